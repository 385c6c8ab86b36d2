"""
Analytics for question sets.

This module provides:
- analyze_quiz_set: averages, distributions, heuristic quality score
- find_duplicates: near-identical question wording
- analyze_difficulty_distribution / analyze_category_coverage
- estimate_completion_time
- identify_problematic_questions: invalid or low-scoring questions
- generate_improvement_suggestions
"""

from .quiz_analytics import (
    CategoryCoverage,
    CompletionEstimate,
    DifficultyBalance,
    DuplicatePair,
    ProblematicQuestion,
    QuizAnalytics,
    analyze_category_coverage,
    analyze_difficulty_distribution,
    analyze_quiz_set,
    calculate_similarity,
    estimate_completion_time,
    find_duplicates,
    generate_improvement_suggestions,
    identify_problematic_questions,
)

__all__ = [
    "CategoryCoverage",
    "CompletionEstimate",
    "DifficultyBalance",
    "DuplicatePair",
    "ProblematicQuestion",
    "QuizAnalytics",
    "analyze_category_coverage",
    "analyze_difficulty_distribution",
    "analyze_quiz_set",
    "calculate_similarity",
    "estimate_completion_time",
    "find_duplicates",
    "generate_improvement_suggestions",
    "identify_problematic_questions",
]
