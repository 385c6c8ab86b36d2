"""
Quiz Set Analytics.

Statistical view of a question set, complementary to rule validation:
averages, difficulty/category distributions, a heuristic quality score,
near-duplicate detection and completion-time estimates.

Quality score deductions (from 100, floored at 0):
- Average question length < 20 chars: -10
- Explanation coverage < 80%: -15
- Average explanation length < 50 chars: -10
- Average option count < 3: -10
- Every difficulty-tagged question shares one level: -10
- No categories at all: -5
"""

from __future__ import annotations

import math
import re
from collections import Counter
from collections.abc import Sequence
from dataclasses import dataclass, field

from quiz_validator.core.models import QuizQuestion, ValidationResult
from quiz_validator.core.validator import round_half_up

# Thresholds
SHORT_QUESTION_CHARS = 20
MIN_EXPLANATION_COVERAGE = 80
SHORT_EXPLANATION_CHARS = 50
MIN_AVERAGE_OPTIONS = 3
DUPLICATE_SIMILARITY = 0.8
PROBLEMATIC_SCORE = 70
BALANCE_RATIO = 2

# Improvement suggestion targets
TARGET_QUESTION_CHARS = 30
TARGET_EXPLANATION_CHARS = 100
TARGET_OPTION_COUNT = 4
TARGET_DIFFICULTY_LEVELS = 3
TARGET_CATEGORIES = 5


@dataclass
class QuizAnalytics:
    """Aggregate statistics for a question set."""

    total_questions: int = 0
    average_question_length: float = 0.0
    average_explanation_length: float = 0.0
    average_option_count: float = 0.0
    difficulty_distribution: dict[str, int] = field(default_factory=dict)
    category_distribution: dict[str, int] = field(default_factory=dict)
    quality_score: int = 0
    recommendations: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "totalQuestions": self.total_questions,
            "averageQuestionLength": self.average_question_length,
            "averageExplanationLength": self.average_explanation_length,
            "averageOptionCount": self.average_option_count,
            "difficultyDistribution": self.difficulty_distribution,
            "categoryDistribution": self.category_distribution,
            "qualityScore": self.quality_score,
            "recommendations": self.recommendations,
        }


@dataclass
class DuplicatePair:
    """Two questions whose wording is nearly identical."""

    question1: QuizQuestion
    question2: QuizQuestion
    similarity: float


@dataclass
class DifficultyBalance:
    distribution: dict[str, int]
    balanced: bool
    recommendation: str


@dataclass
class CategoryCoverage:
    coverage: dict[str, int]
    average_per_category: float
    recommendation: str


@dataclass
class CompletionEstimate:
    total_minutes: int
    total_seconds: int
    formatted: str


@dataclass
class ProblematicQuestion:
    question: QuizQuestion
    issues: list[str]
    score: int


def _difficulty_counts(questions: Sequence[QuizQuestion]) -> dict[str, int]:
    # falsy difficulties (None, "", 0) are treated as unset
    return dict(Counter(str(q.difficulty) for q in questions if q.difficulty))


def _category_counts(questions: Sequence[QuizQuestion]) -> dict[str, int]:
    return dict(Counter(q.category for q in questions if q.category))


def analyze_quiz_set(questions: Sequence[QuizQuestion]) -> QuizAnalytics:
    """Compute statistics, a quality score and recommendations."""
    if not questions:
        return QuizAnalytics(recommendations=["No questions to analyze"])

    total = len(questions)
    average_question_length = sum(len(q.question or "") for q in questions) / total

    with_explanation = [q for q in questions if q.explanation]
    average_explanation_length = (
        sum(len(q.explanation) for q in with_explanation) / len(with_explanation)
        if with_explanation
        else 0.0
    )

    average_option_count = sum(len(q.options or []) for q in questions) / total

    difficulty_distribution = _difficulty_counts(questions)
    category_distribution = _category_counts(questions)

    quality_score = 100
    recommendations: list[str] = []

    if average_question_length < SHORT_QUESTION_CHARS:
        quality_score -= 10
        recommendations.append("Questions are too short on average")

    explanation_coverage = len(with_explanation) / total * 100
    if explanation_coverage < MIN_EXPLANATION_COVERAGE:
        quality_score -= 15
        recommendations.append(
            f"Only {round_half_up(explanation_coverage)}% of questions have explanations"
        )

    if with_explanation and average_explanation_length < SHORT_EXPLANATION_CHARS:
        quality_score -= 10
        recommendations.append("Explanations are too short on average")

    if average_option_count < MIN_AVERAGE_OPTIONS:
        quality_score -= 10
        recommendations.append("Too few options per question on average")

    if len(difficulty_distribution) == 1:
        quality_score -= 10
        recommendations.append("All questions have the same difficulty level")

    if not category_distribution:
        quality_score -= 5
        recommendations.append("No categories assigned to questions")

    if not recommendations:
        recommendations.append("Quiz set is well-balanced and high quality")

    return QuizAnalytics(
        total_questions=total,
        average_question_length=average_question_length,
        average_explanation_length=average_explanation_length,
        average_option_count=average_option_count,
        difficulty_distribution=difficulty_distribution,
        category_distribution=category_distribution,
        quality_score=max(0, quality_score),
        recommendations=recommendations,
    )


def calculate_similarity(text1: str, text2: str) -> float:
    """Jaccard similarity of the lowercase word sets."""
    words1 = set(re.split(r"\s+", text1.lower()))
    words2 = set(re.split(r"\s+", text2.lower()))
    union = words1 | words2
    if not union:
        return 0.0
    return len(words1 & words2) / len(union)


def find_duplicates(
    questions: Sequence[QuizQuestion], threshold: float = DUPLICATE_SIMILARITY
) -> list[DuplicatePair]:
    """Find question pairs with similarity strictly above ``threshold``."""
    duplicates: list[DuplicatePair] = []

    for i, first in enumerate(questions):
        for second in questions[i + 1 :]:
            similarity = calculate_similarity(first.question or "", second.question or "")
            if similarity > threshold:
                duplicates.append(DuplicatePair(first, second, similarity))

    return duplicates


def analyze_difficulty_distribution(questions: Sequence[QuizQuestion]) -> DifficultyBalance:
    """Check that no difficulty level has twice the questions of another."""
    distribution = _difficulty_counts(questions)
    counts = distribution.values()
    balanced = bool(counts) and max(counts) / min(counts) < BALANCE_RATIO

    if balanced:
        recommendation = "Difficulty distribution is well-balanced"
    else:
        recommendation = "Consider adding more questions to underrepresented difficulty levels"

    return DifficultyBalance(distribution, balanced, recommendation)


def analyze_category_coverage(questions: Sequence[QuizQuestion]) -> CategoryCoverage:
    coverage = _category_counts(questions)
    average_per_category = sum(coverage.values()) / len(coverage) if coverage else 0.0

    if not coverage:
        recommendation = "Add categories to improve quiz organization"
    elif len(coverage) < 3:
        recommendation = "Consider adding more categories for better coverage"
    else:
        recommendation = f"Good category coverage with {len(coverage)} categories"

    return CategoryCoverage(coverage, average_per_category, recommendation)


def estimate_completion_time(
    questions: Sequence[QuizQuestion], seconds_per_question: int = 30
) -> CompletionEstimate:
    """Estimate time to answer every question, rounded up to whole minutes."""
    total_seconds = len(questions) * seconds_per_question
    total_minutes = math.ceil(total_seconds / 60)

    hours, minutes = divmod(total_minutes, 60)
    formatted = f"{hours}h {minutes}m" if hours > 0 else f"{minutes} minutes"

    return CompletionEstimate(total_minutes, total_seconds, formatted)


def identify_problematic_questions(
    questions: Sequence[QuizQuestion],
    results: Sequence[ValidationResult],
    threshold: int = PROBLEMATIC_SCORE,
) -> list[ProblematicQuestion]:
    """Questions that are invalid or score below ``threshold``."""
    return [
        ProblematicQuestion(
            question=question,
            issues=[e.message for e in result.errors],
            score=result.score,
        )
        for question, result in zip(questions, results)
        if not result.valid or result.score < threshold
    ]


def generate_improvement_suggestions(analytics: QuizAnalytics) -> list[str]:
    suggestions: list[str] = []

    if analytics.average_question_length < TARGET_QUESTION_CHARS:
        suggestions.append(
            "Add more context to questions to make them clearer (target: 30-100 characters)"
        )

    if analytics.average_explanation_length < TARGET_EXPLANATION_CHARS:
        suggestions.append("Provide more detailed explanations (target: 100-200 characters)")

    if analytics.average_option_count < TARGET_OPTION_COUNT:
        suggestions.append("Add more options per question (recommended: 4 options)")

    if len(analytics.difficulty_distribution) < TARGET_DIFFICULTY_LEVELS:
        suggestions.append("Add questions with varied difficulty levels (easy, medium, hard)")

    if len(analytics.category_distribution) < TARGET_CATEGORIES:
        suggestions.append("Expand category coverage to provide more diverse content")

    if analytics.quality_score < PROBLEMATIC_SCORE:
        suggestions.append(
            "Overall quality needs improvement - review individual question feedback"
        )

    return suggestions
