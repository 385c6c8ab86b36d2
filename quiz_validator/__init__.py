"""
quiz-validator: validation, scoring and reporting for quiz question sets.

Usage:
    from quiz_validator import validate_quiz_set

    result = validate_quiz_set(questions, {"requireExplanation": True})
    print(result.summary.average_score)
"""

from quiz_validator.core import (
    QuestionShapeError,
    QuizQuestion,
    QuizSetResult,
    QuizSetSummary,
    QuizValidationOptions,
    RuleKind,
    ValidationError,
    ValidationResult,
    ValidationRule,
    generate_batch_report,
    generate_report,
    validate_field,
    validate_quiz_question,
    validate_quiz_set,
)

__version__ = "1.1.0"

__all__ = [
    "QuestionShapeError",
    "QuizQuestion",
    "QuizSetResult",
    "QuizSetSummary",
    "QuizValidationOptions",
    "RuleKind",
    "ValidationError",
    "ValidationResult",
    "ValidationRule",
    "generate_batch_report",
    "generate_report",
    "validate_field",
    "validate_quiz_question",
    "validate_quiz_set",
]
