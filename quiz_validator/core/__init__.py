"""
Validation core: rule evaluation, question validation, set aggregation.
"""

from .models import (
    QuestionShapeError,
    QuizQuestion,
    QuizSetResult,
    QuizSetSummary,
    QuizValidationOptions,
    RuleKind,
    ValidationError,
    ValidationResult,
    ValidationRule,
)
from .reports import generate_batch_report, generate_report
from .validator import (
    compute_score,
    round_half_up,
    validate_field,
    validate_quiz_question,
    validate_quiz_set,
)

__all__ = [
    # Models
    "QuestionShapeError",
    "QuizQuestion",
    "QuizSetResult",
    "QuizSetSummary",
    "QuizValidationOptions",
    "RuleKind",
    "ValidationError",
    "ValidationResult",
    "ValidationRule",
    # Engine
    "compute_score",
    "round_half_up",
    "validate_field",
    "validate_quiz_question",
    "validate_quiz_set",
    # Reports
    "generate_report",
    "generate_batch_report",
]
