"""
Quiz Validation Engine.

Three layers, leaf first:

1. validate_field: one rule against one value, first failure wins
2. validate_quiz_question: built-in rules + custom rules for one question,
   errors accumulate across fields, warnings never affect validity
3. validate_quiz_set: per-question results folded into a summary

Score model:
    total_checks  = 4 + option_count + require_* flags + custom_rule_count
    failed_checks = len(errors)
    score         = max(0, round_half_up((total - failed) / total * 100))

The constant 4 counts the base checks (question text, option count,
duplicates, correct answer) whether or not they ran. The correct-answer
check is never performed; the constant is kept for score compatibility.
"""

from __future__ import annotations

import math
from collections.abc import Mapping, Sequence
from typing import Any

from loguru import logger

from .models import (
    QuizQuestion,
    QuizSetResult,
    QuizSetSummary,
    QuizValidationOptions,
    RuleKind,
    ValidationError,
    ValidationResult,
    ValidationRule,
)

BASE_CHECKS = 4
DUPLICATE_OPTIONS_MESSAGE = "Duplicate options detected"

QuestionInput = QuizQuestion | Mapping[str, Any]
OptionsInput = QuizValidationOptions | Mapping[str, Any] | None


def round_half_up(value: float) -> int:
    """Round halves toward positive infinity (75.5 -> 76, 62.5 -> 63)."""
    return math.floor(value + 0.5)


def is_absent(value: Any) -> bool:
    """A value is absent when it is None or the empty string."""
    return value is None or value == ""


def validate_field(value: Any, rule: ValidationRule) -> ValidationError | None:
    """
    Evaluate one rule against one value.

    Precedence: required > skip-if-empty > min length > max length >
    pattern > custom. Length and pattern only apply to strings.

    Returns:
        The first failure as a ValidationError, or None.
    """
    if is_absent(value):
        if rule.required:
            return ValidationError(
                field=rule.field,
                message=rule.error_message or f"{rule.field} is required",
                value=value,
                rule=RuleKind.REQUIRED,
            )
        return None

    if isinstance(value, str):
        if rule.min_length is not None and len(value) < rule.min_length:
            return ValidationError(
                field=rule.field,
                message=rule.error_message
                or f"{rule.field} must be at least {rule.min_length} characters (got {len(value)})",
                value=value,
                rule=RuleKind.MIN_LENGTH,
            )

        if rule.max_length is not None and len(value) > rule.max_length:
            return ValidationError(
                field=rule.field,
                message=rule.error_message
                or f"{rule.field} must be at most {rule.max_length} characters (got {len(value)})",
                value=value,
                rule=RuleKind.MAX_LENGTH,
            )

        if rule.pattern is not None and not rule.pattern.search(value):
            return ValidationError(
                field=rule.field,
                message=rule.error_message or f"{rule.field} does not match required pattern",
                value=value,
                rule=RuleKind.PATTERN,
            )

    if rule.custom_validator is not None and not rule.custom_validator(value):
        return ValidationError(
            field=rule.field,
            message=rule.error_message or f"{rule.field} failed custom validation",
            value=value,
            rule=RuleKind.CUSTOM,
        )

    return None


def _validate_options(
    options: Sequence[Any],
    opts: QuizValidationOptions,
    errors: list[ValidationError],
    warnings: list[ValidationError],
) -> None:
    count = len(options)

    if count < opts.min_options:
        errors.append(
            ValidationError(
                field="options",
                message=f"At least {opts.min_options} options required (got {count})",
                value=count,
                rule=RuleKind.MIN_OPTIONS,
            )
        )

    if count > opts.max_options:
        errors.append(
            ValidationError(
                field="options",
                message=f"At most {opts.max_options} options allowed (got {count})",
                value=count,
                rule=RuleKind.MAX_OPTIONS,
            )
        )

    for index, option in enumerate(options):
        error = validate_field(
            option,
            ValidationRule(
                field=f"options[{index}]",
                required=True,
                min_length=opts.option_min_length,
                max_length=opts.option_max_length,
            ),
        )
        if error:
            errors.append(error)

    # options may hold unhashable values, so no set(); the type is part of
    # the key so 1, 1.0 and True stay distinct
    distinct: list[tuple[type, Any]] = []
    for option in options:
        key = (type(option), option)
        if key not in distinct:
            distinct.append(key)
    if len(distinct) < count:
        warnings.append(
            ValidationError(
                field="options",
                message=DUPLICATE_OPTIONS_MESSAGE,
                rule=RuleKind.DUPLICATES,
            )
        )


def compute_score(
    question: QuizQuestion, opts: QuizValidationOptions, failed_checks: int
) -> int:
    """Normalize failed checks against the check budget of a question."""
    total_checks = (
        BASE_CHECKS
        + len(question.options or [])
        + int(opts.require_explanation)
        + int(opts.require_category)
        + int(opts.require_difficulty)
        + len(opts.custom_rules)
    )
    return max(0, round_half_up(((total_checks - failed_checks) / total_checks) * 100))


def validate_quiz_question(
    question: QuestionInput, options: OptionsInput = None
) -> ValidationResult:
    """
    Validate one question against the built-in and custom rules.

    Args:
        question: A QuizQuestion or a raw record in the interchange shape
        options: Rule bounds and flags; omitted fields use the defaults

    Returns:
        ValidationResult; ``valid`` is True iff there are no errors

    Raises:
        QuestionShapeError: if a raw record has malformed known fields
    """
    question = QuizQuestion.coerce(question)
    opts = QuizValidationOptions.resolve(options)
    errors: list[ValidationError] = []
    warnings: list[ValidationError] = []

    question_error = validate_field(
        question.question,
        ValidationRule(
            field="question",
            required=True,
            min_length=opts.question_min_length,
            max_length=opts.question_max_length,
        ),
    )
    if question_error:
        errors.append(question_error)

    if question.options is not None:
        _validate_options(question.options, opts, errors, warnings)

    if opts.require_explanation or question.explanation:
        explanation_error = validate_field(
            question.explanation,
            ValidationRule(
                field="explanation",
                required=opts.require_explanation,
                min_length=opts.explanation_min_length,
                max_length=opts.explanation_max_length,
            ),
        )
        if explanation_error:
            errors.append(explanation_error)

    if opts.require_category:
        category_error = validate_field(
            question.category, ValidationRule(field="category", required=True)
        )
        if category_error:
            errors.append(category_error)

    if opts.require_difficulty:
        difficulty_error = validate_field(
            question.difficulty, ValidationRule(field="difficulty", required=True)
        )
        if difficulty_error:
            errors.append(difficulty_error)

    for rule in opts.custom_rules:
        error = validate_field(question.get_field(rule.field), rule)
        if error:
            errors.append(error)

    return ValidationResult(
        valid=not errors,
        errors=errors,
        warnings=warnings,
        score=compute_score(question, opts, len(errors)),
    )


def validate_quiz_set(
    questions: Sequence[QuestionInput], options: OptionsInput = None
) -> QuizSetResult:
    """
    Validate every question in order and summarize.

    ``results[i]`` always corresponds to ``questions[i]``. An empty list is
    valid with an all-zero summary.
    """
    opts = QuizValidationOptions.resolve(options)
    results = [validate_quiz_question(q, opts) for q in questions]

    passed = sum(1 for r in results if r.valid)
    failed = len(results) - passed
    average_score = sum(r.score for r in results) / max(1, len(results))

    summary = QuizSetSummary(
        total=len(questions),
        passed=passed,
        failed=failed,
        average_score=round_half_up(average_score),
    )
    logger.debug(
        "Validated {} questions: {} passed, {} failed, average score {}",
        summary.total,
        summary.passed,
        summary.failed,
        summary.average_score,
    )

    return QuizSetResult(valid=failed == 0, results=results, summary=summary)
