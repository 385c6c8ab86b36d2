"""
Quiz validation data model.

Value objects shared by the validation engine, the importers and the
report formatters:

- ValidationRule: declarative check applied to one question field
- ValidationError: a single failed check (error or warning)
- ValidationResult: outcome of validating one question
- QuizQuestion: the record under validation (known fields + open extras)
- QuizValidationOptions: rule bounds and flags, merged over defaults
- QuizSetSummary / QuizSetResult: aggregate outcome for a question list

Rules and options accept both the snake_case attribute names and the
camelCase names used by the JSON interchange format.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from functools import lru_cache
from re import Pattern
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel


class RuleKind(str, Enum):
    """Kind of check that produced a ValidationError."""

    REQUIRED = "required"
    MIN_LENGTH = "minLength"
    MAX_LENGTH = "maxLength"
    PATTERN = "pattern"
    CUSTOM = "custom"
    MIN_OPTIONS = "minOptions"
    MAX_OPTIONS = "maxOptions"
    DUPLICATES = "duplicates"


class QuestionShapeError(ValueError):
    """Raised when a raw record cannot be read as a QuizQuestion.

    Args:
        message: Human-readable description of the failure.
        errors: The pydantic error list describing each offending field.
    """

    def __init__(self, message: str, errors: list[dict[str, Any]] | None = None) -> None:
        super().__init__(message)
        self.errors: list[dict[str, Any]] = errors or []


# ============================================================================
# Rules and options
# ============================================================================


class ValidationRule(BaseModel):
    """
    Declarative check for one question field.

    Length bounds are inclusive. ``custom_validator`` must be a pure
    function for validation to stay deterministic.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        arbitrary_types_allowed=True,
    )

    field: str = Field(..., min_length=1)
    min_length: int | None = None
    max_length: int | None = None
    required: bool = False
    pattern: Pattern[str] | None = None
    custom_validator: Callable[[Any], bool] | None = None
    error_message: str | None = None


class QuizValidationOptions(BaseModel):
    """Bounds and flags for question validation.

    Omitted fields keep their defaults; a ``None`` value in a mapping is
    treated as omitted.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    question_min_length: int = 5
    question_max_length: int = 500
    option_min_length: int = 1
    option_max_length: int = 200
    explanation_min_length: int = 10
    explanation_max_length: int = 1000
    min_options: int = 2
    max_options: int = 10
    require_explanation: bool = False
    require_category: bool = False
    require_difficulty: bool = False
    custom_rules: list[ValidationRule] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def _drop_unset(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return {key: value for key, value in data.items() if value is not None}
        return data

    @classmethod
    def resolve(
        cls, options: QuizValidationOptions | Mapping[str, Any] | None
    ) -> QuizValidationOptions:
        """Return options merged over the defaults."""
        if options is None:
            return cls()
        if isinstance(options, cls):
            return options
        return cls.model_validate(options)

    def merged(self, overrides: Mapping[str, Any]) -> QuizValidationOptions:
        """Return a copy with ``overrides`` (either naming style) applied."""
        parsed = type(self).model_validate(overrides)
        return self.model_copy(
            update={name: getattr(parsed, name) for name in parsed.model_fields_set}
        )


# ============================================================================
# Question record
# ============================================================================


class QuizQuestion(BaseModel):
    """
    A quiz question record.

    Known fields are typed attributes; every other key of the source record
    is kept verbatim as a pydantic extra (see :attr:`extra_fields`) so custom
    rules can target it through :meth:`get_field`. Any key, ``extra``
    included, is a legal record field.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
        extra="allow",
    )

    id: str | int | None = None
    question: str | None = None
    options: list[Any] | None = None
    correct_answer: str | int | float | None = None
    explanation: str | None = None
    category: str | None = None
    difficulty: str | int | float | None = None

    @property
    def extra_fields(self) -> dict[str, Any]:
        """Record keys that are not known question fields."""
        return dict(self.model_extra or {})

    @classmethod
    def from_dict(cls, data: Any) -> QuizQuestion:
        """Build a question from a raw record, raising QuestionShapeError."""
        try:
            return cls.model_validate(data)
        except PydanticValidationError as e:
            raise QuestionShapeError(
                f"Malformed question record: {e.error_count()} invalid field(s)",
                errors=e.errors(include_url=False),
            ) from e

    @classmethod
    def coerce(cls, question: QuizQuestion | Mapping[str, Any]) -> QuizQuestion:
        if isinstance(question, cls):
            return question
        return cls.from_dict(question)

    def get_field(self, name: str) -> Any:
        """Look up a field by attribute name, interchange name or extra key."""
        attribute = _known_keys().get(name)
        if attribute is not None:
            return getattr(self, attribute)
        return self.extra_fields.get(name)

    def to_dict(self) -> dict[str, Any]:
        """Interchange shape: camelCase keys, unset known fields dropped."""
        data = self.model_dump(
            by_alias=True, exclude_none=True, include=set(type(self).model_fields)
        )
        data.update(self.extra_fields)
        return data


@lru_cache(maxsize=1)
def _known_keys() -> dict[str, str]:
    """Map attribute names and their aliases to attribute names."""
    keys: dict[str, str] = {}
    for name, info in QuizQuestion.model_fields.items():
        keys[name] = name
        if info.alias:
            keys[info.alias] = name
    return keys


# ============================================================================
# Results
# ============================================================================


@dataclass(frozen=True)
class ValidationError:
    """A failed check. Used for both errors and warnings."""

    field: str
    message: str
    value: Any = None
    rule: RuleKind | None = None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"field": self.field, "message": self.message}
        if self.value is not None:
            data["value"] = self.value
        if self.rule is not None:
            data["rule"] = self.rule.value
        return data


@dataclass(frozen=True)
class ValidationResult:
    """Validation outcome for a single question."""

    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)
    score: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "errors": [e.to_dict() for e in self.errors],
            "warnings": [w.to_dict() for w in self.warnings],
            "score": self.score,
        }


@dataclass(frozen=True)
class QuizSetSummary:
    """Totals for a validated question list."""

    total: int = 0
    passed: int = 0
    failed: int = 0
    average_score: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "averageScore": self.average_score,
        }


@dataclass(frozen=True)
class QuizSetResult:
    """Validation outcome for a question list; results keep input order."""

    valid: bool
    results: list[ValidationResult] = field(default_factory=list)
    summary: QuizSetSummary = field(default_factory=QuizSetSummary)

    def to_dict(self) -> dict[str, Any]:
        return {
            "valid": self.valid,
            "results": [r.to_dict() for r in self.results],
            "summary": self.summary.to_dict(),
        }
