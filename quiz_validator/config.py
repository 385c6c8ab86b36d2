"""
Configuration settings for quiz-validator.

Uses Pydantic Settings for environment variable management with .env file support.
Every variable is prefixed with QUIZ_VALIDATOR_ (e.g. QUIZ_VALIDATOR_LOG_LEVEL).
"""
from __future__ import annotations

from collections.abc import Mapping
from functools import lru_cache
from typing import Any, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from quiz_validator.core.models import QuizValidationOptions


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="QUIZ_VALIDATOR_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ========================================
    # Logging
    # ========================================
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="WARNING",
        description="Logging level for the stderr sink",
    )
    log_file: str | None = Field(
        default=None,
        description="Optional log file path (rotated at 10 MB)",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        return value.strip().upper() if isinstance(value, str) else value

    # ========================================
    # Reports
    # ========================================
    default_format: Literal["json", "html", "markdown"] = Field(
        default="markdown",
        description="Report format used by 'validate' when --format is omitted",
    )

    # ========================================
    # Rule bounds (defaults for QuizValidationOptions)
    # ========================================
    question_min_length: int = Field(default=5, ge=0)
    question_max_length: int = Field(default=500, ge=0)
    option_min_length: int = Field(default=1, ge=0)
    option_max_length: int = Field(default=200, ge=0)
    explanation_min_length: int = Field(default=10, ge=0)
    explanation_max_length: int = Field(default=1000, ge=0)
    min_options: int = Field(default=2, ge=0)
    max_options: int = Field(default=10, ge=0)

    # ========================================
    # Analytics
    # ========================================
    seconds_per_question: int = Field(
        default=30,
        gt=0,
        description="Time budget per question for completion estimates",
    )
    problematic_score_threshold: int = Field(
        default=70,
        ge=0,
        le=100,
        description="Questions scoring below this are flagged as problematic",
    )
    duplicate_similarity_threshold: float = Field(
        default=0.8,
        ge=0.0,
        le=1.0,
        description="Jaccard similarity above which two questions are duplicates",
    )

    def validation_options(
        self,
        strict: bool = False,
        overrides: Mapping[str, Any] | None = None,
    ) -> QuizValidationOptions:
        """
        Build validation options from the configured bounds.

        Args:
            strict: Require explanation, category and difficulty
            overrides: Rules-file document (camelCase or snake_case keys)
                applied last
        """
        options = QuizValidationOptions(
            question_min_length=self.question_min_length,
            question_max_length=self.question_max_length,
            option_min_length=self.option_min_length,
            option_max_length=self.option_max_length,
            explanation_min_length=self.explanation_min_length,
            explanation_max_length=self.explanation_max_length,
            min_options=self.min_options,
            max_options=self.max_options,
            require_explanation=strict,
            require_category=strict,
            require_difficulty=strict,
        )
        if overrides:
            options = options.merged(overrides)
        return options


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
