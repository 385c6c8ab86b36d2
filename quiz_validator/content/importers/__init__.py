"""
Importers for flat-text quiz exports.

Supported formats:
- anki: tab-separated notes (front, back, tags...)
- csv: header row + question,answer,options...
- quizlet: alternating term / definition lines
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum

from loguru import logger

from quiz_validator.core.models import QuizQuestion

from .anki import convert_from_anki
from .csv_import import convert_from_csv
from .quizlet import convert_from_quizlet


class SourceFormat(str, Enum):
    """Supported import formats."""

    ANKI = "anki"
    CSV = "csv"
    QUIZLET = "quizlet"


class ConversionError(Exception):
    """Raised when content cannot be converted to question records."""
    pass


CONVERTERS: dict[SourceFormat, Callable[[str], list[QuizQuestion]]] = {
    SourceFormat.ANKI: convert_from_anki,
    SourceFormat.CSV: convert_from_csv,
    SourceFormat.QUIZLET: convert_from_quizlet,
}


def convert(content: str, source_format: str | SourceFormat) -> list[QuizQuestion]:
    """Convert exported text in ``source_format`` into question records."""
    try:
        source_format = SourceFormat(source_format)
    except ValueError as e:
        raise ConversionError(f"Unknown format: {source_format}") from e

    questions = CONVERTERS[source_format](content)
    logger.debug("Converted {} questions from {}", len(questions), source_format.value)
    return questions


__all__ = [
    "CONVERTERS",
    "ConversionError",
    "SourceFormat",
    "convert",
    "convert_from_anki",
    "convert_from_csv",
    "convert_from_quizlet",
]
