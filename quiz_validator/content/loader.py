"""
Question file loader.

Reads a JSON document holding a list of question records and converts each
record into a QuizQuestion.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from loguru import logger

from quiz_validator.core.models import QuestionShapeError, QuizQuestion


class QuizFileError(Exception):
    """Raised when a question file cannot be read or has the wrong shape.

    Args:
        message: Human-readable description of the failure.
        path: The file that failed to load.
    """

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path: Path | None = Path(path) if path is not None else None


def load_questions(path: Path | str) -> list[QuizQuestion]:
    """
    Load question records from a JSON file.

    Raises:
        QuizFileError: unreadable file, invalid JSON, a document that is not
            a list, or a record with malformed fields
    """
    path = Path(path)

    try:
        content = path.read_text(encoding="utf-8")
    except OSError as e:
        raise QuizFileError(f"Cannot read {path}: {e}", path) from e

    try:
        document = json.loads(content)
    except json.JSONDecodeError as e:
        raise QuizFileError(f"Invalid JSON in {path}: {e}", path) from e

    if not isinstance(document, list):
        raise QuizFileError(
            f"{path} must contain a list of questions, got {type(document).__name__}",
            path,
        )

    questions: list[QuizQuestion] = []
    for index, record in enumerate(document):
        try:
            questions.append(QuizQuestion.from_dict(record))
        except QuestionShapeError as e:
            raise QuizFileError(f"{path}: question {index + 1}: {e}", path) from e

    logger.debug("Loaded {} questions from {}", len(questions), path)
    return questions


def load_rules(path: Path | str) -> dict[str, Any]:
    """
    Load a rules document (QuizValidationOptions keys, pattern strings).

    Example:
        {"requireCategory": true,
         "customRules": [{"field": "id", "pattern": "^Q\\\\d+$"}]}

    Raises:
        QuizFileError: unreadable file, invalid JSON or not an object
    """
    path = Path(path)

    try:
        document = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise QuizFileError(f"Cannot read {path}: {e}", path) from e
    except json.JSONDecodeError as e:
        raise QuizFileError(f"Invalid JSON in {path}: {e}", path) from e

    if not isinstance(document, dict):
        raise QuizFileError(f"{path} must contain a JSON object of rule options", path)

    return document
