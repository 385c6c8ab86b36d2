"""
Quizlet export importer.

Terms and definitions alternate line by line; blank lines are ignored and
a trailing term without a definition is dropped.
"""

from __future__ import annotations

from loguru import logger

from quiz_validator.core.models import QuizQuestion


def convert_from_quizlet(content: str) -> list[QuizQuestion]:
    """Convert alternating term/definition lines into question records."""
    lines = [line for line in content.split("\n") if line.strip()]

    if len(lines) % 2:
        logger.warning("Quizlet export ends with an unpaired term: {!r}", lines[-1].strip())

    return [
        QuizQuestion(question=term.strip(), explanation=definition.strip())
        for term, definition in zip(lines[::2], lines[1::2])
    ]
