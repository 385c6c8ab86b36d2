"""
Anki plain-text export importer.

One note per line, tab-separated: front, back, then any number of tags.
The front becomes the question, the back the explanation and the first
tag the category.
"""

from __future__ import annotations

from loguru import logger

from quiz_validator.core.models import QuizQuestion


def convert_from_anki(content: str) -> list[QuizQuestion]:
    """Convert a tab-separated Anki export into question records."""
    questions: list[QuizQuestion] = []

    for line_number, line in enumerate(content.split("\n"), start=1):
        if not line.strip():
            continue

        parts = line.split("\t")
        if len(parts) < 2:
            logger.warning("Anki line {} has no back field, skipping", line_number)
            continue

        front, back, *tags = parts
        tags = [tag.strip() for tag in tags]

        questions.append(
            QuizQuestion(
                question=front.strip(),
                explanation=back.strip(),
                category=tags[0] if tags else None,
                tags=tags,
            )
        )

    return questions
