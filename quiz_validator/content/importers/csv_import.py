"""
CSV export importer.

Layout: a header row (skipped), then one question per row:

    question,answer,option 1,option 2,option 3,option 4

Only the first four option columns are read; empty option cells are
dropped. Quoted cells may contain commas.
"""

from __future__ import annotations

import csv
import io

from loguru import logger

from quiz_validator.core.models import QuizQuestion

FIRST_OPTION_COLUMN = 2
LAST_OPTION_COLUMN = 5


def convert_from_csv(content: str) -> list[QuizQuestion]:
    """Convert CSV rows into question records."""
    reader = csv.reader(io.StringIO(content), skipinitialspace=True)
    rows = [[cell.strip() for cell in row] for row in reader if any(cell.strip() for cell in row)]
    if not rows:
        return []

    header, *records = rows
    logger.debug("CSV header: {}", header)

    questions: list[QuizQuestion] = []
    for row_number, values in enumerate(records, start=2):
        if len(values) < 2:
            logger.warning("CSV row {} has fewer than two columns, skipping", row_number)
            continue

        options = [
            value
            for value in values[FIRST_OPTION_COLUMN : LAST_OPTION_COLUMN + 1]
            if value
        ]
        questions.append(
            QuizQuestion(question=values[0], correct_answer=values[1], options=options)
        )

    return questions
