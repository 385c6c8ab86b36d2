"""JSON report formatter."""

from __future__ import annotations

import json

from quiz_validator.core.models import QuizSetResult


def format_json(result: QuizSetResult) -> str:
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False, default=str)
