"""
Report formatters for validation results.

- json: machine-readable dump of the result
- markdown: detailed per-question report
- html: standalone page with a score chart
"""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from quiz_validator.core.models import QuizQuestion, QuizSetResult

from .html import format_html
from .json_format import format_json
from .markdown import format_markdown


class ReportFormat(str, Enum):
    """Output format for validation reports."""

    JSON = "json"
    HTML = "html"
    MARKDOWN = "markdown"


def render(
    report_format: ReportFormat | str,
    result: QuizSetResult,
    questions: Sequence[QuizQuestion],
) -> str:
    """Render ``result`` in the requested format."""
    report_format = ReportFormat(report_format)
    if report_format == ReportFormat.JSON:
        return format_json(result)
    if report_format == ReportFormat.HTML:
        return format_html(result, questions)
    return format_markdown(result, questions)


__all__ = [
    "ReportFormat",
    "format_html",
    "format_json",
    "format_markdown",
    "render",
]
