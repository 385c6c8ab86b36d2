"""
Plain Markdown reports for validation results.

Used by library callers who want a quick human-readable summary without
going through the CLI formatters.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .models import QuizQuestion, ValidationResult
from .validator import round_half_up


def generate_report(result: ValidationResult, question_id: str | int | None = None) -> str:
    """Render one question's result as Markdown."""
    lines: list[str] = []

    if question_id is not None:
        lines.append(f"## Question {question_id}")

    lines.append(f"**Score**: {result.score}/100")
    lines.append(f"**Status**: {'✅ PASS' if result.valid else '❌ FAIL'}")
    lines.append("")

    if result.errors:
        lines.append("### Errors")
        for error in result.errors:
            lines.append(f"- **{error.field}**: {error.message}")
        lines.append("")

    if result.warnings:
        lines.append("### Warnings")
        for warning in result.warnings:
            lines.append(f"- **{warning.field}**: {warning.message}")
        lines.append("")

    if result.valid:
        lines.append("✅ All validation checks passed!")

    return "\n".join(lines)


def generate_batch_report(
    questions: Sequence[QuizQuestion | Mapping[str, Any]],
    results: Sequence[ValidationResult],
) -> str:
    """
    Render a Markdown report for a validated question list.

    Failed questions are listed under their id, or their 1-based position
    when the id is missing or falsy.
    """
    lines: list[str] = ["# Quiz Validation Report", ""]

    total = len(results)
    passed = sum(1 for r in results if r.valid)
    failed = total - passed
    average_score = sum(r.score for r in results) / max(1, total)

    lines.append("## Summary")
    lines.append(f"- **Total Questions**: {total}")
    lines.append(f"- **Passed**: {passed} ({round_half_up(passed / max(1, total) * 100)}%)")
    lines.append(f"- **Failed**: {failed} ({round_half_up(failed / max(1, total) * 100)}%)")
    lines.append(f"- **Average Score**: {round_half_up(average_score)}/100")
    lines.append("")

    if failed > 0:
        lines.append("## Failed Questions")
        for index, result in enumerate(results):
            if result.valid:
                continue
            question = QuizQuestion.coerce(questions[index])
            lines.append("")
            lines.append(generate_report(result, question.id or index + 1))

    return "\n".join(lines)
