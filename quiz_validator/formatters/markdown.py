"""Markdown report formatter."""

from __future__ import annotations

from collections.abc import Sequence

from quiz_validator.core.models import QuizQuestion, QuizSetResult


def format_markdown(result: QuizSetResult, questions: Sequence[QuizQuestion]) -> str:
    """Render a detailed Markdown report; ``questions`` align with results."""
    summary = result.summary

    report = "# Quiz Validation Report\n\n"
    report += "## Summary\n\n"
    report += f"- **Total Questions**: {summary.total}\n"
    report += f"- **Passed**: ✅ {summary.passed}\n"
    report += f"- **Failed**: ❌ {summary.failed}\n"
    report += f"- **Average Score**: {summary.average_score:.1f}/100\n\n"

    report += "---\n\n"
    report += "## Detailed Results\n\n"

    for i, (r, question) in enumerate(zip(result.results, questions), start=1):
        status = "✅ PASS" if r.valid else "❌ FAIL"
        report += f"### Question {i} {status}\n\n"
        report += f"**Score**: {r.score}/100\n\n"
        report += f"**Question**: {question.question or ''}\n\n"

        if r.errors:
            report += "**Errors**:\n"
            for e in r.errors:
                report += f"- `{e.field}`: {e.message}\n"
            report += "\n"

        if r.warnings:
            report += "**Warnings**:\n"
            for w in r.warnings:
                report += f"- `{w.field}`: {w.message}\n"
            report += "\n"

        report += "---\n\n"

    return report
