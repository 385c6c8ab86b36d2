"""
quiz-validator CLI

Validate quiz question files, convert flashcard exports, and analyze
question sets from the terminal or a CI pipeline.

Usage:
    quiz-validator validate quiz.json                # Markdown report
    quiz-validator validate quiz.json -f html -o report.html
    quiz-validator validate quiz.json --strict       # Require explanation/category/difficulty
    quiz-validator batch ./quizzes -r                # Validate a directory tree
    quiz-validator convert deck.txt -t anki -o quiz.json
    quiz-validator analyze quiz.json                 # Set statistics

Exit codes:
    0 - All questions valid
    1 - Validation failures, or a file could not be processed
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Annotated, NoReturn, Optional

import typer
from loguru import logger
from pydantic import ValidationError as PydanticValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from quiz_validator.analytics import (
    analyze_category_coverage,
    analyze_difficulty_distribution,
    analyze_quiz_set,
    estimate_completion_time,
    find_duplicates,
    generate_improvement_suggestions,
    identify_problematic_questions,
)
from quiz_validator.config import Settings, get_settings
from quiz_validator.content import (
    ConversionError,
    QuizFileError,
    SourceFormat,
    convert,
    find_json_files,
    format_batch_summary,
    load_questions,
    load_rules,
    validate_directory,
)
from quiz_validator.core import QuizValidationOptions, validate_quiz_set
from quiz_validator.formatters import ReportFormat, render

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="quiz-validator",
    help="Quiz validation CLI tool",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

# Reports go to stdout; progress and summaries go to stderr so that
# `validate -f json | jq` stays parseable.
console = Console(stderr=True)


def configure_logging(settings: Settings, verbose: bool = False) -> None:
    """Route loguru to stderr (and optionally a rotating file)."""
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else settings.log_level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )
    if settings.log_file:
        logger.add(settings.log_file, level="DEBUG", rotation="10 MB")


def _build_options(settings: Settings, strict: bool, rules: Path | None) -> QuizValidationOptions:
    overrides = load_rules(rules) if rules else None
    return settings.validation_options(strict=strict, overrides=overrides)


def _write_output(content: str, output: Path | None, label: str) -> None:
    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(content, encoding="utf-8")
        console.print(f"[green]✓ {label} saved to {output}[/]")
    else:
        typer.echo(content)


def _fail(message: str, error: Exception) -> NoReturn:
    console.print(f"[red]✗ {message}[/]")
    console.print(f"[red]Error:[/] {escape(str(error))}", highlight=False)
    raise typer.Exit(1)


# =============================================================================
# Validation Commands
# =============================================================================


@app.command()
def validate(
    file: Annotated[Path, typer.Argument(help="Quiz JSON file")],
    report_format: Annotated[
        Optional[ReportFormat],
        typer.Option("--format", "-f", help="Output format (json|html|markdown)"),
    ] = None,
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Output file path")
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Require explanation, category and difficulty"),
    ] = False,
    rules: Annotated[
        Optional[Path],
        typer.Option("--rules", help="JSON file with validation options and custom rules"),
    ] = None,
) -> None:
    """
    Validate a quiz JSON file.

    Examples:
        quiz-validator validate quiz.json
        quiz-validator validate quiz.json --format json --output report.json
        quiz-validator validate quiz.json --strict --rules rules.json
    """
    settings = get_settings()
    report_format = report_format or ReportFormat(settings.default_format)

    try:
        with console.status(f"Loading {file}...") as status:
            questions = load_questions(file)
            options = _build_options(settings, strict, rules)
            status.update("Validating questions...")
            result = validate_quiz_set(questions, options)
    except (QuizFileError, PydanticValidationError) as e:
        _fail("Validation failed", e)

    console.print("[green]✓ Validation complete[/]")
    _write_output(render(report_format, result, questions), output, "Report")

    console.print("\n[bold]📊 Summary:[/]")
    console.print(f"Total: {result.summary.total}")
    console.print(f"[green]Passed: {result.summary.passed}[/]")
    console.print(f"[red]Failed: {result.summary.failed}[/]")
    console.print(f"Average Score: {result.summary.average_score:.1f}/100")

    raise typer.Exit(0 if result.valid else 1)


@app.command()
def batch(
    directory: Annotated[Path, typer.Argument(help="Directory of quiz JSON files")],
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Scan subdirectories")
    ] = False,
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Summary report output file")
    ] = None,
    strict: Annotated[
        bool,
        typer.Option("--strict", help="Require explanation, category and difficulty"),
    ] = False,
    rules: Annotated[
        Optional[Path],
        typer.Option("--rules", help="JSON file with validation options and custom rules"),
    ] = None,
) -> None:
    """
    Validate multiple quiz files in a directory.

    Examples:
        quiz-validator batch ./quizzes
        quiz-validator batch ./quizzes --recursive --output summary.md
        quiz-validator batch ./quizzes --rules rules.json
    """
    if not directory.is_dir():
        console.print(f"[red]Directory not found: {directory}[/]")
        raise typer.Exit(1)

    settings = get_settings()

    try:
        options = _build_options(settings, strict, rules)
    except (QuizFileError, PydanticValidationError) as e:
        _fail("Batch validation failed", e)

    with console.status("Scanning directory...") as status:
        files = find_json_files(directory, recursive)
        console.print(f"[green]✓[/] Found {len(files)} JSON files")

        try:
            result = validate_directory(
                directory,
                options=options,
                on_file=lambda path: status.update(f"Validating {path.name}..."),
                files=files,
            )
        except QuizFileError as e:
            _fail("Batch validation failed", e)

    _write_output(format_batch_summary(result), output, "Summary")
    raise typer.Exit(0 if result.valid else 1)


# =============================================================================
# Conversion Commands
# =============================================================================


@app.command("convert")
def convert_command(
    input_file: Annotated[Path, typer.Argument(help="Exported flashcard/quiz file")],
    source_format: Annotated[
        SourceFormat,
        typer.Option("--type", "-t", help="Source format (anki|csv|quizlet)"),
    ] = SourceFormat.ANKI,
    output: Annotated[
        Optional[Path], typer.Option("--output", "-o", help="Output JSON file")
    ] = None,
) -> None:
    """
    Convert quiz data from other formats.

    Examples:
        quiz-validator convert deck.txt --type anki -o quiz.json
        quiz-validator convert questions.csv -t csv
    """
    try:
        with console.status(f"Converting from {source_format.value} format..."):
            content = input_file.read_text(encoding="utf-8")
            questions = convert(content, source_format)
    except (OSError, ConversionError) as e:
        _fail("Conversion failed", e)

    console.print(f"[green]✓ Converted {len(questions)} questions[/]")
    payload = json.dumps([q.to_dict() for q in questions], indent=2, ensure_ascii=False)
    _write_output(payload, output, "Questions")


# =============================================================================
# Analytics Commands
# =============================================================================


@app.command()
def analyze(
    file: Annotated[Path, typer.Argument(help="Quiz JSON file")],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print analytics as JSON")
    ] = False,
) -> None:
    """
    Analyze a question set: statistics, duplicates and suggestions.

    Examples:
        quiz-validator analyze quiz.json
        quiz-validator analyze quiz.json --json > analytics.json
    """
    settings = get_settings()

    try:
        questions = load_questions(file)
    except QuizFileError as e:
        _fail("Analysis failed", e)

    analytics = analyze_quiz_set(questions)
    result = validate_quiz_set(questions, settings.validation_options())
    problematic = identify_problematic_questions(
        questions, result.results, threshold=settings.problematic_score_threshold
    )
    duplicates = find_duplicates(questions, threshold=settings.duplicate_similarity_threshold)
    difficulty = analyze_difficulty_distribution(questions)
    categories = analyze_category_coverage(questions)
    estimate = estimate_completion_time(questions, settings.seconds_per_question)
    suggestions = generate_improvement_suggestions(analytics)

    if as_json:
        typer.echo(
            json.dumps(
                {
                    "analytics": analytics.to_dict(),
                    "difficulty": {
                        "balanced": difficulty.balanced,
                        "recommendation": difficulty.recommendation,
                    },
                    "categories": {
                        "averagePerCategory": categories.average_per_category,
                        "recommendation": categories.recommendation,
                    },
                    "completionTime": {
                        "totalSeconds": estimate.total_seconds,
                        "totalMinutes": estimate.total_minutes,
                        "formatted": estimate.formatted,
                    },
                    "duplicates": [
                        {
                            "question1": d.question1.question,
                            "question2": d.question2.question,
                            "similarity": d.similarity,
                        }
                        for d in duplicates
                    ],
                    "problematic": [
                        {"question": p.question.question, "issues": p.issues, "score": p.score}
                        for p in problematic
                    ],
                    "suggestions": suggestions,
                },
                indent=2,
                ensure_ascii=False,
            )
        )
        return

    table = Table(title=f"📈 Quiz Analytics: {file.name}")
    table.add_column("Metric", style="cyan")
    table.add_column("Value", style="green", justify="right")
    table.add_row("Questions", str(analytics.total_questions))
    table.add_row("Avg Question Length", f"{analytics.average_question_length:.1f}")
    table.add_row("Avg Explanation Length", f"{analytics.average_explanation_length:.1f}")
    table.add_row("Avg Options", f"{analytics.average_option_count:.1f}")
    table.add_row("Quality Score", f"{analytics.quality_score}/100")
    table.add_row("Validation Score", f"{result.summary.average_score}/100")
    table.add_row("Estimated Time", estimate.formatted)
    console.print(table)

    if analytics.difficulty_distribution or analytics.category_distribution:
        dist_table = Table(title="Distribution")
        dist_table.add_column("Kind", style="cyan")
        dist_table.add_column("Label")
        dist_table.add_column("Count", justify="right", style="yellow")
        for label, count in sorted(analytics.difficulty_distribution.items()):
            dist_table.add_row("difficulty", label, str(count))
        for label, count in sorted(analytics.category_distribution.items()):
            dist_table.add_row("category", label, str(count))
        console.print(dist_table)

    console.print(f"[dim]{difficulty.recommendation}. {categories.recommendation}.[/]")

    if duplicates:
        console.print(f"\n[yellow bold]Possible duplicates ({len(duplicates)}):[/]")
        for d in duplicates:
            console.print(
                f"  [yellow]⚠[/] {escape(repr(d.question1.question))} ~ "
                f"{escape(repr(d.question2.question))} "
                f"({d.similarity:.0%})",
                highlight=False,
            )

    if problematic:
        console.print(f"\n[red bold]Problematic questions ({len(problematic)}):[/]")
        for p in problematic:
            console.print(
                f"  [red]✗[/] [{p.score}] {escape(p.question.question or '')}", highlight=False
            )
            for issue in p.issues:
                console.print(f"      {issue}", markup=False, highlight=False)

    console.print(
        Panel(
            "\n".join(f"• {r}" for r in analytics.recommendations + suggestions),
            title="Recommendations",
            border_style="cyan",
        )
    )


# =============================================================================
# Entry Point
# =============================================================================


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Verbose output")
    ] = False,
) -> None:
    """
    Quiz validation CLI tool.

    \b
    Commands:
      validate  - Validate a quiz JSON file
      batch     - Validate every quiz file in a directory
      convert   - Convert Anki/CSV/Quizlet exports to quiz JSON
      analyze   - Statistics and improvement suggestions
    """
    configure_logging(get_settings(), verbose)


def run() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    run()
