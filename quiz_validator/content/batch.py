"""
Batch validation over a directory of question files.

Every ``*.json`` file is loaded and validated as an independent set; the
per-file summaries are folded into directory totals.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from loguru import logger

from quiz_validator.core.models import QuizValidationOptions
from quiz_validator.core.validator import validate_quiz_set

from .loader import load_questions


@dataclass
class FileResult:
    """Summary of one validated file."""

    file: str
    total: int
    passed: int
    failed: int
    average_score: int

    @property
    def valid(self) -> bool:
        return self.failed == 0

    def to_dict(self) -> dict:
        return {
            "file": self.file,
            "total": self.total,
            "passed": self.passed,
            "failed": self.failed,
            "averageScore": self.average_score,
        }


@dataclass
class BatchResult:
    """Result of validating a directory."""

    files: list[FileResult] = field(default_factory=list)

    @property
    def total_files(self) -> int:
        return len(self.files)

    @property
    def total_questions(self) -> int:
        return sum(f.total for f in self.files)

    @property
    def total_passed(self) -> int:
        return sum(f.passed for f in self.files)

    @property
    def total_failed(self) -> int:
        return sum(f.failed for f in self.files)

    @property
    def valid(self) -> bool:
        return all(f.valid for f in self.files)

    def to_dict(self) -> dict:
        return {
            "totalFiles": self.total_files,
            "totalQuestions": self.total_questions,
            "totalPassed": self.total_passed,
            "totalFailed": self.total_failed,
            "files": [f.to_dict() for f in self.files],
        }


def find_json_files(directory: Path | str, recursive: bool = False) -> list[Path]:
    """List ``*.json`` files in a directory, sorted for stable output."""
    directory = Path(directory)
    pattern = "**/*.json" if recursive else "*.json"
    return sorted(p for p in directory.glob(pattern) if p.is_file())


def validate_directory(
    directory: Path | str,
    recursive: bool = False,
    options: QuizValidationOptions | None = None,
    on_file: Callable[[Path], None] | None = None,
    files: Sequence[Path] | None = None,
) -> BatchResult:
    """
    Validate every question file in ``directory``.

    Args:
        directory: Directory to scan
        recursive: Include subdirectories
        options: Validation options applied to every file
        on_file: Called with each path before it is validated
        files: Files to validate, as returned by find_json_files; scanned
            from ``directory`` when omitted

    Raises:
        QuizFileError: if any file cannot be loaded
    """
    directory = Path(directory)
    batch = BatchResult()

    if files is None:
        files = find_json_files(directory, recursive)

    for path in files:
        if on_file:
            on_file(path)

        result = validate_quiz_set(load_questions(path), options)
        batch.files.append(
            FileResult(
                file=path.relative_to(directory).as_posix(),
                total=result.summary.total,
                passed=result.summary.passed,
                failed=result.summary.failed,
                average_score=result.summary.average_score,
            )
        )

    logger.debug(
        "Batch validated {} files ({} questions) in {}",
        batch.total_files,
        batch.total_questions,
        directory,
    )
    return batch


def format_batch_summary(batch: BatchResult) -> str:
    """Render the batch result as Markdown."""
    report = "# Batch Validation Summary\n\n"
    report += f"📁 Total Files: {batch.total_files}\n"
    report += f"📝 Total Questions: {batch.total_questions}\n"
    report += f"✅ Passed: {batch.total_passed}\n"
    report += f"❌ Failed: {batch.total_failed}\n\n"
    report += "## File Results\n\n"

    for result in batch.files:
        status = "✅" if result.valid else "⚠️"
        report += f"{status} **{result.file}**: {result.passed}/{result.total} passed\n"

    return report
