"""
Content: question file loading, batch validation and format importers.

Core modules:
- loader: JSON question files
- batch: directory-wide validation and summaries
- importers/: Anki, CSV and Quizlet exports
"""

from .batch import BatchResult, FileResult, find_json_files, format_batch_summary, validate_directory
from .importers import ConversionError, SourceFormat, convert
from .loader import QuizFileError, load_questions, load_rules

__all__ = [
    "BatchResult",
    "FileResult",
    "find_json_files",
    "format_batch_summary",
    "validate_directory",
    "ConversionError",
    "SourceFormat",
    "convert",
    "QuizFileError",
    "load_questions",
    "load_rules",
]
