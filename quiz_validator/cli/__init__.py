"""
Command-line interface for quiz-validator.

Entry point: quiz-validator (quiz_validator.cli.main:run)
"""

from .main import app, run

__all__ = ["app", "run"]
