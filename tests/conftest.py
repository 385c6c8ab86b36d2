"""
Pytest Configuration and Fixtures.

This file configures pytest and provides shared fixtures for all tests.
"""
import json
import sys
from pathlib import Path

import pytest

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests (files on disk)")
    config.addinivalue_line("markers", "smoke: Smoke tests for CLI commands")
    config.addinivalue_line("markers", "slow: Slow tests")


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their location."""
    for item in items:
        # Mark based on test file location
        if "unit" in str(item.fspath):
            item.add_marker(pytest.mark.unit)
        elif "integration" in str(item.fspath):
            item.add_marker(pytest.mark.integration)
        elif "smoke" in str(item.fspath):
            item.add_marker(pytest.mark.smoke)


@pytest.fixture(scope="session")
def project_root():
    """Return the project root directory."""
    return PROJECT_ROOT


@pytest.fixture
def sample_quiz_question():
    """Provide a valid multiple-choice question record."""
    return {
        "id": "Q1",
        "question": "What is the capital of France?",
        "options": ["Paris", "London", "Berlin", "Madrid"],
        "correctAnswer": "Paris",
        "explanation": "Paris has been the capital of France since 987 AD.",
        "category": "geography",
        "difficulty": "easy",
    }


@pytest.fixture
def sample_quiz_set(sample_quiz_question):
    """Provide a small question list with one failing record."""
    return [
        sample_quiz_question,
        {
            "id": "Q2",
            "question": "Which planet is known as the Red Planet?",
            "options": ["Mars", "Venus", "Jupiter"],
            "correctAnswer": 0,
            "explanation": "Iron oxide on its surface gives Mars its red color.",
            "category": "science",
            "difficulty": "medium",
        },
        {"id": "Q3", "question": "Hi?", "options": ["A"]},
    ]


@pytest.fixture
def quiz_file(tmp_path, sample_quiz_set):
    """Write the sample set to a JSON file and return its path."""
    path = tmp_path / "quiz.json"
    path.write_text(json.dumps(sample_quiz_set), encoding="utf-8")
    return path


@pytest.fixture
def valid_quiz_file(tmp_path, sample_quiz_question):
    """Write a set whose only question passes every check."""
    path = tmp_path / "valid.json"
    path.write_text(json.dumps([sample_quiz_question]), encoding="utf-8")
    return path
