"""
Setup script for quiz-validator.

quiz-validator checks quiz question sets against structural and content
rules, scores each question, and reports the results. It serves three roles:

1. Library - validate_quiz_question / validate_quiz_set for other tools
2. Content Pipeline - CI/CD validation for quiz files (non-zero exit on failure)
3. Converter - turn Anki, CSV and Quizlet exports into quiz JSON

The 'quiz-validator' command is the entry point.
"""

from setuptools import find_packages, setup

setup(
    name="quiz-validator",
    version="1.1.0",
    description="Validation, scoring and reporting for quiz question sets",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "quiz-validator=quiz_validator.cli.main:run",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Software Development :: Quality Assurance",
    ],
    keywords="quiz validation education cli",
)
