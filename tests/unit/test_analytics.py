"""
Tests for question set analytics.
"""

import pytest

from quiz_validator.analytics import (
    QuizAnalytics,
    analyze_category_coverage,
    analyze_difficulty_distribution,
    analyze_quiz_set,
    calculate_similarity,
    estimate_completion_time,
    find_duplicates,
    generate_improvement_suggestions,
    identify_problematic_questions,
)
from quiz_validator.core import QuizQuestion, validate_quiz_set


@pytest.fixture
def questions(sample_quiz_set):
    return [QuizQuestion.from_dict(q) for q in sample_quiz_set]


class TestAnalyzeQuizSet:
    def test_empty_set(self):
        analytics = analyze_quiz_set([])

        assert analytics.total_questions == 0
        assert analytics.recommendations == ["No questions to analyze"]

    def test_statistics(self, questions):
        analytics = analyze_quiz_set(questions)

        assert analytics.total_questions == 3
        assert analytics.difficulty_distribution == {"easy": 1, "medium": 1}
        assert analytics.category_distribution == {"geography": 1, "science": 1}
        assert analytics.average_option_count == pytest.approx(8 / 3)
        assert "Only 67% of questions have explanations" in analytics.recommendations

    def test_quality_score_deductions(self):
        questions = [QuizQuestion(question="Short?", options=["A"], difficulty="easy")] * 2

        analytics = analyze_quiz_set(questions)

        # short questions, no explanations, few options, one difficulty, no categories
        assert analytics.quality_score == 100 - 10 - 15 - 10 - 10 - 5
        assert "No categories assigned to questions" in analytics.recommendations

    def test_to_dict_uses_interchange_keys(self, questions):
        data = analyze_quiz_set(questions).to_dict()

        assert data["totalQuestions"] == 3
        assert "qualityScore" in data


class TestDuplicates:
    def test_similarity_is_case_insensitive_jaccard(self):
        assert calculate_similarity("The cat sat", "the CAT sat") == 1.0
        assert calculate_similarity("a b", "b c") == pytest.approx(1 / 3)

    def test_find_duplicates_above_threshold(self):
        questions = [
            QuizQuestion(question="What is the capital of France?"),
            QuizQuestion(question="what is the capital of France?"),
            QuizQuestion(question="Which river flows through Paris?"),
        ]

        pairs = find_duplicates(questions)

        assert len(pairs) == 1
        assert pairs[0].question1 is questions[0]
        assert pairs[0].similarity == 1.0

    def test_threshold_is_exclusive(self):
        questions = [QuizQuestion(question="a b c d e"), QuizQuestion(question="a b c d f")]

        # 4 shared of 6 distinct words
        assert find_duplicates(questions, threshold=4 / 6) == []


class TestDistribution:
    def test_difficulty_imbalance(self):
        questions = [QuizQuestion(difficulty=d) for d in ["easy", "easy", "hard"]]

        balance = analyze_difficulty_distribution(questions)

        assert balance.distribution == {"easy": 2, "hard": 1}
        assert not balance.balanced

    def test_difficulty_balanced(self):
        questions = [QuizQuestion(difficulty=d) for d in ["easy", "medium", "hard"]]

        assert analyze_difficulty_distribution(questions).balanced

    def test_category_coverage(self, questions):
        coverage = analyze_category_coverage(questions)

        assert coverage.average_per_category == 1.0
        assert coverage.recommendation == "Consider adding more categories for better coverage"

    def test_no_categories(self):
        coverage = analyze_category_coverage([QuizQuestion(question="x")])

        assert coverage.recommendation == "Add categories to improve quiz organization"


@pytest.mark.parametrize(
    "count, minutes, formatted",
    [(0, 0, "0 minutes"), (3, 2, "2 minutes"), (150, 75, "1h 15m")],
)
def test_completion_time(count, minutes, formatted):
    estimate = estimate_completion_time([QuizQuestion()] * count)

    assert estimate.total_minutes == minutes
    assert estimate.total_seconds == count * 30
    assert estimate.formatted == formatted


def test_problematic_questions(questions):
    results = validate_quiz_set(questions).results

    problematic = identify_problematic_questions(questions, results)

    assert [p.question.id for p in problematic] == ["Q3"]
    assert problematic[0].issues == [e.message for e in results[2].errors]


def test_improvement_suggestions():
    analytics = QuizAnalytics(
        average_question_length=10,
        average_explanation_length=40,
        average_option_count=2,
        quality_score=50,
    )

    suggestions = generate_improvement_suggestions(analytics)

    assert len(suggestions) == 6
    assert suggestions[-1].startswith("Overall quality needs improvement")
