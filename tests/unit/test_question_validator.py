"""
Tests for question-level validation and scoring.
"""

import pytest

from quiz_validator.core import (
    QuestionShapeError,
    QuizQuestion,
    QuizValidationOptions,
    RuleKind,
    round_half_up,
    validate_quiz_question,
)


def _rules(result):
    return [(e.field, e.rule) for e in result.errors]


class TestBuiltInRules:
    def test_well_formed_question_scores_100(self):
        result = validate_quiz_question({"question": "What is 2+2?", "options": ["3", "4", "5", "6"]})

        assert result.valid
        assert result.score == 100
        assert result.errors == []
        assert result.warnings == []

    def test_short_question_text(self):
        result = validate_quiz_question(
            {"question": "Hi?", "options": ["A", "B"]}, {"questionMinLength": 5}
        )

        assert not result.valid
        assert _rules(result) == [("question", RuleKind.MIN_LENGTH)]
        # 6 checks, 1 failed
        assert result.score == 83

    def test_too_few_options(self):
        result = validate_quiz_question({"question": "Test question?", "options": ["A"]})

        assert _rules(result) == [("options", RuleKind.MIN_OPTIONS)]
        assert result.errors[0].message == "At least 2 options required (got 1)"
        assert result.errors[0].value == 1
        assert result.score == 80

    def test_too_many_options(self):
        result = validate_quiz_question(
            {"question": "Pick a letter", "options": list("ABCD")}, {"maxOptions": 3}
        )

        assert _rules(result) == [("options", RuleKind.MAX_OPTIONS)]
        assert result.errors[0].message == "At most 3 options allowed (got 4)"

    def test_missing_question_text(self):
        result = validate_quiz_question({"options": ["A", "B"]})

        assert _rules(result) == [("question", RuleKind.REQUIRED)]

    def test_missing_options_skips_option_checks(self):
        result = validate_quiz_question({"question": "Name a prime number"})

        assert result.valid
        assert result.score == 100

    def test_empty_options_list_is_checked(self):
        result = validate_quiz_question({"question": "Name a prime number", "options": []})

        assert _rules(result) == [("options", RuleKind.MIN_OPTIONS)]
        assert result.score == 75

    def test_each_option_is_validated_by_index(self):
        result = validate_quiz_question(
            {"question": "What is 2+2?", "options": ["4", "", "x" * 201]}
        )

        assert _rules(result) == [
            ("options[1]", RuleKind.REQUIRED),
            ("options[2]", RuleKind.MAX_LENGTH),
        ]

    def test_duplicate_options_warn_without_failing(self):
        result = validate_quiz_question({"question": "What is 2+2?", "options": ["4", "4", "5"]})

        assert result.valid
        assert result.score == 100
        assert [(w.field, w.rule, w.message) for w in result.warnings] == [
            ("options", RuleKind.DUPLICATES, "Duplicate options detected")
        ]

    @pytest.mark.parametrize("options", [[1, True], [1, 1.0], [0, False], ["1", 1]])
    def test_options_of_different_types_are_distinct(self, options):
        result = validate_quiz_question({"question": "Pick a value", "options": options})

        assert result.valid
        assert result.warnings == []

    def test_duplicate_detection_handles_unhashable_options(self):
        result = validate_quiz_question(
            {"question": "Pick a pair", "options": [{"a": 1}, {"a": 1}]}
        )

        assert result.valid
        assert len(result.warnings) == 1


class TestExplanation:
    def test_required_explanation(self):
        result = validate_quiz_question(
            {"question": "Q?", "options": ["A", "B"]}, {"requireExplanation": True}
        )

        assert ("explanation", RuleKind.REQUIRED) in _rules(result)

    def test_present_explanation_is_checked_even_when_optional(self):
        result = validate_quiz_question(
            {"question": "What is 2+2?", "options": ["3", "4"], "explanation": "Math"}
        )

        assert _rules(result) == [("explanation", RuleKind.MIN_LENGTH)]

    def test_empty_optional_explanation_is_ignored(self):
        result = validate_quiz_question(
            {"question": "What is 2+2?", "options": ["3", "4"], "explanation": ""}
        )

        assert result.valid


class TestRequiredMetadata:
    def test_category_and_difficulty_flags(self):
        result = validate_quiz_question(
            {"question": "What is 2+2?", "options": ["3", "4"]},
            {"requireCategory": True, "requireDifficulty": True},
        )

        assert _rules(result) == [
            ("category", RuleKind.REQUIRED),
            ("difficulty", RuleKind.REQUIRED),
        ]
        # 4 + 2 options + 2 flags = 8 checks, 2 failed
        assert result.score == 75

    def test_numeric_difficulty_satisfies_requirement(self):
        result = validate_quiz_question(
            {"question": "What is 2+2?", "options": ["3", "4"], "difficulty": 2},
            {"requireDifficulty": True},
        )

        assert result.valid


class TestCustomRules:
    def test_custom_rule_on_extra_field(self):
        result = validate_quiz_question(
            {"question": "What is 2+2?", "options": ["3", "4"], "source": "web"},
            {"customRules": [{"field": "source", "pattern": "^book"}]},
        )

        assert _rules(result) == [("source", RuleKind.PATTERN)]
        # custom rules count toward the check total: 7 checks, 1 failed
        assert result.score == 86

    @pytest.mark.parametrize("value", ["bonus", {"k": 1}])
    def test_field_named_extra_is_a_custom_rule_target(self, value):
        result = validate_quiz_question(
            {"question": "What is 2+2?", "options": ["3", "4"], "extra": value},
            {"customRules": [{"field": "extra", "required": True}]},
        )

        assert result.valid
        assert result.score == 100

    def test_missing_field_named_extra_fails_required_rule(self):
        result = validate_quiz_question(
            {"question": "What is 2+2?", "options": ["3", "4"]},
            {"customRules": [{"field": "extra", "required": True}]},
        )

        assert _rules(result) == [("extra", RuleKind.REQUIRED)]

    def test_custom_rule_resolves_interchange_field_names(self):
        options = {
            "customRules": [
                {"field": "correctAnswer", "required": True, "errorMessage": "Answer missing"}
            ]
        }
        result = validate_quiz_question({"question": "What is 2+2?", "options": ["3", "4"]}, options)

        assert [e.message for e in result.errors] == ["Answer missing"]

    def test_passing_custom_rule_still_counts_in_total(self):
        options = QuizValidationOptions(
            custom_rules=[{"field": "id", "custom_validator": lambda v: True}]
        )
        result = validate_quiz_question(
            {"id": 7, "question": "Hi?", "options": ["A", "B"]}, options
        )

        # 7 checks, 1 failed
        assert result.score == 86


class TestScore:
    @pytest.mark.parametrize(
        "value, expected",
        [(62.5, 63), (75.5, 76), (83.333, 83), (0.5, 1), (100.0, 100)],
    )
    def test_round_half_up(self, value, expected):
        assert round_half_up(value) == expected

    def test_half_scores_round_up(self):
        # 4 options -> 8 checks; three failing options -> 5/8 = 62.5%
        result = validate_quiz_question(
            {"question": "What is 2+2?", "options": ["", "", "", "4"]}
        )

        assert len(result.errors) == 3
        assert result.score == 63

    def test_score_is_100_iff_no_errors(self, sample_quiz_question):
        assert validate_quiz_question(sample_quiz_question).score == 100
        assert validate_quiz_question({"question": "Hi"}).score < 100


class TestInput:
    def test_accepts_question_model(self):
        question = QuizQuestion(question="What is 2+2?", options=["3", "4"])

        assert validate_quiz_question(question).valid

    def test_none_option_values_fall_back_to_defaults(self):
        result = validate_quiz_question(
            {"question": "Test question?", "options": ["A"]}, {"minOptions": None}
        )

        assert _rules(result) == [("options", RuleKind.MIN_OPTIONS)]

    def test_malformed_record_raises_shape_error(self):
        with pytest.raises(QuestionShapeError) as exc_info:
            validate_quiz_question({"question": "What is 2+2?", "options": "A,B"})

        assert isinstance(exc_info.value, ValueError)
        assert exc_info.value.errors[0]["loc"] == ("options",)

    def test_unknown_keys_survive_round_trip(self):
        record = {
            "id": "Q9",
            "question": "What is 2+2?",
            "correctAnswer": "4",
            "extra": {"k": 1},
            "source": "book",
        }

        question = QuizQuestion.from_dict(record)

        assert question.extra_fields == {"extra": {"k": 1}, "source": "book"}
        assert question.get_field("extra") == {"k": 1}
        assert question.to_dict() == record

    def test_validation_is_deterministic(self, sample_quiz_question):
        first = validate_quiz_question(sample_quiz_question, {"requireCategory": True})
        second = validate_quiz_question(sample_quiz_question, {"requireCategory": True})

        assert first == second
