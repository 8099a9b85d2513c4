# tests/test_normalizer.py
import pytest

from js_lab.errors import MalformedQuestion
from js_lab.models import ChoiceStrategy, Difficulty
from js_lab.normalizer import build_choices, choice_label, normalize, normalize_difficulty


def test_normalize_none_returns_none():
    assert normalize(None) is None


def test_normalize_legacy_record(legacy_record):
    q = normalize(legacy_record)
    assert q.strategy is ChoiceStrategy.LEGACY
    assert q.code == "console.log(x);\nvar x = 5;\nconsole.log(x);"
    assert q.expected_output == "undefined\n5"
    assert q.options == ["undefined\n5", "undefined", "null", "Error"]
    assert q.correct_answer_index == 0
    assert q.difficulty is Difficulty.EASY
    assert q.hint == "Think about hoisting."


def test_normalize_rich_record(rich_record):
    q = normalize(rich_record)
    assert q.strategy is ChoiceStrategy.AUTHORED
    assert q.code == "console.log(x);\nlet x = 5;"
    assert q.expected_output == "ReferenceError"
    assert q.correct_answer_index == 2
    assert q.difficulty is Difficulty.MEDIUM
    assert q.hint == "let/const behave differently from var"
    assert q.tags == ["temporal-dead-zone", "let"]
    assert q.related_concepts == ["Block scoping"]
    assert q.title == "Temporal Dead Zone"


def test_normalize_prefers_options_when_both_shapes_present(rich_record):
    rich_record["expectedOutput"] = "something else"
    q = normalize(rich_record)
    assert q.strategy is ChoiceStrategy.AUTHORED
    assert q.expected_output == "ReferenceError"


def test_normalize_rich_falls_back_to_single_hint(rich_record):
    del rich_record["hints"]
    rich_record["hint"] = "Only hint"
    assert normalize(rich_record).hint == "Only hint"


def test_normalize_missing_difficulty_defaults_to_easy(rich_record):
    del rich_record["difficulty"]
    assert normalize(rich_record).difficulty is Difficulty.EASY


def test_normalize_missing_code_is_empty_string(legacy_record):
    del legacy_record["starterCode"]
    assert normalize(legacy_record).code == ""


# --- Edge case tests ---

def test_normalize_rejects_record_without_either_shape():
    with pytest.raises(MalformedQuestion) as exc_info:
        normalize({"id": 99, "question": "?"})
    assert exc_info.value.record == {"id": 99, "question": "?"}


def test_normalize_rejects_out_of_range_answer(rich_record):
    rich_record["correctAnswer"] = 4
    with pytest.raises(MalformedQuestion):
        normalize(rich_record)


def test_normalize_rejects_negative_answer(rich_record):
    rich_record["correctAnswer"] = -1
    with pytest.raises(MalformedQuestion):
        normalize(rich_record)


def test_normalize_rejects_boolean_answer(rich_record):
    rich_record["correctAnswer"] = True
    with pytest.raises(MalformedQuestion):
        normalize(rich_record)


def test_normalize_rejects_single_option(rich_record):
    rich_record["options"] = ["only"]
    rich_record["correctAnswer"] = 0
    with pytest.raises(MalformedQuestion):
        normalize(rich_record)


def test_normalize_rejects_unknown_difficulty(rich_record):
    rich_record["difficulty"] = "expert"
    with pytest.raises(MalformedQuestion):
        normalize(rich_record)


def test_normalize_difficulty_empty_is_easy():
    assert normalize_difficulty("") is Difficulty.EASY
    assert normalize_difficulty(None) is Difficulty.EASY


def test_choice_label():
    assert [choice_label(i) for i in range(4)] == ["A", "B", "C", "D"]


def test_build_choices_legacy(legacy_record):
    choices = build_choices(normalize(legacy_record))
    assert [c.label for c in choices] == ["A", "B", "C", "D"]
    assert [c.text for c in choices] == ["undefined\n5", "undefined", "null", "Error"]
    assert [c.is_correct for c in choices] == [True, False, False, False]


def test_build_choices_authored(rich_record):
    choices = build_choices(normalize(rich_record))
    assert [c.text for c in choices] == ["undefined", "5", "ReferenceError", "null"]
    assert [c.label for c in choices if c.is_correct] == ["C"]


def test_build_choices_exactly_one_correct_for_every_fallback_question(fallback_repo):
    for question in fallback_repo.all_questions():
        choices = build_choices(question)
        assert len(choices) >= 2
        assert sum(c.is_correct for c in choices) == 1


def test_normalize_rejects_non_list_hints(rich_record):
    rich_record["hints"] = 5
    with pytest.raises(MalformedQuestion):
        normalize(rich_record)


def test_normalize_rejects_non_list_tags(rich_record):
    rich_record["tags"] = 7
    with pytest.raises(MalformedQuestion):
        normalize(rich_record)


def test_normalize_rejects_non_list_related_concepts(rich_record):
    rich_record["relatedConcepts"] = "Block scoping"
    with pytest.raises(MalformedQuestion):
        normalize(rich_record)


def test_normalize_null_text_fields_become_empty(rich_record):
    rich_record.update(question=None, title=None, explanation=None, type=None)
    q = normalize(rich_record)
    assert (q.question, q.title, q.explanation) == ("", "", "")
    assert q.type == "output"


def test_normalize_legacy_numeric_expected_output(legacy_record):
    legacy_record["expectedOutput"] = 5
    q = normalize(legacy_record)
    assert q.expected_output == "5"
    assert q.options[0] == "5"
