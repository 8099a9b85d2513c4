"""Tests for data model classes."""
import pytest

from js_lab.models import (
    ChoiceStrategy, Difficulty, Question, RunResult, SelectionPhase, SessionState,
)


def test_difficulty_parse_both_naming_schemes():
    assert Difficulty.parse("beginner") is Difficulty.EASY
    assert Difficulty.parse("easy") is Difficulty.EASY
    assert Difficulty.parse("intermediate") is Difficulty.MEDIUM
    assert Difficulty.parse("medium") is Difficulty.MEDIUM
    assert Difficulty.parse("advanced") is Difficulty.HARD
    assert Difficulty.parse("hard") is Difficulty.HARD


def test_difficulty_parse_is_case_insensitive():
    assert Difficulty.parse(" Advanced ") is Difficulty.HARD


def test_difficulty_order_is_preserved():
    assert Difficulty.parse("beginner") < Difficulty.parse("intermediate") < Difficulty.parse("advanced")


def test_difficulty_label():
    assert [d.label for d in Difficulty] == ["easy", "medium", "hard"]


def test_difficulty_parse_unknown():
    with pytest.raises(ValueError):
        Difficulty.parse("expert")


def test_question_defaults():
    q = Question(id=1, category="variables", difficulty=Difficulty.EASY, question="Q?", options=["a", "b"])
    assert q.correct_answer_index == 0
    assert q.code == ""
    assert q.hint == ""
    assert q.strategy is ChoiceStrategy.AUTHORED
    assert q.tags == []
    assert q.starter_code == ""


def test_session_state_defaults():
    state = SessionState(active_category="variables")
    assert state.active_difficulty == "all"
    assert state.ordered_questions == []
    assert state.cursor == 0
    assert state.score == 0
    assert state.streak == 0
    assert state.phase is SelectionPhase.UNFILTERED


def test_session_state_clear_transient_keeps_progress():
    state = SessionState(active_category="variables", score=20, streak=2, cursor=3)
    state.selected_label = "B"
    state.code_buffer = "console.log(1)"
    state.last_run = RunResult(output="1", is_correct=True, expected="1")
    state.clear_transient()
    assert state.selected_label is None
    assert state.code_buffer == ""
    assert state.last_run is None
    assert (state.score, state.streak, state.cursor) == (20, 2, 3)
