"""Normalize legacy and rich question records into one Question shape."""
from typing import Mapping, Optional

from js_lab.errors import MalformedQuestion
from js_lab.models import Choice, ChoiceStrategy, Difficulty, Question

# Fixed wrong answers offered for legacy questions, in label order B, C, D.
LEGACY_DISTRACTORS = ("undefined", "null", "Error")


def normalize_difficulty(value) -> Difficulty:
    """Missing difficulty means easy; unknown spellings are rejected."""
    if value is None or value == "":
        return Difficulty.EASY
    try:
        return Difficulty.parse(value)
    except ValueError as exc:
        raise MalformedQuestion(str(exc)) from exc


def _list_field(raw: Mapping, key: str) -> list:
    value = raw.get(key)
    if value is None:
        return []
    if not isinstance(value, (list, tuple)):
        raise MalformedQuestion(f"Question {raw.get('id')!r}: {key} must be a list", dict(raw))
    return list(value)


def _first_hint(hints: list, raw: Mapping) -> str:
    if hints and hints[0] is not None:
        return str(hints[0])
    return raw.get("hint") or ""


def _normalize_rich(raw: Mapping) -> Question:
    options = raw["options"]
    if not isinstance(options, (list, tuple)) or len(options) < 2:
        raise MalformedQuestion(
            f"Question {raw.get('id')!r}: options must be a list with at least 2 items", dict(raw)
        )
    correct = raw.get("correctAnswer")
    if isinstance(correct, bool) or not isinstance(correct, int) or not 0 <= correct < len(options):
        raise MalformedQuestion(
            f"Question {raw.get('id')!r}: correctAnswer must be a valid index of options", dict(raw)
        )
    options = [str(o) for o in options]
    hints = _list_field(raw, "hints")
    tags = [str(t) for t in _list_field(raw, "tags")]
    related = _list_field(raw, "relatedConcepts")
    return Question(
        id=raw.get("id"),
        category=raw.get("category") or "",
        difficulty=normalize_difficulty(raw.get("difficulty")),
        question=raw.get("question") or "",
        options=options,
        correct_answer_index=correct,
        code=raw.get("code") or "",
        hint=_first_hint(hints, raw),
        explanation=raw.get("explanation") or "",
        expected_output=options[correct],
        strategy=ChoiceStrategy.AUTHORED,
        title=raw.get("title") or "",
        type=raw.get("type") or "output",
        tags=tags,
        hints=hints,
        related_concepts=related,
    )


def _normalize_legacy(raw: Mapping) -> Question:
    expected = str(raw["expectedOutput"])
    return Question(
        id=raw.get("id"),
        category=raw.get("category") or "",
        difficulty=normalize_difficulty(raw.get("difficulty")),
        question=raw.get("question") or "",
        options=[expected, *LEGACY_DISTRACTORS],
        correct_answer_index=0,
        code=raw.get("starterCode") or "",
        hint=raw.get("hint") or "",
        explanation=raw.get("explanation") or "",
        expected_output=expected,
        strategy=ChoiceStrategy.LEGACY,
    )


def normalize(raw: Optional[Mapping]) -> Optional[Question]:
    """Return the canonical Question for a raw record, or None for no record.

    Records carrying an ``options`` list are the rich database shape; records
    carrying ``expectedOutput`` are the legacy shape. Anything else raises
    MalformedQuestion.
    """
    if raw is None:
        return None
    if raw.get("options") is not None:
        return _normalize_rich(raw)
    if raw.get("expectedOutput") is not None:
        return _normalize_legacy(raw)
    raise MalformedQuestion(
        f"Question {raw.get('id')!r} has neither options nor expectedOutput", dict(raw)
    )


def choice_label(index: int) -> str:
    return chr(ord("A") + index)


def build_choices(question: Question) -> list[Choice]:
    """Labelled answer choices for a question, exactly one of them correct."""
    if question.strategy is ChoiceStrategy.LEGACY:
        texts = [question.expected_output, *LEGACY_DISTRACTORS]
        return [
            Choice(label=choice_label(i), text=text, is_correct=i == 0)
            for i, text in enumerate(texts)
        ]
    return [
        Choice(label=choice_label(i), text=text, is_correct=i == question.correct_answer_index)
        for i, text in enumerate(question.options)
    ]
