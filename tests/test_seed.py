# tests/test_seed.py
from js_lab.legacy import LEGACY_CATEGORIES, LEGACY_QUESTIONS
from js_lab.seed import FALLBACK_QUESTIONS, fallback_document


def test_fallback_document_shape():
    doc = fallback_document()
    assert set(doc) == {"meta", "categories", "questions"}
    assert len(doc["questions"]) == len(LEGACY_QUESTIONS) + len(FALLBACK_QUESTIONS)
    assert doc["meta"]["totalQuestions"] == len(doc["questions"])
    assert doc["meta"]["categories"] == len(LEGACY_CATEGORIES)


def test_fallback_document_returns_fresh_copies():
    first = fallback_document()
    first["questions"][0]["expectedOutput"] = "changed"
    first["categories"].clear()
    second = fallback_document()
    assert second["questions"][0]["expectedOutput"] == "undefined\n5"
    assert len(second["categories"]) == len(LEGACY_CATEGORIES)


def test_legacy_question_ids_are_unique():
    ids = [q["id"] for q in LEGACY_QUESTIONS + FALLBACK_QUESTIONS]
    assert len(ids) == len(set(ids))


def test_legacy_categories_cover_every_legacy_question():
    names = {c["name"] for c in LEGACY_CATEGORIES}
    for q in LEGACY_QUESTIONS:
        assert q["category"] in names


def test_fallback_loads_without_rejections(fallback_repo):
    assert fallback_repo.rejected == []
    assert fallback_repo.total_questions() == 21
    assert len(fallback_repo.questions_for("variables")) == 5
