import pytest

from js_lab.repository import QuestionRepository
from js_lab.seed import fallback_document


class FakeHandle:
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    """Records call_later requests; tests fire them by hand."""

    def __init__(self):
        self.handles = []

    def call_later(self, delay, callback):
        handle = FakeHandle(delay, callback)
        self.handles.append(handle)
        return handle

    @property
    def live(self):
        return [h for h in self.handles if not h.cancelled]

    def fire_all(self):
        for handle in self.live:
            handle.cancelled = True
            handle.callback()


@pytest.fixture
def scheduler():
    return FakeScheduler()


@pytest.fixture
def legacy_record():
    return {
        "id": 1,
        "difficulty": "beginner",
        "category": "Variables",
        "question": "What will be the output of the following code?",
        "starterCode": "console.log(x);\nvar x = 5;\nconsole.log(x);",
        "expectedOutput": "undefined\n5",
        "hint": "Think about hoisting.",
        "explanation": "var declarations are hoisted, assignments are not.",
    }


@pytest.fixture
def rich_record():
    return {
        "id": 2,
        "category": "variables",
        "difficulty": "intermediate",
        "type": "output",
        "title": "Temporal Dead Zone",
        "question": "What will be the output of the following code?",
        "code": "console.log(x);\nlet x = 5;",
        "options": ["undefined", "5", "ReferenceError", "null"],
        "correctAnswer": 2,
        "explanation": "let bindings cannot be read before their declaration.",
        "hints": ["let/const behave differently from var", "Temporal dead zone"],
        "tags": ["temporal-dead-zone", "let"],
        "relatedConcepts": ["Block scoping"],
    }


@pytest.fixture
def fallback_repo():
    """Repository holding the embedded dataset (20 legacy questions + 1 rich)."""
    repo = QuestionRepository()
    repo.load_document(fallback_document())
    return repo


@pytest.fixture
def hoisting_repo(legacy_record):
    """Repository with a single legacy question whose expected output is 'undefined\\n5'."""
    repo = QuestionRepository()
    repo.load_document({
        "categories": [{"id": "variables", "name": "Variables", "color": "#4CAF50"}],
        "questions": [legacy_record],
    })
    return repo
