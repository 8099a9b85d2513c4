"""Embedded default dataset used when the question source cannot be loaded."""
import copy

from js_lab.legacy import LEGACY_CATEGORIES, LEGACY_QUESTIONS

FALLBACK_META = {
    "version": "1.0",
    "lastUpdated": "2025-10-31",
    "source": "embedded",
}

# Rich-format sample kept alongside the legacy list.
FALLBACK_QUESTIONS = [
    {
        "id": 21,
        "category": "variables",
        "difficulty": "beginner",
        "type": "output",
        "title": "Variable Hoisting",
        "question": "What will be the output?",
        "code": "console.log(x); var x = 5;",
        "options": ["undefined", "5", "ReferenceError", "null"],
        "correctAnswer": 0,
        "explanation": "Due to hoisting, var x is declared but not assigned.",
        "hints": ["Think about hoisting"],
        "tags": ["hoisting", "var"],
        "relatedConcepts": ["Variable declarations"],
    },
]


def fallback_document() -> dict:
    """Return a fresh copy of the embedded document in the source file schema."""
    questions = copy.deepcopy(LEGACY_QUESTIONS) + copy.deepcopy(FALLBACK_QUESTIONS)
    meta = dict(FALLBACK_META)
    meta["totalQuestions"] = len(questions)
    meta["categories"] = len(LEGACY_CATEGORIES)
    return {
        "meta": meta,
        "categories": copy.deepcopy(LEGACY_CATEGORIES),
        "questions": questions,
    }
