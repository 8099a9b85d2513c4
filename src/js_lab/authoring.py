"""Helpers for authors adding questions to the JSON database."""
import random
import time

from js_lab.errors import MalformedQuestion

QUESTION_TEMPLATES = {
    "output": {
        "question": "What will be the output of the following code?",
        "default_options": ["Option A", "Option B", "Option C", "Option D"],
    },
    "concept": {
        "question": "Which statement is correct?",
        "default_options": ["Statement A", "Statement B", "Statement C", "Statement D"],
    },
    "debugging": {
        "question": "What's wrong with this code?",
        "default_options": ["Error A", "Error B", "Error C", "Nothing wrong"],
    },
    "completion": {
        "question": "Complete the code to achieve the desired output:",
        "default_options": ["Code A", "Code B", "Code C", "Code D"],
    },
}

REQUIRED_FIELDS = (
    "id", "category", "difficulty", "type", "title", "question", "options", "correctAnswer", "explanation",
)


def generate_id() -> int:
    return int(time.time() * 1000) + random.randrange(1000)


def generate_question(
    id=None,
    category: str = "variables",
    difficulty: str = "beginner",
    type: str = "output",
    title: str = "",
    question: str = "",
    code: str = "",
    options: list | None = None,
    correct_answer: int = 0,
    explanation: str = "",
    hints: list | None = None,
    tags: list | None = None,
    related_concepts: list | None = None,
) -> dict:
    """Build a rich-format record, filling blanks from the question-type template.

    Unknown types fall back to the ``output`` template but keep their type name.
    """
    template = QUESTION_TEMPLATES.get(type, QUESTION_TEMPLATES["output"])
    return {
        "id": id if id is not None else generate_id(),
        "category": category,
        "difficulty": difficulty,
        "type": type,
        "title": title or f"{category} Question",
        "question": question or template["question"],
        "code": code,
        "options": list(options) if options else list(template["default_options"]),
        "correctAnswer": correct_answer,
        "explanation": explanation or "Add explanation here.",
        "hints": list(hints) if hints else ["Add hint here"],
        "tags": list(tags) if tags else [category, difficulty],
        "relatedConcepts": list(related_concepts) if related_concepts else [f"{category} concepts"],
    }


def validate_question(record: dict) -> bool:
    missing = [f for f in REQUIRED_FIELDS if not record.get(f) and record.get(f) != 0]
    if missing:
        raise MalformedQuestion(f"Missing required fields: {', '.join(missing)}", record)
    options = record["options"]
    if not isinstance(options, list) or len(options) < 2:
        raise MalformedQuestion("Options must be a list with at least 2 items", record)
    correct = record["correctAnswer"]
    if not isinstance(correct, int) or not 0 <= correct < len(options):
        raise MalformedQuestion("correctAnswer must be a valid index of options", record)
    return True


def create_question_set(records: list[dict]) -> list[dict]:
    """Generate and validate several questions; records use generate_question's keyword names."""
    questions = []
    for data in records:
        question = generate_question(**data)
        validate_question(question)
        questions.append(question)
    return questions
