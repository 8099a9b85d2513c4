"""Question repository: loading, filtering and randomizing question sets."""
import logging
import random
from typing import Iterable, Optional, Sequence, Union

import httpx

from js_lab.config import DEFAULT_SOURCE, FETCH_TIMEOUT
from js_lab.errors import MalformedQuestion, SourceLoadFailure
from js_lab.importer import fetch_document
from js_lab.models import Category, Difficulty, Question
from js_lab.normalizer import normalize
from js_lab.seed import fallback_document

logger = logging.getLogger(__name__)

ALL = "all"


def shuffle(items: Iterable, rng: Optional[random.Random] = None) -> list:
    """Fisher-Yates shuffle of a copy of ``items``; every permutation is equally likely."""
    rng = rng or random
    shuffled = list(items)
    for i in range(len(shuffled) - 1, 0, -1):
        j = rng.randrange(i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]
    return shuffled


def _matches_difficulty(question: Question, difficulty) -> bool:
    if difficulty is None or difficulty == ALL:
        return True
    return question.difficulty is Difficulty.parse(difficulty)


class QuestionRepository:
    """Loaded questions and categories, hiding where they came from."""

    def __init__(
        self,
        source: str = DEFAULT_SOURCE,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = FETCH_TIMEOUT,
        rng: Optional[random.Random] = None,
    ):
        self.source = str(source)
        self.client = client
        self.timeout = timeout
        self.rng = rng
        self.questions: list[Question] = []
        self.categories: list[Category] = []
        self.meta: dict = {}
        self.rejected: list[dict] = []
        self.is_loaded = False
        self.used_fallback = False

    async def load(self) -> None:
        """Load the configured source, falling back to the embedded dataset on any failure."""
        try:
            document = await fetch_document(self.source, client=self.client, timeout=self.timeout)
            self.load_document(document)
            if not self.questions:
                raise SourceLoadFailure("Question document has no usable questions", self.source)
            self.used_fallback = False
        except SourceLoadFailure as exc:
            logger.warning(
                "Failed to load questions from %s (%s); using embedded questions", self.source, exc
            )
            self.load_document(fallback_document())
            self.used_fallback = True
        logger.info("Loaded %d questions in %d categories", len(self.questions), len(self.categories))

    def load_document(self, document: dict) -> None:
        """Ingest an already-parsed document, excluding malformed records."""
        self.meta = dict(document.get("meta") or {})
        self.categories = [
            Category(id=str(c["id"]), name=c.get("name", str(c["id"])), color=c.get("color", ""))
            for c in document.get("categories") or []
        ]
        self.questions = []
        self.rejected = []
        for raw in document.get("questions") or []:
            record = dict(raw)
            record["category"] = self._category_key(record.get("category"))
            try:
                question = normalize(record)
            except MalformedQuestion as exc:
                logger.warning("Skipping malformed question: %s", exc)
                self.rejected.append(dict(raw))
                continue
            self._register_category(question.category)
            self.questions.append(question)
        self.is_loaded = True

    def _category_key(self, value) -> str:
        """Resolve a category id or display name (legacy records) to a category id."""
        if value is None:
            return ""
        value = str(value)
        for category in self.categories:
            if category.id == value:
                return value
        for category in self.categories:
            if category.name == value:
                return category.id
        return value

    def _register_category(self, category_id: str) -> None:
        if category_id and self.category_by_id(category_id) is None:
            logger.debug("Registering undeclared category %r", category_id)
            self.categories.append(Category(id=category_id, name=category_id))

    def all_questions(self) -> list[Question]:
        return list(self.questions)

    def total_questions(self) -> int:
        return len(self.questions)

    def questions_for(self, category: str, difficulty: Union[str, Difficulty] = ALL) -> list[Question]:
        """Questions in ``category`` (exact id match, or "all") at ``difficulty`` (or "all")."""
        key = ALL if category == ALL else self._category_key(category)
        return [
            q for q in self.questions
            if (key == ALL or q.category == key) and _matches_difficulty(q, difficulty)
        ]

    def filtered_questions(
        self,
        category: Optional[str] = None,
        difficulty=None,
        question_type: Optional[str] = None,
        tags: Optional[Sequence[str]] = None,
    ) -> list[Question]:
        questions = self.questions_for(category or ALL, difficulty or ALL)
        if question_type:
            questions = [q for q in questions if q.type == question_type]
        if tags:
            questions = [q for q in questions if any(tag in q.tags for tag in tags)]
        return questions

    def random_questions(self, count: int = 10, **filters) -> list[Question]:
        return shuffle(self.filtered_questions(**filters), self.rng)[:count]

    def question_by_id(self, question_id) -> Optional[Question]:
        return next((q for q in self.questions if q.id == question_id), None)

    def category_by_id(self, category_id: str) -> Optional[Category]:
        return next((c for c in self.categories if c.id == category_id), None)

    def metadata(self) -> dict:
        return dict(self.meta)

    def search(self, term: str) -> list[Question]:
        """Case-insensitive search over title, prompt, explanation and tags."""
        term = term.lower()
        return [
            q for q in self.questions
            if term in q.title.lower()
            or term in q.question.lower()
            or term in q.explanation.lower()
            or any(term in tag.lower() for tag in q.tags)
        ]

    def related_questions(self, question_id, count: int = 5) -> list[Question]:
        question = self.question_by_id(question_id)
        if question is None:
            return []
        related = [
            q for q in self.questions
            if q.id != question_id
            and (q.category == question.category or any(tag in question.tags for tag in q.tags))
        ]
        return shuffle(related, self.rng)[:count]

    def statistics(self) -> dict:
        by_type: dict[str, int] = {}
        for q in self.questions:
            by_type[q.type] = by_type.get(q.type, 0) + 1
        return {
            "total": len(self.questions),
            "by_difficulty": {
                d.label: sum(1 for q in self.questions if q.difficulty is d) for d in Difficulty
            },
            "by_category": {
                c.id: sum(1 for q in self.questions if q.category == c.id) for c in self.categories
            },
            "by_type": by_type,
        }
