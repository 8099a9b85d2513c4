"""Session state and the controller the UI layer drives."""
import asyncio
import logging
import random
from enum import Enum
from typing import Callable, Optional, Protocol

from js_lab.config import LabConfig
from js_lab.models import (
    Choice, Difficulty, Judgment, Question, RunResult, SelectionPhase, SessionSnapshot, SessionState,
)
from js_lab.normalizer import build_choices
from js_lab.repository import ALL, QuestionRepository, shuffle
from js_lab.sandbox import CodeSandbox

logger = logging.getLogger(__name__)

NO_QUESTIONS_MESSAGE = "No questions available for this filter. Try a different category or difficulty."


class AdvanceOutcome(Enum):
    NEXT = "next"
    COMPLETED = "completed"  # wrapped back to the first question
    NO_QUESTIONS = "no_questions"


class Handle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    """Anything with asyncio's ``call_later`` shape, an event loop included."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> Handle: ...


class SessionController:
    """Owns the session state and mediates between repository, sandbox and UI."""

    def __init__(
        self,
        repository: QuestionRepository,
        sandbox: Optional[CodeSandbox] = None,
        scheduler: Optional[Scheduler] = None,
        config: Optional[LabConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or LabConfig()
        self.repository = repository
        self.sandbox = sandbox or CodeSandbox(timeout_ms=self.config.run_timeout_ms)
        self.scheduler = scheduler
        self.rng = rng
        self.state = SessionState(
            active_category=self.config.default_category,
            active_difficulty=self.config.default_difficulty,
        )
        self._pending_advance: Optional[Handle] = None
        self.last_auto_advance: Optional[AdvanceOutcome] = None

    # --- queries -------------------------------------------------------

    @property
    def has_questions(self) -> bool:
        return bool(self.state.ordered_questions)

    @property
    def advance_pending(self) -> bool:
        return self._pending_advance is not None

    def current_question(self) -> Optional[Question]:
        if not self.has_questions:
            return None
        return self.state.ordered_questions[self.state.cursor]

    def current_choices(self) -> list[Choice]:
        question = self.current_question()
        return build_choices(question) if question else []

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            score=self.state.score,
            streak=self.state.streak,
            cursor=self.state.cursor,
            category=self.state.active_category,
            difficulty=self.state.active_difficulty,
            total=len(self.state.ordered_questions),
            phase=self.state.phase,
            advance_pending=self.advance_pending,
        )

    # --- filters and ordering -----------------------------------------

    def select_filters(self, category: str, difficulty: str = ALL) -> int:
        """Apply filters, reshuffle the matching set and start from its first question."""
        if difficulty != ALL:
            difficulty = Difficulty.parse(difficulty).label
        self._cancel_pending_advance()
        self.state.phase = SelectionPhase.FILTERING
        self.state.active_category = category
        self.state.active_difficulty = difficulty
        matches = self.repository.questions_for(category, difficulty)
        self.state.phase = SelectionPhase.SHUFFLING
        self.state.ordered_questions = shuffle(matches, self.rng)
        self.state.cursor = 0
        self.state.clear_transient()
        self.state.phase = SelectionPhase.READY
        logger.debug("Filters %s/%s matched %d questions", category, difficulty, len(matches))
        return len(matches)

    def reshuffle_current_set(self) -> bool:
        if not self.has_questions:
            return False
        self._cancel_pending_advance()
        self.state.ordered_questions = shuffle(self.state.ordered_questions, self.rng)
        self.state.cursor = 0
        self.state.clear_transient()
        return True

    async def reload(self) -> None:
        """Reload the repository and rebuild the ordered set for the active filters."""
        await self.repository.load()
        self.select_filters(self.state.active_category, self.state.active_difficulty)

    # --- answering -----------------------------------------------------

    def select_choice(self, label: str) -> Judgment:
        """Judge a multiple-choice selection. Never changes score or streak."""
        self._cancel_pending_advance()
        question = self.current_question()
        if question is None:
            return Judgment(label=label, is_correct=False, message=NO_QUESTIONS_MESSAGE)
        choices = build_choices(question)
        label = label.strip().upper()
        selected = next((c for c in choices if c.label == label), None)
        correct = next(c for c in choices if c.is_correct)
        judgment = Judgment(
            label=label,
            is_correct=bool(selected and selected.is_correct),
            correct_label=correct.label,
            explanation=question.explanation,
        )
        self.state.selected_label = label
        self.state.last_judgment = judgment
        if judgment.is_correct:
            self._schedule_advance()
        return judgment

    def update_code(self, text: str) -> None:
        self.state.code_buffer = text

    def run_code(self, source: Optional[str] = None) -> RunResult:
        """Run a snippet against the current question; the only path that scores."""
        if source is not None:
            self.state.code_buffer = source
        question = self.current_question()
        if question is None:
            return RunResult(output=NO_QUESTIONS_MESSAGE, is_correct=False, expected="")
        result = self.sandbox.run(self.state.code_buffer, question.expected_output)
        if result.is_correct:
            self.state.score += self.config.points_per_correct
            self.state.streak += 1
        else:
            self.state.streak = 0
        self.state.last_run = result
        return result

    def advance(self) -> AdvanceOutcome:
        """Move to the next question, wrapping to the first after the last one."""
        self._cancel_pending_advance()
        if not self.has_questions:
            return AdvanceOutcome.NO_QUESTIONS
        self.state.clear_transient()
        if self.state.cursor + 1 < len(self.state.ordered_questions):
            self.state.cursor += 1
            return AdvanceOutcome.NEXT
        self.state.cursor = 0
        logger.debug("Completed all %d questions", len(self.state.ordered_questions))
        return AdvanceOutcome.COMPLETED

    # --- auto-advance --------------------------------------------------

    def _resolve_scheduler(self) -> Optional[Scheduler]:
        if self.scheduler is not None:
            return self.scheduler
        try:
            return asyncio.get_running_loop()
        except RuntimeError:
            return None

    def _schedule_advance(self) -> None:
        scheduler = self._resolve_scheduler()
        if scheduler is None:
            logger.debug("No scheduler or running event loop; auto-advance disabled")
            return
        self._pending_advance = scheduler.call_later(self.config.auto_advance_delay, self._auto_advance)

    def _auto_advance(self) -> None:
        self._pending_advance = None
        self.last_auto_advance = self.advance()

    def _cancel_pending_advance(self) -> None:
        if self._pending_advance is not None:
            self._pending_advance.cancel()
            self._pending_advance = None
