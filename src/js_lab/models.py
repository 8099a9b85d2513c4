"""Data classes for the lab domain model."""
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional, Union

DIFFICULTY_ALIASES = {
    "beginner": "easy",
    "intermediate": "medium",
    "advanced": "hard",
    "easy": "easy",
    "medium": "medium",
    "hard": "hard",
}


class Difficulty(IntEnum):
    EASY = 1
    MEDIUM = 2
    HARD = 3

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: Union[str, "Difficulty"]) -> "Difficulty":
        """Map either naming scheme (beginner/easy, ...) onto the enum."""
        if isinstance(value, Difficulty):
            return value
        canonical = DIFFICULTY_ALIASES.get(str(value).strip().lower())
        if canonical is None:
            raise ValueError(f"Unknown difficulty: {value!r}")
        return cls[canonical.upper()]


class ChoiceStrategy(Enum):
    LEGACY = "legacy"      # expectedOutput plus fixed distractors
    AUTHORED = "authored"  # options list written by the question author


@dataclass
class Category:
    id: str
    name: str
    color: str = ""


@dataclass
class Question:
    id: Union[int, str]
    category: str
    difficulty: Difficulty
    question: str
    options: list[str]
    correct_answer_index: int = 0
    code: str = ""
    hint: str = ""
    explanation: str = ""
    expected_output: str = ""
    strategy: ChoiceStrategy = ChoiceStrategy.AUTHORED
    title: str = ""
    type: str = "output"
    tags: list[str] = field(default_factory=list)
    hints: list[str] = field(default_factory=list)
    related_concepts: list[str] = field(default_factory=list)

    @property
    def starter_code(self) -> str:
        return self.code


@dataclass
class Choice:
    label: str
    text: str
    is_correct: bool = False


@dataclass
class RunResult:
    output: str
    is_correct: bool
    expected: str
    error: bool = False


@dataclass
class Judgment:
    label: str
    is_correct: bool
    correct_label: Optional[str] = None
    explanation: str = ""
    message: str = ""


class SelectionPhase(Enum):
    UNFILTERED = "unfiltered"
    FILTERING = "filtering"
    SHUFFLING = "shuffling"
    READY = "ready"


@dataclass
class SessionState:
    active_category: str
    active_difficulty: str = "all"
    ordered_questions: list[Question] = field(default_factory=list)
    cursor: int = 0
    score: int = 0
    streak: int = 0
    phase: SelectionPhase = SelectionPhase.UNFILTERED
    selected_label: Optional[str] = None
    code_buffer: str = ""
    last_run: Optional[RunResult] = None
    last_judgment: Optional[Judgment] = None

    def clear_transient(self) -> None:
        """Drop the per-question state: selected choice, code buffer, results."""
        self.selected_label = None
        self.code_buffer = ""
        self.last_run = None
        self.last_judgment = None


@dataclass(frozen=True)
class SessionSnapshot:
    score: int
    streak: int
    cursor: int
    category: str
    difficulty: str
    total: int
    phase: SelectionPhase
    advance_pending: bool = False
