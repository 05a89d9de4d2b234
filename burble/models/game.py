"""
Game Data Models

Contains all game-related data structures and enums.
"""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple

# Feedback codes for one letter of a guess; each code is also the points it earns
EXACT_POINTS = 2
PRESENT_POINTS = 1
ABSENT_POINTS = 0


class GameStatus(Enum):
    """Lifecycle of a single round. WON and LOST are terminal."""
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"

    @property
    def is_terminal(self) -> bool:
        return self is not GameStatus.IN_PROGRESS


class LetterStatus(Enum):
    """Per-letter evaluation of a guess."""
    HIT = "HIT"
    PRESENT = "PRESENT"
    MISS = "MISS"
    UNUSED = "UNUSED"

    @classmethod
    def from_code(cls, code: int) -> "LetterStatus":
        """Map a feedback code (exact, misplaced, absent) to a status."""
        return {EXACT_POINTS: cls.HIT, PRESENT_POINTS: cls.PRESENT, ABSENT_POINTS: cls.MISS}[code]


class Difficulty(Enum):
    """Difficulty tiers: (attempt budget, base points for a win)."""
    EASY = ("easy", 15, 25)
    MEDIUM = ("medium", 10, 35)
    HARD = ("hard", 5, 50)

    def __init__(self, label: str, max_attempts: int, base_points: int):
        self.label = label
        self.max_attempts = max_attempts
        self.base_points = base_points

    @classmethod
    def parse(cls, value) -> "Difficulty":
        """Look up a tier by label, case-insensitively."""
        if isinstance(value, cls):
            return value
        for tier in cls:
            if isinstance(value, str) and tier.label == value.strip().lower():
                return tier
        raise ValueError(f"Invalid difficulty '{value}'. Must be one of: easy, medium, hard")


@dataclass(frozen=True)
class Attempt:
    """A recorded guess. Never rescored once created."""
    guess: str
    score: int
    feedback: Tuple[int, ...] = ()


@dataclass
class GameSession:
    """Per-round state. Mutated only through the scoring engine."""
    target_word: str
    max_attempts: int
    attempts: List[Attempt] = field(default_factory=list)
    status: GameStatus = GameStatus.IN_PROGRESS
    hinted_positions: List[int] = field(default_factory=list)
    difficulty: Difficulty = Difficulty.MEDIUM
    category: str = "burble"
    game_id: Optional[str] = None
    started_at: float = field(default_factory=time.time)

    def __post_init__(self):
        if not self.target_word or not self.target_word.isalpha():
            raise ValueError("Target word must be a non-empty alphabetic string")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be a positive integer")
        self.target_word = self.target_word.lower()

    @property
    def word_length(self) -> int:
        return len(self.target_word)

    @property
    def hints_used(self) -> int:
        return len(self.hinted_positions)

    @property
    def attempts_used(self) -> int:
        """Guesses plus hints; both draw on the same budget."""
        return len(self.attempts) + self.hints_used


@dataclass
class GameState:
    """Client-facing snapshot of a session (answer hidden until the round ends)."""
    game_id: str
    difficulty: str
    category: str
    word_length: int
    max_attempts: int
    attempts_used: int
    attempts_remaining: int
    hints_used: int
    status: str
    game_over: bool
    won: bool
    guesses: List[str]
    scores: List[int]
    guess_results: List[List[Tuple[str, str]]]  # Letter status as string for JSON serialization
    letter_status: Dict[str, str]
    points: int = 0
    answer: Optional[str] = None  # Only included when game is over
