"""
Game Service

Manages Burble game sessions and delegates scoring to the scoring engine.
"""

import logging
import random
import string
import threading
import uuid
from typing import Dict, List, Optional, Tuple

from ..config.game_settings import (
    DEFAULT_CATEGORY,
    DEFAULT_DIFFICULTY,
    DEFAULT_WORD_LENGTH,
    MAX_WORD_LENGTH,
    MIN_WORD_LENGTH,
)
from ..models.errors import GameNotFoundError, InvalidGuessError
from ..models.game import Difficulty, GameSession, GameState, GameStatus, LetterStatus
from . import scoring_engine
from .word_provider import JsonWordProvider, WordProvider, choose_word

logger = logging.getLogger(__name__)


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Word selection through an injected word provider
    - Guess validation before scoring
    - Game state snapshots without exposing answers to clients

    Every read-modify-write of a session happens under the service lock, so
    concurrent requests for the same game are applied one at a time.
    """

    def __init__(self, word_provider: WordProvider, rng: Optional[random.Random] = None):
        self.games: Dict[str, GameSession] = {}  # Store active games by game_id
        self.word_provider = word_provider
        self._rng = rng or random.Random()
        self._lock = threading.RLock()

    def create_new_game(self, difficulty: str = DEFAULT_DIFFICULTY,
                        category: str = DEFAULT_CATEGORY,
                        length: int = DEFAULT_WORD_LENGTH) -> str:
        """
        Creates a new game session with a randomly selected word.

        Args:
            difficulty: "easy", "medium" or "hard"; sets the attempt budget
            category: Word category to draw from
            length: Target word length

        Returns:
            str: Unique game ID for this session

        Raises:
            ValueError: If the difficulty or length is invalid
            LookupError: If no word matches the category and length
        """
        tier = Difficulty.parse(difficulty)
        if isinstance(length, bool) or not isinstance(length, int) or not MIN_WORD_LENGTH <= length <= MAX_WORD_LENGTH:
            raise ValueError(f"Word length must be between {MIN_WORD_LENGTH} and {MAX_WORD_LENGTH}")

        game_id = str(uuid.uuid4())
        with self._lock:
            # Select random word (server keeps this secret)
            target_word = choose_word(self.word_provider, category, length, self._rng)
            self.games[game_id] = GameSession(
                target_word=target_word,
                max_attempts=tier.max_attempts,
                difficulty=tier,
                category=category.lower(),
                game_id=game_id
            )

        logger.debug("Created game %s (%s, %s, %d letters)", game_id, tier.label, category, length)
        return game_id

    def _get_session(self, game_id: str) -> GameSession:
        session = self.games.get(game_id)
        if session is None:
            raise GameNotFoundError(game_id)
        return session

    def get_game_state(self, game_id: str) -> GameState:
        """
        Returns the current game state for a session (without revealing the answer).

        Raises:
            GameNotFoundError: If no game has this id
        """
        with self._lock:
            return self._build_state(self._get_session(game_id))

    def get_session(self, game_id: str) -> GameSession:
        """Returns the live session object; callers must not mutate it."""
        with self._lock:
            return self._get_session(game_id)

    def make_guess(self, game_id: str, guess: str) -> GameState:
        """
        Validates and records a guess.

        Args:
            game_id: Unique game identifier
            guess: Word of the same length as the target

        Returns:
            Updated GameState

        Raises:
            GameNotFoundError: If no game has this id
            InvalidGuessError: If the guess is empty or not alphabetic
            InvalidLengthError, SessionTerminatedError, AttemptsExhaustedError:
                Propagated from the scoring engine
        """
        if not isinstance(guess, str) or not guess.strip():
            raise InvalidGuessError("Guess must be a valid string")

        normalized_guess = guess.strip()
        if not all(char in string.ascii_letters for char in normalized_guess):
            raise InvalidGuessError("Guess must contain only letters")

        with self._lock:
            session = self._get_session(game_id)
            scoring_engine.record_attempt(session, normalized_guess)
            return self._build_state(session)

    def take_hint(self, game_id: str) -> Tuple[str, GameState]:
        """
        Reveals one letter of the target at the cost of an attempt.

        Raises:
            GameNotFoundError: If no game has this id
            SessionTerminatedError, HintUnavailableError: From the scoring engine
        """
        with self._lock:
            session = self._get_session(game_id)
            hint = scoring_engine.use_hint(session)
            return hint, self._build_state(session)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Returns:
            bool: True if game was deleted, False if not found
        """
        with self._lock:
            return self.games.pop(game_id, None) is not None

    def active_game_count(self) -> int:
        with self._lock:
            return sum(1 for session in self.games.values() if not session.status.is_terminal)

    def _build_state(self, session: GameSession) -> GameState:
        game_over = session.status.is_terminal
        guess_results: List[List[Tuple[str, str]]] = [
            [(letter, LetterStatus.from_code(code).value) for letter, code in zip(attempt.guess, attempt.feedback)]
            for attempt in session.attempts
        ]

        return GameState(
            game_id=session.game_id,
            difficulty=session.difficulty.label,
            category=session.category,
            word_length=session.word_length,
            max_attempts=session.max_attempts,
            attempts_used=session.attempts_used,
            attempts_remaining=scoring_engine.attempts_remaining(session),
            hints_used=session.hints_used,
            status=session.status.value,
            game_over=game_over,
            won=session.status is GameStatus.WON,
            guesses=[attempt.guess for attempt in session.attempts],
            scores=[attempt.score for attempt in session.attempts],
            guess_results=guess_results,
            letter_status=self._letter_status(session),
            points=scoring_engine.calculate_points(session),
            answer=session.target_word if game_over else None
        )

    def _letter_status(self, session: GameSession) -> Dict[str, str]:
        """
        Keyboard tracking across all attempts.
        Status can only progress in priority order: UNUSED < MISS < PRESENT < HIT.
        """
        letter_status = {letter: LetterStatus.UNUSED.value for letter in string.ascii_lowercase}
        for attempt in session.attempts:
            for letter, code in zip(attempt.guess, attempt.feedback):
                new_status = LetterStatus.from_code(code)
                current_status = LetterStatus(letter_status[letter])

                if new_status == LetterStatus.HIT:
                    letter_status[letter] = LetterStatus.HIT.value
                elif new_status == LetterStatus.PRESENT and current_status != LetterStatus.HIT:
                    letter_status[letter] = LetterStatus.PRESENT.value
                elif new_status == LetterStatus.MISS and current_status == LetterStatus.UNUSED:
                    letter_status[letter] = LetterStatus.MISS.value
        return letter_status


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(word_provider: Optional[WordProvider] = None,
                            word_list_path: Optional[str] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    if word_provider is None:
        word_provider = JsonWordProvider(word_list_path) if word_list_path else JsonWordProvider()
    _game_service = GameService(word_provider)
    return _game_service
