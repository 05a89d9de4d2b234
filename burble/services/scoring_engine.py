"""
Scoring Engine

Pure scoring and attempt bookkeeping for Burble rounds.

A guess earns 2 points for every letter in the same position as in the
target word and 1 point for every other letter that still appears somewhere
in the target. Each physical target letter is credited at most once, so the
score of a guess of length L always falls in [0, 2L].
"""

import logging
import math
from fractions import Fraction
from typing import List, Tuple

from ..models.errors import (
    AttemptsExhaustedError,
    HintUnavailableError,
    InvalidLengthError,
    SessionTerminatedError,
)
from ..models.game import ABSENT_POINTS, EXACT_POINTS, PRESENT_POINTS, Attempt, GameSession, GameStatus

logger = logging.getLogger(__name__)

HINT_PENALTY = 5


def _normalize(target: str, guess: str) -> Tuple[str, str]:
    target = target.lower()
    guess = guess.lower()
    if not target or len(guess) != len(target):
        raise InvalidLengthError(len(target), len(guess))
    return target, guess


def evaluate(target: str, guess: str) -> Tuple[int, ...]:
    """
    Evaluates a guess letter by letter.

    Args:
        target: The secret word
        guess: The candidate word, same length as target

    Returns:
        Tuple of feedback codes, one per letter: 2 exact, 1 misplaced, 0 absent

    Raises:
        InvalidLengthError: If the lengths differ or the target is empty
    """
    target, guess = _normalize(target, guess)

    # Consumption flags, so no character value can collide with a consumed slot
    target_consumed: List[bool] = [False] * len(target)
    guess_consumed: List[bool] = [False] * len(guess)
    feedback = [ABSENT_POINTS] * len(target)

    # First pass: exact position matches
    for i in range(len(guess)):
        if guess[i] == target[i]:
            feedback[i] = EXACT_POINTS
            target_consumed[i] = True
            guess_consumed[i] = True

    # Second pass: letters present elsewhere in the remaining target
    for i in range(len(guess)):
        if guess_consumed[i]:
            continue
        for j in range(len(target)):
            if not target_consumed[j] and target[j] == guess[i]:
                feedback[i] = PRESENT_POINTS
                target_consumed[j] = True
                break

    return tuple(feedback)


def score(target: str, guess: str) -> int:
    """Returns the closeness score of guess against target, in [0, 2 * len(target)]."""
    return sum(evaluate(target, guess))


def attempts_remaining(session: GameSession) -> int:
    return session.max_attempts - session.attempts_used


def record_attempt(session: GameSession, guess: str) -> GameSession:
    """
    Scores a guess and appends it to the session, updating the round status.

    The session is mutated in place and returned. The caller must hold
    exclusive access to it for the duration of the call.

    Raises:
        SessionTerminatedError: If the round is already won or lost
        InvalidLengthError: If the guess length differs from the target
        AttemptsExhaustedError: If no attempts are left
    """
    if session.status.is_terminal:
        raise SessionTerminatedError(session.status.value)

    if len(guess) != session.word_length:
        raise InvalidLengthError(session.word_length, len(guess))

    if attempts_remaining(session) <= 0:
        raise AttemptsExhaustedError(session.max_attempts)

    normalized_guess = guess.lower()
    feedback = evaluate(session.target_word, normalized_guess)
    session.attempts.append(Attempt(guess=normalized_guess, score=sum(feedback), feedback=feedback))

    if normalized_guess == session.target_word:
        session.status = GameStatus.WON
    elif attempts_remaining(session) == 0:
        session.status = GameStatus.LOST

    logger.debug(
        "Recorded attempt %d/%d for game %s: score=%d status=%s",
        session.attempts_used, session.max_attempts, session.game_id,
        session.attempts[-1].score, session.status.value
    )
    return session


def _revealed_positions(session: GameSession) -> set:
    revealed = set(session.hinted_positions)
    for attempt in session.attempts:
        revealed.update(i for i, code in enumerate(attempt.feedback) if code == EXACT_POINTS)
    return revealed


def use_hint(session: GameSession) -> str:
    """
    Reveals the first letter the player has not yet placed correctly.

    A hint costs one attempt and is refused when it would use up the last
    one, so taking a hint can never end the round by itself.

    Returns:
        str: Hint message naming the revealed position and letter

    Raises:
        SessionTerminatedError: If the round is already won or lost
        HintUnavailableError: If fewer than two attempts remain or every letter is known
    """
    if session.status.is_terminal:
        raise SessionTerminatedError(session.status.value)

    if attempts_remaining(session) < 2:
        raise HintUnavailableError("Not enough attempts left to use a hint")

    revealed = _revealed_positions(session)
    for position, letter in enumerate(session.target_word):
        if position not in revealed:
            session.hinted_positions.append(position)
            return f"Letter {position + 1} is '{letter.upper()}'"

    raise HintUnavailableError("Every letter has already been revealed")


def calculate_points(session: GameSession) -> int:
    """
    Calculates the reward for a won round.

    Base points depend on difficulty; fewer attempts used raise the reward
    by up to 100%, each hint subtracts a flat penalty, and a win is never
    worth less than half the base.
    """
    if session.status is not GameStatus.WON:
        return 0

    base_points = session.difficulty.base_points
    # base * (1 + attempt_factor), with attempt_factor = 1 - used / (2 * max), kept exact
    reward = Fraction(base_points * (4 * session.max_attempts - session.attempts_used), 2 * session.max_attempts)
    # Halves round up
    points = math.floor(reward - session.hints_used * HINT_PENALTY + Fraction(1, 2))
    return max(points, base_points // 2)
