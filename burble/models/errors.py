"""
Game Errors

Precondition failures raised by the scoring engine and the game service.
None of these are retried; the caller decides how to react.
"""


class BurbleError(Exception):
    """Base class for every Burble game error."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidLengthError(BurbleError):
    """Guess length does not match the target word length."""

    def __init__(self, expected: int, actual: int):
        super().__init__(f"Guess must be exactly {expected} letters (got {actual})")
        self.expected = expected
        self.actual = actual


class SessionTerminatedError(BurbleError):
    """Attempt submitted to a session that is already won or lost."""

    def __init__(self, status: str):
        super().__init__(f"Game is already over ({status})")
        self.status = status


class AttemptsExhaustedError(BurbleError):
    """No attempts left in the session budget."""

    def __init__(self, max_attempts: int):
        super().__init__(f"All {max_attempts} attempts have been used")
        self.max_attempts = max_attempts


class HintUnavailableError(BurbleError):
    """Not enough attempts left to pay for a hint."""


class InvalidGuessError(BurbleError):
    """Guess is not a usable word (empty or non-alphabetic)."""


class GameNotFoundError(BurbleError):
    """No session is registered under the given game id."""

    def __init__(self, game_id: str):
        super().__init__("Game not found")
        self.game_id = game_id
