"""
Data Models Package

Contains all data models and errors used throughout the application.
"""

from .game import Attempt, Difficulty, GameSession, GameState, GameStatus, LetterStatus
from .errors import (
    AttemptsExhaustedError,
    BurbleError,
    GameNotFoundError,
    HintUnavailableError,
    InvalidGuessError,
    InvalidLengthError,
    SessionTerminatedError,
)

__all__ = [
    'Attempt', 'Difficulty', 'GameSession', 'GameState', 'GameStatus', 'LetterStatus',
    'BurbleError', 'InvalidLengthError', 'SessionTerminatedError', 'AttemptsExhaustedError',
    'HintUnavailableError', 'InvalidGuessError', 'GameNotFoundError'
]
