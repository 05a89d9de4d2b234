"""
Utilities Package

Contains utility functions and helper modules.
"""

from .helpers import error_response, get_user_identity
from .game_logger import game_logger

__all__ = ['error_response', 'get_user_identity', 'game_logger']
