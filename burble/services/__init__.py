"""
Services Package

Contains the scoring engine, word providers and the game service.
"""

from . import scoring_engine
from .game_service import GameService, get_game_service, initialize_game_service
from .word_provider import JsonWordProvider, StaticWordProvider, WordProvider, choose_word

__all__ = [
    'scoring_engine',
    'GameService', 'get_game_service', 'initialize_game_service',
    'WordProvider', 'StaticWordProvider', 'JsonWordProvider', 'choose_word'
]
