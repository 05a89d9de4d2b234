"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, word-length limits and word list checks
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    DEFAULT_CATEGORY, MAX_WORD_LENGTH, MIN_WORD_LENGTH, WORD_LIST_PATH,
    get_word_statistics, validate_word_list_integrity
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'DEFAULT_CATEGORY', 'MIN_WORD_LENGTH', 'MAX_WORD_LENGTH', 'WORD_LIST_PATH',
    'validate_word_list_integrity', 'get_word_statistics'
]
