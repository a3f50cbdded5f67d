"""
Configuration Package

Contains all configuration-related files and settings.

This package separates three types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and the word pool
- messages.py: Player-facing strings
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    WORD_LIST, MAX_NO_OF_WORDS, SCORE_INCREASE,
    validate_word_list, validate_word_list_integrity, get_word_statistics
)
from .messages import MESSAGES, get_message

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'WORD_LIST', 'MAX_NO_OF_WORDS', 'SCORE_INCREASE',
    'validate_word_list', 'validate_word_list_integrity', 'get_word_statistics',
    # Strings
    'MESSAGES', 'get_message'
]
