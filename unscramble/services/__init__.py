"""
Services Package

Contains all business logic and service classes.
"""

from .word_shuffler import shuffle, can_shuffle
from .game_session import GameSession, WordPoolExhaustedError
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'shuffle', 'can_shuffle',
    'GameSession', 'WordPoolExhaustedError',
    'GameService', 'get_game_service', 'initialize_game_service'
]
