"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import GameState, GameSummary, GuessOutcome

__all__ = ['GameState', 'GameSummary', 'GuessOutcome']
