"""
Game Data Models

Contains the game-related data structures sent to clients.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class GameState:
    """Client-side view of a game session."""
    game_id: str
    score: int
    current_word_count: int
    max_rounds: int
    scrambled_word: str
    score_label: str  # "Score: 20"
    word_count_label: str  # "3 of 10 words"
    game_over: bool
    answer: Optional[str] = None  # Only included when game is over


@dataclass
class GameSummary:
    """Final score dialog shown when a game ends."""
    title: str
    message: str
    score: int
    words_played: int
    max_rounds: int


@dataclass
class GuessOutcome:
    """Result of a submitted guess or a skipped word."""
    correct: bool
    game_over: bool
    state: GameState
    message: Optional[str] = None  # "Try again!" on a wrong guess
    summary: Optional[GameSummary] = None  # Only included when game is over
