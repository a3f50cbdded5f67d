"""
Game Service

Manages Unscramble game sessions and the round flow around them.
"""

import logging
import random
import time
import uuid
from typing import Callable, Dict, Iterable, List, Optional, Tuple

from ..config.app_config import Config
from ..config.game_settings import WORD_LIST
from ..config.messages import get_message
from ..models.game import GameState, GameSummary, GuessOutcome
from .game_session import GameSession

logger = logging.getLogger(__name__)

GAME_OVER = "game_over"
GAME_RESTARTED = "game_restarted"

ServiceListener = Callable[[str, str, GameState], None]


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Session management with unique game IDs
    - The submit / skip / restart flow of a game
    - Game state snapshots that keep the answer hidden until the game ends
    - Notifying listeners whenever a session changes
    """

    def __init__(self,
                 word_list: Iterable[str] = WORD_LIST,
                 max_rounds: int = Config.MAX_NO_OF_WORDS,
                 score_increase: int = Config.SCORE_INCREASE,
                 seed: Optional[int] = None):
        self.games: Dict[str, Dict] = {}  # Store active games by game_id
        self.word_list = tuple(word_list)
        self.max_rounds = max_rounds
        self.score_increase = score_increase
        self._rng = random.Random(seed)
        self._listeners: List[ServiceListener] = []

    def add_listener(self, listener: ServiceListener) -> None:
        """Register ``listener(game_id, event, state)`` for all sessions."""
        self._listeners.append(listener)

    def remove_listener(self, listener: ServiceListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, game_id: str, event: str) -> None:
        state = self.get_game_state(game_id)
        if state is None:
            return
        for listener in list(self._listeners):
            try:
                listener(game_id, event, state)
            except Exception:
                logger.exception("Listener failed on %s for game %s", event, game_id)

    def create_new_game(self) -> str:
        """
        Creates a new game session with its first word already scrambled.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())

        session = GameSession(
            self.word_list,
            max_rounds=self.max_rounds,
            score_increase=self.score_increase,
            rng=random.Random(self._rng.random()),
        )

        self.games[game_id] = {
            "session": session,
            "game_over": False,
            "created_at": time.time(),
        }

        # Registered after the first word so creation itself is not broadcast
        session.add_listener(lambda event, _session: self._notify(game_id, event))

        logger.debug("Created game %s", game_id)
        return game_id

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        """
        Returns the current game state for a session.

        The unscrambled word is only revealed once the game is over.

        Args:
            game_id: Unique game identifier

        Returns:
            GameState object or None if game not found
        """
        if game_id not in self.games:
            return None

        game = self.games[game_id]
        session: GameSession = game["session"]

        return GameState(
            game_id=game_id,
            score=session.score,
            current_word_count=session.current_word_count,
            max_rounds=session.max_rounds,
            scrambled_word=session.current_scrambled_word,
            score_label=get_message('score', session.score),
            word_count_label=get_message('word_count', session.current_word_count, session.max_rounds),
            game_over=game["game_over"],
            answer=session.current_word if game["game_over"] else None,
        )

    def can_play(self, game_id: str) -> Tuple[bool, str]:
        """
        Checks that a game exists and is still running.

        Returns:
            Tuple of (is_playable, error_message)
        """
        if game_id not in self.games:
            return False, "Game not found"

        if self.games[game_id]["game_over"]:
            return False, "Game is already over"

        return True, ""

    def is_valid_guess(self, game_id: str, guess) -> Tuple[bool, str]:
        """
        Validates a guess for a specific game session.

        Args:
            game_id: Unique game identifier
            guess: The word to validate

        Returns:
            Tuple of (is_valid, error_message)
        """
        playable, error = self.can_play(game_id)
        if not playable:
            return False, error

        if not isinstance(guess, str) or not guess.strip():
            return False, "Guess must be a non-empty string"

        return True, ""

    def submit_guess(self, game_id: str, guess: str) -> Optional[GuessOutcome]:
        """
        Checks the player's word and moves to the next word when it is right.

        A wrong guess leaves the game unchanged. A right guess on the last
        word ends the game.

        Args:
            game_id: Unique game identifier
            guess: The player's word

        Returns:
            GuessOutcome or None if the guess is invalid
        """
        is_valid, _error = self.is_valid_guess(game_id, guess)
        if not is_valid:
            return None

        session: GameSession = self.games[game_id]["session"]

        if not session.submit_guess(guess):
            return GuessOutcome(
                correct=False,
                game_over=False,
                state=self.get_game_state(game_id),
                message=get_message('try_again'),
            )

        return self._advance(game_id, correct=True)

    def skip_word(self, game_id: str) -> Optional[GuessOutcome]:
        """
        Skips the current word without changing the score.

        Returns:
            GuessOutcome or None if the game is missing or already over
        """
        playable, _error = self.can_play(game_id)
        if not playable:
            return None

        return self._advance(game_id, correct=False)

    def _advance(self, game_id: str, correct: bool) -> GuessOutcome:
        game = self.games[game_id]
        session: GameSession = game["session"]

        if not session.advance_round():
            game["game_over"] = True
            logger.debug("Game %s over with score %s", game_id, session.score)
            self._notify(game_id, GAME_OVER)

        return GuessOutcome(
            correct=correct,
            game_over=game["game_over"],
            state=self.get_game_state(game_id),
            summary=self.get_final_summary(game_id) if game["game_over"] else None,
        )

    def get_final_summary(self, game_id: str) -> Optional[GameSummary]:
        """
        Builds the final score dialog for a game.

        Returns:
            GameSummary or None if game not found
        """
        if game_id not in self.games:
            return None

        session: GameSession = self.games[game_id]["session"]

        return GameSummary(
            title=get_message('congratulations'),
            message=get_message('you_scored', session.score),
            score=session.score,
            words_played=session.current_word_count,
            max_rounds=session.max_rounds,
        )

    def restart_game(self, game_id: str) -> Optional[GameState]:
        """
        Starts a game over with a fresh score and a new first word.

        Returns:
            GameState or None if game not found
        """
        if game_id not in self.games:
            return None

        game = self.games[game_id]
        game["game_over"] = False
        game["session"].reset()

        self._notify(game_id, GAME_RESTARTED)
        return self.get_game_state(game_id)

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session from memory.

        Args:
            game_id: Unique game identifier

        Returns:
            bool: True if game was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(config_class=Config, word_list: Optional[Iterable[str]] = None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(
        word_list=WORD_LIST if word_list is None else word_list,
        max_rounds=config_class.MAX_NO_OF_WORDS,
        score_increase=config_class.SCORE_INCREASE,
        seed=config_class.RANDOM_SEED,
    )
    return _game_service
