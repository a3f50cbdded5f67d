"""
Game Session

The state of one Unscramble game: score, words played so far, and the word
currently shown to the player. A session is owned by whoever creates it and
is only changed through its own methods; listeners are told about every
change so a client can re-render.
"""

import logging
import random
from typing import Callable, FrozenSet, Iterable, List, Optional, Tuple

from ..config.game_settings import MAX_NO_OF_WORDS, SCORE_INCREASE
from .word_shuffler import shuffle

logger = logging.getLogger(__name__)

# Events passed to session listeners
WORD_SELECTED = "word_selected"
SCORE_CHANGED = "score_changed"
RESET = "reset"

SessionListener = Callable[[str, "GameSession"], None]


class WordPoolExhaustedError(RuntimeError):
    """Raised when every word in the pool has already been played."""


class GameSession:
    """
    Single-player Unscramble game state.

    The first word is selected on construction, so a new session starts at
    word 1 of ``max_rounds``.
    """

    def __init__(self,
                 word_pool: Iterable[str],
                 max_rounds: int = MAX_NO_OF_WORDS,
                 score_increase: int = SCORE_INCREASE,
                 rng: Optional[random.Random] = None):
        """
        Args:
            word_pool: Candidate words, in a fixed order
            max_rounds: Number of words played per game
            score_increase: Points awarded per correct guess
            rng: Random source for word selection and shuffling

        Raises:
            ValueError: If the settings are out of range or the pool holds
                fewer distinct words than a full game needs
        """
        if max_rounds < 1:
            raise ValueError("max_rounds must be at least 1")
        if score_increase < 0:
            raise ValueError("score_increase cannot be negative")

        self._word_pool: Tuple[str, ...] = tuple(word_pool)
        if len(set(self._word_pool)) < max_rounds:
            raise ValueError(
                f"Word pool has {len(set(self._word_pool))} distinct words, "
                f"fewer than the {max_rounds} played per game"
            )

        self._max_rounds = max_rounds
        self._score_increase = score_increase
        self._rng = rng or random.Random()
        self._listeners: List[SessionListener] = []

        self._score = 0
        self._round_count = 0
        self._used_words: set = set()
        self._current_word = ""
        self._current_scrambled = ""

        self.select_next_word()

    # -----------------------------
    # Observable values
    # -----------------------------

    @property
    def score(self) -> int:
        return self._score

    @property
    def current_word_count(self) -> int:
        return self._round_count

    @property
    def max_rounds(self) -> int:
        return self._max_rounds

    @property
    def score_increase(self) -> int:
        return self._score_increase

    @property
    def current_word(self) -> str:
        return self._current_word

    @property
    def current_scrambled_word(self) -> str:
        return self._current_scrambled

    @property
    def used_words(self) -> FrozenSet[str]:
        return frozenset(self._used_words)

    @property
    def is_last_word(self) -> bool:
        """True while the final word of the game is on screen."""
        return self._round_count >= self._max_rounds

    def add_listener(self, listener: SessionListener) -> None:
        """Register ``listener(event, session)``, called after each change."""
        self._listeners.append(listener)

    def remove_listener(self, listener: SessionListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self, event: str) -> None:
        for listener in list(self._listeners):
            try:
                listener(event, self)
            except Exception:
                logger.exception("Session listener failed on %s", event)

    # -----------------------------
    # Game operations
    # -----------------------------

    def select_next_word(self) -> Tuple[str, str]:
        """
        Draws an unused word from the pool and scrambles it.

        Returns:
            Tuple of (word, scrambled_word)

        Raises:
            WordPoolExhaustedError: If every word has been used; the
                session is left unchanged
        """
        candidates = [word for word in self._word_pool if word not in self._used_words]
        if not candidates:
            raise WordPoolExhaustedError(
                f"All {len(self._used_words)} words in the pool have been played"
            )

        word = self._rng.choice(candidates)
        scrambled = shuffle(word, self._rng)

        self._current_word = word
        self._current_scrambled = scrambled
        self._round_count += 1
        self._used_words.add(word)

        logger.debug("Word %s/%s selected: %s -> %s",
                     self._round_count, self._max_rounds, word, scrambled)
        self._notify(WORD_SELECTED)
        return word, scrambled

    def submit_guess(self, text: str) -> bool:
        """
        Checks the player's word against the current word, ignoring case.

        A correct guess increases the score; a wrong one changes nothing.

        Returns:
            bool: True if the guess is correct
        """
        if not isinstance(text, str):
            return False

        if text.lower() != self._current_word.lower():
            return False

        self._score += self._score_increase
        self._notify(SCORE_CHANGED)
        return True

    def advance_round(self) -> bool:
        """
        Moves on to the next word.

        Returns:
            bool: False once ``max_rounds`` words have been played, which
            ends the game
        """
        if self._round_count < self._max_rounds:
            self.select_next_word()
            return True
        return False

    def reset(self) -> None:
        """Starts the game over from word 1 with a score of zero."""
        self._score = 0
        self._round_count = 0
        self._used_words.clear()
        self.select_next_word()
        self._notify(RESET)
