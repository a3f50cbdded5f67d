"""
Word Shuffler

Produces the scrambled form of a word shown to the player.
"""

import random
from typing import Optional


def can_shuffle(word: str) -> bool:
    """Returns True if some permutation of the word differs from it."""
    return len(set(word)) >= 2


def shuffle(word: str, rng: Optional[random.Random] = None) -> str:
    """
    Returns a random permutation of the word's letters that is never the
    word itself.

    The letters are shuffled again until the result differs from the
    original. The comparison is case-sensitive.

    Args:
        word: Word to scramble
        rng: Random source; the module-level generator when omitted

    Returns:
        str: The scrambled word

    Raises:
        ValueError: If the word has no permutation other than itself
            (empty, a single letter, or one letter repeated)
    """
    if not can_shuffle(word):
        raise ValueError(f"Word '{word}' cannot be scrambled")

    shuffle_letters = rng.shuffle if rng is not None else random.shuffle
    letters = list(word)

    shuffle_letters(letters)
    while "".join(letters) == word:
        shuffle_letters(letters)

    return "".join(letters)
