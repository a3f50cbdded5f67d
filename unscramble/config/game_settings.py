"""
Game Configuration Constants Module

This module defines the game rules of Unscramble: how many words are played
per game, how many points a correct answer is worth, and the pool of words
the game draws from. The word pool is loaded from ``words.json`` next to this
module and validated on import.
"""

import json
import os
from typing import Dict, Final, Iterable, List

# Core Game Configuration Constants
MAX_NO_OF_WORDS: Final[int] = 10
"""
Number of words played in a single game before the final score is shown.
"""

SCORE_INCREASE: Final[int] = 20
"""
Points awarded for each correctly unscrambled word.
"""


def validate_word_list(words: Iterable[str]) -> List[str]:
    """
    Validates a candidate word pool and returns it as a list.

    Every word must:
    1. Be a non-empty, lowercase, alphabetic string
    2. Have at least two distinct letters, so it can be scrambled into
       something different from itself
    3. Appear only once in the pool

    Args:
        words: Candidate words in pool order

    Returns:
        List[str]: The validated words, order preserved

    Raises:
        ValueError: If the pool is empty or any word fails validation
    """
    word_list = list(words)

    if not word_list:
        raise ValueError("Word list cannot be empty")

    for index, word in enumerate(word_list):
        if not isinstance(word, str) or not word:
            raise ValueError(f"Word at index {index} must be a non-empty string")

        if not word.isalpha():
            raise ValueError(f"Word at index {index} '{word}' contains non-alphabetic characters")

        if not word.islower():
            raise ValueError(f"Word at index {index} '{word}' is not in lowercase format")

        if len(set(word)) < 2:
            raise ValueError(f"Word at index {index} '{word}' cannot be scrambled")

    if len(word_list) != len(set(word_list)):
        duplicates = sorted({word for word in word_list if word_list.count(word) > 1})
        raise ValueError(f"Duplicate words found in word list: {duplicates}")

    return word_list


def _load_word_list() -> List[str]:
    """
    Load the word pool from words.json.

    Returns:
        List[str]: Validated lowercase words

    Raises:
        FileNotFoundError: If words.json is missing
        ValueError: If the file is malformed or a word is invalid
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, 'words.json')

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            word_list = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in words.json: {e}") from e

    if not isinstance(word_list, list):
        raise ValueError("JSON file must contain an array of words")

    return validate_word_list(word_list)


# Word pool loaded from JSON file. A tuple, so it cannot be mutated in place.
WORD_LIST: Final[tuple] = tuple(_load_word_list())


def validate_word_list_integrity(max_rounds: int = MAX_NO_OF_WORDS) -> bool:
    """
    Validates the bundled word pool against the game rules.

    Args:
        max_rounds: Words played per game, as configured

    Returns:
        bool: True if the pool is valid and large enough for a full game

    Raises:
        ValueError: If any validation check fails
    """
    validate_word_list(WORD_LIST)

    if len(WORD_LIST) < max_rounds:
        raise ValueError(
            f"Word list has {len(WORD_LIST)} words, fewer than the "
            f"{max_rounds} played per game"
        )

    return True


def get_word_statistics() -> Dict:
    """
    Summarizes the word pool.

    Returns:
        dict: total_words, shortest, longest, avg_length and the word
        count per length
    """
    if not WORD_LIST:
        return {"error": "Word list is empty"}

    lengths: Dict[int, int] = {}
    for word in WORD_LIST:
        lengths[len(word)] = lengths.get(len(word), 0) + 1

    return {
        "total_words": len(WORD_LIST),
        "shortest": min(lengths),
        "longest": max(lengths),
        "avg_length": round(sum(len(word) for word in WORD_LIST) / len(WORD_LIST), 2),
        "words_by_length": dict(sorted(lengths.items())),
    }


if __name__ == "__main__":

    try:
        validate_word_list_integrity()
        print(" Word list validation passed")

        stats = get_word_statistics()
        print(f" Word statistics: {stats}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
