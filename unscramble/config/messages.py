"""
Player-facing strings.

The text shown by clients: score and word-count labels, the "try again"
hint for a wrong answer and the end-of-game dialog.
"""

from typing import Dict

MESSAGES: Dict[str, str] = {
    'app_name': 'Unscramble',
    'instructions': 'Unscramble the word using all the letters.',
    'score': 'Score: %d',
    'word_count': '%d of %d words',
    'try_again': 'Try again!',
    'congratulations': 'Congratulations!',
    'you_scored': 'You scored: %d',
    'play_again': 'Play Again',
    'exit': 'Exit',
    'skip': 'Skip',
    'submit': 'Submit',
}


def get_message(key: str, *args) -> str:
    """
    Look up a message and apply %-style formatting arguments.

    Raises:
        KeyError: If the message key is unknown
    """
    template = MESSAGES[key]
    return template % args if args else template
