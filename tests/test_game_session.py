import random

import pytest

from unscramble.config import WORD_LIST
from unscramble.services.game_session import (
    GameSession, WordPoolExhaustedError, WORD_SELECTED, SCORE_CHANGED, RESET
)
from unscramble.services.word_shuffler import shuffle, can_shuffle


def test_shuffle_is_a_different_permutation_for_every_pool_word():
    rng = random.Random(7)
    for word in WORD_LIST:
        scrambled = shuffle(word, rng)
        assert scrambled != word
        assert sorted(scrambled) == sorted(word)


def test_shuffle_two_letter_word_is_reversed():
    assert shuffle("ab") == "ba"


def test_shuffle_is_repeatable_with_seeded_rng():
    assert shuffle("keyboard", random.Random(3)) == shuffle("keyboard", random.Random(3))


@pytest.mark.parametrize("word", ["", "a", "aa", "zzz"])
def test_shuffle_rejects_words_without_another_permutation(word):
    assert not can_shuffle(word)
    with pytest.raises(ValueError):
        shuffle(word)


def test_new_session_starts_on_first_word():
    session = GameSession(WORD_LIST, rng=random.Random(1))
    assert session.score == 0
    assert session.current_word_count == 1
    assert session.max_rounds == 10
    assert session.current_word in WORD_LIST
    assert session.used_words == {session.current_word}
    assert session.current_scrambled_word != session.current_word
    assert sorted(session.current_scrambled_word) == sorted(session.current_word)


def test_reset_clears_score_and_selects_a_word():
    session = GameSession(WORD_LIST, rng=random.Random(2))
    session.submit_guess(session.current_word)
    session.advance_round()
    session.advance_round()

    session.reset()

    assert session.score == 0
    assert session.current_word_count == 1
    assert len(session.used_words) == 1
    assert session.current_word in session.used_words


def test_correct_guess_ignores_case():
    session = GameSession(WORD_LIST, rng=random.Random(3))
    assert session.submit_guess(session.current_word.upper())
    assert session.score == 20
    assert session.submit_guess(session.current_word.title())
    assert session.score == 40


def test_padded_guess_is_wrong():
    session = GameSession(["cat", "dog"], max_rounds=2, rng=random.Random(3))
    assert session.submit_guess(f" {session.current_word} ") is False
    assert session.score == 0


@pytest.mark.parametrize("guess", ["", "nope", None, 42])
def test_wrong_guess_changes_nothing(guess):
    session = GameSession(WORD_LIST, rng=random.Random(4))
    word, scrambled = session.current_word, session.current_scrambled_word

    assert session.submit_guess(guess) is False
    assert session.score == 0
    assert session.current_word_count == 1
    assert session.current_word == word
    assert session.current_scrambled_word == scrambled


def test_scrambled_word_itself_is_not_accepted():
    session = GameSession(WORD_LIST, rng=random.Random(5))
    assert session.submit_guess(session.current_scrambled_word) is False


def test_custom_score_increase():
    session = GameSession(["cat", "dog"], max_rounds=2, score_increase=5)
    session.submit_guess(session.current_word)
    assert session.score == 5


def test_advance_round_until_max_rounds():
    session = GameSession(WORD_LIST, max_rounds=3, rng=random.Random(6))
    seen = [session.current_word]

    assert session.advance_round() is True
    seen.append(session.current_word)
    assert session.current_word_count == 2
    assert not session.is_last_word

    assert session.advance_round() is True
    seen.append(session.current_word)
    assert session.current_word_count == 3
    assert session.is_last_word

    last_word = session.current_word
    assert session.advance_round() is False
    assert session.current_word_count == 3
    assert session.current_word == last_word

    assert len(set(seen)) == 3
    assert session.used_words == set(seen)


def test_full_game_uses_each_word_once():
    pool = ["cat", "dog", "emu", "fox"]
    session = GameSession(pool, max_rounds=4, rng=random.Random(8))
    while session.advance_round():
        pass
    assert session.used_words == set(pool)
    assert session.current_word_count == 4


def test_two_word_game_scenario():
    session = GameSession(["cat", "dog"], max_rounds=2, rng=random.Random(9))
    session.reset()
    first = session.current_word
    assert first in ("cat", "dog")

    assert session.submit_guess(first) is True
    assert session.score == 20

    assert session.advance_round() is True
    second = session.current_word
    assert {first, second} == {"cat", "dog"}

    assert session.submit_guess(second) is True
    assert session.score == 40

    assert session.advance_round() is False


def test_pool_smaller_than_game_is_rejected():
    with pytest.raises(ValueError):
        GameSession(["cat", "dog"], max_rounds=3)


def test_pool_duplicates_do_not_count_towards_game_length():
    with pytest.raises(ValueError):
        GameSession(["cat", "cat", "dog"], max_rounds=3)


@pytest.mark.parametrize("kwargs", [{"max_rounds": 0}, {"score_increase": -1}])
def test_invalid_settings_are_rejected(kwargs):
    with pytest.raises(ValueError):
        GameSession(["cat", "dog"], **kwargs)


def test_exhausted_pool_raises_and_leaves_state_unchanged():
    session = GameSession(["cat", "dog"], max_rounds=2, rng=random.Random(10))
    session.advance_round()
    word, count = session.current_word, session.current_word_count

    with pytest.raises(WordPoolExhaustedError):
        session.select_next_word()

    assert session.current_word == word
    assert session.current_word_count == count


def test_listeners_are_told_about_each_change():
    session = GameSession(WORD_LIST, rng=random.Random(11))
    events = []
    listener = lambda event, s: events.append((event, s.current_word_count, s.score))
    session.add_listener(listener)

    session.submit_guess("wrong")
    session.submit_guess(session.current_word)
    session.advance_round()
    session.reset()

    assert events == [
        (SCORE_CHANGED, 1, 20),
        (WORD_SELECTED, 2, 20),
        (WORD_SELECTED, 1, 0),
        (RESET, 1, 0),
    ]

    session.remove_listener(listener)
    session.advance_round()
    assert len(events) == 4


def test_failing_listener_does_not_interrupt_the_session():
    session = GameSession(["cat", "dog"], max_rounds=2, rng=random.Random(12))

    def broken(event, s):
        raise RuntimeError("listener down")

    session.add_listener(broken)

    assert session.submit_guess(session.current_word) is True
    assert session.score == 20
    assert session.advance_round() is True
    assert session.current_word_count == 2
