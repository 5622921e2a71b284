import random

import pytest

from oddments.mastermind import Mastermind, make_secret, score_guess


@pytest.mark.parametrize("seed", range(5))
def test_secret_without_repeats(seed):
    secret = make_secret(False, random.Random(seed))
    assert len(secret) == 4
    assert len(set(secret)) == 4
    assert all(1 <= value <= 8 for value in secret)


@pytest.mark.parametrize("seed", range(5))
def test_secret_with_repeats_in_range(seed):
    secret = make_secret(True, random.Random(seed))
    assert len(secret) == 4
    assert all(1 <= value <= 8 for value in secret)


def test_score_exact():
    assert score_guess((1, 2, 3, 4), (1, 2, 3, 4)) == (4, 0)


def test_score_all_misplaced():
    assert score_guess((1, 2, 3, 4), (4, 3, 2, 1)) == (0, 4)


def test_score_duplicates_counted_once():
    assert score_guess((1, 1, 2, 2), (1, 2, 1, 3)) == (1, 2)


@pytest.mark.parametrize("seed", range(10))
def test_score_is_symmetric_and_bounded(seed):
    rng = random.Random(seed)
    secret = make_secret(True, rng)
    guess = make_secret(True, rng)
    rights, halfrights = score_guess(secret, guess)
    assert rights + halfrights <= 4
    assert score_guess(guess, secret) == (rights, halfrights)


def test_set_place_rejects_bad_values():
    game = Mastermind((1, 2, 3, 4), 3)
    with pytest.raises(ValueError):
        game.set_place(5, 1)
    with pytest.raises(ValueError):
        game.set_place(1, 9)


def test_incomplete_guess_cannot_be_submitted():
    game = Mastermind((1, 2, 3, 4), 3)
    game.set_place(1, 1)
    assert not game.is_complete()
    with pytest.raises(ValueError):
        game.submit()


def test_winning_game():
    game = Mastermind((1, 2, 3, 4), 3)
    for place, color in enumerate((1, 2, 3, 4), start=1):
        game.set_place(place, color)
    assert game.is_complete()
    assert game.submit() == (4, 0)
    assert game.won
    assert game.guesses_made == 1


def test_losing_game():
    game = Mastermind((1, 2, 3, 4), 1)
    for place in range(1, 5):
        game.set_place(place, 5)
    assert game.submit() == (0, 0)
    assert game.lost
    assert game.guess == [0, 0, 0, 0]
    with pytest.raises(ValueError):
        game.submit()


def test_zero_tries_rejected():
    with pytest.raises(ValueError):
        Mastermind((1, 2, 3, 4), 0)