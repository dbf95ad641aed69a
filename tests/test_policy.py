import numpy as np
import pytest

from tttmatch.board import Board
from tttmatch.policy import MoveSelector, RandomMover


def test_empty_board_takes_center():
    assert MoveSelector.seeded(0).select(Board(), "O", "X") == 5


def test_center_beats_an_available_win():
    b = Board.from_string("OO.X.X...")
    assert MoveSelector.seeded(0).select(b, "O", "X") == 5


def test_takes_immediate_win():
    b = Board.from_string("OO..X.X..")
    assert MoveSelector.seeded(0).select(b, "O", "X") == 3


def test_win_preferred_over_block():
    # X threatens 9 via column 3-6-9, O can win at 8 via column 2-5-8
    b = Board.from_string("XOX.OX...")
    assert b.threat_position("X") == 9
    assert MoveSelector.seeded(0).select(b, "O", "X") == 8


def test_blocks_human_threat():
    b = Board.from_string("XX..O....")
    assert b.win_position("O") is None
    assert MoveSelector.seeded(0).select(b, "O", "X") == 3


def test_random_fallback_picks_an_unmarked_square():
    b = Board.from_string("X...O....")
    for seed in range(20):
        assert MoveSelector.seeded(seed).select(b, "O", "X") in b.unmarked_positions()


def test_random_fallback_is_reproducible_with_a_seed():
    b = Board.from_string("X...O....")
    picks_a = [MoveSelector.seeded(7).select(b, "O", "X") for _ in range(5)]
    picks_b = [MoveSelector.seeded(7).select(b, "O", "X") for _ in range(5)]
    assert picks_a == picks_b


def test_injected_generator_is_used():
    class FixedChoice:
        def choice(self, seq):
            return seq[-1]

    b = Board.from_string("X...O....")
    assert MoveSelector(FixedChoice()).select(b, "O", "X") == 9


def test_full_board_is_a_caller_error():
    b = Board.from_string("XOXXOOOXX")
    with pytest.raises(ValueError):
        MoveSelector.seeded(0).select(b, "O", "X")
    with pytest.raises(ValueError):
        RandomMover(np.random.default_rng(0)).select(b, "X", "O")


def test_random_mover_stays_on_unmarked_squares():
    mover = RandomMover(np.random.default_rng(3))
    b = Board.from_string("XOXOX....")
    for _ in range(20):
        assert mover.select(b, "O", "X") in (6, 7, 8, 9)
