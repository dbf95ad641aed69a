from typing import List

import pytest
try:
    from hypothesis import given, strategies as st  # type: ignore
except ModuleNotFoundError:  # pragma: no cover - test infra
    pytest.skip("Hypothesis not installed", allow_module_level=True)

from tttmatch.board import WINNING_LINES, Board
from tttmatch.match import MatchController, MatchState
from tttmatch.policy import MoveSelector

orders = st.permutations(list(range(1, 10)))


@given(orders)
def test_full_iff_no_unmarked_positions(order: List[int]):
    b = Board()
    for i, pos in enumerate(order):
        assert b.is_full() == (not b.unmarked_positions())
        assert pos in b.unmarked_positions()
        b.assign(pos, "XO"[i % 2])
        assert pos not in b.unmarked_positions()
        assert b.unmarked_positions() == sorted(b.unmarked_positions())
    assert b.is_full()


@given(orders)
def test_win_and_threat_agree_from_both_sides(order: List[int]):
    b = Board()
    for i, pos in enumerate(order):
        if b.someone_won():
            break
        for m in ("X", "O"):
            assert b.win_position(m) == b.threat_position(m)
            hit = b.win_position(m)
            if hit is not None:
                assert b.is_unmarked(hit)
                assert any(
                    hit in line and [b[p] for p in line].count(m) == 2
                    for line in WINNING_LINES
                )
        b.assign(pos, "XO"[i % 2])


@given(st.sampled_from(WINNING_LINES), st.integers(min_value=0, max_value=2))
def test_two_in_a_line_points_at_the_gap(line, gap_index: int):
    b = Board()
    for i, pos in enumerate(line):
        if i != gap_index:
            b.assign(pos, "M")
    gap = line[gap_index]
    assert b.win_position("M") == gap
    assert b.threat_position("M") == gap


@given(orders, st.integers(min_value=0, max_value=2**32 - 1))
def test_selector_always_picks_an_unmarked_square(order: List[int], seed: int):
    b = Board()
    selector = MoveSelector.seeded(seed)
    for i, pos in enumerate(order[:8]):
        b.assign(pos, "XO"[i % 2])
        if b.someone_won() or b.is_full():
            break
        assert selector.select(b, "O", "X") in b.unmarked_positions()


@given(st.lists(st.integers(min_value=1, max_value=9), min_size=1, max_size=40),
       st.integers(min_value=0, max_value=1000))
def test_scores_never_decrease_during_a_match(picks: List[int], seed: int):
    m = MatchController(selector=MoveSelector.seeded(seed))
    m.set_markers("X", "O")
    m.set_names("human", "computer")
    last = m.current_scores()
    for pick in picks:
        if m.state is MatchState.MATCH_ENDED:
            break
        if m.state is MatchState.ROUND_ENDED:
            m.next_round()
        if m.state is MatchState.AWAITING_FIRST_MOVER:
            m.choose_first_mover("human" if pick % 2 else "computer")
        if m.is_human_turn():
            unmarked = m.board.unmarked_positions()
            m.apply_move(unmarked[pick % len(unmarked)])
        else:
            m.apply_move()
        scores = m.current_scores()
        assert scores.human >= last.human and scores.computer >= last.computer
        assert sum(scores) - sum(last) <= 1
        last = scores
