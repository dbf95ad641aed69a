"""
Plain-text rendering for the console session.
Everything here returns strings; printing is left to the caller.
"""
from __future__ import annotations

from typing import List, Sequence

from .board import Board
from .match import WINNER_SCORE, MatchController

_SPACER = "     |     |"
_DIVIDER = "-----+-----+-----"


def draw_board(board: Board) -> str:
    rows: List[str] = []
    for top in (1, 4, 7):
        if rows:
            rows.append(_DIVIDER)
        cells = [board[pos] for pos in (top, top + 1, top + 2)]
        rows.append(_SPACER)
        rows.append("  " + "  |  ".join(cells))
        rows.append(_SPACER)
    return "\n".join(rows)


def joinor(values: Sequence[object], sep: str = ", ", final: str = "or") -> str:
    """Join for prompts: ``[1, 2, 3]`` -> ``"1, 2, or 3"``, ``[1, 2]`` -> ``"1 or 2"``."""
    items = [str(v) for v in values]
    if len(items) <= 1:
        return "".join(items)
    if len(items) == 2:
        return f"{items[0]} {final} {items[1]}"
    return sep.join(items[:-1]) + f"{sep}{final} {items[-1]}"


def describe_players(match: MatchController) -> str:
    return (f"{match.human.name} you're a {match.human.marker}.\n"
            f"{match.computer.name} is a {match.computer.marker}.")


def round_result_message(match: MatchController) -> str:
    winner = match.round_winner()
    if winner is None:
        return "It's a tie this round!"
    return f"{winner.name} won this round!"


def score_lines(match: MatchController) -> str:
    return (f"{match.human.name} has won {match.human.score} times.\n"
            f"{match.computer.name} has won {match.computer.score} times.")


def final_result_message(match: MatchController) -> str:
    winner = match.match_winner()
    if winner is None:
        return f"Nobody reached {WINNER_SCORE} round wins this time."
    return f"{winner.name} has won the entire game."
