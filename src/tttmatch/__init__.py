"""tttmatch package.

Board, opponent move selection, and the match state machine for a
human-vs-computer tic-tac-toe match, plus a console shell and a small CLI.

Convenience imports are exposed for common workflows.
"""

from .board import EMPTY, WINNING_LINES, Board
from .match import WINNER_SCORE, MatchController, MatchState, Outcome, Player, Scores
from .policy import MoveSelector, RandomMover

__all__ = [
    "Board",
    "EMPTY",
    "WINNING_LINES",
    "MoveSelector",
    "RandomMover",
    "MatchController",
    "MatchState",
    "Outcome",
    "Player",
    "Scores",
    "WINNER_SCORE",
]
