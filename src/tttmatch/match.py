"""
Match state machine: two players, alternating turns, round scoring, match end.

States run AWAITING_FIRST_MOVER -> ROUND_IN_PROGRESS -> ROUND_ENDED, and back to
AWAITING_FIRST_MOVER via ``next_round`` until a player reaches ``WINNER_SCORE``
(or the match is abandoned), which lands in the terminal MATCH_ENDED state.
The first mover is resolved again at the start of every round.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional

from .board import EMPTY, Board
from .policy import MoveSelector

WINNER_SCORE = 3


@dataclass
class Player:
    marker: Optional[str] = None
    name: Optional[str] = None
    score: int = 0


class MatchState(Enum):
    AWAITING_FIRST_MOVER = "awaiting_first_mover"
    ROUND_IN_PROGRESS = "round_in_progress"
    ROUND_ENDED = "round_ended"
    MATCH_ENDED = "match_ended"


class Outcome(Enum):
    ONGOING = "ongoing"
    WON = "won"
    TIED = "tied"
    NO_WINNER = "no_winner"


class Scores(NamedTuple):
    human: int
    computer: int


class MatchController:
    """Owns the board and both players and enforces the turn order.

    Setup (``set_markers``/``set_names``) happens once, before the first round.
    Misuse raises ``ValueError`` for bad arguments and ``RuntimeError`` for a
    transition attempted in the wrong state.
    """

    def __init__(self, board: Optional[Board] = None, selector: Optional[MoveSelector] = None):
        self.board = board if board is not None else Board()
        self.selector = selector if selector is not None else MoveSelector()
        self.human = Player()
        self.computer = Player()
        self.current_marker: Optional[str] = None
        self.state = MatchState.AWAITING_FIRST_MOVER
        self.round_number = 1
        self._started = False

    # --- setup -----------------------------------------------------------

    def _require_setup_phase(self, what: str) -> None:
        if self._started:
            raise RuntimeError(f"{what} can only be set before the first round starts")

    def set_markers(self, human_marker: str, computer_marker: str) -> None:
        self._require_setup_phase("Markers")
        for marker in (human_marker, computer_marker):
            if len(marker) != 1 or marker == EMPTY:
                raise ValueError(f"Marker must be a single non-blank character: {marker!r}")
        if human_marker == computer_marker:
            raise ValueError(f"Both sides cannot use the same marker: {human_marker!r}")
        self.human.marker = human_marker
        self.computer.marker = computer_marker

    def set_names(self, human_name: str, computer_name: str) -> None:
        self._require_setup_phase("Names")
        for name in (human_name, computer_name):
            if not name.strip():
                raise ValueError("Names must not be blank")
        if human_name == computer_name:
            raise ValueError(f"Both sides cannot use the same name: {human_name!r}")
        self.human.name = human_name
        self.computer.name = computer_name

    # --- turn order ------------------------------------------------------

    def choose_first_mover(self, name: Optional[str] = None) -> Player:
        """Resolve who opens the current round; ``None`` lets the human start."""
        if self.state is not MatchState.AWAITING_FIRST_MOVER:
            raise RuntimeError(f"Cannot choose a first mover in state {self.state.value}")
        if None in (self.human.marker, self.computer.marker, self.human.name, self.computer.name):
            raise RuntimeError("Markers and names must be set before play begins")

        if name is None or name == self.human.name:
            player = self.human
        elif name == self.computer.name:
            player = self.computer
        else:
            raise ValueError(f"Unknown player name: {name!r}")

        self.current_marker = player.marker
        self.state = MatchState.ROUND_IN_PROGRESS
        self._started = True
        logging.debug("Round %d: %s moves first", self.round_number, player.name)
        return player

    @property
    def active_player(self) -> Optional[Player]:
        if self.current_marker is None:
            return None
        return self.human if self.current_marker == self.human.marker else self.computer

    def is_human_turn(self) -> bool:
        return self.current_marker is not None and self.current_marker == self.human.marker

    def is_computer_turn(self) -> bool:
        return self.current_marker is not None and self.current_marker == self.computer.marker

    def apply_move(self, position: Optional[int] = None) -> int:
        """Play one turn for the active side and return the position taken.

        The human's turn needs ``position``; on the computer's turn it is
        computed by the selector unless one is given explicitly.
        """
        if self.state is not MatchState.ROUND_IN_PROGRESS:
            raise RuntimeError(f"Cannot move in state {self.state.value}")

        if self.is_human_turn():
            player, opponent = self.human, self.computer
            if position is None:
                raise ValueError("A position is required on the human's turn")
        else:
            player, opponent = self.computer, self.human
            if position is None:
                position = self.selector.select(self.board, player.marker, opponent.marker)

        if not self.board.is_unmarked(position):
            raise ValueError(f"Position {position} is not an unmarked square")

        self.board.assign(position, player.marker)
        logging.debug("%s (%s) marks %d", player.name, player.marker, position)
        self.current_marker = opponent.marker

        if self.is_round_over():
            self._end_round()
        return position

    # --- round and match results -----------------------------------------

    def _end_round(self) -> None:
        winner = self.round_winner()
        if winner is not None:
            winner.score += 1
            logging.debug("Round %d won by %s (%d-%d)", self.round_number, winner.name,
                          self.human.score, self.computer.score)
        else:
            logging.debug("Round %d tied", self.round_number)

        if self._threshold_reached():
            self.state = MatchState.MATCH_ENDED
            logging.debug("Match won by %s", self.match_winner().name)
        else:
            self.state = MatchState.ROUND_ENDED

    def _threshold_reached(self) -> bool:
        return self.human.score >= WINNER_SCORE or self.computer.score >= WINNER_SCORE

    def is_round_over(self) -> bool:
        return self.board.someone_won() or self.board.is_full()

    def round_winner(self) -> Optional[Player]:
        marker = self.board.winning_marker()
        if marker is None:
            return None
        if marker == self.human.marker:
            return self.human
        if marker == self.computer.marker:
            return self.computer
        return None

    def round_outcome(self) -> Outcome:
        if not self.is_round_over():
            return Outcome.ONGOING
        return Outcome.WON if self.round_winner() is not None else Outcome.TIED

    def is_match_over(self) -> bool:
        return self.state is MatchState.MATCH_ENDED

    def match_winner(self) -> Optional[Player]:
        if self.human.score >= WINNER_SCORE:
            return self.human
        if self.computer.score >= WINNER_SCORE:
            return self.computer
        return None

    def match_outcome(self) -> Outcome:
        if self.match_winner() is not None:
            return Outcome.WON
        if self.is_match_over():
            return Outcome.NO_WINNER
        return Outcome.ONGOING

    def current_scores(self) -> Scores:
        return Scores(self.human.score, self.computer.score)

    # --- continuation ----------------------------------------------------

    def next_round(self) -> None:
        if self.state is not MatchState.ROUND_ENDED:
            raise RuntimeError(f"Cannot start a new round in state {self.state.value}")
        self.board.reset()
        self.current_marker = None
        self.round_number += 1
        self.state = MatchState.AWAITING_FIRST_MOVER

    def abandon(self) -> None:
        if self.is_match_over():
            return
        self.state = MatchState.MATCH_ENDED
        logging.debug("Match abandoned after %d round(s) at %d-%d", self.round_number,
                      self.human.score, self.computer.score)

    def new_match(self) -> None:
        self.human = Player()
        self.computer = Player()
        self.board.reset()
        self.current_marker = None
        self.round_number = 1
        self._started = False
        self.state = MatchState.AWAITING_FIRST_MOVER
