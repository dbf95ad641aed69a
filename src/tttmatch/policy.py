"""
Move selection for the automated side.
Teaching notes:
- The policy is a greedy priority list, not a search: center, win, block, random.
- An optimal human can still beat it; that is accepted behaviour.
- Randomness comes from an injected numpy Generator so runs can be pinned by seed.
"""
from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from .board import CENTER, Board


class MoveSelector:
    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    @classmethod
    def seeded(cls, seed: Optional[int]) -> "MoveSelector":
        return cls(np.random.default_rng(seed))

    def select(self, board: Board, own_marker: str, opponent_marker: str) -> int:
        unmarked = board.unmarked_positions()
        if not unmarked:
            raise ValueError("Cannot select a move on a full board")

        if CENTER in unmarked:
            return self._chose(CENTER, "center")

        offense = board.win_position(own_marker)
        if offense is not None:
            return self._chose(offense, "win")

        defense = board.threat_position(opponent_marker)
        if defense is not None:
            return self._chose(defense, "block")

        return self._chose(int(self.rng.choice(unmarked)), "random")

    @staticmethod
    def _chose(position: int, rule: str) -> int:
        logging.debug("selector rule=%s position=%d", rule, position)
        return position


class RandomMover:
    """Uniform mover over unmarked positions; stands in for a human in simulations."""

    def __init__(self, rng: Optional[np.random.Generator] = None):
        self.rng = rng if rng is not None else np.random.default_rng()

    def select(self, board: Board, own_marker: str, opponent_marker: str) -> int:
        unmarked = board.unmarked_positions()
        if not unmarked:
            raise ValueError("Cannot select a move on a full board")
        return int(self.rng.choice(unmarked))
