"""
Board basics: squares, the fixed line catalog, and line-completion scans.
Teaching notes:
- Positions are 1..9, row-major, so the keypad-style numbering reads naturally.
- A square holds either the EMPTY sentinel or a one-character marker.
- Scans walk positions in ascending order and, per position, the lines through
  it in catalog order; the first match wins, which fixes ties deterministically.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

EMPTY = " "
CENTER = 5
POSITIONS: Tuple[int, ...] = tuple(range(1, 10))

WINNING_LINES: Tuple[Tuple[int, int, int], ...] = (
    (1, 2, 3), (4, 5, 6), (7, 8, 9),  # rows
    (1, 4, 7), (2, 5, 8), (3, 6, 9),  # columns
    (1, 5, 9), (3, 5, 7),             # diagonals
)

LINES_THROUGH: Mapping[int, Tuple[Tuple[int, int, int], ...]] = MappingProxyType({
    pos: tuple(line for line in WINNING_LINES if pos in line) for pos in POSITIONS
})

# accepted spellings of an empty cell in board strings
_EMPTY_CHARS = {".", "_", EMPTY}


class Square:
    def __init__(self, marker: str = EMPTY):
        self.marker = marker

    def __str__(self) -> str:
        return self.marker

    def __repr__(self) -> str:
        return f"Square({self.marker!r})"

    def is_unmarked(self) -> bool:
        return self.marker == EMPTY


class Board:
    """Nine squares keyed 1..9 plus line analysis over ``WINNING_LINES``.

    ``assign`` trusts its caller: the position must be in range and unmarked.
    Check with ``is_unmarked`` or ``unmarked_positions`` first.
    """

    def __init__(self) -> None:
        self.squares: Dict[int, Square] = {}
        self.reset()

    def reset(self) -> None:
        for pos in POSITIONS:
            self.squares[pos] = Square()

    def __getitem__(self, position: int) -> str:
        return self.squares[position].marker

    def __setitem__(self, position: int, marker: str) -> None:
        self.assign(position, marker)

    def assign(self, position: int, marker: str) -> None:
        self.squares[position].marker = marker

    def is_unmarked(self, position: int) -> bool:
        square = self.squares.get(position)
        return square is not None and square.is_unmarked()

    def unmarked_positions(self) -> List[int]:
        return [pos for pos in POSITIONS if self.squares[pos].is_unmarked()]

    def is_full(self) -> bool:
        return not self.unmarked_positions()

    def markers(self, line: Tuple[int, ...]) -> List[str]:
        return [self.squares[pos].marker for pos in line]

    def winning_marker(self) -> Optional[str]:
        for line in WINNING_LINES:
            markers = self.markers(line)
            if markers[0] != EMPTY and markers.count(markers[0]) == 3:
                return markers[0]
        return None

    def someone_won(self) -> bool:
        return self.winning_marker() is not None

    def _completing_position(self, marker: str) -> Optional[int]:
        for pos in self.unmarked_positions():
            for line in LINES_THROUGH[pos]:
                markers = self.markers(line)
                if markers.count(marker) == 2 and markers.count(EMPTY) == 1:
                    return pos
        return None

    def threat_position(self, opponent_marker: str) -> Optional[int]:
        """Empty position where ``opponent_marker`` would complete a line next turn."""
        return self._completing_position(opponent_marker)

    def win_position(self, my_marker: str) -> Optional[int]:
        """Empty position that completes a line for ``my_marker`` right now."""
        return self._completing_position(my_marker)

    def serialize(self) -> str:
        return "".join("." if self.squares[pos].is_unmarked() else self.squares[pos].marker
                       for pos in POSITIONS)

    @classmethod
    def from_string(cls, text: str) -> "Board":
        if len(text) != len(POSITIONS):
            raise ValueError(f"Board string must have 9 cells, got {len(text)}: {text!r}")
        board = cls()
        for pos, ch in zip(POSITIONS, text):
            if ch not in _EMPTY_CHARS:
                board.assign(pos, ch)
        return board

    def __repr__(self) -> str:
        return f"Board({self.serialize()!r})"
