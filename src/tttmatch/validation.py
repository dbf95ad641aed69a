"""Validators for raw console input. Each returns the cleaned value or None."""
from __future__ import annotations

from typing import Iterable, Optional, Sequence

from .board import EMPTY


def validate_marker(raw: str, taken: Optional[str] = None) -> Optional[str]:
    choice = raw.strip()
    if len(choice) != 1 or choice == EMPTY or choice == taken:
        return None
    return choice


def validate_name(raw: str, taken: Optional[str] = None) -> Optional[str]:
    if not raw.strip() or raw == taken:
        return None
    return raw


def parse_move(raw: str, unmarked: Iterable[int]) -> Optional[int]:
    try:
        position = int(raw.strip())
    except ValueError:
        return None
    return position if position in set(unmarked) else None


def parse_yes_no(raw: str) -> Optional[bool]:
    answer = raw.strip().lower()
    if answer == "y":
        return True
    if answer == "n":
        return False
    return None


def match_first_mover(raw: str, names: Sequence[str]) -> Optional[str]:
    return raw if raw in names else None
