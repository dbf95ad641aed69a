"""
Batch simulation: the move selector against a uniform random mover.

One numpy SeedSequence is split into independent streams for the two sides,
so a seed reproduces every move of every match. Results stay in memory as a
pandas DataFrame with one row per round.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import numpy as np
import pandas as pd

from .match import WINNER_SCORE, MatchController
from .policy import MoveSelector, RandomMover

HUMAN_MARKER = "X"
COMPUTER_MARKER = "O"
HUMAN_NAME = "random"
COMPUTER_NAME = "selector"

# Guard against a run of ties that never lets either side reach the threshold.
MAX_ROUNDS_PER_MATCH = 50

COLUMNS = ["match", "round", "first_mover", "winner", "moves", "human_score", "computer_score"]


def play_match(match: MatchController, mover: RandomMover, match_index: int = 0) -> List[Dict[str, Any]]:
    """Play one complete match; the first mover alternates, human first."""
    match.set_markers(HUMAN_MARKER, COMPUTER_MARKER)
    match.set_names(HUMAN_NAME, COMPUTER_NAME)
    rows: List[Dict[str, Any]] = []
    while True:
        first = HUMAN_NAME if match.round_number % 2 == 1 else COMPUTER_NAME
        match.choose_first_mover(first)
        while not match.is_round_over():
            if match.is_human_turn():
                match.apply_move(mover.select(match.board, HUMAN_MARKER, COMPUTER_MARKER))
            else:
                match.apply_move()
        winner = match.round_winner()
        rows.append({
            "match": match_index,
            "round": match.round_number,
            "first_mover": "human" if first == HUMAN_NAME else "computer",
            "winner": "tie" if winner is None else ("human" if winner is match.human else "computer"),
            "moves": 9 - len(match.board.unmarked_positions()),
            "human_score": match.human.score,
            "computer_score": match.computer.score,
        })
        if match.is_match_over():
            break
        if match.round_number >= MAX_ROUNDS_PER_MATCH:
            match.abandon()
            break
        match.next_round()
    return rows


def simulate_matches(matches: int = 100, seed: Optional[int] = None) -> pd.DataFrame:
    if matches < 1:
        raise ValueError(f"matches must be positive, got {matches}")
    selector_seq, mover_seq = np.random.SeedSequence(seed).spawn(2)
    selector = MoveSelector(np.random.default_rng(selector_seq))
    mover = RandomMover(np.random.default_rng(mover_seq))
    match = MatchController(selector=selector)

    rows: List[Dict[str, Any]] = []
    for i in range(matches):
        match.new_match()
        rows.extend(play_match(match, mover, match_index=i))
    logging.debug("Simulated %d matches, %d rounds", matches, len(rows))
    return pd.DataFrame(rows, columns=COLUMNS)


def summarize(df: pd.DataFrame) -> Dict[str, float]:
    rates = df["winner"].value_counts(normalize=True)
    finals = df.groupby("match").last()
    return {
        "matches": int(finals.shape[0]),
        "rounds": int(df.shape[0]),
        "human_round_rate": float(rates.get("human", 0.0)),
        "computer_round_rate": float(rates.get("computer", 0.0)),
        "tie_rate": float(rates.get("tie", 0.0)),
        "mean_moves": float(df["moves"].mean()),
        "human_matches": int((finals["human_score"] >= WINNER_SCORE).sum()),
        "computer_matches": int((finals["computer_score"] >= WINNER_SCORE).sum()),
    }
