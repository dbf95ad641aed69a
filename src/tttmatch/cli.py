from __future__ import annotations

import argparse
import logging
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _ver
from typing import Optional, Tuple

from .board import EMPTY, Board
from .match import MatchController
from .policy import MoveSelector
from .settings import Settings
from .shell import ConsoleShell
from .simulate import simulate_matches, summarize


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="ttt-match", description="Tic-tac-toe match against the computer")
    sub = p.add_subparsers(dest="cmd")
    p.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")
    p.add_argument("--version", action="store_true", help="Print version and exit")
    p.add_argument("--seed", type=int, default=None, help="Seed for the computer's random fallback moves")

    p_play = sub.add_parser("play", help="Play an interactive match in the console")
    p_play.add_argument(
        "--no-clear",
        dest="clear_screen",
        action="store_false",
        default=None,
        help="Do not clear the screen between turns",
    )

    p_sim = sub.add_parser("simulate", help="Play the computer against a random mover and summarize")
    p_sim.add_argument("--matches", type=int, default=100, help="Number of matches (default: 100)")

    p_tac = sub.add_parser("tactics", help="Show win/threat positions and the computer's pick for a board")
    p_tac.add_argument("--board", required=True, help="Board string, 9 cells row-major, '.' for empty, e.g. XX.OO....")
    p_tac.add_argument("--markers", default="X,O", help="The two markers, comma separated (default: X,O)")

    return p


def _parse_markers(raw: str) -> Optional[Tuple[str, str]]:
    parts = [m.strip() for m in raw.split(",")]
    if len(parts) != 2 or any(len(m) != 1 or m in (".", "_") for m in parts) or parts[0] == parts[1]:
        return None
    return parts[0], parts[1]


def _run_play(settings: Settings) -> int:
    shell = ConsoleShell(
        MatchController(selector=MoveSelector.seeded(settings.seed)),
        clear_screen=settings.clear_screen,
    )
    try:
        outcome = shell.run()
    except (EOFError, KeyboardInterrupt):
        print()
        print("Game interrupted. Goodbye!")
        return 130
    logging.debug("match outcome=%s", outcome.value)
    return 0


def _run_simulate(matches: int, seed: Optional[int]) -> int:
    if matches < 1:
        logging.error("--matches must be positive: %s", matches)
        return 2
    df = simulate_matches(matches, seed=seed)
    s = summarize(df)
    logging.info(
        "matches=%d rounds=%d computer_matches=%d human_matches=%d",
        s["matches"], s["rounds"], s["computer_matches"], s["human_matches"],
    )
    logging.info(
        "round rates: computer=%.3f human=%.3f tie=%.3f mean_moves=%.2f",
        s["computer_round_rate"], s["human_round_rate"], s["tie_rate"], s["mean_moves"],
    )
    return 0


def _run_tactics(raw_board: str, raw_markers: str, seed: Optional[int]) -> int:
    markers = _parse_markers(raw_markers)
    if markers is None:
        logging.error("Invalid markers. Must be two distinct single characters, e.g. X,O.")
        return 2
    try:
        board = Board.from_string(raw_board)
    except ValueError as e:
        logging.error("Invalid board string: %s", e)
        return 2
    stray = {board[pos] for pos in range(1, 10)} - {EMPTY, *markers}
    if stray:
        logging.error("Board uses markers other than %s: %s", "/".join(markers), "".join(sorted(stray)))
        return 2

    first, second = markers
    counts = {m: board.serialize().count(m) for m in markers}
    to_move, other = (second, first) if counts[second] < counts[first] else (first, second)

    logging.info("winner=%s full=%s", board.winning_marker(), board.is_full())
    for m in markers:
        logging.info("%s: win=%s threat=%s", m, board.win_position(m), board.threat_position(m))
    if board.someone_won() or board.is_full():
        return 0
    pick = MoveSelector.seeded(seed).select(board, to_move, other)
    logging.info("to_move=%s pick=%d", to_move, pick)
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    ns = parser.parse_args(argv)
    settings = Settings.from_env()
    if ns.seed is not None:
        settings.seed = ns.seed
    if getattr(ns, "clear_screen", None) is not None:
        settings.clear_screen = ns.clear_screen
    logging.basicConfig(level=logging.DEBUG if ns.verbose else settings.level(),
                        format="[%(levelname)s] %(message)s")

    if ns.version:
        try:
            print(_ver("ttt-match"))
        except PackageNotFoundError:
            print("unknown")
        return 0

    if ns.cmd == "play":
        return _run_play(settings)

    if ns.cmd == "simulate":
        return _run_simulate(ns.matches, settings.seed)

    if ns.cmd == "tactics":
        return _run_tactics(ns.board, ns.markers, settings.seed)

    parser.print_help()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
