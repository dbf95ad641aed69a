"""
Interactive console session around ``MatchController``.

The shell owns prompting, retry loops and printing; the controller owns the
rules. Input, output and screen-clearing callables are injectable so sessions
can be scripted.
"""
from __future__ import annotations

from typing import Callable, Optional, TypeVar

from .match import WINNER_SCORE, MatchController, Outcome
from .render import (
    describe_players,
    draw_board,
    final_result_message,
    joinor,
    round_result_message,
    score_lines,
)
from .validation import match_first_mover, parse_move, parse_yes_no, validate_marker, validate_name

T = TypeVar("T")

CLEAR_SEQUENCE = "\033[2J\033[H"


class ConsoleShell:
    def __init__(
        self,
        match: Optional[MatchController] = None,
        input_fn: Optional[Callable[[], str]] = None,
        output_fn: Optional[Callable[[str], None]] = None,
        clear_fn: Optional[Callable[[], None]] = None,
        clear_screen: bool = True,
    ):
        self.match = match if match is not None else MatchController()
        self.input_fn = input_fn if input_fn is not None else input
        self.output_fn = output_fn if output_fn is not None else print
        self.clear_fn = clear_fn if clear_fn is not None else self._write_clear_sequence
        self.clear_screen = clear_screen

    def say(self, text: str = "") -> None:
        self.output_fn(text)

    def _write_clear_sequence(self) -> None:
        self.output_fn(CLEAR_SEQUENCE)

    def clear(self) -> None:
        if self.clear_screen:
            self.clear_fn()

    def ask(self, question: str, parse: Callable[[str], Optional[T]], retry: str) -> T:
        self.say(question)
        while True:
            value = parse(self.input_fn())
            if value is not None:
                return value
            self.say(retry)

    # --- session ---------------------------------------------------------

    def run(self) -> Outcome:
        self.display_welcome()
        self.set_info()
        while True:
            self.play_round()
            self.display_round_result()
            if self.match.is_match_over():
                break
            if not self.play_again():
                self.match.abandon()
                break
            self.match.next_round()
            self.clear()
            self.say("Let's play again!")
            self.say()
        self.say(final_result_message(self.match))
        self.say("Thanks for playing Tic Tac Toe! Goodbye!")
        return self.match.match_outcome()

    def display_welcome(self) -> None:
        self.clear()
        self.say("Welcome to Tic Tac Toe!")
        self.say(f"It takes {WINNER_SCORE} round wins to win the game.")
        self.say()

    def set_info(self) -> None:
        human_marker = self.ask(
            "What single-character marker would you like to use?",
            validate_marker,
            "That is not a possible choice. Please try again.",
        )
        computer_marker = self.ask(
            "What single-character marker would you like the computer to use?",
            lambda raw: validate_marker(raw, taken=human_marker),
            "That is not a possible choice. Please try again.",
        )
        human_name = self.ask(
            "What name would you like to use?",
            validate_name,
            "That is not valid. Please try again.",
        )
        computer_name = self.ask(
            "What name would you like the computer to use?",
            lambda raw: validate_name(raw, taken=human_name),
            "That is not valid. Please try again.",
        )
        self.match.set_markers(human_marker, computer_marker)
        self.match.set_names(human_name, computer_name)

    def display_board(self) -> None:
        self.say(describe_players(self.match))
        self.say()
        self.say(draw_board(self.match.board))
        self.say()

    def choose_first_mover(self) -> None:
        names = (self.match.human.name, self.match.computer.name)
        self.clear()
        choice = self.ask(
            f"Pick who you would like to go first {names[0]}/{names[1]}:",
            lambda raw: match_first_mover(raw, names),
            "Your choice is invalid. Please try again.",
        )
        self.match.choose_first_mover(choice)

    def play_round(self) -> None:
        self.choose_first_mover()
        self.display_board()
        while not self.match.is_round_over():
            if self.match.is_human_turn():
                self.human_moves()
            else:
                self.match.apply_move()
            if self.match.is_human_turn() and not self.match.is_round_over():
                self.clear()
                self.display_board()

    def human_moves(self) -> None:
        unmarked = self.match.board.unmarked_positions()
        position = self.ask(
            f"Choose a square ({joinor(unmarked)}):",
            lambda raw: parse_move(raw, unmarked),
            "Sorry, that's not a valid choice.",
        )
        self.match.apply_move(position)

    def display_round_result(self) -> None:
        self.clear()
        self.display_board()
        self.say(round_result_message(self.match))
        self.say(score_lines(self.match))
        self.say()

    def play_again(self) -> bool:
        return self.ask(
            f"You have not reached the winning score of {WINNER_SCORE} yet.\n"
            "Would you like to continue playing? (y/n)",
            parse_yes_no,
            "Sorry, must be y or n.",
        )
