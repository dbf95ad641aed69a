import logging

import pytest

from tttmatch.cli import main


@pytest.fixture
def info_logs(caplog):
    caplog.set_level(logging.INFO)
    return caplog


def test_tactics_reports_positions_and_pick(info_logs):
    assert main(["tactics", "--board", "OO..X.X.."]) == 0
    text = info_logs.text
    assert "winner=None full=False" in text
    assert "O: win=3 threat=3" in text
    assert "X: win=3 threat=3" in text
    assert "to_move=X pick=3" in text


def test_tactics_on_finished_board_skips_pick(info_logs):
    assert main(["tactics", "--board", "XXXOO...."]) == 0
    assert "winner=X" in info_logs.text
    assert "pick=" not in info_logs.text


def test_tactics_custom_markers(info_logs):
    assert main(["tactics", "--board", "AA.B.B...", "--markers", "A,B"]) == 0
    # equal counts: A is listed first so it moves, and the center is free
    assert "to_move=A pick=5" in info_logs.text


@pytest.mark.parametrize("bad", ["XO", "XXXXXXXXXX", "ZZ......."])
def test_tactics_rejects_bad_boards(info_logs, bad):
    assert main(["tactics", "--board", bad]) == 2


@pytest.mark.parametrize("markers", ["X", "X,X", "XY,O", "X,O,Z", ".,O"])
def test_tactics_rejects_bad_markers(info_logs, markers):
    assert main(["tactics", "--board", ".........", "--markers", markers]) == 2


def test_simulate_logs_summary(info_logs):
    assert main(["--seed", "3", "simulate", "--matches", "4"]) == 0
    assert "matches=4" in info_logs.text
    assert "round rates:" in info_logs.text


def test_simulate_rejects_non_positive(info_logs):
    assert main(["simulate", "--matches", "0"]) == 2


def test_play_handles_end_of_input(monkeypatch, capsys):
    def no_more_input():
        raise EOFError

    monkeypatch.setattr("builtins.input", no_more_input)
    assert main(["play", "--no-clear"]) == 130
    out = capsys.readouterr().out
    assert "Welcome to Tic Tac Toe!" in out
    assert "Game interrupted. Goodbye!" in out


def test_no_command_prints_help(capsys):
    assert main([]) == 0
    assert "ttt-match" in capsys.readouterr().out


def test_version_flag(capsys):
    assert main(["--version"]) == 0
    assert capsys.readouterr().out.strip()


def test_play_handles_ctrl_c(monkeypatch, capsys):
    def interrupted():
        raise KeyboardInterrupt

    monkeypatch.setattr("builtins.input", interrupted)
    assert main(["play", "--no-clear"]) == 130
    assert "Game interrupted. Goodbye!" in capsys.readouterr().out
