import io
import logging
import random
import sys
import time

import pytest

from lightsgrid import app
from lightsgrid.game import GameBoard


def _scrambled_board():
    board = GameBoard(3, 3)
    board.scramble(random.Random(42), 100)
    return board


def _cells(board):
    return [[board.get(x, y) for y in range(board.height)] for x in range(board.width)]


def test_parser_defaults():
    args = app.build_parser().parse_args([])
    assert args.message is None
    assert args.version is False
    assert args.turn_based is False
    assert args.loop_based is False


def test_parser_message_option():
    args = app.build_parser().parse_args(["-m", "hello"])
    assert args.message == "hello"
    args = app.build_parser().parse_args(["--message", "world"])
    assert args.message == "world"


def test_parser_modes_exclude_each_other():
    with pytest.raises(SystemExit) as info:
        app.build_parser().parse_args(["--turn_based", "--loop_based"])
    assert info.value.code == 2


def test_help_exits_cleanly(capsys):
    with pytest.raises(SystemExit) as info:
        app.main(["--help"])
    assert info.value.code == 0
    assert "--turn_based" in capsys.readouterr().out


def test_version_matches(capsys):
    assert app.main(["--version"]) == 0
    assert capsys.readouterr().out.strip() == app.PROJECT_VERSION


def test_consequence_game_quit_immediately(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("q\n"))
    board = app.consequence_game()
    assert board.move_count == 0
    assert _cells(board) == _cells(_scrambled_board())
    assert "Quit (0 moves)" in capsys.readouterr().out


def test_consequence_game_double_press_restores(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1 1\n1 1\nq\n"))
    board = app.consequence_game()
    reference = _scrambled_board()
    assert _cells(board) == _cells(reference)
    assert board.move_count in (0, 2)


def test_consequence_game_rejects_bad_moves(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("abc\n5 5\n1\nq\n"))
    board = app.consequence_game()
    out = capsys.readouterr().out
    assert out.count("Invalid move") == 3
    assert board.move_count == 0


def test_consequence_game_ends_at_eof(monkeypatch):
    monkeypatch.setattr(sys, "stdin", io.StringIO("0 2\n"))
    board = app.consequence_game()
    assert board.move_count <= 1


def test_main_turn_based(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("q\n"))
    assert app.main(["--turn_based"]) == 0
    assert "Quit (" in capsys.readouterr().out


def _fake_clock(monkeypatch, frames):
    ticks = iter(range(0, 10**12, 1_000_000))
    monkeypatch.setattr(time, "monotonic_ns", lambda: next(ticks))
    calls = []

    def fake_sleep(seconds):
        calls.append(seconds)
        if len(calls) >= frames:
            raise KeyboardInterrupt

    monkeypatch.setattr(time, "sleep", fake_sleep)
    return calls


def test_canvas_runs_until_interrupted(monkeypatch, capsys):
    calls = _fake_clock(monkeypatch, 3)
    sim = app.game_iteration_canvas()
    assert sim.frame == 3
    assert len(calls) == 3
    assert all(abs(c - 1 / 30) < 1e-12 for c in calls)
    out = capsys.readouterr().out
    assert "Frame: 3" in out
    assert "FPS: 1000.000000" in out


def test_canvas_output_is_bordered(monkeypatch, capsys):
    _fake_clock(monkeypatch, 1)
    sim = app.game_iteration_canvas()
    out = capsys.readouterr().out
    assert sim.frame == 1
    assert out.count("\u250c") == 2
    assert out.count("\u2518") == 2
    assert "\u2584" in out


def test_main_defaults_to_canvas(monkeypatch, capsys):
    _fake_clock(monkeypatch, 2)
    assert app.main([]) == 0
    assert "Frame: 2" in capsys.readouterr().out


class _BrokenStdin:
    def readline(self):
        raise OSError("stdin closed")


def test_main_logs_unhandled_exception(monkeypatch, caplog, capsys):
    monkeypatch.setattr(sys, "stdin", _BrokenStdin())
    with caplog.at_level(logging.ERROR):
        assert app.main(["--turn_based"]) == 0
    assert "Unhandled exception in main: stdin closed" in caplog.text