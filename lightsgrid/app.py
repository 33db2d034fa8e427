"""Command-line entry point: the lights puzzle and the animated canvas."""

from __future__ import annotations

import argparse
import logging
import random
import re
import sys
import time
from typing import Sequence

from lightsgrid.game import Bitmap, CanvasSimulation, GameBoard

PROJECT_NAME = "lightsgrid"
PROJECT_VERSION = "0.0.1"

_FRAME_INTERVAL = 1.0 / 30.0
_RANDOM_SEED = 42
_RANDOMIZATION_ITERATIONS = 100
_ANSI = re.compile(r"\x1b\[[0-9;]*[A-Za-z]")
_HOME = "\x1b[H"
_CLEAR = "\x1b[2J"

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser for the command."""
    parser = argparse.ArgumentParser(
        prog=PROJECT_NAME,
        description=f"{PROJECT_NAME} version {PROJECT_VERSION}",
    )
    parser.add_argument("-m", "--message", help="A message to print back out")
    parser.add_argument(
        "--version", action="store_true", help="Show version information"
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument("--turn_based", action="store_true")
    mode.add_argument("--loop_based", action="store_true")
    return parser


def _draw_board(board: GameBoard) -> str:
    rows = [
        " ".join(f"[{board.get_string(x, y)}]" for y in range(board.height))
        for x in range(board.width)
    ]
    rows.append(f"[{board.quit_text()}]")
    return "\n".join(rows)


def _parse_move(line: str, board: GameBoard) -> tuple[int, int]:
    parts = line.split()
    if len(parts) != 2:
        raise ValueError("expected a row and a column")
    row, col = (int(part) for part in parts)
    if not (0 <= row < board.width and 0 <= col < board.height):
        raise ValueError(f"cell ({row}, {col}) is outside the board")
    return row, col


def consequence_game() -> GameBoard:
    """Play the lights puzzle on stdin and stdout; return the final board."""
    board = GameBoard(3, 3)
    board.scramble(random.Random(_RANDOM_SEED), _RANDOMIZATION_ITERATIONS)
    out = sys.stdout
    while True:
        out.write(_draw_board(board) + "\n")
        out.write("Enter row and column (q to quit): ")
        out.flush()
        line = sys.stdin.readline()
        if not line:
            out.write("\n")
            break
        line = line.strip()
        if line.lower() in ("q", "quit"):
            break
        try:
            row, col = _parse_move(line, board)
        except ValueError as exc:
            out.write(f"Invalid move: {exc}\n")
            continue
        if not board.solved():
            board.press(row, col)
    out.flush()
    return board


def _visible_len(text: str) -> int:
    return len(_ANSI.sub("", text))


def _bordered(lines: list[str], width: int) -> list[str]:
    padded = [line + " " * (width - _visible_len(line)) for line in lines]
    return (
        ["\u250c" + "\u2500" * width + "\u2510"]
        + [f"\u2502{line}\u2502" for line in padded]
        + ["\u2514" + "\u2500" * width + "\u2518"]
    )


def _render_bitmap(bitmap: Bitmap) -> list[str]:
    return _bordered(bitmap.render(), bitmap.width)


def _render_frame(sim: CanvasSimulation) -> list[str]:
    left = _render_bitmap(sim.bitmap)
    right = [f"Frame: {sim.frame}", f"FPS: {sim.fps:f}"] + _render_bitmap(
        sim.small_bitmap
    )
    left_width = max((_visible_len(line) for line in left), default=0)
    right_width = max((_visible_len(line) for line in right), default=0)
    height = max(len(left), len(right))
    left += [" " * left_width] * (height - len(left))
    right += [""] * (height - len(right))
    return [
        a + b + " " * (right_width - _visible_len(b)) for a, b in zip(left, right)
    ]


def game_iteration_canvas() -> CanvasSimulation:
    """Animate the canvas at about 30 frames a second until interrupted."""
    sim = CanvasSimulation()
    out = sys.stdout
    out.write(_CLEAR)
    last_time = time.monotonic_ns()
    try:
        while True:
            new_time = time.monotonic_ns()
            sim.step(new_time - last_time)
            last_time = new_time
            out.write(_HOME + "\n".join(_render_frame(sim)) + "\n")
            out.flush()
            time.sleep(_FRAME_INTERVAL)
    except KeyboardInterrupt:
        pass
    return sim


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return the exit status."""
    args = build_parser().parse_args(argv)
    try:
        if args.version:
            print(PROJECT_VERSION)
            return 0
        if args.turn_based:
            consequence_game()
        else:
            game_iteration_canvas()
    except Exception as exc:  # noqa: BLE001
        logger.error("Unhandled exception in main: %s", exc)
    return 0


if __name__ == "__main__":
    sys.exit(main())