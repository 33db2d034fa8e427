"""Game models: the lights puzzle board and the animated canvas."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Callable

_ON = " ON"
_OFF = "OFF"
_BLOCK = "\u2584"
_CHANNELS = ("r", "g", "b")


class GameBoard:
    """A grid of lights; pressing a cell toggles it and its four neighbours."""

    def __init__(self, width: int = 3, height: int = 3) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("board dimensions must be positive")
        self.width = width
        self.height = height
        self.move_count = 0
        self._values = [[False] * height for _ in range(width)]
        self._strings = [[""] * height for _ in range(width)]
        self.visit(lambda x, y, board: board.set(x, y, True))

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"cell ({x}, {y}) is outside the board")

    def get(self, x: int, y: int) -> bool:
        """Return whether the light at ``(x, y)`` is on."""
        self._check(x, y)
        return self._values[x][y]

    def set(self, x: int, y: int, value: bool) -> None:
        """Set the light at ``(x, y)`` and its label."""
        self._check(x, y)
        self._values[x][y] = value
        self._strings[x][y] = _ON if value else _OFF

    def get_string(self, x: int, y: int) -> str:
        """Return the label of the light at ``(x, y)``."""
        self._check(x, y)
        return self._strings[x][y]

    def visit(self, visitor: Callable[[int, int, "GameBoard"], None]) -> None:
        """Call ``visitor(x, y, board)`` for every cell, column by column."""
        for x in range(self.width):
            for y in range(self.height):
                visitor(x, y, self)

    def update_strings(self) -> None:
        """Bring every label in line with its light."""
        self.visit(lambda x, y, board: board.set(x, y, board.get(x, y)))

    def toggle(self, x: int, y: int) -> None:
        """Flip one light."""
        self.set(x, y, not self.get(x, y))

    def press(self, x: int, y: int) -> None:
        """Count a move and flip ``(x, y)`` and its orthogonal neighbours."""
        self._check(x, y)
        self.move_count += 1
        self.toggle(x, y)
        if x > 0:
            self.toggle(x - 1, y)
        if y > 0:
            self.toggle(x, y - 1)
        if x < self.width - 1:
            self.toggle(x + 1, y)
        if y < self.height - 1:
            self.toggle(x, y + 1)

    def solved(self) -> bool:
        """Return True when every light is on."""
        return all(all(column) for column in self._values)

    def scramble(self, rng: random.Random | None = None, iterations: int = 100) -> None:
        """Press random cells ``iterations`` times, then reset the move count."""
        rng = rng if rng is not None else random.Random(42)
        for _ in range(iterations):
            x = rng.randrange(self.width)
            y = rng.randrange(self.height)
            self.press(x, y)
        self.move_count = 0

    def quit_text(self) -> str:
        """Return the caption of the quit button."""
        text = f"Quit ({self.move_count} moves)"
        if self.solved():
            text += " Solved!"
        return text


@dataclass
class Color:
    """An RGB colour whose channels wrap around at 256."""

    r: int = 0
    g: int = 0
    b: int = 0

    def __post_init__(self) -> None:
        self.r %= 256
        self.g %= 256
        self.b %= 256

    def add(self, channel: str, amount: int = 1) -> None:
        """Add ``amount`` to channel ``'r'``, ``'g'`` or ``'b'``, wrapping at 256."""
        name = channel.lower()
        if name not in _CHANNELS:
            raise ValueError(f"unknown colour channel: {channel!r}")
        setattr(self, name, (getattr(self, name) + amount) % 256)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)


class Bitmap:
    """A pixel grid drawn with half-block characters, two rows per line."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("bitmap dimensions must not be negative")
        self.width = width
        self.height = height
        self.data = [Color() for _ in range(width * height)]

    @property
    def min_size(self) -> tuple[int, int]:
        """Columns and lines needed to show the bitmap."""
        return (self.width, self.height // 2)

    def at(self, x: int, y: int) -> Color:
        """Return the pixel at ``(x, y)``."""
        index = self.width * y + x
        if not 0 <= index < len(self.data):
            raise IndexError(f"pixel ({x}, {y}) is outside the bitmap")
        return self.data[index]

    def render(self) -> list[str]:
        """Return one ANSI true-colour line per pair of pixel rows."""
        lines = []
        for row in range(self.height // 2):
            cells = []
            for col in range(self.width):
                top = self.at(col, row * 2)
                bottom = self.at(col, row * 2 + 1)
                cells.append(
                    f"\x1b[48;2;{top.r};{top.g};{top.b}m"
                    f"\x1b[38;2;{bottom.r};{bottom.g};{bottom.b}m{_BLOCK}"
                )
            lines.append("".join(cells) + "\x1b[0m")
        return lines


@dataclass
class CanvasSimulation:
    """The animated canvas: a sweeping large bitmap and a flickering small one."""

    bitmap: Bitmap = field(default_factory=lambda: Bitmap(50, 50))
    small_bitmap: Bitmap = field(default_factory=lambda: Bitmap(6, 6))
    fps: float = 0.0
    max_row: int = 0
    max_col: int = 0
    frame: int = 0

    def step(self, elapsed_ns: int) -> None:
        """Advance the animation by one frame that took ``elapsed_ns`` nanoseconds."""
        if elapsed_ns < 0:
            raise ValueError("elapsed time must not be negative")
        self.frame += 1
        micros = elapsed_ns // 1000
        self.fps = float("inf") if micros == 0 else 1.0 / (micros / 1_000_000.0)

        bm = self.bitmap
        for row in range(self.max_row):
            for col in range(bm.width):
                bm.at(col, row).add("r")
        for row in range(bm.height):
            for col in range(self.max_col):
                bm.at(col, row).add("g")

        pixels = self.small_bitmap.data
        if pixels:
            pixel = pixels[elapsed_ns % len(pixels)]
            pixel.add(_CHANNELS[elapsed_ns % 3], 11)

        self.max_row += 1
        if self.max_row >= bm.height:
            self.max_row = 0
        self.max_col += 1
        if self.max_col >= bm.width:
            self.max_col = 0