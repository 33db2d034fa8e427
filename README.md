# lightsgrid

A small terminal toy with two modes, plus a few helper functions.

- **Turn-based puzzle**: a 3×3 grid of switches. Pressing a switch flips it
  and its orthogonal neighbours. The board starts scrambled (100 random
  presses from a fixed seed, 42); turn every switch back to `ON` to solve it.
  The last line shows how many moves you have made and adds `Solved!` once
  every switch is on. After that, further presses are ignored.
- **Loop-based canvas**: a 50×50 bitmap drawn with half-block characters in
  ANSI true colour, which fills with red and green sweeps, shown next to the
  frame counter, the frames per second and a 6×6 bitmap whose pixels change
  colour as time passes. It redraws about 30 times a second.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
lightsgrid --turn_based      # play the puzzle
lightsgrid --loop_based      # run the animated canvas (also the default)
lightsgrid --version         # print the version and exit
lightsgrid --help
```

`--turn_based` and `--loop_based` cannot be used together. A `-m/--message`
option is accepted but has no effect.

In the puzzle, type a row and a column separated by a space (for example
`1 1`), each from 0 to 2, and press Enter. Type `q` or `quit`, or end the
input, to leave. Input that is not two numbers on the board is reported as
an invalid move.

The canvas runs until you press Ctrl-C.

## Library use

```python
from lightsgrid.game import GameBoard

board = GameBoard(3, 3)      # every switch starts ON
board.press(1, 1)
print(board.solved())        # False
print(board.quit_text())     # "Quit (1 moves)"
print(board.get_string(1, 1))  # "OFF"
```

`lightsgrid.game` also has:

- `Color`: an RGB value whose channels wrap at 256; `add("r" | "g" | "b", amount)`.
- `Bitmap(width, height)`: a grid of `Color` pixels; `at(x, y)` returns a
  pixel and `render()` returns one ANSI-coloured line per two pixel rows.
- `CanvasSimulation`: the canvas animation state; `step(elapsed_ns)`
  advances it by one frame.

`lightsgrid.sample_library` provides `factorial` (values of zero or below
give 1) and `factorial_recursive` (negative values raise `ValueError`).
`lightsgrid.fuzz` provides `sum_values`, which adds up a byte string with
each byte scaled by 1000, and `test_one_input`, which prints that sum and
the length.

## What it does not do

There is no clickable or full-screen interface: the puzzle is played by
typing coordinates line by line, and the canvas is redrawn with plain ANSI
escape codes. The canvas does not read the keyboard; it stops only on
Ctrl-C.