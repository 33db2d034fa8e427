"""Terminal lights-toggling puzzle, animated bitmap canvas and small helpers."""

__version__ = "0.0.1"