"""Shared constants and enumerations for the crossword editor."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Tuple


class Direction(str, Enum):
    """Word directions supported by the grid."""

    ACROSS = "ACROSS"
    DOWN = "DOWN"

    def flipped(self) -> "Direction":
        return Direction.DOWN if self is Direction.ACROSS else Direction.ACROSS

    @property
    def step(self) -> Tuple[int, int]:
        """(row, col) delta of one forward step along this direction."""
        return (0, 1) if self is Direction.ACROSS else (1, 0)


class EventType(str, Enum):
    """Logical input events understood by the navigator."""

    CLICK = "CLICK"
    TOGGLE_BLOCK = "TOGGLE_BLOCK"
    LETTER = "LETTER"
    TAB = "TAB"
    SHIFT_TAB = "SHIFT_TAB"
    SPACE = "SPACE"
    BACKSPACE = "BACKSPACE"
    ARROW = "ARROW"


class ArrowKey(str, Enum):
    """Arrow keys and the axis/step they map to."""

    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    @property
    def axis(self) -> Direction:
        return Direction.DOWN if self in (ArrowKey.UP, ArrowKey.DOWN) else Direction.ACROSS

    @property
    def step(self) -> Tuple[int, int]:
        return ARROW_STEPS[self]


ARROW_STEPS = {
    ArrowKey.UP: (-1, 0),
    ArrowKey.DOWN: (1, 0),
    ArrowKey.LEFT: (0, -1),
    ArrowKey.RIGHT: (0, 1),
}

LETTERS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")

# Search cap for word-start scans is ITERATION_FACTOR * width * height.
ITERATION_FACTOR = 2


@dataclass(frozen=True)
class Bounds:
    """Simple rectangle bounds helper."""

    rows: int
    cols: int

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    @property
    def size(self) -> int:
        return self.rows * self.cols
