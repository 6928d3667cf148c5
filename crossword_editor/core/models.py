"""Data models supporting the crossword editor."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union

from .constants import Direction


@dataclass(frozen=True)
class Cell:
    """Represents a grid cell.

    Cells are immutable values; the grid replaces them on every change so a
    cell handed out by :meth:`CrosswordGrid.cell` can never drift.
    """

    blocked: bool = False
    number: Optional[int] = None
    letter: Optional[str] = None

    def is_playable(self) -> bool:
        return not self.blocked

    def is_empty(self) -> bool:
        return not self.blocked and self.letter is None


@dataclass(frozen=True)
class Clue:
    """A numbered clue. The text is opaque to the engine."""

    number: int
    text: str = ""


@dataclass(frozen=True)
class ClueSet:
    """Across and down clue lists, in display order."""

    across: Tuple[Clue, ...] = field(default_factory=tuple)
    down: Tuple[Clue, ...] = field(default_factory=tuple)

    def for_direction(self, direction: Direction) -> Tuple[Clue, ...]:
        return self.across if direction == Direction.ACROSS else self.down

    def find(self, number: int, direction: Direction) -> Optional[Clue]:
        for clue in self.for_direction(direction):
            if clue.number == number:
                return clue
        return None


@dataclass(frozen=True)
class NoCursor:
    """No active cell, e.g. before the first interaction."""

    def __bool__(self) -> bool:
        return False


@dataclass(frozen=True)
class ActiveCursor:
    """The focused cell plus the active entry direction."""

    row: int
    col: int
    direction: Direction = Direction.ACROSS

    @property
    def position(self) -> Tuple[int, int]:
        return self.row, self.col

    def with_direction(self, direction: Direction) -> "ActiveCursor":
        return ActiveCursor(self.row, self.col, direction)

    def moved_to(self, row: int, col: int) -> "ActiveCursor":
        return ActiveCursor(row, col, self.direction)


Cursor = Union[NoCursor, ActiveCursor]

NO_CURSOR = NoCursor()
