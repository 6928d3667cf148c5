"""Grid representation and cell mutation helpers."""

from __future__ import annotations

import copy
from dataclasses import dataclass, replace
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from ..core.constants import Bounds, Direction, LETTERS
from ..core.exceptions import (CellBlockedError, InvalidDimensionError, InvalidLetterError,
                               OutOfBoundsError)
from ..core.models import Cell
from ..utils.logger import get_logger
from .numbering import compute_numbers


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Configuration values driving the grid layout."""

    height: int
    width: int
    blocked: Sequence[Tuple[int, int]] = ()

    def bounds(self) -> Bounds:
        return Bounds(rows=self.height, cols=self.width)


class CrosswordGrid:
    """Encapsulates the crossword grid: blocked squares, numbers and letters."""

    def __init__(self, config: GridConfig) -> None:
        if config.width <= 0 or config.height <= 0:
            raise InvalidDimensionError(
                f"Grid dimensions must be positive, got {config.width}x{config.height}"
            )
        bounds = config.bounds()
        blocked = set()
        for row, col in config.blocked:
            if not bounds.contains(row, col):
                raise OutOfBoundsError(f"Blocked position outside grid: {(row, col)}")
            blocked.add((row, col))

        self.config = config
        self.bounds = bounds
        self.cells: List[List[Cell]] = [
            [Cell(blocked=(r, c) in blocked) for c in range(bounds.cols)]
            for r in range(bounds.rows)
        ]
        self.renumber()

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        blocked: Iterable[Tuple[int, int]] = (),
    ) -> "CrosswordGrid":
        return cls(GridConfig(height=height, width=width, blocked=tuple(blocked)))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    @property
    def height(self) -> int:
        return self.bounds.rows

    @property
    def width(self) -> int:
        return self.bounds.cols

    def contains(self, row: int, col: int) -> bool:
        return self.bounds.contains(row, col)

    def cell(self, row: int, col: int) -> Cell:
        self._check_bounds(row, col)
        return self.cells[row][col]

    def is_blocked(self, row: int, col: int) -> bool:
        return self.cell(row, col).blocked

    def line_length(self, direction: Direction) -> int:
        """Length of the axis a word in ``direction`` varies along."""
        return self.width if direction == Direction.ACROSS else self.height

    def iter_cells(self) -> Iterator[Tuple[int, int, Cell]]:
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                yield r, c, cell

    def blocked_positions(self) -> List[Tuple[int, int]]:
        return [(r, c) for r, c, cell in self.iter_cells() if cell.blocked]

    def blocked_mask(self) -> List[List[bool]]:
        return [[cell.blocked for cell in row] for row in self.cells]

    def copy(self) -> "CrosswordGrid":
        clone = copy.copy(self)
        clone.cells = [list(row) for row in self.cells]
        return clone

    # ------------------------------------------------------------------
    # Cell manipulation
    # ------------------------------------------------------------------
    def toggle_blocked(self, row: int, col: int) -> Cell:
        """Flip the blocked flag; the caller renumbers afterwards."""

        cell = self.cell(row, col)
        updated = Cell(blocked=not cell.blocked)
        self.cells[row][col] = updated
        LOGGER.debug("Cell (%s,%s) blocked=%s", row, col, updated.blocked)
        return updated

    def set_letter(self, row: int, col: int, letter: Optional[str]) -> None:
        cell = self.cell(row, col)
        if cell.blocked:
            raise CellBlockedError(f"Cannot write into blocked cell {(row, col)}")
        if letter is not None and letter not in LETTERS:
            raise InvalidLetterError(f"Invalid letter {letter!r} for cell {(row, col)}")
        self.cells[row][col] = replace(cell, letter=letter)

    def clear_letter(self, row: int, col: int) -> None:
        self.set_letter(row, col, None)

    def renumber(self) -> None:
        """Recompute every cell number from the current blocked state."""

        numbers = compute_numbers(self.blocked_mask())
        for r, row in enumerate(self.cells):
            for c, cell in enumerate(row):
                if cell.number != numbers[r][c]:
                    row[c] = replace(cell, number=numbers[r][c])

    def _check_bounds(self, row: int, col: int) -> None:
        if not self.bounds.contains(row, col):
            raise OutOfBoundsError(
                f"Cell {(row, col)} outside {self.height}x{self.width} grid"
            )

    def __repr__(self) -> str:
        return f"CrosswordGrid(height={self.height}, width={self.width})"
