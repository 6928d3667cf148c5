"""Association between clue numbers and the cursor's current word."""

from __future__ import annotations

from typing import Dict, Optional

from ..core.constants import Direction
from ..core.models import ActiveCursor, Clue, ClueSet, Cursor
from .boundaries import find_word_boundaries, position_at
from .grid import CrosswordGrid


def active_clue_number(
    grid: CrosswordGrid,
    cursor: Cursor,
    direction: Optional[Direction] = None,
) -> Optional[int]:
    """Number of the start cell of the cursor's word along ``direction``.

    ``direction`` defaults to the cursor's own direction. Returns ``None``
    without an active cursor.
    """

    if not isinstance(cursor, ActiveCursor):
        return None
    direction = direction or cursor.direction
    span = find_word_boundaries(grid, cursor.row, cursor.col, direction)
    row, col = position_at(cursor.row, cursor.col, span.start, direction)
    return grid.cell(row, col).number


def is_active_clue(clue: Clue, direction: Direction, cursor: Cursor, grid: CrosswordGrid) -> bool:
    if not isinstance(cursor, ActiveCursor) or direction != cursor.direction:
        return False
    return clue.number == active_clue_number(grid, cursor)


def active_clue(clues: ClueSet, grid: CrosswordGrid, cursor: Cursor) -> Optional[Clue]:
    if not isinstance(cursor, ActiveCursor):
        return None
    for clue in clues.for_direction(cursor.direction):
        if is_active_clue(clue, cursor.direction, cursor, grid):
            return clue
    return None


def crossing_clues(clues: ClueSet, grid: CrosswordGrid, cursor: Cursor) -> Dict[Direction, Optional[Clue]]:
    """Clue of the word through the cursor in each direction."""

    result: Dict[Direction, Optional[Clue]] = {}
    for direction in Direction:
        number = active_clue_number(grid, cursor, direction)
        result[direction] = clues.find(number, direction) if number is not None else None
    return result
