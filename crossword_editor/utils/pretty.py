"""Pretty-print helpers for crossword grids."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, List, Set, Tuple

from ..core.constants import Direction
from ..core.models import NO_CURSOR, ActiveCursor, ClueSet, Cursor
from ..engine.boundaries import word_cells
from ..engine.clues import is_active_clue

if TYPE_CHECKING:
    from ..engine.editor import CrosswordEditor
    from ..engine.grid import CrosswordGrid


BLOCKED = "#"
EMPTY = "."


def cell_symbol(cell) -> str:
    if cell.blocked:
        return BLOCKED
    return cell.letter or EMPTY


def _active_word(grid: CrosswordGrid, cursor: Cursor) -> Set[Tuple[int, int]]:
    if not isinstance(cursor, ActiveCursor):
        return set()
    return set(word_cells(grid, cursor.row, cursor.col, cursor.direction))


def format_grid(grid: CrosswordGrid, cursor: Cursor = NO_CURSOR) -> str:
    """Render letters; the cursor cell is bracketed, its word underlined with ``_``."""

    width = grid.width
    active = _active_word(grid, cursor)
    header_cells = [f"{c:>2}" for c in range(width)]
    lines = ["    " + " ".join(f" {h}" for h in header_cells)]
    lines.append("    " + "-" * (4 * width - 1))
    for r in range(grid.height):
        rendered: List[str] = []
        for c in range(width):
            symbol = cell_symbol(grid.cell(r, c))
            if isinstance(cursor, ActiveCursor) and cursor.position == (r, c):
                rendered.append(f"[{symbol}]")
            elif (r, c) in active:
                rendered.append(f"_{symbol}_")
            else:
                rendered.append(f" {symbol} ")
        lines.append(f"{r:>2} | {' '.join(rendered)}")
    return "\n".join(lines)


def format_numbers(grid: CrosswordGrid) -> str:
    lines = []
    for r in range(grid.height):
        row_cells = []
        for c in range(grid.width):
            cell = grid.cell(r, c)
            if cell.blocked:
                row_cells.append(f"{BLOCKED:>3}")
            elif cell.number is not None:
                row_cells.append(f"{cell.number:>3}")
            else:
                row_cells.append(f"{EMPTY:>3}")
        lines.append("".join(row_cells))
    return "\n".join(lines)


def format_clues(clues: ClueSet, grid: CrosswordGrid, cursor: Cursor = NO_CURSOR) -> str:
    lines: List[str] = []
    for direction in Direction:
        lines.append(direction.value.capitalize())
        entries = clues.for_direction(direction)
        if not entries:
            lines.append("  (none)")
        for clue in entries:
            marker = ">" if is_active_clue(clue, direction, cursor, grid) else " "
            lines.append(f" {marker}{clue.number:>3}. {clue.text}")
    return "\n".join(lines)


def pretty_print_state(editor: CrosswordEditor, *, label: str | None = None, stream=None) -> None:
    """Print the grid, numbering, cursor and clues of an editing session."""

    stream = stream or sys.stdout
    if label:
        print(label, file=stream)
    print(format_grid(editor.grid, editor.cursor), file=stream)
    print(file=stream)
    print("--- Numbers ---", file=stream)
    print(format_numbers(editor.grid), file=stream)
    print(file=stream)
    cursor = editor.cursor
    if isinstance(cursor, ActiveCursor):
        print(f"Cursor: ({cursor.row},{cursor.col}) {cursor.direction.value}", file=stream)
    else:
        print("Cursor: none", file=stream)
    print(file=stream)
    print(format_clues(editor.clues, editor.grid, cursor), file=stream)
