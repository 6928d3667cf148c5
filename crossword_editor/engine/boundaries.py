"""Word-boundary resolution and grid scan order."""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterator, List, NamedTuple, Optional, Tuple

from ..core.constants import Bounds, Direction, ITERATION_FACTOR

if TYPE_CHECKING:
    from .grid import CrosswordGrid


class WordSpan(NamedTuple):
    """Inclusive indices along the varying axis of a word."""

    start: int
    end: int

    @property
    def length(self) -> int:
        return self.end - self.start + 1

    def contains(self, index: int) -> bool:
        return self.start <= index <= self.end


def axis_index(row: int, col: int, direction: Direction) -> int:
    """Index along the axis a word in ``direction`` varies on."""
    return col if direction == Direction.ACROSS else row


def position_at(row: int, col: int, index: int, direction: Direction) -> Tuple[int, int]:
    """Replace the varying-axis coordinate of ``(row, col)`` with ``index``."""
    return (row, index) if direction == Direction.ACROSS else (index, col)


def find_word_boundaries(
    grid: "CrosswordGrid",
    row: int,
    col: int,
    direction: Direction,
) -> WordSpan:
    """Return the maximal unblocked run through ``(row, col)`` along ``direction``.

    A blocked starting cell yields the degenerate span ``(index, index)``.
    """

    index = axis_index(row, col, direction)
    if grid.is_blocked(row, col):
        return WordSpan(index, index)

    def blocked_at(i: int) -> bool:
        r, c = position_at(row, col, i, direction)
        return grid.cells[r][c].blocked

    start = index
    while start > 0 and not blocked_at(start - 1):
        start -= 1

    last = grid.line_length(direction) - 1
    end = index
    while end < last and not blocked_at(end + 1):
        end += 1

    return WordSpan(start, end)


def word_cells(
    grid: "CrosswordGrid",
    row: int,
    col: int,
    direction: Direction,
) -> List[Tuple[int, int]]:
    span = find_word_boundaries(grid, row, col, direction)
    return [position_at(row, col, i, direction) for i in range(span.start, span.end + 1)]


def is_word_start_in(grid: "CrosswordGrid", row: int, col: int, direction: Direction) -> bool:
    """True when ``(row, col)`` begins a run along ``direction``."""

    if grid.is_blocked(row, col):
        return False
    dr, dc = direction.step
    prev_row, prev_col = row - dr, col - dc
    return not grid.contains(prev_row, prev_col) or grid.cells[prev_row][prev_col].blocked


class ScanOrder:
    """Cyclic scan of grid positions following a direction.

    ACROSS walks each row left to right and wraps onto the next row, DOWN
    walks each column top to bottom and wraps onto the next column; the last
    line wraps back to the first. ``forward=False`` walks the same cycle in
    reverse. The start position itself is not produced, and iteration stops
    after ``limit`` positions (``ITERATION_FACTOR * width * height`` by
    default). Each ``iter()`` restarts from the start position.
    """

    def __init__(
        self,
        bounds: Bounds,
        row: int,
        col: int,
        direction: Direction,
        forward: bool = True,
        limit: Optional[int] = None,
    ) -> None:
        self.bounds = bounds
        self.row = row
        self.col = col
        self.direction = direction
        self.forward = forward
        self.limit = ITERATION_FACTOR * bounds.size if limit is None else limit

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        # major: the line being walked; minor: the position along it
        if self.direction == Direction.ACROSS:
            major, minor = self.row, self.col
            majors, minors = self.bounds.rows, self.bounds.cols
        else:
            major, minor = self.col, self.row
            majors, minors = self.bounds.cols, self.bounds.rows
        step = 1 if self.forward else -1

        for _ in range(self.limit):
            minor += step
            if minor >= minors:
                minor = 0
                major = (major + 1) % majors
            elif minor < 0:
                minor = minors - 1
                major = (major - 1) % majors
            if self.direction == Direction.ACROSS:
                yield major, minor
            else:
                yield minor, major
