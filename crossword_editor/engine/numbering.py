"""Standard crossword numbering.

Scanning row-major, a cell is numbered when it is unblocked and begins an
across word (column 0 or blocked to its left) or a down word (row 0 or
blocked above). Numbers are consecutive from 1 in scan order. The functions
here work on a plain blocked mask so they stay a full, idempotent
recomputation with no knowledge of letters or cursors.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

BlockedMask = Sequence[Sequence[bool]]


def starts_across(mask: BlockedMask, row: int, col: int) -> bool:
    if mask[row][col]:
        return False
    return col == 0 or mask[row][col - 1]


def starts_down(mask: BlockedMask, row: int, col: int) -> bool:
    if mask[row][col]:
        return False
    return row == 0 or mask[row - 1][col]


def is_word_start(mask: BlockedMask, row: int, col: int) -> bool:
    return starts_across(mask, row, col) or starts_down(mask, row, col)


def compute_numbers(mask: BlockedMask) -> List[List[Optional[int]]]:
    """Return the number matrix for ``mask`` (``None`` for unnumbered cells)."""

    counter = 1
    numbers: List[List[Optional[int]]] = []
    for r, row in enumerate(mask):
        numbered_row: List[Optional[int]] = []
        for c in range(len(row)):
            if is_word_start(mask, r, c):
                numbered_row.append(counter)
                counter += 1
            else:
                numbered_row.append(None)
        numbers.append(numbered_row)
    return numbers
