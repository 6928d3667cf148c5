"""Deterministic integrity checks for an edited grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List

from ..core.constants import LETTERS
from ..core.exceptions import EditorError
from ..utils.logger import get_logger
from .grid import CrosswordGrid
from .numbering import compute_numbers


LOGGER = get_logger(__name__)


class GridIntegrityError(EditorError):
    """Raised internally when a grid check fails."""


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class GridValidator:
    """Runs integrity validation over a grid."""

    def validate(self, grid: CrosswordGrid) -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_blocked_cells_are_bare(grid)
            self._check_letters_valid(grid)
            self._check_numbering(grid)
        except GridIntegrityError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_blocked_cells_are_bare(self, grid: CrosswordGrid) -> None:
        for r, c, cell in grid.iter_cells():
            if not cell.blocked:
                continue
            if cell.number is not None:
                raise GridIntegrityError(f"Blocked cell ({r},{c}) carries number {cell.number}")
            if cell.letter is not None:
                raise GridIntegrityError(f"Blocked cell ({r},{c}) carries letter '{cell.letter}'")

    def _check_letters_valid(self, grid: CrosswordGrid) -> None:
        for r, c, cell in grid.iter_cells():
            if cell.letter is not None and cell.letter not in LETTERS:
                raise GridIntegrityError(f"Invalid letter '{cell.letter}' at ({r},{c})")

    def _check_numbering(self, grid: CrosswordGrid) -> None:
        expected = compute_numbers(grid.blocked_mask())
        for r, c, cell in grid.iter_cells():
            if cell.number != expected[r][c]:
                raise GridIntegrityError(
                    f"Cell ({r},{c}) numbered {cell.number}, expected {expected[r][c]}"
                )
