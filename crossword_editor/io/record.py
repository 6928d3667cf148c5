"""Persisted/shared puzzle record.

The record is the plain-data shape exchanged with persistence and sharing
collaborators::

    {
        "filledPositions": ["0:2", "2:0"],
        "clues": {"across": [[1, "..."], ...], "down": [[1, "..."], ...]},
    }

``filledPositions`` lists blocked cells as ``"row:col"`` strings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

from ..core.exceptions import RecordFormatError
from ..core.models import Clue, ClueSet


@dataclass(frozen=True)
class PuzzleRecord:
    filled_positions: Tuple[Tuple[int, int], ...] = ()
    clues: ClueSet = field(default_factory=ClueSet)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "filledPositions": [format_position(r, c) for r, c in self.filled_positions],
            "clues": {
                "across": [[clue.number, clue.text] for clue in self.clues.across],
                "down": [[clue.number, clue.text] for clue in self.clues.down],
            },
        }

    @classmethod
    def from_dict(cls, payload: Any) -> "PuzzleRecord":
        if not isinstance(payload, dict):
            raise RecordFormatError(f"Puzzle record must be an object, got {type(payload).__name__}")

        raw_positions = payload.get("filledPositions", [])
        if not isinstance(raw_positions, list):
            raise RecordFormatError("filledPositions must be a list")
        positions = tuple(parse_position(item) for item in raw_positions)

        raw_clues = payload.get("clues", {}) or {}
        if not isinstance(raw_clues, dict):
            raise RecordFormatError("clues must be an object with across/down lists")
        clues = ClueSet(
            across=tuple(_parse_clues(raw_clues.get("across", []), "across")),
            down=tuple(_parse_clues(raw_clues.get("down", []), "down")),
        )
        return cls(filled_positions=positions, clues=clues)


def format_position(row: int, col: int) -> str:
    return f"{row}:{col}"


def parse_position(text: Any) -> Tuple[int, int]:
    """Parse a ``"row:col"`` string."""

    if not isinstance(text, str):
        raise RecordFormatError(f"Position must be a 'row:col' string, got {text!r}")
    parts = text.split(":")
    if len(parts) != 2:
        raise RecordFormatError(f"Position must be 'row:col', got {text!r}")
    try:
        row, col = int(parts[0]), int(parts[1])
    except ValueError as exc:
        raise RecordFormatError(f"Position has non-integer parts: {text!r}") from exc
    return row, col


def _parse_clues(entries: Any, label: str) -> List[Clue]:
    if not isinstance(entries, list):
        raise RecordFormatError(f"{label} clues must be a list")
    clues: List[Clue] = []
    for entry in entries:
        if isinstance(entry, dict):
            number, text = entry.get("number"), entry.get("text", "")
        elif isinstance(entry, (list, tuple)) and len(entry) == 2:
            number, text = entry
        else:
            raise RecordFormatError(f"Malformed {label} clue entry: {entry!r}")
        if isinstance(number, bool) or not isinstance(number, int) or number < 1:
            raise RecordFormatError(f"{label} clue number must be a positive integer: {entry!r}")
        clues.append(Clue(number=number, text=str(text)))
    return clues
