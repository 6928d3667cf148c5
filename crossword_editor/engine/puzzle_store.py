"""Persistent puzzle document store.

Every saved puzzle is written as a JSON document under
``local_db/collections/puzzles/``. Documents carry the shared record, the
grid dimensions the record belongs to, its share token and layout stats.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import List

from ..core.exceptions import RecordFormatError
from ..io.record import PuzzleRecord
from ..io.share import encode_record
from ..utils.logger import get_logger
from .grid import CrosswordGrid
from .numbering import starts_across, starts_down


LOGGER = get_logger(__name__)

DEFAULT_STORE_DIR = Path("local_db/collections/puzzles")


@dataclass(frozen=True)
class StoredPuzzle:
    id: str
    created_at: str
    width: int
    height: int
    record: PuzzleRecord


class PuzzleStore:
    """Save puzzle records as structured JSON documents."""

    def __init__(self, store_dir: Path | str = DEFAULT_STORE_DIR) -> None:
        self.store_dir = Path(store_dir)
        self.store_dir.mkdir(parents=True, exist_ok=True)

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def save(self, record: PuzzleRecord, width: int, height: int) -> str:
        """Persist ``record`` for a ``width`` x ``height`` grid and return its document ID."""
        grid = CrosswordGrid.create(width, height, blocked=record.filled_positions)
        doc_id = self._new_id()
        doc = {
            "id": doc_id,
            "created_at": datetime.now(timezone.utc).isoformat(),
            "width": width,
            "height": height,
            "puzzle": record.to_dict(),
            "share_token": encode_record(record),
            "stats": self._compute_stats(grid),
        }

        path = self._path(doc_id)
        path.write_text(json.dumps(doc, ensure_ascii=False, indent=2), encoding="utf-8")
        LOGGER.info("Puzzle saved: %s", doc_id)
        return doc_id

    def load(self, doc_id: str) -> StoredPuzzle:
        path = self._path(doc_id)
        try:
            doc = json.loads(path.read_text(encoding="utf-8"))
        except ValueError as exc:
            raise RecordFormatError(f"Stored puzzle {doc_id} is not valid JSON: {exc}") from exc

        try:
            width, height = int(doc["width"]), int(doc["height"])
            record = PuzzleRecord.from_dict(doc["puzzle"])
        except (KeyError, TypeError, ValueError) as exc:
            raise RecordFormatError(f"Stored puzzle {doc_id} is malformed: {exc}") from exc
        LOGGER.debug("Puzzle loaded: %s", doc_id)
        return StoredPuzzle(
            id=str(doc.get("id", doc_id)),
            created_at=str(doc.get("created_at", "")),
            width=width,
            height=height,
            record=record,
        )

    def list_ids(self) -> List[str]:
        return sorted(path.stem for path in self.store_dir.glob("*.json"))

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _path(self, doc_id: str) -> Path:
        return self.store_dir / f"{doc_id}.json"

    @staticmethod
    def _compute_stats(grid: CrosswordGrid) -> dict:
        mask = grid.blocked_mask()
        blocked = sum(1 for row in mask for flag in row if flag)
        across = down = 0
        for r in range(grid.height):
            for c in range(grid.width):
                across += starts_across(mask, r, c)
                down += starts_down(mask, r, c)
        total = grid.height * grid.width
        return {
            "total_cells": total,
            "blocked_cells": blocked,
            "open_cells": total - blocked,
            "blocked_pct": round(blocked / total * 100, 1),
            "across_words": across,
            "down_words": down,
        }

    @staticmethod
    def _new_id() -> str:
        ts = datetime.now(timezone.utc).strftime("%Y%m%dT%H%M%S")
        short_uuid = uuid.uuid4().hex[:8]
        return f"{ts}_{short_uuid}"
