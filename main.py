"""CLI entrypoint for the crossword grid editor."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from crossword_editor.core.exceptions import EditorError
from crossword_editor.core.models import ActiveCursor
from crossword_editor.engine.editor import CrosswordEditor
from crossword_editor.engine.puzzle_store import DEFAULT_STORE_DIR, PuzzleStore
from crossword_editor.io.keys import parse_key_script
from crossword_editor.io.record import PuzzleRecord, parse_position
from crossword_editor.io.share import build_share_url, decode_token, record_from_url
from crossword_editor.utils.logger import configure_logging
from crossword_editor.utils.pretty import pretty_print_state


def parse_script_file(path: Path) -> str:
    """Read a key script, one or more tokens per line. Blank lines and # comments are skipped."""
    lines: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        lines.append(line)
    return " ".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Build a crossword grid and replay a typing session against it",
    )
    parser.add_argument("--width", type=int, default=5, help="Grid width in cells")
    parser.add_argument("--height", type=int, default=5, help="Grid height in cells")
    parser.add_argument(
        "--blocked",
        nargs="+",
        metavar="ROW:COL",
        default=[],
        help="Cells to block before replaying keys",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--load-token", type=str, help="Seed the puzzle from a share token")
    source.add_argument("--load-url", type=str, help="Seed the puzzle from a share URL")
    source.add_argument("--load-file", type=Path, help="Seed the puzzle from a record JSON file")
    source.add_argument("--load-id", type=str, help="Seed the puzzle from a stored document ID")
    parser.add_argument(
        "--clues-file",
        type=Path,
        help="JSON file with {\"across\": [[n, text], ...], \"down\": [...]} clues",
    )
    parser.add_argument("--keys", type=str, default="", help="Key script to replay")
    parser.add_argument(
        "--keys-file",
        type=Path,
        metavar="FILE",
        help="File with key-script tokens (# comments and blank lines ignored)",
    )
    parser.add_argument("--save", action="store_true", help="Save the resulting puzzle to the store")
    parser.add_argument("--store-dir", type=Path, default=DEFAULT_STORE_DIR, help="Puzzle store directory")
    parser.add_argument(
        "--share-base-url",
        type=str,
        help="Print a share URL for the resulting puzzle based on this URL",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def load_record(args: argparse.Namespace) -> Tuple[Optional[PuzzleRecord], int, int]:
    width, height = args.width, args.height
    record: Optional[PuzzleRecord] = None
    if args.load_token:
        record = decode_token(args.load_token)
    elif args.load_url:
        record = record_from_url(args.load_url)
    elif args.load_file:
        record = PuzzleRecord.from_dict(json.loads(args.load_file.read_text(encoding="utf-8")))
    elif args.load_id:
        stored = PuzzleStore(args.store_dir).load(args.load_id)
        record, width, height = stored.record, stored.width, stored.height
    return record, width, height


def build_editor(args: argparse.Namespace) -> CrosswordEditor:
    record, width, height = load_record(args)
    if record is None:
        record = PuzzleRecord()
    blocked = list(record.filled_positions) + [parse_position(item) for item in args.blocked]
    clues = record.clues
    if args.clues_file:
        clues = PuzzleRecord.from_dict(
            {"clues": json.loads(args.clues_file.read_text(encoding="utf-8"))}
        ).clues
    return CrosswordEditor.from_record(
        PuzzleRecord(filled_positions=tuple(dict.fromkeys(blocked)), clues=clues),
        width,
        height,
    )


def state_payload(editor: CrosswordEditor) -> Dict[str, Any]:
    cursor = editor.cursor
    return {
        "width": editor.grid.width,
        "height": editor.grid.height,
        "cells": [
            [
                {"blocked": cell.blocked, "number": cell.number, "letter": cell.letter}
                for cell in row
            ]
            for row in editor.grid.cells
        ],
        "cursor": (
            {"row": cursor.row, "col": cursor.col, "direction": cursor.direction.value}
            if isinstance(cursor, ActiveCursor)
            else None
        ),
        "puzzle": editor.to_record().to_dict(),
    }


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.WARNING)
    configure_logging(level)

    script = args.keys
    if args.keys_file:
        script = f"{script} {parse_script_file(args.keys_file)}"

    try:
        editor = build_editor(args)
        editor.replay(parse_key_script(script))
    except (EditorError, OSError, ValueError) as exc:
        parser.error(str(exc))

    validation = editor.validate()
    payload = state_payload(editor)
    payload["validation"] = validation.messages

    if args.save:
        store = PuzzleStore(args.store_dir)
        payload["saved_id"] = store.save(editor.to_record(), editor.grid.width, editor.grid.height)
    if args.share_base_url:
        payload["share_url"] = build_share_url(args.share_base_url, editor.to_record())

    if args.output:
        args.output.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")
    else:
        pretty_print_state(editor)
        for key in ("saved_id", "share_url"):
            if key in payload:
                print(f"{key}: {payload[key]}")
        for message in validation.messages:
            print(f"validation: {message}")
    return 0 if validation.ok else 1


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
