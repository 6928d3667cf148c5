import io
import json
import logging
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

import main
from crossword_editor.core.models import ActiveCursor, Clue, ClueSet
from crossword_editor.core.constants import Direction
from crossword_editor.engine.editor import CrosswordEditor
from crossword_editor.io.record import PuzzleRecord
from crossword_editor.io.share import encode_record
from crossword_editor.utils.pretty import format_clues, format_grid, format_numbers


class PrettyTests(unittest.TestCase):
    def test_grid_marks_blocks_cursor_and_word(self) -> None:
        editor = CrosswordEditor.create(3, 2, blocked=[(1, 2)])
        editor.click(0, 0)
        editor.type_letter("A")
        rendered = format_grid(editor.grid, editor.cursor).splitlines()
        self.assertEqual(rendered[2], " 0 | _A_ [.] _._")
        self.assertEqual(rendered[3], " 1 |  .   .   # ")

    def test_numbers(self) -> None:
        grid = CrosswordEditor.create(3, 2, blocked=[(1, 2)]).grid
        self.assertEqual(format_numbers(grid).splitlines(), ["  1  2  3", "  4  .  #"])

    def test_clues_mark_active(self) -> None:
        editor = CrosswordEditor.create(
            3, 3, clues=ClueSet(across=(Clue(1, "Top"), Clue(4, "Middle")), down=())
        )
        editor.click(1, 1)
        text = format_clues(editor.clues, editor.grid, editor.cursor)
        self.assertIn(" >  4. Middle", text)
        self.assertIn("    1. Top", text)
        self.assertIn("(none)", text)


class CliTests(unittest.TestCase):
    def tearDown(self) -> None:
        logging.getLogger().setLevel(logging.WARNING)

    def test_replays_keys_into_json_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            output = Path(tmpdir) / "out.json"
            code = main.main(
                [
                    "--blocked", "0:2", "2:0",
                    "--keys", "click:0:3 HI <tab>",
                    "--share-base-url", "https://example.com/play",
                    "--output", str(output),
                ]
            )
            self.assertEqual(code, 0)
            payload = json.loads(output.read_text(encoding="utf-8"))

        self.assertEqual(payload["puzzle"]["filledPositions"], ["0:2", "2:0"])
        self.assertEqual(payload["cells"][0][3]["letter"], "H")
        self.assertEqual(payload["cells"][0][4]["letter"], "I")
        self.assertEqual(payload["cursor"], {"row": 1, "col": 0, "direction": "ACROSS"})
        self.assertEqual(payload["validation"], [])
        self.assertIn("?puzzle=", payload["share_url"])

    def test_load_token_save_and_reload(self) -> None:
        record = PuzzleRecord.from_dict({"filledPositions": ["1:1"], "clues": {"across": [[1, "Top"]]}})
        with tempfile.TemporaryDirectory() as tmpdir:
            store_dir = Path(tmpdir) / "store"
            buffer = io.StringIO()
            with redirect_stdout(buffer):
                code = main.main(
                    [
                        "--width", "3", "--height", "3",
                        "--load-token", encode_record(record),
                        "--keys", "<tab> AB",
                        "--save", "--store-dir", str(store_dir),
                    ]
                )
            self.assertEqual(code, 0)
            printed = buffer.getvalue()
            self.assertIn("saved_id:", printed)
            self.assertIn(" >  1. Top", printed)

            saved_id = printed.split("saved_id:")[1].split()[0]
            output = Path(tmpdir) / "reloaded.json"
            main.main(["--load-id", saved_id, "--store-dir", str(store_dir), "--output", str(output)])
            payload = json.loads(output.read_text(encoding="utf-8"))
        self.assertEqual(payload["puzzle"], record.to_dict())
        self.assertIsNone(payload["cursor"])

    def test_bad_key_script_exits_with_usage_error(self) -> None:
        with redirect_stdout(io.StringIO()), self.assertRaises(SystemExit) as ctx:
            with mock.patch("sys.stderr", new=io.StringIO()):
                main.main(["--keys", "<nope>"])
        self.assertEqual(ctx.exception.code, 2)

    def test_cursor_type_in_payload(self) -> None:
        editor = CrosswordEditor.create(2, 2)
        editor.click(1, 1)
        payload = main.state_payload(editor)
        self.assertEqual(editor.cursor, ActiveCursor(1, 1, Direction.ACROSS))
        self.assertEqual(payload["cursor"]["direction"], "ACROSS")


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
