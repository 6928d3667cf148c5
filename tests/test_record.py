import unittest

from crossword_editor.core.exceptions import OutOfBoundsError, RecordFormatError, ShareTokenError
from crossword_editor.core.models import Clue, ClueSet
from crossword_editor.engine.editor import CrosswordEditor
from crossword_editor.io.record import PuzzleRecord, parse_position
from crossword_editor.io.share import build_share_url, decode_token, encode_record, record_from_url


SAMPLE = {
    "filledPositions": ["0:2", "2:0"],
    "clues": {
        "across": [[1, "City on Florida's Space Coast"], [3, "What we're doing for dinner."]],
        "down": [[1, "Opposite of up"]],
    },
}


class PuzzleRecordTests(unittest.TestCase):
    def test_from_dict_parses_positions_and_clues(self) -> None:
        record = PuzzleRecord.from_dict(SAMPLE)
        self.assertEqual(record.filled_positions, ((0, 2), (2, 0)))
        self.assertEqual(record.clues.across[0], Clue(1, "City on Florida's Space Coast"))
        self.assertEqual(record.clues.down, (Clue(1, "Opposite of up"),))

    def test_to_dict_matches_shared_shape(self) -> None:
        self.assertEqual(PuzzleRecord.from_dict(SAMPLE).to_dict(), SAMPLE)

    def test_missing_sections_default_empty(self) -> None:
        record = PuzzleRecord.from_dict({})
        self.assertEqual(record.filled_positions, ())
        self.assertEqual(record.clues, ClueSet())

    def test_malformed_records_rejected(self) -> None:
        bad_payloads = [
            [],
            {"filledPositions": "0:2"},
            {"filledPositions": ["0-2"]},
            {"filledPositions": ["a:b"]},
            {"clues": {"across": [[0, "zero"]]}},
            {"clues": {"down": [["1", "text"]]}},
            {"clues": {"across": [[1]]}},
        ]
        for payload in bad_payloads:
            with self.assertRaises(RecordFormatError, msg=repr(payload)):
                PuzzleRecord.from_dict(payload)

    def test_parse_position(self) -> None:
        self.assertEqual(parse_position("12:3"), (12, 3))

    def test_editor_round_trip(self) -> None:
        record = PuzzleRecord.from_dict(SAMPLE)
        editor = CrosswordEditor.from_record(record, 5, 5)
        self.assertTrue(editor.grid.cell(0, 2).blocked)
        self.assertEqual(editor.grid.cell(0, 3).number, 3)
        editor.toggle_block(4, 4)
        self.assertEqual(
            editor.to_record().to_dict()["filledPositions"], ["0:2", "2:0", "4:4"]
        )
        self.assertEqual(editor.to_record().clues, record.clues)

    def test_record_outside_grid_rejected(self) -> None:
        record = PuzzleRecord.from_dict({"filledPositions": ["9:9"]})
        with self.assertRaises(OutOfBoundsError):
            CrosswordEditor.from_record(record, 5, 5)


class ShareTokenTests(unittest.TestCase):
    def test_token_round_trip(self) -> None:
        record = PuzzleRecord.from_dict(SAMPLE)
        token = encode_record(record)
        self.assertNotIn("=", token)
        self.assertNotIn("+", token)
        self.assertNotIn("/", token)
        self.assertEqual(decode_token(token), record)

    def test_share_url_embeds_token(self) -> None:
        record = PuzzleRecord.from_dict(SAMPLE)
        url = build_share_url("https://example.com/play", record)
        self.assertTrue(url.startswith("https://example.com/play?puzzle="))
        self.assertEqual(record_from_url(url), record)

    def test_share_url_keeps_existing_query(self) -> None:
        record = PuzzleRecord.from_dict(SAMPLE)
        url = build_share_url("https://example.com/play?lang=en", record)
        self.assertIn("lang=en", url)
        self.assertEqual(record_from_url(url), record)

    def test_bad_tokens_rejected(self) -> None:
        for token in ("", "!!!not-base64!!!", encode_record(PuzzleRecord())[:-3] + "@@"):
            with self.assertRaises(ShareTokenError):
                decode_token(token)

    def test_url_without_parameter_rejected(self) -> None:
        with self.assertRaises(ShareTokenError):
            record_from_url("https://example.com/play?other=1")

    def test_share_url_requires_scheme(self) -> None:
        with self.assertRaises(ShareTokenError):
            build_share_url("example.com/play", PuzzleRecord())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
