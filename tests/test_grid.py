import unittest

from crossword_editor.core.exceptions import (CellBlockedError, InvalidDimensionError,
                                              InvalidLetterError, OutOfBoundsError)
from crossword_editor.core.models import Cell
from crossword_editor.engine.grid import CrosswordGrid, GridConfig
from crossword_editor.engine.validator import GridValidator


class GridCreationTests(unittest.TestCase):
    def test_open_grid_numbers_top_row_and_left_column(self) -> None:
        grid = CrosswordGrid.create(5, 5)
        self.assertEqual([grid.cell(0, c).number for c in range(5)], [1, 2, 3, 4, 5])
        self.assertEqual([grid.cell(r, 0).number for r in range(1, 5)], [6, 7, 8, 9])
        self.assertIsNone(grid.cell(2, 2).number)
        self.assertFalse(any(cell.blocked for _, _, cell in grid.iter_cells()))

    def test_dimensions_follow_config(self) -> None:
        grid = CrosswordGrid(GridConfig(height=3, width=7))
        self.assertEqual((grid.height, grid.width), (3, 7))
        self.assertEqual(len(grid.cells), 3)
        self.assertEqual(len(grid.cells[0]), 7)

    def test_non_positive_dimensions_rejected(self) -> None:
        with self.assertRaises(InvalidDimensionError):
            CrosswordGrid.create(0, 5)
        with self.assertRaises(InvalidDimensionError):
            CrosswordGrid.create(5, -1)

    def test_seeded_blocked_positions(self) -> None:
        grid = CrosswordGrid.create(5, 5, blocked=[(0, 2), (2, 0)])
        self.assertEqual(grid.blocked_positions(), [(0, 2), (2, 0)])
        self.assertIsNone(grid.cell(0, 2).number)

    def test_seeded_position_outside_grid_rejected(self) -> None:
        with self.assertRaises(OutOfBoundsError):
            CrosswordGrid.create(3, 3, blocked=[(3, 0)])


class GridMutationTests(unittest.TestCase):
    def test_toggle_blocked_clears_cell_without_renumbering_others(self) -> None:
        grid = CrosswordGrid.create(3, 3)
        grid.set_letter(0, 1, "A")
        grid.toggle_blocked(0, 1)

        cell = grid.cell(0, 1)
        self.assertTrue(cell.blocked)
        self.assertIsNone(cell.letter)
        self.assertIsNone(cell.number)
        self.assertIsNone(grid.cell(1, 1).number)

        grid.renumber()
        self.assertEqual(grid.cell(0, 2).number, 2)
        self.assertEqual(grid.cell(1, 1).number, 4)

    def test_toggle_twice_unblocks(self) -> None:
        grid = CrosswordGrid.create(3, 3)
        grid.toggle_blocked(1, 1)
        grid.toggle_blocked(1, 1)
        grid.renumber()
        self.assertFalse(grid.cell(1, 1).blocked)
        self.assertEqual(grid.blocked_positions(), [])

    def test_set_letter_rejects_blocked_cell(self) -> None:
        grid = CrosswordGrid.create(3, 3, blocked=[(1, 1)])
        with self.assertRaises(CellBlockedError):
            grid.set_letter(1, 1, "A")
        self.assertIsNone(grid.cell(1, 1).letter)

    def test_set_letter_requires_single_uppercase_letter(self) -> None:
        grid = CrosswordGrid.create(3, 3)
        for value in ("a", "AB", "1", ""):
            with self.assertRaises(InvalidLetterError):
                grid.set_letter(0, 0, value)
        grid.set_letter(0, 0, "Q")
        self.assertEqual(grid.cell(0, 0).letter, "Q")

    def test_clear_letter(self) -> None:
        grid = CrosswordGrid.create(3, 3)
        grid.set_letter(2, 2, "Z")
        grid.clear_letter(2, 2)
        self.assertIsNone(grid.cell(2, 2).letter)

    def test_coordinates_outside_grid_rejected(self) -> None:
        grid = CrosswordGrid.create(4, 2)
        with self.assertRaises(OutOfBoundsError):
            grid.cell(2, 0)
        with self.assertRaises(OutOfBoundsError):
            grid.toggle_blocked(-1, 0)
        with self.assertRaises(OutOfBoundsError):
            grid.set_letter(0, 4, "A")

    def test_copy_is_independent(self) -> None:
        grid = CrosswordGrid.create(3, 3)
        clone = grid.copy()
        clone.set_letter(0, 0, "A")
        clone.toggle_blocked(2, 2)
        self.assertIsNone(grid.cell(0, 0).letter)
        self.assertFalse(grid.cell(2, 2).blocked)


class GridValidatorTests(unittest.TestCase):
    def test_fresh_grid_is_valid(self) -> None:
        result = GridValidator().validate(CrosswordGrid.create(4, 3, blocked=[(1, 1)]))
        self.assertTrue(result.ok)
        self.assertEqual(result.messages, [])

    def test_stale_numbering_reported(self) -> None:
        grid = CrosswordGrid.create(3, 3)
        grid.toggle_blocked(0, 1)
        result = GridValidator().validate(grid)
        self.assertFalse(result.ok)
        self.assertIn("(0,2)", result.messages[0])

        grid.renumber()
        self.assertTrue(GridValidator().validate(grid).ok)

    def test_bad_letter_reported(self) -> None:
        grid = CrosswordGrid.create(2, 2)
        grid.cells[0][0] = Cell(number=1, letter="a")
        result = GridValidator().validate(grid)
        self.assertFalse(result.ok)
        self.assertIn("Invalid letter", result.messages[0])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
