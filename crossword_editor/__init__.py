"""Crossword grid construction and navigation engine.

This package exposes the public API surface via:

- ``crossword_editor.engine.editor.CrosswordEditor``: owns a grid and its cursor.
- ``crossword_editor.engine.grid.CrosswordGrid``: blocked squares, numbers, letters.
- ``crossword_editor.engine.boundaries.find_word_boundaries``: word-span queries.
- ``crossword_editor.io.record.PuzzleRecord``: the persisted/shared puzzle shape.
"""

from .engine.boundaries import find_word_boundaries
from .engine.editor import CrosswordEditor
from .engine.grid import CrosswordGrid, GridConfig
from .io.record import PuzzleRecord

__all__ = [
    "CrosswordEditor",
    "CrosswordGrid",
    "GridConfig",
    "PuzzleRecord",
    "find_word_boundaries",
]

__version__ = "0.1.0"
