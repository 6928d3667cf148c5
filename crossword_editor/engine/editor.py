"""Editing session: the single owner of a grid, its cursor and its clues."""

from __future__ import annotations

from typing import Dict, Iterable, Optional

from ..core.constants import ArrowKey, Direction
from ..core.models import NO_CURSOR, ActiveCursor, Clue, ClueSet, Cursor
from ..io.record import PuzzleRecord
from ..utils.logger import get_logger
from .boundaries import WordSpan, find_word_boundaries
from .clues import active_clue, crossing_clues, is_active_clue
from .grid import CrosswordGrid
from .navigator import EditorConfig, EditorEvent, EditorState, reduce
from .validator import GridValidator, ValidationResult


LOGGER = get_logger(__name__)


class CrosswordEditor:
    """Drives navigation events against one grid.

    Each operation replaces :attr:`state` wholesale with the reducer's
    output and returns it; earlier states stay valid snapshots.
    """

    def __init__(
        self,
        grid: CrosswordGrid,
        clues: Optional[ClueSet] = None,
        cursor: Cursor = NO_CURSOR,
        config: Optional[EditorConfig] = None,
    ) -> None:
        self.config = config or EditorConfig()
        self.clues = clues or ClueSet()
        self.state = EditorState(grid=grid, cursor=cursor, last_action="init")

    @classmethod
    def create(
        cls,
        width: int,
        height: int,
        blocked: Iterable[tuple] = (),
        clues: Optional[ClueSet] = None,
        config: Optional[EditorConfig] = None,
    ) -> "CrosswordEditor":
        return cls(CrosswordGrid.create(width, height, blocked=blocked), clues=clues, config=config)

    @classmethod
    def from_record(
        cls,
        record: PuzzleRecord,
        width: int,
        height: int,
        config: Optional[EditorConfig] = None,
    ) -> "CrosswordEditor":
        LOGGER.info(
            "Loading %sx%s puzzle with %s blocked cells", width, height, len(record.filled_positions)
        )
        return cls.create(width, height, blocked=record.filled_positions, clues=record.clues, config=config)

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------
    @property
    def grid(self) -> CrosswordGrid:
        return self.state.grid

    @property
    def cursor(self) -> Cursor:
        return self.state.cursor

    # ------------------------------------------------------------------
    # Navigation operations
    # ------------------------------------------------------------------
    def dispatch(self, event: EditorEvent) -> EditorState:
        self.state = reduce(self.state, event, self.config)
        return self.state

    def replay(self, events: Iterable[EditorEvent]) -> EditorState:
        for event in events:
            self.dispatch(event)
        return self.state

    def click(self, row: int, col: int) -> EditorState:
        return self.dispatch(EditorEvent.click(row, col))

    def toggle_block(self, row: int, col: int) -> EditorState:
        return self.dispatch(EditorEvent.toggle_block(row, col))

    def type_letter(self, letter: str) -> EditorState:
        return self.dispatch(EditorEvent.letter(letter))

    def type_text(self, text: str) -> EditorState:
        return self.replay(EditorEvent.letter(ch) for ch in text)

    def tab(self) -> EditorState:
        return self.dispatch(EditorEvent.tab())

    def shift_tab(self) -> EditorState:
        return self.dispatch(EditorEvent.shift_tab())

    def space(self) -> EditorState:
        return self.dispatch(EditorEvent.space())

    def backspace(self) -> EditorState:
        return self.dispatch(EditorEvent.backspace())

    def arrow(self, key: ArrowKey | str) -> EditorState:
        return self.dispatch(EditorEvent.arrow(key))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def word_boundaries(self, direction: Optional[Direction] = None) -> Optional[WordSpan]:
        """Span of the word under the cursor, or ``None`` without a cursor."""
        cursor = self.cursor
        if not isinstance(cursor, ActiveCursor):
            return None
        return find_word_boundaries(self.grid, cursor.row, cursor.col, direction or cursor.direction)

    def is_active_clue(self, clue: Clue, direction: Direction) -> bool:
        return is_active_clue(clue, direction, self.cursor, self.grid)

    def active_clue(self) -> Optional[Clue]:
        return active_clue(self.clues, self.grid, self.cursor)

    def crossing_clues(self) -> Dict[Direction, Optional[Clue]]:
        return crossing_clues(self.clues, self.grid, self.cursor)

    def validate(self) -> ValidationResult:
        return GridValidator().validate(self.grid)

    def to_record(self) -> PuzzleRecord:
        return PuzzleRecord(filled_positions=tuple(self.grid.blocked_positions()), clues=self.clues)
