"""Cursor navigation state machine.

``reduce`` is the authoritative transition function: it takes the current
:class:`EditorState` and one :class:`EditorEvent` and returns a new state.
States are never mutated in place; any grid change happens on a clone, so a
rejected event always leaves the caller holding the untouched prior state.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any, Callable, Dict, Optional

from ..core.constants import ArrowKey, Direction, EventType, ITERATION_FACTOR, LETTERS, Bounds
from ..core.exceptions import (CellBlockedError, InvalidLetterError, NoWordFoundError,
                               OutOfBoundsError)
from ..core.models import NO_CURSOR, ActiveCursor, Cursor
from ..utils.logger import get_logger
from .boundaries import (ScanOrder, axis_index, find_word_boundaries, is_word_start_in,
                         position_at)
from .grid import CrosswordGrid


LOGGER = get_logger(__name__)

REJECTED_ERRORS = (OutOfBoundsError, CellBlockedError, InvalidLetterError, NoWordFoundError)


@dataclass(frozen=True)
class EditorConfig:
    """Tunables for navigation searches."""

    iteration_factor: int = ITERATION_FACTOR

    def search_limit(self, bounds: Bounds) -> int:
        return self.iteration_factor * bounds.size


@dataclass(frozen=True)
class EditorEvent:
    type: EventType
    payload: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def click(cls, row: int, col: int) -> "EditorEvent":
        return cls(EventType.CLICK, {"row": row, "col": col})

    @classmethod
    def toggle_block(cls, row: int, col: int) -> "EditorEvent":
        return cls(EventType.TOGGLE_BLOCK, {"row": row, "col": col})

    @classmethod
    def letter(cls, letter: str) -> "EditorEvent":
        return cls(EventType.LETTER, {"letter": letter})

    @classmethod
    def tab(cls) -> "EditorEvent":
        return cls(EventType.TAB)

    @classmethod
    def shift_tab(cls) -> "EditorEvent":
        return cls(EventType.SHIFT_TAB)

    @classmethod
    def space(cls) -> "EditorEvent":
        return cls(EventType.SPACE)

    @classmethod
    def backspace(cls) -> "EditorEvent":
        return cls(EventType.BACKSPACE)

    @classmethod
    def arrow(cls, key: ArrowKey | str) -> "EditorEvent":
        return cls(EventType.ARROW, {"key": key})


@dataclass(frozen=True)
class EditorState:
    grid: CrosswordGrid
    cursor: Cursor = NO_CURSOR
    last_action: str = ""


# -----------------------------
# Word-start search
# -----------------------------


def start_of_next_word(
    grid: CrosswordGrid,
    cursor: Cursor,
    forward: bool = True,
    limit: Optional[int] = None,
) -> ActiveCursor:
    """Return the start of the next (or previous) word along the cursor direction.

    The search walks :class:`ScanOrder` from the cursor and returns the first
    word start that does not begin the cursor's own word. Without a cursor the
    search covers the whole grid in ACROSS order, from the top-left cell when
    moving forward and from the bottom-right cell when moving backward.
    """

    if isinstance(cursor, ActiveCursor):
        row, col, direction = cursor.row, cursor.col, cursor.direction
        own_start = None
        if not grid.is_blocked(row, col):
            span = find_word_boundaries(grid, row, col, direction)
            own_start = position_at(row, col, span.start, direction)
    else:
        direction = Direction.ACROSS
        row, col = (grid.height - 1, grid.width - 1) if forward else (0, 0)
        own_start = None

    for r, c in ScanOrder(grid.bounds, row, col, direction, forward=forward, limit=limit):
        if (r, c) == own_start:
            continue
        if is_word_start_in(grid, r, c, direction):
            return ActiveCursor(r, c, direction)
    raise NoWordFoundError(
        f"No {'next' if forward else 'previous'} {direction.value} word from {(row, col)}"
    )


# -----------------------------
# Reducer
# -----------------------------

Handler = Callable[[EditorState, Dict[str, Any], EditorConfig], EditorState]


def reduce(
    state: EditorState,
    event: EditorEvent,
    config: Optional[EditorConfig] = None,
) -> EditorState:
    """Authoritative state transition."""

    config = config or EditorConfig()
    name = _event_name(event)
    handler = _HANDLERS.get(name)
    if handler is None:
        LOGGER.debug("Ignoring unknown event %s", name)
        return replace(state, last_action=f"ignored:{name}")

    try:
        out = handler(state, dict(event.payload or {}), config)
    except REJECTED_ERRORS as exc:
        LOGGER.debug("Rejected %s: %s", name, exc)
        return replace(state, last_action=f"rejected:{name.lower()}")

    LOGGER.debug("%s -> cursor=%s (%s)", name, out.cursor, out.last_action)
    return out


def _event_name(event: EditorEvent) -> str:
    return str(getattr(event.type, "value", event.type)).upper()


def _coords(payload: Dict[str, Any]) -> tuple:
    try:
        return int(payload["row"]), int(payload["col"])
    except (KeyError, TypeError, ValueError) as exc:
        raise OutOfBoundsError(f"Event payload has no usable coordinates: {payload}") from exc


def _on_toggle_block(state: EditorState, payload: Dict[str, Any], config: EditorConfig) -> EditorState:
    row, col = _coords(payload)
    grid = state.grid.copy()
    cell = grid.toggle_blocked(row, col)
    grid.renumber()

    cursor = state.cursor
    if isinstance(cursor, ActiveCursor) and cursor.position == (row, col) and cell.blocked:
        cursor = NO_CURSOR
    return EditorState(grid=grid, cursor=cursor, last_action="toggle_block")


def _on_click(state: EditorState, payload: Dict[str, Any], config: EditorConfig) -> EditorState:
    row, col = _coords(payload)
    if state.grid.is_blocked(row, col):
        return replace(state, last_action="click:blocked")

    cursor = state.cursor
    if isinstance(cursor, ActiveCursor):
        if cursor.position == (row, col):
            return replace(state, cursor=cursor.with_direction(cursor.direction.flipped()),
                           last_action="click:flip")
        return replace(state, cursor=cursor.moved_to(row, col), last_action="click:move")
    return replace(state, cursor=ActiveCursor(row, col, Direction.ACROSS), last_action="click:place")


def _on_letter(state: EditorState, payload: Dict[str, Any], config: EditorConfig) -> EditorState:
    letter = str(payload.get("letter", "")).strip().upper()
    if len(letter) != 1 or letter not in LETTERS:
        raise InvalidLetterError(f"Not a letter key: {payload.get('letter')!r}")

    cursor = state.cursor
    if not isinstance(cursor, ActiveCursor):
        return replace(state, last_action="letter:no_cursor")

    grid = state.grid.copy()
    grid.set_letter(cursor.row, cursor.col, letter)

    span = find_word_boundaries(grid, cursor.row, cursor.col, cursor.direction)
    index = axis_index(cursor.row, cursor.col, cursor.direction)
    if index < span.end:
        row, col = position_at(cursor.row, cursor.col, index + 1, cursor.direction)
        return EditorState(grid=grid, cursor=cursor.moved_to(row, col), last_action="letter:advance")
    return EditorState(grid=grid, cursor=cursor, last_action="letter:word_end")


def _on_tab(forward: bool) -> Handler:
    def handler(state: EditorState, payload: Dict[str, Any], config: EditorConfig) -> EditorState:
        limit = config.search_limit(state.grid.bounds)
        cursor = start_of_next_word(state.grid, state.cursor, forward=forward, limit=limit)
        return replace(state, cursor=cursor, last_action="tab" if forward else "shift_tab")

    return handler


def _on_space(state: EditorState, payload: Dict[str, Any], config: EditorConfig) -> EditorState:
    cursor = state.cursor
    if not isinstance(cursor, ActiveCursor):
        return replace(state, last_action="space:no_cursor")
    return replace(state, cursor=cursor.with_direction(cursor.direction.flipped()), last_action="space")


def _on_backspace(state: EditorState, payload: Dict[str, Any], config: EditorConfig) -> EditorState:
    """
    Backspace behavior:
    - If the current cell has a letter: clear it, cursor stays.
    - Else, at the start of the word: jump to the last cell of the previous
      word along the same direction and clear that.
    - Else: move back one cell and clear that.
    """
    cursor = state.cursor
    if not isinstance(cursor, ActiveCursor):
        return replace(state, last_action="bksp:no_cursor")

    current = state.grid.cell(cursor.row, cursor.col)
    if current.letter is not None:
        grid = state.grid.copy()
        grid.clear_letter(cursor.row, cursor.col)
        return EditorState(grid=grid, cursor=cursor, last_action="bksp:clear")

    direction = cursor.direction
    span = find_word_boundaries(state.grid, cursor.row, cursor.col, direction)
    index = axis_index(cursor.row, cursor.col, direction)

    if index == span.start:
        limit = config.search_limit(state.grid.bounds)
        prev_start = start_of_next_word(state.grid, cursor, forward=False, limit=limit)
        prev_span = find_word_boundaries(state.grid, prev_start.row, prev_start.col, direction)
        row, col = position_at(prev_start.row, prev_start.col, prev_span.end, direction)
        action = "bksp:prev_word"
    else:
        row, col = position_at(cursor.row, cursor.col, index - 1, direction)
        action = "bksp:prev_clear"

    grid = state.grid.copy()
    grid.clear_letter(row, col)
    return EditorState(grid=grid, cursor=cursor.moved_to(row, col), last_action=action)


def _on_arrow(state: EditorState, payload: Dict[str, Any], config: EditorConfig) -> EditorState:
    cursor = state.cursor
    if not isinstance(cursor, ActiveCursor):
        return replace(state, last_action="arrow:no_cursor")
    try:
        key = ArrowKey(str(getattr(payload.get("key"), "value", payload.get("key"))).upper())
    except ValueError:
        return replace(state, last_action="arrow:unknown")

    grid = state.grid
    dr, dc = key.step
    row, col = cursor.row + dr, cursor.col + dc
    open_neighbor = grid.contains(row, col) and not grid.cells[row][col].blocked

    if key.axis == cursor.direction:
        if not open_neighbor:
            return replace(state, last_action="arrow:edge")
        return replace(state, cursor=cursor.moved_to(row, col), last_action="arrow:move")

    if not open_neighbor:
        return replace(state, last_action="arrow:edge")
    return replace(state, cursor=cursor.with_direction(key.axis), last_action="arrow:switch")


_HANDLERS: Dict[str, Handler] = {
    EventType.TOGGLE_BLOCK.value: _on_toggle_block,
    EventType.CLICK.value: _on_click,
    EventType.LETTER.value: _on_letter,
    EventType.TAB.value: _on_tab(forward=True),
    EventType.SHIFT_TAB.value: _on_tab(forward=False),
    EventType.SPACE.value: _on_space,
    EventType.BACKSPACE.value: _on_backspace,
    EventType.ARROW.value: _on_arrow,
}
