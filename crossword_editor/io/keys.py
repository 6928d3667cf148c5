"""Key-script parsing.

A key script is a whitespace-separated list of tokens describing a typing
session, used by the CLI and handy in tests::

    click:0:0 HELLO <tab> <s-tab> <space> <bs> <up> block:2:2

Runs of letters produce one letter event per character. Angle-bracket
tokens are case-insensitive.
"""

from __future__ import annotations

import re
from typing import List

from ..core.constants import ArrowKey
from ..core.exceptions import KeyScriptError
from ..engine.navigator import EditorEvent


SPECIAL_TOKENS = {
    "<tab>": EditorEvent.tab,
    "<s-tab>": EditorEvent.shift_tab,
    "<space>": EditorEvent.space,
    "<bs>": EditorEvent.backspace,
    "<backspace>": EditorEvent.backspace,
}

ARROW_TOKENS = {
    "<up>": ArrowKey.UP,
    "<down>": ArrowKey.DOWN,
    "<left>": ArrowKey.LEFT,
    "<right>": ArrowKey.RIGHT,
}

COORD_RE = re.compile(r"^(click|block):(\d+):(\d+)$", re.IGNORECASE)
LETTERS_RE = re.compile(r"^[A-Za-z]+$")


def parse_key_script(text: str) -> List[EditorEvent]:
    events: List[EditorEvent] = []
    for token in text.split():
        events.extend(parse_token(token))
    return events


def parse_token(token: str) -> List[EditorEvent]:
    lowered = token.lower()
    if lowered in SPECIAL_TOKENS:
        return [SPECIAL_TOKENS[lowered]()]
    if lowered in ARROW_TOKENS:
        return [EditorEvent.arrow(ARROW_TOKENS[lowered])]

    match = COORD_RE.match(token)
    if match:
        kind, row, col = match.group(1).lower(), int(match.group(2)), int(match.group(3))
        if kind == "click":
            return [EditorEvent.click(row, col)]
        return [EditorEvent.toggle_block(row, col)]

    if LETTERS_RE.match(token):
        return [EditorEvent.letter(ch.upper()) for ch in token]

    raise KeyScriptError(f"Unknown key-script token: {token!r}")
