"""Custom exception hierarchy for the crossword editor."""


class EditorError(Exception):
    """Base exception for editor failures."""


class InvalidDimensionError(EditorError, ValueError):
    """Raised when a grid is requested with a non-positive width or height."""


class OutOfBoundsError(EditorError, IndexError):
    """Raised when a coordinate falls outside the grid."""


class CellBlockedError(EditorError):
    """Raised when a letter is written into a blocked cell."""


class InvalidLetterError(EditorError, ValueError):
    """Raised when a cell value is not a single uppercase A-Z letter."""


class NoWordFoundError(EditorError):
    """Raised when a word-start search exhausts its iteration cap."""


class RecordFormatError(EditorError, ValueError):
    """Raised when a persisted puzzle record cannot be parsed."""


class ShareTokenError(EditorError, ValueError):
    """Raised when a share token or share URL cannot be decoded."""


class KeyScriptError(EditorError, ValueError):
    """Raised when a key script contains an unknown token."""
