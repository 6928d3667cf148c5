"""Share-token codec and share URL helpers.

A share token is the record's compact JSON encoded as URL-safe base64
without padding, so it can travel as a single query parameter.
"""

from __future__ import annotations

import base64
import binascii
import json
from urllib.parse import parse_qs, urlsplit

import requests

from ..core.exceptions import RecordFormatError, ShareTokenError
from ..utils.logger import get_logger
from .record import PuzzleRecord


LOGGER = get_logger(__name__)

DEFAULT_PARAM = "puzzle"


def encode_record(record: PuzzleRecord) -> str:
    """Return the transport token for ``record``."""

    text = json.dumps(record.to_dict(), ensure_ascii=False, separators=(",", ":"))
    token = base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii")
    return token.rstrip("=")


def decode_token(token: str) -> PuzzleRecord:
    """Decode a transport token back into a :class:`PuzzleRecord`."""

    token = (token or "").strip()
    if not token:
        raise ShareTokenError("Empty share token")
    padded = token + "=" * (-len(token) % 4)
    try:
        raw = base64.urlsafe_b64decode(padded.encode("ascii"))
        payload = json.loads(raw.decode("utf-8"))
    except (binascii.Error, UnicodeError, ValueError) as exc:
        raise ShareTokenError(f"Share token is not valid encoded JSON: {exc}") from exc
    try:
        return PuzzleRecord.from_dict(payload)
    except RecordFormatError as exc:
        raise ShareTokenError(f"Share token holds a malformed record: {exc}") from exc


def build_share_url(base_url: str, record: PuzzleRecord, param: str = DEFAULT_PARAM) -> str:
    """Embed the record token as ``param`` in ``base_url``'s query string."""

    prepared = requests.PreparedRequest()
    try:
        prepared.prepare_url(base_url, {param: encode_record(record)})
    except requests.RequestException as exc:
        raise ShareTokenError(f"Cannot build share URL from {base_url!r}: {exc}") from exc
    LOGGER.debug("Built share URL for %s blocked cells", len(record.filled_positions))
    return prepared.url or base_url


def record_from_url(url: str, param: str = DEFAULT_PARAM) -> PuzzleRecord:
    """Extract and decode the record embedded in a share URL."""

    values = parse_qs(urlsplit(url).query).get(param)
    if not values:
        raise ShareTokenError(f"URL has no {param!r} parameter")
    return decode_token(values[0])
