"""Internal shared utilities for guess_html_encoding."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

#: Encoding returned by ``guess()`` when no signal yields a usable charset.
DEFAULT_ENCODING: str = "UTF-8"

#: Encoding that ``encode()`` always produces.
REFERENCE_ENCODING: str = "UTF-8"

#: Default number of leading document bytes scanned for ``<meta>`` tags.
DEFAULT_SCAN_LIMIT: int = 2500


def _validate_scan_limit(scan_limit: int) -> None:
    """Raise ValueError if *scan_limit* is not a positive integer."""
    if (
        isinstance(scan_limit, bool)
        or not isinstance(scan_limit, int)
        or scan_limit < 1
    ):
        msg = "scan_limit must be a positive integer"
        raise ValueError(msg)


def _coerce_document(document: bytes | bytearray | memoryview | str | None) -> bytes:
    """Return *document* as ``bytes``; ``None`` becomes ``b""``.

    A ``str`` document is taken as its UTF-8 bytes.  Anything else is treated
    as an absent document.
    """
    if document is None:
        return b""
    if isinstance(document, bytes):
        return document
    if isinstance(document, (bytearray, memoryview)):
        return bytes(document)
    if isinstance(document, str):
        return document.encode("utf-8", errors="surrogateescape")
    logger.debug("ignoring document of unsupported type %s", type(document).__name__)
    return b""
