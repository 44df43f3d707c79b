"""Stage 1: charset extraction from HTTP response headers."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Mapping
from typing import Any

logger = logging.getLogger(__name__)

HeaderSource = str | bytes | Mapping[str, Any] | None

_CONTENT_TYPE = "Content-Type"
_CHARSET_PARAM_RE = re.compile(r"(?<![\w-])charset\s*=\s*([^;]*)", re.IGNORECASE)


def extract_charset_param(value: str) -> str | None:
    """Return the ``charset=`` parameter of a Content-Type style value.

    The parameter name is matched case-insensitively.  The value runs up to
    the next ``;`` or the end of *value*; surrounding whitespace and quotes
    are removed.  Returns ``None`` if there is no non-empty charset.
    """
    match = _CHARSET_PARAM_RE.search(value)
    if match is None:
        return None
    token = match.group(1).strip().strip("'\"").strip()
    return token or None


def _as_text(value: Any) -> str | None:
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if isinstance(value, bytes):
        # HTTP header values are octets; latin-1 maps each one to a code point.
        return value.decode("latin-1")
    if isinstance(value, str):
        return value
    return None


def _iter_blob(blob: str) -> Iterable[tuple[str, str]]:
    for line in blob.splitlines():
        name, sep, value = line.partition(":")
        if sep:
            yield name.strip(), value


def _iter_pairs(headers: HeaderSource) -> Iterable[tuple[str, Any]]:
    if isinstance(headers, bytes):
        return _iter_blob(headers.decode("latin-1"))
    if isinstance(headers, str):
        return _iter_blob(headers)
    items = getattr(headers, "items", None)
    if not callable(items):
        logger.debug("ignoring headers of unsupported type %s", type(headers).__name__)
        return ()
    return items()


def find_content_type(headers: HeaderSource) -> str | None:
    """Return the value of the ``Content-Type`` header, if any.

    An entry named exactly ``Content-Type`` is preferred; otherwise the
    first entry whose name matches case-insensitively is used.
    """
    if not headers:
        return None
    fallback = None
    for name, value in _iter_pairs(headers):
        if not isinstance(name, str):
            continue
        if name == _CONTENT_TYPE:
            return _as_text(value)
        if fallback is None and name.lower() == "content-type":
            fallback = _as_text(value)
    return fallback


def extract_header_charset(headers: HeaderSource) -> str | None:
    """Return the raw charset token declared by the ``Content-Type`` header.

    :param headers: ``None``, a ``"Name: Value"`` blob (``str`` or
        ``bytes``) with one header per line, or a mapping of header names
        to values.
    :returns: The charset token, or ``None`` if there is none.
    """
    content_type = find_content_type(headers)
    if content_type is None:
        return None
    return extract_charset_param(content_type)
