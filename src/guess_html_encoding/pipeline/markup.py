"""Stage 2: charset extraction from in-document ``<meta>`` declarations.

The scan works on raw bytes and only looks at ASCII-range tag structure, so
it does not depend on knowing the document's encoding.  It follows the shape
of the HTML "prescan a byte stream" algorithm: comments, declarations and
the attributes of other tags are skipped so that a ``charset=`` hidden in a
comment or a ``<script>`` attribute is not mistaken for a declaration.

Two forms are recognized, whichever comes first in the document:

1. ``<meta charset="...">``
2. ``<meta http-equiv="Content-Type" content="...; charset=...">``
"""

from __future__ import annotations

import re

from guess_html_encoding._utils import DEFAULT_SCAN_LIMIT
from guess_html_encoding.pipeline.headers import extract_charset_param

_META_OPEN_RE = re.compile(rb"<meta[\t\n\f\r /]", re.IGNORECASE)
_TAG_OPEN_RE = re.compile(rb"</?[A-Za-z][^\t\n\f\r />]*")
_SPACES_OR_SLASHES_RE = re.compile(rb"[\t\n\f\r /]*")
_SPACES_RE = re.compile(rb"[\t\n\f\r ]*")
_ATTR_NAME_RE = re.compile(rb"=?[^\t\n\f\r =/>]*")
_UNQUOTED_VALUE_RE = re.compile(rb"[^\t\n\f\r >]*")

_GT = ord(">")
_EQ = ord("=")
_QUOTES = frozenset(b"'\"")


def _get_attribute(data: bytes, pos: int) -> tuple[bytes | None, bytes, int]:
    """Read one attribute starting at *pos*.

    :returns: ``(name, value, new_pos)``.  *name* is lowercased and is
        ``None`` once the end of the tag (or of *data*) is reached.
    """
    pos = _SPACES_OR_SLASHES_RE.match(data, pos).end()
    if pos >= len(data):
        return None, b"", len(data)
    if data[pos] == _GT:
        return None, b"", pos + 1

    match = _ATTR_NAME_RE.match(data, pos)
    name = match.group().lower()
    pos = _SPACES_RE.match(data, match.end()).end()
    if pos >= len(data) or data[pos] != _EQ:
        return name, b"", pos

    pos = _SPACES_RE.match(data, pos + 1).end()
    if pos < len(data) and data[pos] in _QUOTES:
        end = data.find(data[pos : pos + 1], pos + 1)
        if end == -1:
            return name, data[pos + 1 :], len(data)
        return name, data[pos + 1 : end], end + 1
    match = _UNQUOTED_VALUE_RE.match(data, pos)
    return name, match.group(), match.end()


def _read_meta(data: bytes, pos: int) -> tuple[str | None, int]:
    """Read the attributes of a ``<meta>`` tag whose name ends at *pos*.

    :returns: ``(charset, new_pos)`` where *charset* is the declared token,
        or ``None`` if this meta element does not declare one.
    """
    seen: set[bytes] = set()
    got_pragma = False
    need_pragma: bool | None = None
    charset: str | None = None
    while True:
        name, value, pos = _get_attribute(data, pos)
        if name is None:
            break
        if name in seen:
            continue
        seen.add(name)
        if name == b"http-equiv":
            if value.strip().lower() == b"content-type":
                got_pragma = True
        elif name == b"content":
            if charset is None:
                declared = extract_charset_param(value.decode("latin-1"))
                if declared is not None:
                    charset = declared
                    need_pragma = True
        elif name == b"charset":
            declared = value.decode("latin-1").strip()
            if declared:
                charset = declared
                need_pragma = False

    if charset is not None and (need_pragma is False or got_pragma):
        return charset, pos
    return None, pos


def _skip_tag(data: bytes, pos: int) -> int:
    while True:
        name, _value, pos = _get_attribute(data, pos)
        if name is None:
            return pos


def extract_meta_charset(data: bytes, scan_limit: int = DEFAULT_SCAN_LIMIT) -> str | None:
    """Return the raw charset token of the first ``<meta>`` declaration.

    :param data: The raw document bytes.
    :param scan_limit: Number of leading bytes to examine.
    :returns: The charset token, or ``None`` if no meta element declares one.
    """
    if not data:
        return None

    head = data[:scan_limit]
    pos = 0
    while True:
        pos = head.find(b"<", pos)
        if pos == -1:
            return None

        if head.startswith(b"<!--", pos):
            end = head.find(b"-->", pos + 2)
            if end == -1:
                return None
            pos = end + 3
            continue

        match = _META_OPEN_RE.match(head, pos)
        if match:
            charset, pos = _read_meta(head, match.end())
            if charset is not None:
                return charset
            continue

        match = _TAG_OPEN_RE.match(head, pos)
        if match:
            pos = _skip_tag(head, match.end())
            continue

        if head.startswith((b"<!", b"</", b"<?"), pos):
            end = head.find(b">", pos + 2)
            if end == -1:
                return None
            pos = end + 1
            continue

        pos += 1
