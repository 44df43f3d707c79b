"""Charset alias table.

Pages in the wild declare their encoding with spellings that no registry
knows (``utf8``, ``cp-1251``, ``latin-1``) or with a name for a subset of
what they really contain (``GB2312`` pages routinely use GB18030
characters).  :data:`ALIASES` maps those spellings onto names the
:mod:`~guess_html_encoding.registry` does recognize.  Anything not in the
table is passed to the registry as-is.
"""

from __future__ import annotations

from guess_html_encoding.registry import lookup

# Keys are in normalized form: uppercase with "-" and "_" removed.
ALIASES: dict[str, str] = {
    "UTF8": "UTF-8",
    "CP1251": "CP1251",
    "LATIN1": "ISO-8859-1",
    # Historical pairing kept as-is; WIN1251 pages are labeled Windows-1250.
    "WIN1251": "WINDOWS-1250",
    # GB2312 is a strict subset of GB18030.
    "GB2312": "GB18030",
    "GB231280": "GB18030",
    "XSJIS": "SHIFT_JIS",
    "XEUCJP": "EUC-JP",
    "XGBK": "GBK",
    "KSC56011987": "CP949",
}


def normalize_alias_key(token: str) -> str:
    """Return the form *token* takes as an :data:`ALIASES` key."""
    return token.strip().upper().replace("-", "").replace("_", "")


def resolve(token: str | None) -> str | None:
    """Map a raw charset token to an uppercased, registry-known name.

    Returns ``None`` when the token is empty, not a string, or unknown to
    both the alias table and the registry.
    """
    if not isinstance(token, str) or not token.strip():
        return None
    name = ALIASES.get(normalize_alias_key(token), token.strip().upper())
    if lookup(name) is None:
        return None
    return name


def encoding_loaded(name: str | None) -> bool:
    """Return whether *name* is a charset this package can resolve.

    True for alias-table spellings (``utf8``, ``cp-1251``), registry names
    and aliases, and any label Python's codec registry accepts.
    """
    return resolve(name) is not None
