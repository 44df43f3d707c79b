"""Encoding registry: the names this package recognizes and how to decode them.

Each :class:`EncodingInfo` pairs a registry name (plus its aliases) with the
Python codec that decodes it.  A ``None`` codec marks a *nominal* entry: the
name is a legitimate, recognized encoding, but no Python codec converts from
it, so :func:`~guess_html_encoding.encode` falls back to relabeling the raw
bytes instead of transcoding them.

Names outside the table are looked up in Python's own codec registry.  The
table is built once at import time and never mutated, so lookups are
safe from any number of threads.
"""

from __future__ import annotations

import codecs
import dataclasses


@dataclasses.dataclass(frozen=True, slots=True)
class EncodingInfo:
    """A registry entry.

    :param name: The registry's preferred spelling of the encoding.
    :param aliases: Other spellings that refer to the same encoding.
    :param python_codec: Codec name for :meth:`bytes.decode`, or ``None``
        for a nominal encoding Python cannot convert from.
    """

    name: str
    aliases: tuple[str, ...]
    python_codec: str | None

    @property
    def is_nominal(self) -> bool:
        """Whether the encoding is recognized but not convertible."""
        return self.python_codec is None

    @property
    def names(self) -> tuple[str, ...]:
        """The registry name followed by every alias."""
        return (self.name, *self.aliases)


def _iso_8859(part: int) -> EncodingInfo:
    codec = "latin-1" if part == 1 else f"iso8859-{part}"
    return EncodingInfo(f"ISO-8859-{part}", (f"ISO8859-{part}",), codec)


def _windows(codepage: int) -> EncodingInfo:
    return EncodingInfo(f"Windows-{codepage}", (f"CP{codepage}",), f"cp{codepage}")


REGISTRY: tuple[EncodingInfo, ...] = (
    # Unicode
    EncodingInfo("UTF-8", ("CP65001",), "utf-8"),
    EncodingInfo("UTF8-MAC", ("UTF-8-MAC", "UTF-8-HFS"), "utf-8"),
    EncodingInfo("UTF-16", (), "utf-16"),
    EncodingInfo("UTF-16BE", ("UCS-2BE",), "utf-16-be"),
    EncodingInfo("UTF-16LE", (), "utf-16-le"),
    EncodingInfo("UTF-32", (), "utf-32"),
    EncodingInfo("UTF-32BE", ("UCS-4BE",), "utf-32-be"),
    EncodingInfo("UTF-32LE", ("UCS-4LE",), "utf-32-le"),
    EncodingInfo("UTF-7", ("CP65000",), "utf-7"),
    EncodingInfo("CESU-8", (), None),
    # ASCII and raw bytes
    EncodingInfo("US-ASCII", ("ASCII", "ANSI_X3.4-1968", "646"), "ascii"),
    EncodingInfo("ASCII-8BIT", ("BINARY",), None),
    # ISO-8859 family (there is no part 12)
    *(_iso_8859(part) for part in (1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 13, 14, 15, 16)),
    # Windows code pages
    *(_windows(codepage) for codepage in range(1250, 1259)),
    EncodingInfo("Windows-874", ("CP874",), "cp874"),
    EncodingInfo("TIS-620", (), "tis-620"),
    # Cyrillic
    EncodingInfo("KOI8-R", ("CP878",), "koi8-r"),
    EncodingInfo("KOI8-U", (), "koi8-u"),
    # Japanese
    EncodingInfo("Shift_JIS", (), "shift_jis"),
    EncodingInfo("Windows-31J", ("CP932", "csWindows31J", "SJIS", "PCK"), "cp932"),
    EncodingInfo("EUC-JP", ("eucJP",), "euc_jp"),
    EncodingInfo("EUC-JIS-2004", ("EUC-JISX0213",), "euc_jis_2004"),
    EncodingInfo("ISO-2022-JP", ("ISO2022-JP",), "iso2022_jp"),
    EncodingInfo("ISO-2022-JP-2", ("ISO2022-JP2",), "iso2022_jp_2"),
    EncodingInfo("eucJP-ms", ("euc-jp-ms",), None),
    EncodingInfo("CP51932", (), None),
    EncodingInfo("CP50220", (), None),
    EncodingInfo("CP50221", (), None),
    EncodingInfo("stateless-ISO-2022-JP", (), None),
    EncodingInfo("MacJapanese", ("MacJapan",), None),
    # Chinese
    EncodingInfo("GB18030", (), "gb18030"),
    EncodingInfo("GBK", ("CP936",), "gbk"),
    EncodingInfo("GB2312", ("EUC-CN", "eucCN"), "gb2312"),
    EncodingInfo("HZ-GB-2312", (), "hz"),
    EncodingInfo("GB12345", (), None),
    EncodingInfo("Big5", ("CP950",), "big5"),
    EncodingInfo("Big5-HKSCS", ("Big5-HKSCS:2008",), "big5hkscs"),
    EncodingInfo("Big5-UAO", (), None),
    EncodingInfo("EUC-TW", ("eucTW",), None),
    # Korean
    EncodingInfo("EUC-KR", ("eucKR",), "euc_kr"),
    EncodingInfo("CP949", (), "cp949"),
    EncodingInfo("ISO-2022-KR", (), "iso2022_kr"),
    # DOS and mainframe code pages
    EncodingInfo("IBM437", ("CP437",), "cp437"),
    EncodingInfo("IBM737", ("CP737",), "cp737"),
    EncodingInfo("IBM775", ("CP775",), "cp775"),
    EncodingInfo("CP850", ("IBM850",), "cp850"),
    EncodingInfo("IBM852", ("CP852",), "cp852"),
    EncodingInfo("CP855", ("IBM855",), "cp855"),
    EncodingInfo("IBM857", ("CP857",), "cp857"),
    EncodingInfo("IBM860", ("CP860",), "cp860"),
    EncodingInfo("IBM861", ("CP861",), "cp861"),
    EncodingInfo("IBM862", ("CP862",), "cp862"),
    EncodingInfo("IBM863", ("CP863",), "cp863"),
    EncodingInfo("IBM864", ("CP864",), "cp864"),
    EncodingInfo("IBM865", ("CP865",), "cp865"),
    EncodingInfo("IBM866", ("CP866",), "cp866"),
    EncodingInfo("IBM869", ("CP869",), "cp869"),
    EncodingInfo("IBM037", ("ebcdic-cp-us",), "cp037"),
    # Macintosh
    EncodingInfo("macRoman", ("MACINTOSH", "X-MAC-ROMAN"), "mac_roman"),
    EncodingInfo("macCyrillic", ("X-MAC-CYRILLIC",), "mac_cyrillic"),
    EncodingInfo("macGreek", (), "mac_greek"),
    EncodingInfo("macIceland", (), "mac_iceland"),
    EncodingInfo("macTurkish", (), "mac_turkish"),
    EncodingInfo("macCroatian", (), "mac_croatian"),
    EncodingInfo("macRomania", (), "mac_romanian"),
    EncodingInfo("macCentEuro", (), None),
    EncodingInfo("macThai", (), None),
    EncodingInfo("macUkraine", (), None),
    # Other
    EncodingInfo("Emacs-Mule", (), None),
)

_BY_NAME: dict[str, EncodingInfo] = {
    alias.upper(): info for info in REGISTRY for alias in info.names
}


def _lookup_codec(name: str) -> EncodingInfo | None:
    """Synthesize an entry for a name only Python's codec registry knows.

    Codecs that are not text encodings (``rot13``, ``base64``) are rejected,
    since they cannot decode a document.
    """
    try:
        codec = codecs.lookup(name)
        b"".decode(codec.name)
    except (LookupError, UnicodeError, ValueError):
        return None
    return EncodingInfo(name, (), codec.name)


def lookup(name: str | None) -> EncodingInfo | None:
    """Return the entry for *name*, ignoring case.

    Names in :data:`REGISTRY` are matched first; anything else is looked up
    in Python's codec registry, so labels such as ``latin2`` or ``koi8_r``
    resolve to a synthesized entry.  Surrounding whitespace is ignored.
    Returns ``None`` for unknown names and for anything that is not a string.
    """
    if not isinstance(name, str) or not name.strip():
        return None
    name = name.strip()
    info = _BY_NAME.get(name.upper())
    if info is not None:
        return info
    return _lookup_codec(name)
