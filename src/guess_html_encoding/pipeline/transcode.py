"""Stage 4: re-encoding a document into the reference encoding."""

from __future__ import annotations

import logging

from guess_html_encoding._utils import REFERENCE_ENCODING
from guess_html_encoding.pipeline import EncodedDocument
from guess_html_encoding.registry import lookup

logger = logging.getLogger(__name__)


def _relabel(data: bytes, encoding: str) -> EncodedDocument:
    logger.debug(
        "cannot convert from %s; relabeling bytes as %s", encoding, REFERENCE_ENCODING
    )
    return EncodedDocument(
        content=data,
        encoding=REFERENCE_ENCODING,
        source_encoding=encoding,
        valid=_is_utf8(data),
        relabeled=True,
    )


def _is_utf8(data: bytes) -> bool:
    try:
        data.decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True


def transcode(data: bytes, encoding: str) -> EncodedDocument:
    """Convert *data* from *encoding* into UTF-8.

    Byte sequences that are invalid under *encoding* are replaced with
    U+FFFD and the result is flagged ``valid=False``.  When *encoding* is
    known to the registry but no Python codec can convert from it, the
    original bytes are returned relabeled as UTF-8.

    :param data: The raw document bytes.
    :param encoding: A registry-known encoding name, as returned by
        :func:`~guess_html_encoding.guess`.
    """
    info = lookup(encoding)
    if info is None or info.python_codec is None:
        return _relabel(data, encoding)

    try:
        text = data.decode(info.python_codec)
        valid = True
    except UnicodeDecodeError:
        logger.debug("document is not valid %s; replacing bad sequences", encoding)
        text = data.decode(info.python_codec, errors="replace")
        valid = False
    except LookupError:
        return _relabel(data, encoding)

    return EncodedDocument(
        content=text.encode("utf-8", errors="replace"),
        encoding=REFERENCE_ENCODING,
        source_encoding=encoding,
        valid=valid,
    )
