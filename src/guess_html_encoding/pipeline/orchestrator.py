"""Pipeline orchestrator — combines the header and meta signals."""

from __future__ import annotations

import logging

from guess_html_encoding._utils import (
    DEFAULT_ENCODING,
    DEFAULT_SCAN_LIMIT,
    REFERENCE_ENCODING,
    _coerce_document,
    _validate_scan_limit,
)
from guess_html_encoding.aliases import resolve
from guess_html_encoding.enums import SignalSource
from guess_html_encoding.pipeline import EncodedDocument, GuessResult
from guess_html_encoding.pipeline.headers import HeaderSource, extract_header_charset
from guess_html_encoding.pipeline.markup import extract_meta_charset
from guess_html_encoding.pipeline.transcode import transcode

logger = logging.getLogger(__name__)


def _resolve_default(default: str) -> str:
    """Return *default* normalized like a declared charset.

    :raises ValueError: If *default* is not a known encoding name.
    """
    encoding = resolve(default)
    if encoding is None:
        msg = f"default must be a known encoding name, not {default!r}"
        raise ValueError(msg)
    return encoding


def run_pipeline(
    data: bytes,
    headers: HeaderSource = None,
    default: str = DEFAULT_ENCODING,
    scan_limit: int = DEFAULT_SCAN_LIMIT,
) -> GuessResult:
    """Run the guess stages over already-validated arguments.

    A header charset wins when it resolves to a known encoding.  Otherwise
    the first ``<meta>`` declaration is used, and failing that *default*.
    """
    if not data:
        return GuessResult(encoding=default, source=SignalSource.DEFAULT)

    header_charset = extract_header_charset(headers)
    if header_charset is not None:
        encoding = resolve(header_charset)
        if encoding is not None:
            logger.debug("using header charset %r as %s", header_charset, encoding)
            return GuessResult(
                encoding=encoding,
                source=SignalSource.HEADER,
                header_charset=header_charset,
            )
        logger.debug("discarding unrecognized header charset %r", header_charset)

    meta_charset = extract_meta_charset(data, scan_limit)
    if meta_charset is not None:
        encoding = resolve(meta_charset)
        if encoding is not None:
            logger.debug("using meta charset %r as %s", meta_charset, encoding)
            return GuessResult(
                encoding=encoding,
                source=SignalSource.META,
                header_charset=header_charset,
                meta_charset=meta_charset,
            )
        logger.debug("discarding unrecognized meta charset %r", meta_charset)

    logger.debug("no usable charset declaration; falling back to %s", default)
    return GuessResult(
        encoding=default,
        source=SignalSource.DEFAULT,
        header_charset=header_charset,
        meta_charset=meta_charset,
    )


def guess_details(
    document: bytes | bytearray | memoryview | str | None,
    headers: HeaderSource = None,
    *,
    default: str = DEFAULT_ENCODING,
    scan_limit: int = DEFAULT_SCAN_LIMIT,
) -> GuessResult:
    """Guess the encoding of *document* and report which signal decided it.

    :param document: The raw HTML bytes.  ``None`` and ``b""`` are accepted.
    :param headers: ``None``, a ``"Name: Value"`` header blob, or a mapping
        of header names to values.
    :param default: Encoding to report when nothing usable is declared.
    :param scan_limit: Number of leading bytes searched for ``<meta>`` tags.
    :raises ValueError: If *default* or *scan_limit* is invalid.
    """
    default = _resolve_default(default)
    _validate_scan_limit(scan_limit)
    data = _coerce_document(document)
    return run_pipeline(data, headers, default=default, scan_limit=scan_limit)


def guess(
    document: bytes | bytearray | memoryview | str | None,
    headers: HeaderSource = None,
    *,
    default: str = DEFAULT_ENCODING,
    scan_limit: int = DEFAULT_SCAN_LIMIT,
) -> str:
    """Guess the encoding of an HTML document from its declarations.

    The ``Content-Type`` header is trusted first, as long as its charset
    names a known encoding; an unknown header charset is ignored in favour
    of a ``<meta>`` declaration inside the document.  Charset spellings are
    normalized through the alias table, so ``utf8`` becomes ``"UTF-8"`` and
    ``GB2312`` becomes ``"GB18030"``.

    :returns: An uppercased encoding name, or *default* if neither signal
        declares a known encoding.
    """
    return guess_details(
        document, headers, default=default, scan_limit=scan_limit
    ).encoding


def encode(
    document: bytes | bytearray | memoryview | str | None,
    headers: HeaderSource = None,
    *,
    default: str = DEFAULT_ENCODING,
    scan_limit: int = DEFAULT_SCAN_LIMIT,
) -> EncodedDocument:
    """Re-encode *document* as UTF-8 using the encoding from :func:`guess`.

    Never fails on bad data: invalid byte sequences are replaced, and an
    encoding that cannot be converted leaves the bytes untouched but
    relabeled as UTF-8.  Check :attr:`EncodedDocument.valid` and
    :attr:`EncodedDocument.relabeled` if that matters to you.
    """
    default = _resolve_default(default)
    _validate_scan_limit(scan_limit)
    data = _coerce_document(document)
    result = run_pipeline(data, headers, default=default, scan_limit=scan_limit)
    encoding = result.encoding
    if not data:
        return EncodedDocument(
            content=b"",
            encoding=REFERENCE_ENCODING,
            source_encoding=encoding,
            valid=True,
        )
    return transcode(data, encoding)
