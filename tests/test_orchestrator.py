from __future__ import annotations

import logging

import pytest

from guess_html_encoding.enums import SignalSource
from guess_html_encoding.pipeline.orchestrator import guess_details, run_pipeline

_META_UTF8 = b'<html><head><meta charset="utf8"></head><body>hi</body></html>'


def test_header_wins_over_meta():
    result = run_pipeline(_META_UTF8, "Content-Type: text/html; charset=gbk")
    assert result.encoding == "GBK"
    assert result.source is SignalSource.HEADER
    assert result.header_charset == "gbk"
    assert result.meta_charset is None


def test_invalid_header_falls_through_to_meta():
    result = run_pipeline(_META_UTF8, "Content-Type: text/html; charset=RU;")
    assert result.encoding == "UTF-8"
    assert result.source is SignalSource.META
    assert result.header_charset == "RU"
    assert result.meta_charset == "utf8"


def test_invalid_header_and_no_meta_uses_default():
    result = run_pipeline(b"<html></html>", {"Content-Type": "text/html; charset=RU"})
    assert result.encoding == "UTF-8"
    assert result.source is SignalSource.DEFAULT
    assert result.header_charset == "RU"


def test_invalid_meta_uses_default():
    result = run_pipeline(b'<meta charset="bogus">', default="WINDOWS-1252")
    assert result.encoding == "WINDOWS-1252"
    assert result.source is SignalSource.DEFAULT
    assert result.meta_charset == "bogus"


def test_empty_document_uses_default_even_with_headers():
    result = run_pipeline(b"", "Content-Type: text/html; charset=gbk")
    assert result.encoding == "UTF-8"
    assert result.source is SignalSource.DEFAULT


def test_custom_default():
    assert guess_details(b"<p>plain</p>", default="ISO-8859-1").encoding == "ISO-8859-1"


@pytest.mark.parametrize("scan_limit", [0, -1, 1.5, True, "10"])
def test_invalid_scan_limit_raises(scan_limit):
    with pytest.raises(ValueError, match="scan_limit"):
        guess_details(b"<p></p>", scan_limit=scan_limit)


@pytest.mark.parametrize("default", ["", "  ", None, "bogus", "RU"])
def test_invalid_default_raises(default):
    with pytest.raises(ValueError, match="default"):
        guess_details(b"<p></p>", default=default)


@pytest.mark.parametrize("document", [12345, 1.5, object(), ["<meta charset=gbk>"]])
def test_unsupported_document_type_is_treated_as_absent(document):
    result = guess_details(document, "Content-Type: text/html; charset=gbk")
    assert result.encoding == "UTF-8"
    assert result.source is SignalSource.DEFAULT


@pytest.mark.parametrize(
    ("default", "expected"),
    [
        ("gbk", "GBK"),
        ("utf8", "UTF-8"),
        ("latin2", "LATIN2"),
        (" windows-1252 ", "WINDOWS-1252"),
    ],
)
def test_default_is_normalized(default, expected):
    assert guess_details(b"<p>plain</p>", default=default).encoding == expected
    assert guess_details(None, default=default).encoding == expected


def test_discarded_header_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="guess_html_encoding"):
        run_pipeline(_META_UTF8, "Content-Type: text/html; charset=RU")
    assert "discarding unrecognized header charset 'RU'" in caplog.text
