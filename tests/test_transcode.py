from __future__ import annotations

from guess_html_encoding.pipeline.transcode import transcode


def test_utf8_passes_through():
    data = "<div>hi!♥</div>".encode()
    doc = transcode(data, "UTF-8")
    assert doc.content == data
    assert doc.encoding == "UTF-8"
    assert doc.source_encoding == "UTF-8"
    assert doc.valid is True
    assert doc.relabeled is False


def test_legacy_encoding_is_converted():
    doc = transcode("Größe".encode("windows-1252"), "WINDOWS-1252")
    assert doc.content == "Größe".encode()
    assert doc.valid is True


def test_invalid_bytes_are_replaced():
    doc = transcode(b"hi!\xc2</div>", "UTF-8")
    assert doc.encoding == "UTF-8"
    assert doc.valid is False
    assert doc.relabeled is False
    assert doc.content == "hi!�</div>".encode()
    doc.content.decode("utf-8")


def test_nominal_encoding_is_relabeled():
    data = b"<div>hi!\xa4\xa1</div>"
    doc = transcode(data, "EUC-TW")
    assert doc.content == data
    assert doc.encoding == "UTF-8"
    assert doc.source_encoding == "EUC-TW"
    assert doc.relabeled is True
    assert doc.valid is False


def test_relabeled_ascii_is_valid():
    doc = transcode(b"<div>hi!</div>", "MACTHAI")
    assert doc.relabeled is True
    assert doc.valid is True


def test_unknown_encoding_is_relabeled():
    doc = transcode(b"hi", "NOT-A-CHARSET")
    assert doc.content == b"hi"
    assert doc.relabeled is True


def test_utf16_is_converted():
    doc = transcode("hi ♥".encode("utf-16"), "UTF-16")
    assert doc.content == "hi ♥".encode()
