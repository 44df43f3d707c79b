from __future__ import annotations

from email.message import Message

import pytest

from guess_html_encoding.pipeline.headers import (
    extract_charset_param,
    extract_header_charset,
    find_content_type,
)


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("text/html; charset=LATIN1", "LATIN1"),
        ("text/html; charset=utf-8;", "utf-8"),
        ("text/html; CHARSET=utf-8", "utf-8"),
        ("text/html; charset = gbk ; foo=bar", "gbk"),
        ('text/html; charset="utf-8"', "utf-8"),
        ("text/html; charset='koi8-r'", "koi8-r"),
        ("charset=utf-8", "utf-8"),
    ],
)
def test_extract_charset_param(value, expected):
    assert extract_charset_param(value) == expected


@pytest.mark.parametrize(
    "value", ["text/html", "text/html; charset=", "text/html; charset=;", "x-charset=utf-8"]
)
def test_extract_charset_param_without_charset(value):
    assert extract_charset_param(value) is None


def test_blob_headers():
    headers = "Hello: world\nContent-Type: text/html; charset=LATIN1\nFoo: bar"
    assert extract_header_charset(headers) == "LATIN1"


def test_blob_headers_with_crlf():
    headers = "HTTP/1.1 200 OK\r\nContent-Type: text/html; charset=utf-8\r\n\r\n"
    assert extract_header_charset(headers) == "utf-8"


def test_bytes_blob_headers():
    headers = b"Server: x\nContent-Type: text/html; charset=GB2312\n"
    assert extract_header_charset(headers) == "GB2312"


def test_mapping_headers():
    headers = {"Hello": "world", "Content-Type": "text/html; charset=LATIN1", "Foo": "bar"}
    assert extract_header_charset(headers) == "LATIN1"


def test_mapping_with_list_and_bytes_values():
    assert extract_header_charset({"Content-Type": ["text/html; charset=gbk"]}) == "gbk"
    assert extract_header_charset({"Content-Type": b"text/html; charset=gbk"}) == "gbk"
    assert extract_header_charset({"Content-Type": []}) is None


def test_http_message_headers():
    msg = Message()
    msg["Content-Type"] = "text/html; charset=ISO-8859-1"
    assert extract_header_charset(msg) == "ISO-8859-1"


def test_exact_case_content_type_is_preferred():
    headers = {
        "content-type": "text/html; charset=gbk",
        "Content-Type": "text/html; charset=utf-8",
    }
    assert find_content_type(headers) == "text/html; charset=utf-8"


def test_other_case_content_type_is_used_as_fallback():
    assert extract_header_charset({"content-type": "text/html; charset=gbk"}) == "gbk"
    assert extract_header_charset("CONTENT-TYPE: text/html; charset=gbk") == "gbk"


@pytest.mark.parametrize(
    "headers",
    [
        None,
        "",
        {},
        "Hello: world\nFoo: bar",
        {"Content-Type": "text/html"},
        "Content-Type text/html; charset=utf-8",
        42,
        {1: "text/html; charset=utf-8"},
    ],
)
def test_no_charset(headers):
    assert extract_header_charset(headers) is None
