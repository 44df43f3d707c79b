"""Shared test fixtures."""

from __future__ import annotations

import pytest

_CHINESE = "这是一个用于测试的中文页面。䶮㐀𠀀"  # noqa: RUF001


@pytest.fixture
def plain_html() -> bytes:
    return b"<html><body><div>hi!</div></body></html>"


@pytest.fixture
def gb18030_html() -> bytes:
    """A page labeled GB2312 whose body needs GB18030 (characters outside GB2312)."""
    return (
        b"<html><head>"
        b'<meta http-equiv="Content-Type" content="text/html; charset=gb2312">'
        b"<title>"
        + _CHINESE.encode("gb18030")
        + b"</title></head><body>"
        + _CHINESE.encode("gb18030")
        + b"</body></html>"
    )


@pytest.fixture
def gb18030_text() -> str:
    return _CHINESE
