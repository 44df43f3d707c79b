"""Enumerations for guess_html_encoding."""

import enum


class SignalSource(enum.Enum):
    """Where the encoding reported by ``guess()`` came from."""

    HEADER = "header"
    META = "meta"
    DEFAULT = "default"
