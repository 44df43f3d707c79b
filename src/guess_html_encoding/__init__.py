"""Guess the character encoding of HTML documents from their declarations."""

from __future__ import annotations

from guess_html_encoding.aliases import encoding_loaded
from guess_html_encoding.enums import SignalSource
from guess_html_encoding.pipeline import EncodedDocument, GuessResult
from guess_html_encoding.pipeline.orchestrator import encode, guess, guess_details

__version__ = "1.0.0"
__all__ = [
    "EncodedDocument",
    "GuessResult",
    "SignalSource",
    "encode",
    "encoding_loaded",
    "guess",
    "guess_details",
]
