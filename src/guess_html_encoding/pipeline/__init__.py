"""Signal extraction stages and shared result types."""

from __future__ import annotations

import dataclasses

from guess_html_encoding.enums import SignalSource


@dataclasses.dataclass(frozen=True, slots=True)
class GuessResult:
    """The outcome of a single ``guess_details()`` call.

    ``encoding`` is the name ``guess()`` would return.  The two raw tokens
    record what each signal declared before validation, so callers can see
    why a header charset was ignored.
    """

    encoding: str
    source: SignalSource
    header_charset: str | None = None
    meta_charset: str | None = None

    def to_dict(self) -> dict[str, str | None]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'encoding'``, ``'source'``,
            ``'header_charset'`` and ``'meta_charset'`` keys.
        """
        return {
            "encoding": self.encoding,
            "source": self.source.value,
            "header_charset": self.header_charset,
            "meta_charset": self.meta_charset,
        }


@dataclasses.dataclass(frozen=True, slots=True)
class EncodedDocument:
    """A document re-encoded into the reference encoding.

    :param content: The document bytes, in ``encoding``.
    :param encoding: Always the reference encoding, ``"UTF-8"``.
    :param source_encoding: The encoding the input was read as.
    :param valid: Whether the input decoded under ``source_encoding``
        without errors.  Invalid sequences are replaced with U+FFFD.
    :param relabeled: Whether ``content`` is the original bytes relabeled
        as UTF-8 because ``source_encoding`` could not be converted.
        Relabeled content is not guaranteed to be valid UTF-8.
    """

    content: bytes
    encoding: str
    source_encoding: str
    valid: bool
    relabeled: bool = False

    @property
    def text(self) -> str:
        """``content`` decoded as UTF-8, replacing anything undecodable."""
        return self.content.decode("utf-8", errors="replace")
