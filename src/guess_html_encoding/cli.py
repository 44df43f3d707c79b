"""Command-line interface for guess_html_encoding."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import guess_html_encoding
from guess_html_encoding._utils import DEFAULT_SCAN_LIMIT

_PROG = "guess-html-encoding"


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        number = 0
    if number < 1:
        msg = f"invalid positive integer: {value!r}"
        raise argparse.ArgumentTypeError(msg)
    return number


def _report(
    label: str, data: bytes, args: argparse.Namespace, headers: str | None
) -> None:
    if args.encode:
        encoded = guess_html_encoding.encode(
            data, headers, scan_limit=args.scan_limit
        )
        sys.stdout.buffer.write(encoded.content)
        sys.stdout.buffer.flush()
        return
    result = guess_html_encoding.guess_details(
        data, headers, scan_limit=args.scan_limit
    )
    if args.minimal:
        print(result.encoding)
    else:
        print(f"{label}: {result.encoding} (from {result.source.value})")


def main(argv: list[str] | None = None) -> None:
    """Run the ``guess-html-encoding`` command-line tool.

    :param argv: Command-line arguments.  Defaults to ``sys.argv[1:]``.
    """
    parser = argparse.ArgumentParser(
        prog=_PROG,
        description="Guess the character encoding of HTML documents.",
    )
    parser.add_argument("files", nargs="*", help="HTML files to examine")
    parser.add_argument(
        "-H",
        "--header",
        action="append",
        default=[],
        metavar="'NAME: VALUE'",
        help="HTTP response header to take into account (repeatable)",
    )
    parser.add_argument(
        "--minimal", action="store_true", help="Output only the encoding name"
    )
    parser.add_argument(
        "--encode",
        action="store_true",
        help="Write the document re-encoded as UTF-8 to stdout",
    )
    parser.add_argument(
        "--scan-limit",
        type=_positive_int,
        default=DEFAULT_SCAN_LIMIT,
        help="Number of leading bytes searched for <meta> tags",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log how the guess was made"
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"{_PROG} {guess_html_encoding.__version__}",
    )

    args = parser.parse_args(argv)

    if args.encode and len(args.files) > 1:
        parser.error("--encode accepts at most one file")

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(name)s: %(message)s", stream=sys.stderr
        )

    headers = "\n".join(args.header) or None

    if not args.files:
        _report("stdin", sys.stdin.buffer.read(), args, headers)
        return

    failed = False
    for filepath in args.files:
        try:
            data = Path(filepath).read_bytes()
        except OSError as e:
            print(f"{_PROG}: {filepath}: {e}", file=sys.stderr)
            failed = True
            continue
        _report(filepath, data, args, headers)

    if failed:
        sys.exit(1)


if __name__ == "__main__":
    main()
