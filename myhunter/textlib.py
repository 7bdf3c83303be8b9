"""Small text helpers: leading-integer parsing, word splitting and output."""

from __future__ import annotations

import sys
from collections.abc import Iterable
from itertools import groupby
from typing import TextIO


def parse_leading_int(text: str) -> int:
    """Return the value of the decimal digits at the start of ``text``.

    Parsing stops at the first character that is not a digit; no sign is
    recognised, so text that does not start with a digit gives 0.
    """
    value = 0
    for char in text:
        if not "0" <= char <= "9":
            break
        value = value * 10 + (ord(char) - ord("0"))
    return value


def split_words(text: str, delims: str) -> list[str]:
    """Split ``text`` into the non-empty runs of characters not in ``delims``."""
    return [
        "".join(run)
        for is_delim, run in groupby(text, key=lambda char: char in delims)
        if not is_delim
    ]


def write_words(words: Iterable[str], stream: TextIO | None = None) -> None:
    """Write each word on its own line to ``stream`` (standard output by default)."""
    out = stream if stream is not None else sys.stdout
    for word in words:
        out.write(word)
        out.write("\n")


def write_error(message: str, stream: TextIO | None = None) -> None:
    """Write ``message`` as is to ``stream`` (standard error by default)."""
    out = stream if stream is not None else sys.stderr
    out.write(message)