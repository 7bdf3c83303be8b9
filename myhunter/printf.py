"""A small printf-style formatter supporting c, s, d, i, u, o, x, X, b, p and %."""

from __future__ import annotations

import operator
import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

_DECIMAL = "0123456789"
_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_OCTAL = "01234567"
_BINARY = "01"

_INT_BITS = 32
_POINTER_BITS = 64


def to_base(number: int, base: int, digits: str) -> str:
    """Write ``number`` in ``base`` using ``digits``, with a leading '-' if negative."""
    number = operator.index(number)
    if base < 2 or base > len(digits):
        raise ValueError(f"base {base} is not usable with {len(digits)} digits")
    if number < 0:
        return "-" + to_base(-number, base, digits)
    out: list[str] = []
    while True:
        number, remainder = divmod(number, base)
        out.append(digits[remainder])
        if number == 0:
            break
    return "".join(reversed(out))


def _as_int(value: Any) -> int:
    """Reduce an integer to the range of a 32-bit signed int."""
    span = 1 << _INT_BITS
    half = span >> 1
    return (operator.index(value) + half) % span - half


def _as_unsigned(value: Any) -> int:
    return operator.index(value) % (1 << _INT_BITS)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c expects a single character")
        return value
    return chr(operator.index(value) % 256)


def _format_str(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise TypeError("%s expects a string")
    return value


def _format_pointer(value: Any) -> str:
    address = value if isinstance(value, int) else id(value)
    return "0x" + to_base(address % (1 << _POINTER_BITS), 16, _HEX_LOWER)


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "c": _format_char,
    "s": _format_str,
    "d": lambda value: to_base(_as_int(value), 10, _DECIMAL),
    "i": lambda value: to_base(_as_int(value), 10, _DECIMAL),
    "u": lambda value: to_base(_as_unsigned(value), 10, _DECIMAL),
    "o": lambda value: to_base(_as_int(value), 8, _OCTAL),
    "x": lambda value: to_base(_as_int(value), 16, _HEX_LOWER),
    "X": lambda value: to_base(_as_int(value), 16, _HEX_UPPER),
    "b": lambda value: to_base(_as_int(value), 2, _BINARY),
    "p": _format_pointer,
}


def _next_arg(args: Iterator[Any], spec: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise ValueError(f"not enough arguments for %{spec}") from None


def format_printf(fmt: str, *args: Any) -> str:
    """Expand ``fmt`` with ``args``.

    A '%' followed by a character that is not a known conversion is dropped
    and the character is kept as text; a '%' at the very end is dropped.
    Extra arguments are ignored.
    """
    remaining = iter(args)
    chars = iter(fmt)
    out: list[str] = []
    for char in chars:
        if char != "%":
            out.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            out.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            out.append(spec)
            continue
        out.append(convert(_next_arg(remaining, spec)))
    return "".join(out)


def print_formatted(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expansion of ``fmt`` to ``stream`` (stdout by default); return its length."""
    text = format_printf(fmt, *args)
    out = stream if stream is not None else sys.stdout
    out.write(text)
    return len(text)