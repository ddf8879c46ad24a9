"""A small printf supporting the conversions %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import operator
from typing import Any, Optional, TextIO

from so_long.libft.output import put_str

_HEX_LOWER = "0123456789abcdef"
_HEX_UPPER = "0123456789ABCDEF"
_UINT_MASK = 0xFFFFFFFF
_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def num_count(n: int) -> int:
    """Number of decimal digits in n, not counting a minus sign."""
    value = abs(operator.index(n))
    count = 1
    while value >= 10:
        value //= 10
        count += 1
    return count


def to_base(value: int, digits: str) -> str:
    """Render a non-negative integer using the given digit alphabet.

    The base is the length of digits. Zero is always rendered as "0".
    """
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"value must not be negative, got {value}")
    if len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    if value == 0:
        return "0"
    base = len(digits)
    out = []
    while value > 0:
        value, remainder = divmod(value, base)
        out.append(digits[remainder])
    return "".join(reversed(out))


def format_pointer(p: Optional[int]) -> str:
    """Render an address as 0x followed by lower-case hex; null gives (nil)."""
    if not p:
        return _NULL_POINTER
    return "0x" + to_base(p, _HEX_LOWER)


def _format_char(arg: Any) -> str:
    if isinstance(arg, str):
        if len(arg) != 1:
            raise ValueError(f"%c expects a single character, got {arg!r}")
        return arg
    return chr(operator.index(arg) & 0xFF)


def _convert(spec: str, arg: Any) -> str:
    if spec in ("d", "i"):
        return str(operator.index(arg))
    if spec == "u":
        return str(operator.index(arg) & _UINT_MASK)
    if spec == "c":
        return _format_char(arg)
    if spec == "s":
        return _NULL_STRING if arg is None else str(arg)
    if spec == "x":
        return to_base(operator.index(arg) & _UINT_MASK, _HEX_LOWER)
    if spec == "X":
        return to_base(operator.index(arg) & _UINT_MASK, _HEX_UPPER)
    if spec == "p":
        return format_pointer(None if arg is None else operator.index(arg))
    raise AssertionError(spec)


_TAKES_ARGUMENT = frozenset("diucsxXp")


def sprintf(template: str, *args: Any) -> str:
    """Return template with its conversions replaced by args.

    An unknown conversion character is dropped without consuming an
    argument, as is a lone trailing percent sign. Extra arguments are
    ignored; too few raise TypeError.
    """
    pieces = []
    remaining = iter(args)
    chars = iter(template)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, "")
        if spec == "%":
            pieces.append("%")
        elif spec in _TAKES_ARGUMENT:
            try:
                arg = next(remaining)
            except StopIteration:
                raise TypeError(f"not enough arguments for format {template!r}") from None
            pieces.append(_convert(spec, arg))
    return "".join(pieces)


def printf(template: str, *args: Any, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to stream (standard output by default).

    Returns the number of characters written.
    """
    text = sprintf(template, *args)
    put_str(text, stream)
    return len(text)