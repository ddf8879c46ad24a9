"""Character classification and integer/text conversion helpers."""

from __future__ import annotations

from typing import Union

CharLike = Union[int, str]

_SPACES = frozenset(" \f\n\r\t\v")


def _code(c: CharLike) -> int:
    """Return the code point of a one-character string, or the int itself."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return c


def isalpha(c: CharLike) -> bool:
    """True for ASCII letters."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def isdigit(c: CharLike) -> bool:
    """True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def isalnum(c: CharLike) -> bool:
    """True for ASCII letters and digits."""
    return isalpha(c) or isdigit(c)


def isascii(c: CharLike) -> bool:
    """True for code points 0 to 127."""
    return 0 <= _code(c) <= 127


def isprint(c: CharLike) -> bool:
    """True for printable ASCII, space through tilde."""
    return ord(" ") <= _code(c) <= ord("~")


def toupper(c: CharLike) -> CharLike:
    """Upper-case an ASCII letter; anything else is returned unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code


def tolower(c: CharLike) -> CharLike:
    """Lower-case an ASCII letter; anything else is returned unchanged.

    The result has the same type as the argument.
    """
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading whitespace is skipped, one optional sign is accepted, and
    parsing stops at the first non-digit. Text without digits gives 0.
    """
    chars = iter(text)
    current = next(chars, "")
    while current and current in _SPACES:
        current = next(chars, "")
    sign = 1
    if current in ("-", "+"):
        if current == "-":
            sign = -1
        current = next(chars, "")
    result = 0
    while current and isdigit(current):
        result = result * 10 + (ord(current) - ord("0"))
        current = next(chars, "")
    return sign * result


def itoa(n: int) -> str:
    """Render an integer in decimal, with a leading minus when negative."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    digits = []
    value = -n if n < 0 else n
    while True:
        value, digit = divmod(value, 10)
        digits.append(chr(ord("0") + digit))
        if not value:
            break
    if n < 0:
        digits.append("-")
    return "".join(reversed(digits))