"""String helpers with the semantics of the classic C string routines.

Positions are returned as indices instead of pointers, and ``None`` stands
for "not found". Functions that filled a destination buffer return the
resulting text instead.
"""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from typing import Optional, Union

CharLike = Union[int, str]

_NUL = "\0"


def _char(c: CharLike) -> str:
    """Return c as a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected an int or a single character, got {type(c).__name__}")
    return chr(c)


def strlen(s: str) -> int:
    """Number of characters in s."""
    return len(s)


def strrlen(s: str) -> int:
    """Number of characters in s, counted one by one."""
    return sum(1 for _ in s)


def strchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the first c in s.

    Searching for the NUL character finds the end of the string, so it
    returns len(s). Returns None when c does not occur.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: CharLike) -> Optional[int]:
    """Index of the last c in s; the NUL character gives len(s)."""
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strdup(s: str) -> str:
    """A copy of s."""
    return "".join(s)


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy at most size - 1 characters of src.

    Returns the copied text and the full length of src, which lets the
    caller detect truncation.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst so the result fits a buffer of size characters.

    Returns the resulting text and the length the caller would have needed:
    len(dst) + len(src), or len(src) + size when dst already fills the
    buffer, in which case dst is returned unchanged.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    dst_len = len(dst)
    src_len = len(src)
    if size <= dst_len:
        return dst, src_len + size
    room = size - 1 - dst_len
    return dst + src[:room], dst_len + src_len


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters.

    Returns 0 when they match, otherwise the difference between the code
    points of the first differing pair, where the end of a string counts
    as code point 0.
    """
    for i in range(max(n, 0)):
        a = ord(s1[i]) if i < len(s1) else 0
        b = ord(s2[i]) if i < len(s2) else 0
        if a != b or a == 0:
            return a - b
    return 0


def strnstr(big: str, little: str, length: int) -> Optional[int]:
    """Index of the first little in big that lies within the first length characters.

    An empty little is found at 0. Returns None when there is no match.
    """
    if not little:
        return 0
    little_len = len(little)
    limit = min(len(big), length - little_len + 1)
    for i in range(max(limit, 0)):
        if big.startswith(little, i):
            return i
    return None


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    return s[start : start + length]


def strjoin(s1: str, s2: str) -> str:
    """s1 followed by s2."""
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """s without the characters of charset at either end."""
    if not charset:
        return strdup(s)
    return s.strip(charset)


def split(s: str, c: CharLike) -> list[str]:
    """Words of s separated by runs of c; empty words are dropped."""
    sep = _char(c)
    if sep == _NUL:
        return [s] if s else []
    return [word for word in s.split(sep) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """A new string of f(index, char) for every character of s."""
    return "".join(f(i, ch) for i, ch in enumerate(s))


def striteri(s: MutableSequence, f: Callable[[int, object], object]) -> None:
    """Call f(index, item) for every item of s, in place.

    When f returns something other than None, that value replaces the item.
    s must be mutable, such as a list of characters or a bytearray.
    """
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence")
    for i, item in enumerate(list(s)):
        replacement = f(i, item)
        if replacement is not None:
            s[i] = replacement