"""Reading a map file and checking that it describes a playable map."""

from __future__ import annotations

import os
from collections.abc import Sequence
from typing import Union

from so_long.libft.linereader import read_lines

READ_ERROR = "Error: Couldn't read the map."
INVALID_ERROR = "Error: Invalid map."


class MapError(Exception):
    """The map could not be read or is not valid."""


def read_map(path: Union[str, os.PathLike]) -> list[str]:
    """The lines of the map file at path, newlines kept."""
    try:
        with open(path, encoding="utf-8", newline="") as stream:
            return read_lines(stream)
    except (OSError, UnicodeDecodeError) as exc:
        raise MapError(READ_ERROR) from exc


def is_all_one(line: str) -> bool:
    """True when every character before the newline is a wall."""
    body = line.split("\n", 1)[0]
    return all(ch == "1" for ch in body)


def first_and_last_is_one(line: str) -> bool:
    """True when a row starts and ends with a wall, ignoring its newline."""
    body = line[:-1] if line.endswith("\n") else line
    return bool(body) and body[0] == "1" and body[-1] == "1"


def is_rectangular(lines: Sequence[str]) -> bool:
    """True when every line, newline included, is as long as the first."""
    if not lines:
        return False
    width = len(lines[0])
    return all(len(line) == width for line in lines[1:])


def _count_collectables(lines: Sequence[str]) -> int:
    players = sum(line.count("P") for line in lines)
    exits = sum(line.count("E") for line in lines)
    collectables = sum(line.count("C") for line in lines)
    if players != 1 or exits != 1 or collectables == 0:
        raise MapError(INVALID_ERROR)
    return collectables


def _walls_closed(lines: Sequence[str]) -> bool:
    if not is_all_one(lines[0]) or not is_all_one(lines[-1]):
        return False
    return all(first_and_last_is_one(line) for line in lines[1:-1])


def validate_map(lines: Sequence[str]) -> int:
    """Check a map and return how many collectables it holds.

    A valid map is rectangular, has exactly one player and one exit, at
    least one collectable, and is closed in by walls. Raises MapError
    otherwise.
    """
    if not is_rectangular(lines):
        raise MapError(INVALID_ERROR)
    collectables = _count_collectables(lines)
    if not _walls_closed(lines):
        raise MapError(INVALID_ERROR)
    return collectables