"""Small text helpers shared by the scene parser."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable

INT_MAX = 2147483647
INT_MIN = -2147483648

_C_WHITESPACE = " \t\n\v\f\r"
_PLAYER_CHARS = frozenset("NSEW")


class CubError(Exception):
    """Raised when a scene file or its contents cannot be used."""

    def __init__(self, message: str = "Error") -> None:
        super().__init__(message or "Error")

    @property
    def message(self) -> str:
        return str(self.args[0])


def atoi_safe(text: str) -> int:
    """Convert text to a 32-bit signed integer, strictly.

    Leading whitespace and one sign are allowed; after that only digits,
    at least one of them, up to the end of the string. Values outside the
    32-bit signed range are rejected. Raises ValueError on any failure.
    """
    rest = text.lstrip(_C_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = ""
    for char in rest:
        if not "0" <= char <= "9":
            break
        digits += char
        value = int(digits)
        if (sign == 1 and value > INT_MAX) or (sign == -1 and -value < INT_MIN):
            raise ValueError(f"integer out of range: {text!r}")
    if not digits or len(digits) != len(rest):
        raise ValueError(f"not a valid integer: {text!r}")
    return sign * int(digits)


def split_with_sep(text: str, sep: str) -> list[str]:
    """Split text on sep, keeping every separator as a token of its own."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [part for part in re.split(f"({re.escape(sep)})", text) if part]


def split_words(text: str, sep: str) -> list[str]:
    """Split text on sep, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [part for part in text.split(sep) if part]


def is_line_empty(line: str | None) -> bool:
    """True when the line is missing or holds only spaces and newlines."""
    if line is None:
        return True
    return all(char in " \n" for char in line)


def max_len(rows: Iterable[str]) -> int:
    """Length of the longest row, or 0 when there are none."""
    return max((len(row) for row in rows), default=0)


def is_player_char(char: str) -> bool:
    """True for one of the player start markers N, S, E or W."""
    return char in _PLAYER_CHARS


def check_extension(path: str, ext: str) -> bool:
    """True when path is longer than four characters and ends with ext."""
    return len(path) > 4 and path.endswith(ext)


def is_readable_file(path: str | os.PathLike[str]) -> bool:
    """True when path exists and can be read."""
    return os.access(path, os.F_OK) and os.access(path, os.R_OK)