"""Normalisation and validation of the map grid."""

from __future__ import annotations

from collections.abc import Sequence

from .textutil import CubError, is_line_empty, is_player_char, max_len

MAX_MAP_SIZE = 100
_VALID_CHARS = frozenset("01NESW ")
_WALKABLE = frozenset("0NSEW")


class MapError(CubError):
    """Raised when the map part of a scene is invalid."""


def normalize_map(rows: Sequence[str]) -> list[str]:
    """Pad every row with spaces to the length of the longest row."""
    width = max_len(rows)
    return [row.ljust(width, " ") for row in rows]


def _is_valid_row(row: str) -> bool:
    return all(char in _VALID_CHARS for char in row) and (not row or not is_line_empty(row))


def validate_characters(rows: Sequence[str]) -> None:
    """Reject rows with unknown characters or holding only spaces."""
    if not all(_is_valid_row(row) for row in rows):
        raise MapError("Error: Invalid character in map")


def check_single_player(rows: Sequence[str]) -> None:
    """Require exactly one player start marker in the whole map."""
    count = sum(is_player_char(char) for row in rows for char in row)
    if count != 1:
        raise MapError("Error: Invalid number of player starts")


def _cell(rows: Sequence[str], y: int, x: int) -> str:
    if 0 <= y < len(rows) and 0 <= x < len(rows[y]):
        return rows[y][x]
    return " "


def _is_enclosed(rows: Sequence[str], y: int, x: int) -> bool:
    if rows[y][x] not in _WALKABLE:
        return True
    if y == 0 or x == 0 or y + 1 >= len(rows) or x + 1 >= len(rows[y]):
        return False
    neighbours = (
        _cell(rows, y - 1, x),
        _cell(rows, y + 1, x),
        _cell(rows, y, x - 1),
        _cell(rows, y, x + 1),
    )
    return " " not in neighbours


def check_enclosed(rows: Sequence[str]) -> None:
    """Require every floor or start cell to be surrounded by non-space cells."""
    for y, row in enumerate(rows):
        for x in range(len(row)):
            if not _is_enclosed(rows, y, x):
                raise MapError("Error: Invalid map is not closed")


def validate_map(rows: Sequence[str]) -> list[str]:
    """Run every map check and return the rows as a list."""
    if max_len(rows) > MAX_MAP_SIZE or len(rows) > MAX_MAP_SIZE:
        raise MapError("Error : Map too big")
    validate_characters(rows)
    check_single_player(rows)
    check_enclosed(rows)
    return list(rows)