"""Reading scene files line by line."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import IO, AnyStr

from .textutil import CubError, is_readable_file

BUFFER_SIZE = 42


def iter_lines(stream: IO[AnyStr], buffer_size: int = BUFFER_SIZE) -> Iterator[AnyStr]:
    """Yield the lines of a text or binary stream, newlines included.

    The stream is read in chunks of buffer_size. A final line without a
    newline is yielded as is; an empty tail yields nothing.
    """
    if buffer_size <= 0:
        raise ValueError("buffer_size must be positive")
    pending = None
    while True:
        chunk = stream.read(buffer_size)
        if not chunk:
            break
        pending = chunk if pending is None else pending + chunk
        newline = b"\n" if isinstance(pending, bytes) else "\n"
        while (cut := pending.find(newline)) != -1:
            yield pending[: cut + 1]
            pending = pending[cut + 1 :]
    if pending:
        yield pending


def sanitize_line(line: str) -> str:
    """Return the line with every newline character removed."""
    return line.replace("\n", "")


def read_map_file(path: str | os.PathLike[str]) -> list[str]:
    """Read a scene file into a list of lines without newlines.

    Raises CubError when the file cannot be read or holds no lines.
    """
    if not is_readable_file(path):
        raise CubError("Error: Failed to get map")
    try:
        with open(path, encoding="utf-8", newline="") as stream:
            lines = [sanitize_line(line) for line in iter_lines(stream)]
    except (OSError, UnicodeDecodeError) as exc:
        raise CubError("Error: Failed to get map") from exc
    if not lines:
        raise CubError("Error: Failed to get map")
    return lines