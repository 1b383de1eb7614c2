"""Parsing of the configuration header of a scene file."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .textutil import (
    CubError,
    atoi_safe,
    check_extension,
    is_line_empty,
    is_readable_file,
    split_with_sep,
    split_words,
)

Color = tuple[int, int, int]


class ConfigError(CubError):
    """Raised when the configuration header is invalid or incomplete."""


class ConfigKind(Enum):
    """The identifiers a configuration line may start with."""

    NO = "NO"
    SO = "SO"
    WE = "WE"
    EA = "EA"
    F = "F"
    C = "C"

    @property
    def is_texture(self) -> bool:
        return self in _TEXTURE_FIELDS

    @property
    def field(self) -> str:
        """Name of the SceneConfig attribute this identifier fills."""
        return _TEXTURE_FIELDS.get(self) or ("floor" if self is ConfigKind.F else "ceiling")


_TEXTURE_FIELDS = {
    ConfigKind.NO: "north",
    ConfigKind.SO: "south",
    ConfigKind.WE: "west",
    ConfigKind.EA: "east",
}


@dataclass
class SceneConfig:
    """Texture paths and colours read from a scene header."""

    north: str | None = None
    south: str | None = None
    west: str | None = None
    east: str | None = None
    floor: Color | None = None
    ceiling: Color | None = None
    map_start: int = 0

    def is_complete(self) -> bool:
        """True when all four textures and both colours are set."""
        textures = (self.north, self.south, self.west, self.east)
        return all(path is not None for path in textures) and (
            self.floor is not None and self.ceiling is not None
        )


def config_kind(line: str) -> ConfigKind | None:
    """Identify a configuration line, ignoring leading spaces."""
    stripped = line.lstrip(" ")
    for kind in ConfigKind:
        if stripped.startswith(kind.value + " "):
            return kind
    return None


def extract_value(line: str) -> str | None:
    """Return what follows the identifier of a line, or None if nothing does."""
    rest = line.lstrip(" ")
    cut = rest.find(" ")
    if cut == -1:
        return None
    value = rest[cut:].lstrip(" ")
    return value or None


def _invalid_color(text: str) -> ConfigError:
    return ConfigError(f"Error: Invalid color {text!r}")


def parse_color(text: str) -> Color:
    """Parse 'R,G,B' with each channel a plain decimal from 0 to 255."""
    if len(split_with_sep(text, ",")) != 5:
        raise _invalid_color(text)
    parts = split_words(text, ",")
    if len(parts) < 3:
        raise _invalid_color(text)
    channels = []
    for part in parts[:3]:
        trimmed = part.strip(" ")
        if not trimmed or not all("0" <= char <= "9" for char in trimmed):
            raise _invalid_color(text)
        try:
            value = atoi_safe(trimmed)
        except ValueError as exc:
            raise _invalid_color(text) from exc
        if not 0 <= value <= 255:
            raise _invalid_color(text)
        channels.append(value)
    return (channels[0], channels[1], channels[2])


def is_valid_texture_path(path: str | os.PathLike[str]) -> bool:
    """True when the file is readable and has the .xpm extension."""
    return is_readable_file(path) and check_extension(os.fspath(path), ".xpm")


def _apply(config: SceneConfig, kind: ConfigKind, line: str) -> None:
    value = extract_value(line)
    if value is None:
        raise ConfigError("Error: Missing configuration value")
    if kind.is_texture:
        if not is_valid_texture_path(value):
            raise ConfigError("Error: Invalid texture path")
        setattr(config, kind.field, value)
    else:
        setattr(config, kind.field, parse_color(value))


def parse_config(lines: Sequence[str]) -> SceneConfig:
    """Read the six configuration entries at the top of a scene.

    The returned config's map_start is the index of the first non-empty
    line after the header; it may equal len(lines) when no map follows.
    """
    config = SceneConfig()
    seen: set[ConfigKind] = set()
    for index, line in enumerate(lines):
        if len(seen) == len(ConfigKind):
            config.map_start = index
            break
        if is_line_empty(line):
            continue
        kind = config_kind(line)
        if kind is None or kind in seen:
            raise ConfigError("Error: Invalid configuration")
        seen.add(kind)
        try:
            _apply(config, kind, line)
        except ConfigError as exc:
            raise ConfigError("Error: Invalid configuration") from exc
    if not config.is_complete():
        raise ConfigError("Error: Missing or duplicate configuration")
    start = config.map_start
    while start < len(lines) and is_line_empty(lines[start]):
        start += 1
    if start == 0:
        raise ConfigError("Error: No valid lines found in the map")
    config.map_start = start
    return config