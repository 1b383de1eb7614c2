"""Loading a whole scene: configuration header followed by the map."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

from .config import SceneConfig, parse_config
from .mapgrid import MapError, normalize_map, validate_map
from .reader import read_map_file
from .textutil import CubError, check_extension


@dataclass
class Scene:
    """A validated scene: its configuration and its padded map grid."""

    config: SceneConfig
    grid: list[str]

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)


def parse_scene(lines: Sequence[str]) -> Scene:
    """Parse the lines of a scene file, raising CubError on any problem."""
    if not lines:
        raise CubError("Error: Failed to get map")
    config = parse_config(lines)
    rows = list(lines[config.map_start :])
    if not rows:
        raise MapError("Error: Map not found")
    grid = normalize_map(rows)
    return Scene(config=config, grid=validate_map(grid))


def load_scene(path: str | os.PathLike[str]) -> Scene:
    """Read and parse a .cub scene file."""
    if not check_extension(os.fspath(path), ".cub"):
        raise CubError("Error: Expected .cub extension")
    return parse_scene(read_map_file(path))