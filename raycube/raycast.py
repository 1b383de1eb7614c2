"""Grid ray casting with the digital differential analyser."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

MIN_WALL_DISTANCE = 0.0001


@dataclass
class Ray:
    """A cast ray: direction, the wall cell it hit and its distance.

    side is 0 when a vertical grid line (x step) was crossed last and 1
    when a horizontal one (y step) was. perp_wall_dist is measured in tiles.
    """

    angle: float
    dir_x: float
    dir_y: float
    map_x: int
    map_y: int
    step_x: int
    step_y: int
    delta_dist_x: float
    delta_dist_y: float
    side_dist_x: float
    side_dist_y: float
    side: int = 0
    perp_wall_dist: float = 0.0


def _delta(direction: float) -> float:
    return abs(1.0 / direction) if direction else math.inf


def _is_wall(grid: Sequence[str], row: int, col: int) -> bool:
    if not 0 <= row < len(grid) or not 0 <= col < len(grid[row]):
        return True
    return grid[row][col] == "1"


def cast_ray(grid: Sequence[str], x: float, y: float, tile_size: int, angle: float) -> Ray:
    """Cast a ray from pixel position (x, y) until it meets a wall.

    Leaving the grid counts as meeting a wall.
    """
    pos_x = x / tile_size
    pos_y = y / tile_size
    map_x = int(pos_x)
    map_y = int(pos_y)
    dir_x = math.cos(angle)
    dir_y = math.sin(angle)
    delta_x = _delta(dir_x)
    delta_y = _delta(dir_y)
    if dir_x < 0:
        step_x, side_x = -1, (pos_x - map_x) * delta_x
    else:
        step_x, side_x = 1, (map_x + 1.0 - pos_x) * delta_x
    if dir_y < 0:
        step_y, side_y = -1, (pos_y - map_y) * delta_y
    else:
        step_y, side_y = 1, (map_y + 1.0 - pos_y) * delta_y

    side = 0
    while True:
        if side_x < side_y:
            side_x += delta_x
            map_x += step_x
            side = 0
        else:
            side_y += delta_y
            map_y += step_y
            side = 1
        if _is_wall(grid, map_y, map_x):
            break

    perp = side_x - delta_x if side == 0 else side_y - delta_y
    if perp <= MIN_WALL_DISTANCE:
        perp = MIN_WALL_DISTANCE
    return Ray(
        angle=angle,
        dir_x=dir_x,
        dir_y=dir_y,
        map_x=map_x,
        map_y=map_y,
        step_x=step_x,
        step_y=step_y,
        delta_dist_x=delta_x,
        delta_dist_y=delta_y,
        side_dist_x=side_x,
        side_dist_y=side_y,
        side=side,
        perp_wall_dist=perp,
    )