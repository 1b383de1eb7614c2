"""The player: spawning, input state, rotation and collision-aware movement."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum, auto

from .framebuffer import SCREEN_HEIGHT, SCREEN_WIDTH
from .textutil import is_player_char, max_len

MOVE_SPEED = 2.0
ANGLE_SPEED = 0.03

_START_ANGLES = {
    "N": 3 * math.pi / 2,
    "S": math.pi / 2,
    "E": 0.0,
    "W": math.pi,
}


class Action(Enum):
    """Inputs the player reacts to while they are held."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ROTATE_LEFT = auto()
    ROTATE_RIGHT = auto()


def _trunc_div(a: int, b: int) -> int:
    """Integer division rounding towards zero."""
    return int(a / b)


def compute_tile_size(
    grid: Sequence[str], view_width: int = SCREEN_WIDTH, view_height: int = SCREEN_HEIGHT
) -> int:
    """Largest square tile size letting the whole grid fit the view."""
    width = max_len(grid)
    height = len(grid)
    if width == 0 or height == 0:
        raise ValueError("grid is empty")
    return min(view_width // width, view_height // height)


def is_blocked(grid: Sequence[str], row: int, col: int) -> bool:
    """True for cells outside the grid and for wall cells."""
    if row < 0 or row >= len(grid) or col < 0 or col >= max_len(grid):
        return True
    line = grid[row]
    return col >= len(line) or line[col] == "1"


@dataclass
class Player:
    """Position in pixels, view angle in radians and held inputs."""

    x: float = 0.0
    y: float = 0.0
    angle: float = 0.0
    size: int = 0
    ray_offset: float = 0.0
    speed: float = MOVE_SPEED
    angle_speed: float = ANGLE_SPEED
    tmp_x: float = field(init=False)
    tmp_y: float = field(init=False)
    ray_x: float = field(init=False)
    ray_y: float = field(init=False)
    actions: set[Action] = field(default_factory=set)

    def __post_init__(self) -> None:
        self._reset()

    def _reset(self) -> None:
        self.tmp_x = self.x
        self.tmp_y = self.y
        self.ray_x = self.x
        self.ray_y = self.y

    def press(self, action: Action) -> None:
        self.actions.add(action)

    def release(self, action: Action) -> None:
        self.actions.discard(action)

    def rotate(self) -> None:
        """Turn according to the held rotation inputs, wrapping around 2*pi."""
        if Action.ROTATE_LEFT in self.actions:
            self.angle -= self.angle_speed
        if Action.ROTATE_RIGHT in self.actions:
            self.angle += self.angle_speed
        if self.angle > 2 * math.pi:
            self.angle = 0.0
        if self.angle < 0:
            self.angle = 2 * math.pi

    def _collides(self, grid: Sequence[str], px: float, py: float, tile_size: int) -> bool:
        ix = int(px)
        iy = int(py)
        half = self.size // 2
        rows = (_trunc_div(iy - half, tile_size), _trunc_div(iy + half - 1, tile_size))
        cols = (_trunc_div(ix - half, tile_size), _trunc_div(ix + half - 1, tile_size))
        return any(is_blocked(grid, row, col) for row in rows for col in cols)

    def move(self, grid: Sequence[str], tile_size: int) -> None:
        """Step according to the held movement inputs, sliding along walls."""
        cos_a = math.cos(self.angle)
        sin_a = math.sin(self.angle)
        step = self.speed
        if Action.UP in self.actions:
            self.tmp_x += cos_a * step
            self.tmp_y += sin_a * step
        if Action.DOWN in self.actions:
            self.tmp_x -= cos_a * step
            self.tmp_y -= sin_a * step
        if Action.LEFT in self.actions:
            self.tmp_x += sin_a * step
            self.tmp_y -= cos_a * step
        if Action.RIGHT in self.actions:
            self.tmp_x -= sin_a * step
            self.tmp_y += cos_a * step
        if not self._collides(grid, self.tmp_x, self.tmp_y, tile_size):
            self.x = self.tmp_x
            self.y = self.tmp_y
            return
        if not self._collides(grid, self.tmp_x, self.y, tile_size):
            self.x = self.tmp_x
        if not self._collides(grid, self.x, self.tmp_y, tile_size):
            self.y = self.tmp_y

    def update(self, grid: Sequence[str], tile_size: int) -> None:
        """Advance one frame: rotate, move, then resynchronise helpers."""
        self.rotate()
        self.move(grid, tile_size)
        self._reset()


def spawn_player(grid: Sequence[str], tile_size: int) -> Player:
    """Create the player at the first start marker found, facing its direction."""
    size = tile_size // 2
    for row, line in enumerate(grid):
        for col, char in enumerate(line):
            if is_player_char(char):
                return Player(
                    x=col * tile_size + tile_size // 2,
                    y=row * tile_size + tile_size // 2,
                    angle=_START_ANGLES[char],
                    size=size,
                    ray_offset=size // 2,
                )
    raise ValueError("grid has no player start")