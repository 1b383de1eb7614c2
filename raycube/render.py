"""Textured wall rendering of the first-person view."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from .config import SceneConfig
from .framebuffer import SCREEN_HEIGHT, FrameBuffer, rgb
from .player import Player
from .raycast import Ray, cast_ray
from .textures import Texture, load_texture

FIELD_OF_VIEW = math.pi / 3

Color = int | tuple[int, int, int]


@dataclass
class WallTextures:
    """The four wall textures, one per facing."""

    north: Texture
    south: Texture
    west: Texture
    east: Texture

    @classmethod
    def load(cls, config: SceneConfig) -> WallTextures:
        """Load the textures named by a complete scene configuration."""
        paths = (config.north, config.south, config.west, config.east)
        if any(path is None for path in paths):
            raise ValueError("configuration lacks a texture path")
        north, south, west, east = (load_texture(path) for path in paths)
        return cls(north=north, south=south, west=west, east=east)

    def for_ray(self, ray: Ray) -> Texture:
        """Texture of the wall face a ray hit."""
        if ray.side == 0:
            return self.west if ray.dir_x < 0 else self.east
        return self.north if ray.dir_y < 0 else self.south


def _half(value: int) -> int:
    """Halve an integer, rounding towards zero."""
    return value // 2 if value >= 0 else -((-value) // 2)


def _as_color(color: Color) -> int:
    if isinstance(color, tuple):
        return rgb(*color)
    return color


def wall_span(ray: Ray, player_angle: float, height: int = SCREEN_HEIGHT) -> tuple[int, int]:
    """Rows where the wall column starts and ends, fisheye-corrected."""
    line_height = int(height / (ray.perp_wall_dist * math.cos(player_angle - ray.angle)))
    half = _half(line_height)
    middle = height // 2
    return -half + middle, half + middle


def texture_column(ray: Ray, x: float, y: float, tile_size: int, width: int) -> int:
    """Texture column for the point where a ray cast from (x, y) met the wall."""
    if ray.side == 0:
        wall_x = y / tile_size + ray.perp_wall_dist * ray.dir_y
    else:
        wall_x = x / tile_size + ray.perp_wall_dist * ray.dir_x
    wall_x -= math.floor(wall_x)
    tex_x = int(wall_x * width)
    if ray.side == 0 and ray.dir_x > 0:
        tex_x = width - tex_x - 1
    if ray.side == 1 and ray.dir_y < 0:
        tex_x = width - tex_x - 1
    return width - tex_x - 1


def _draw_wall(
    frame: FrameBuffer, ray: Ray, texture: Texture, x: int, span: tuple[int, int], tex_x: int
) -> None:
    start, end = span
    line_height = end - start
    if line_height <= 0:
        return
    step = texture.height / line_height
    tex_pos = (start - frame.height // 2 + line_height // 2) * step
    if start < 0:
        tex_pos += step * -start
    mask = texture.height - 1
    for y in range(max(start, 0), min(end, frame.height - 1)):
        tex_pos += step
        color = texture.color_at(tex_x, int(tex_pos) & mask)
        if ray.side == 1:
            color = (color >> 1) & 0x7F7F7F
        frame.draw_pixel(x, y, color)


def render_walls(
    frame: FrameBuffer,
    grid: Sequence[str],
    player: Player,
    tile_size: int,
    textures: WallTextures,
    ceiling: Color,
    floor: Color,
) -> None:
    """Draw ceiling, textured walls and floor for every column of the frame."""
    ceiling_color = _as_color(ceiling)
    floor_color = _as_color(floor)
    for x in range(frame.width):
        angle = player.angle - FIELD_OF_VIEW / 2 + (x / frame.width) * FIELD_OF_VIEW
        ray = cast_ray(grid, player.x, player.y, tile_size, angle)
        span = wall_span(ray, player.angle, frame.height)
        frame.draw_vline(x, 0, span[0], ceiling_color)
        frame.draw_vline(x, span[1], frame.height, floor_color)
        texture = textures.for_ray(ray)
        tex_x = texture_column(ray, player.x, player.y, tile_size, texture.width)
        _draw_wall(frame, ray, texture, x, span, tex_x)