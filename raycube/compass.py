"""The on-screen compass: four filled arrow triangles, north highlighted."""

from __future__ import annotations

import math

from .framebuffer import FrameBuffer

CROSS_SIZE = 40
BASE_WIDTH = 10
COMPASS_MARGIN = 20
COLOR_NORTH = 0xFF0000
COLOR_OTHER = 0xFFFFFF

Point = tuple[int, int]


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def interp_x(p0: Point, p1: Point, y: int) -> int:
    """x on the edge p0-p1 at row y, using truncating integer arithmetic."""
    if p1[1] == p0[1]:
        return p0[0]
    return p0[0] + _trunc_div((y - p0[1]) * (p1[0] - p0[0]), p1[1] - p0[1])


def point_at(angle: float, length: int, center: Point) -> Point:
    """The point length pixels from center in the direction of angle."""
    return (
        int(center[0] + math.cos(angle) * length),
        int(center[1] + math.sin(angle) * length),
    )


def _fill_scanline(frame: FrameBuffer, y: int, x0: int, x1: int, color: int) -> None:
    for x in range(min(x0, x1), max(x0, x1) + 1):
        frame.draw_pixel(x, y, color)


def fill_triangle(frame: FrameBuffer, p0: Point, p1: Point, p2: Point, color: int) -> None:
    """Fill a triangle with horizontal scanlines."""
    if p1[1] < p0[1]:
        p0, p1 = p1, p0
    if p2[1] < p0[1]:
        p0, p2 = p2, p0
    if p2[1] < p1[1]:
        p1, p2 = p2, p1
    for y in range(p0[1], p1[1]):
        _fill_scanline(frame, y, interp_x(p0, p2, y), interp_x(p0, p1, y), color)
    for y in range(p1[1], p2[1] + 1):
        _fill_scanline(frame, y, interp_x(p0, p2, y), interp_x(p1, p2, y), color)


def draw_arrow(frame: FrameBuffer, angle: float, color: int, center: Point) -> None:
    """Draw one arrow pointing from center in the direction of angle."""
    tip = point_at(angle, CROSS_SIZE, center)
    base1 = point_at(angle + math.pi / 2, BASE_WIDTH, center)
    base2 = point_at(angle - math.pi / 2, BASE_WIDTH, center)
    fill_triangle(frame, tip, base1, base2, color)


def normalize_angle(angle: float) -> float:
    """Bring an angle into [0, 2*pi)."""
    full = 2 * math.pi
    angle %= full
    return 0.0 if angle >= full else angle


def compass_center(frame: FrameBuffer) -> Point:
    """Where the compass sits: the top right corner of the frame."""
    return (frame.width - CROSS_SIZE - COMPASS_MARGIN, CROSS_SIZE + COMPASS_MARGIN)


def north_angle(player_angle: float) -> float:
    """Screen angle of the north arrow for a given view angle."""
    return normalize_angle(3 * math.pi - player_angle)


def draw_compass(frame: FrameBuffer, player_angle: float) -> None:
    """Draw the compass for the given view angle, north arrow first."""
    center = compass_center(frame)
    base = north_angle(player_angle)
    for index in range(4):
        color = COLOR_NORTH if index == 0 else COLOR_OTHER
        draw_arrow(frame, base + index * (math.pi / 2), color, center)