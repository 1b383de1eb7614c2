"""An in-memory 32-bit pixel buffer the renderer draws into."""

from __future__ import annotations

from array import array
from dataclasses import dataclass, field

SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720

_PIXEL_MASK = 0xFFFFFFFF


def rgb(r: int, g: int, b: int) -> int:
    """Pack three 8-bit channels into a 0xRRGGBB integer."""
    return (r << 16) | (g << 8) | b


@dataclass
class FrameBuffer:
    """A width x height grid of 0xRRGGBB pixels, stored row by row."""

    width: int = SCREEN_WIDTH
    height: int = SCREEN_HEIGHT
    pixels: array = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("frame buffer dimensions must be positive")
        self.pixels = array("I", [0]) * (self.width * self.height)

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def draw_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel; coordinates outside the buffer are ignored."""
        if self._inside(x, y):
            self.pixels[y * self.width + x] = color & _PIXEL_MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return one pixel, or 0 for coordinates outside the buffer."""
        if not self._inside(x, y):
            return 0
        return self.pixels[y * self.width + x]

    def draw_vline(self, x: int, start: int, end: int, color: int) -> None:
        """Fill column x from row start up to, but not including, row end."""
        if not 0 <= x < self.width:
            return
        value = color & _PIXEL_MASK
        for y in range(max(start, 0), min(end, self.height)):
            self.pixels[y * self.width + x] = value

    def clear(self, color: int = 0) -> None:
        """Fill the whole buffer with one colour."""
        self.pixels = array("I", [color & _PIXEL_MASK]) * (self.width * self.height)