"""Wall textures loaded from image files."""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass

from PIL import Image, UnidentifiedImageError

from .framebuffer import rgb
from .textutil import CubError


@dataclass(frozen=True)
class Texture:
    """An image as a row-major tuple of 0xRRGGBB pixels."""

    width: int
    height: int
    pixels: tuple[int, ...]

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("texture dimensions must be positive")
        if len(self.pixels) != self.width * self.height:
            raise ValueError("pixel count does not match texture dimensions")

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> Texture:
        """Build a texture from a list of equally long rows of colours."""
        height = len(rows)
        width = len(rows[0]) if rows else 0
        if any(len(row) != width for row in rows):
            raise ValueError("texture rows differ in length")
        return cls(width, height, tuple(color for row in rows for color in row))

    def color_at(self, x: int, y: int) -> int:
        """Colour of one texel, or 0 for coordinates outside the texture."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            return 0
        return self.pixels[y * self.width + x]


def load_texture(path: str | os.PathLike[str]) -> Texture:
    """Load an image file (XPM or any format the imaging library reads)."""
    try:
        with Image.open(path) as image:
            converted = image.convert("RGB")
    except (OSError, UnidentifiedImageError, ValueError, SyntaxError) as exc:
        raise CubError("Error: Failed to load texture image") from exc
    width, height = converted.size
    data = converted.tobytes()
    if width <= 0 or height <= 0 or len(data) != width * height * 3:
        raise CubError("Error: Failed to get texture address")
    pixels = tuple(rgb(r, g, b) for r, g, b in zip(data[0::3], data[1::3], data[2::3]))
    return Texture(width, height, pixels)