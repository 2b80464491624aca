import os

import numpy as np
from PIL import Image as PILImage

from core.math import Vec3


class Pixel:
    __slots__ = ("r", "g", "b")

    def __init__(self, r: int, g: int, b: int):
        self.r = r
        self.g = g
        self.b = b

    @classmethod
    def black(cls):
        return cls(0, 0, 0)

    @classmethod
    def from_vec3(cls, color: Vec3):
        """Clamp each component to [0, 255] and truncate to an int."""
        r = int(max(0, min(255, color.x)))
        g = int(max(0, min(255, color.y)))
        b = int(max(0, min(255, color.z)))
        return cls(r, g, b)

    def __eq__(self, other):
        if not isinstance(other, Pixel):
            return NotImplemented
        return (self.r, self.g, self.b) == (other.r, other.g, other.b)

    def __iter__(self):
        return iter((self.r, self.g, self.b))

    def __repr__(self):
        return f"Pixel({self.r}, {self.g}, {self.b})"


class Image:
    """Fixed-size RGB grid. Row 0 is the top row of the picture."""

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.pixels = np.zeros((height, width, 3), dtype=np.uint8)

    def _check_bounds(self, x: int, y: int):
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image"
            )

    def set_pixel(self, x: int, y: int, pixel: Pixel):
        self._check_bounds(x, y)
        self.pixels[y, x] = (pixel.r, pixel.g, pixel.b)

    def get_pixel(self, x: int, y: int) -> Pixel:
        self._check_bounds(x, y)
        r, g, b = self.pixels[y, x]
        return Pixel(int(r), int(g), int(b))

    def to_ppm(self) -> str:
        lines = [f"P3\n{self.width} {self.height}\n255\n"]
        for r, g, b in self.pixels.reshape(-1, 3).tolist():
            lines.append(f"{r} {g} {b}\n")
        return "".join(lines)

    def to_pil(self) -> PILImage.Image:
        return PILImage.fromarray(self.pixels)

    def save(self, path: str):
        """Write a plain PPM for ``.ppm`` paths, anything else through Pillow."""
        if os.path.splitext(path)[1].lower() == ".ppm":
            with open(path, "w") as f:
                f.write(self.to_ppm())
        else:
            self.to_pil().save(path)
