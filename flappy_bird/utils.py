"""Geometry and color utility functions used across the game."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np


def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp a numeric value into the inclusive range [lo, hi]."""
    return max(lo, min(hi, value))


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in screen coordinates (y grows downward)."""

    x: int
    y: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    def intersects(self, other: Rect) -> bool:
        """True unless the rectangles are disjoint on at least one axis.

        Shared edges count as overlap.
        """
        if self.right < other.x or other.right < self.x:
            return False
        if self.bottom < other.y or other.bottom < self.y:
            return False
        return True

    def contains_point(self, px: float, py: float) -> bool:
        """Strict containment: points on the border are outside."""
        return self.x < px < self.right and self.y < py < self.bottom

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.x, self.y, self.width, self.height)


def scale_color(color: tuple[int, int, int], factor: float) -> tuple[int, int, int]:
    """Scale an RGB color by factor, clamped to [0,255]."""
    r, g, b = color
    return (
        int(clamp(r * factor, 0, 255)),
        int(clamp(g * factor, 0, 255)),
        int(clamp(b * factor, 0, 255)),
    )


def vertical_gradient(
    w: int,
    h: int,
    top: tuple[int, int, int],
    bottom: tuple[int, int, int],
) -> np.ndarray:
    """Build a (w, h, 3) uint8 array blending top into bottom color.

    The array is laid out column-major for pygame.surfarray.make_surface.
    """
    t = np.linspace(0.0, 1.0, h, dtype=np.float32)[:, None]
    col = np.asarray(top, dtype=np.float32) * (1.0 - t) + np.asarray(bottom, dtype=np.float32) * t
    c = np.clip(col, 0, 255).astype(np.uint8)
    return np.broadcast_to(c[None, :, :], (w, h, 3)).copy()
