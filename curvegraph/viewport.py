"""Viewport transform between screen pixels and the canvas' graph space.

Graph space is the canvas' own pixel space before zoom/pan; dividing by the
canvas size gives normalized ``[0, 1]`` coordinates.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass

from .types import Point

logger = logging.getLogger(__name__)

MIN_SCALE = 0.1
MAX_SCALE = 10.0
ZOOM_INTENSITY = 0.1


@dataclass
class CanvasGeometry:
    """Pixel size of the drawing surface and its origin on screen."""

    width: float = 800.0
    height: float = 600.0
    left: float = 0.0
    top: float = 0.0

    @property
    def origin(self) -> Point:
        return Point(self.left, self.top)

    def to_pixels(self, normalized: Point) -> Point:
        return Point(normalized[0] * self.width, normalized[1] * self.height)

    def to_normalized(self, pixels: Point) -> Point:
        return Point(pixels[0] / self.width, pixels[1] / self.height)


def _clamp_scale(scale: float) -> float:
    return max(MIN_SCALE, min(MAX_SCALE, scale))


@dataclass
class ViewportTransform:
    scale: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0

    def __post_init__(self) -> None:
        self.scale = _clamp_scale(float(self.scale))

    def screen_to_graph(self, screen: Point, canvas: CanvasGeometry) -> Point:
        return Point(
            (screen[0] - canvas.left - self.offset_x) / self.scale,
            (screen[1] - canvas.top - self.offset_y) / self.scale,
        )

    def graph_to_screen(self, graph: Point, canvas: CanvasGeometry) -> Point:
        return Point(
            graph[0] * self.scale + self.offset_x + canvas.left,
            graph[1] * self.scale + self.offset_y + canvas.top,
        )

    def zoom_at(self, screen: Point, delta_y: float, canvas: CanvasGeometry) -> None:
        """Zoom one wheel notch, keeping the graph point under ``screen`` fixed.

        Scrolling up (negative ``delta_y``) zooms in by ``exp(0.1)``; down
        zooms out by ``exp(-0.1)``.
        """

        direction = -math.copysign(1.0, delta_y) if delta_y else 0.0
        factor = math.exp(direction * ZOOM_INTENSITY)
        anchor = self.screen_to_graph(screen, canvas)
        new_scale = _clamp_scale(self.scale * factor)
        scale_diff = new_scale - self.scale
        self.offset_x -= anchor[0] * scale_diff
        self.offset_y -= anchor[1] * scale_diff
        self.scale = new_scale
        logger.debug(
            "Zoomed to scale=%.4g offset=(%.4g, %.4g)", self.scale, self.offset_x, self.offset_y
        )

    def pan(self, dx: float, dy: float) -> None:
        self.offset_x += dx
        self.offset_y += dy

    def reset(self) -> None:
        self.scale = 1.0
        self.offset_x = 0.0
        self.offset_y = 0.0


__all__ = [
    "MIN_SCALE",
    "MAX_SCALE",
    "ZOOM_INTENSITY",
    "CanvasGeometry",
    "ViewportTransform",
]
