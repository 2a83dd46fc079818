"""Geographic-to-pixel projection helpers for SVG rendering."""

import math
from collections.abc import Sequence
from dataclasses import dataclass

from transport_catalogue.core.geo import Coordinates


@dataclass(frozen=True)
class Point:
    """Pixel position on the canvas."""

    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Point") -> "Point":
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)

    def scale(self, factor: float) -> "Point":
        return Point(self.x * factor, self.y * factor)


class SphereProjector:
    """Linear projection of a coordinate bounding box onto a padded canvas."""

    def __init__(
        self, coords: Sequence[Coordinates], width: float, height: float, padding: float
    ) -> None:
        """Fit the bounding box of ``coords`` into ``width`` x ``height``."""
        self.padding = padding
        self.min_lng = self.max_lng = 0.0
        self.min_lat = self.max_lat = 0.0
        self.zoom = 0.0

        if not coords:
            return

        self.min_lng = min(c.lng for c in coords)
        self.max_lng = max(c.lng for c in coords)
        self.min_lat = min(c.lat for c in coords)
        self.max_lat = max(c.lat for c in coords)

        usable_w = width - 2 * padding
        usable_h = height - 2 * padding

        span_lng = self.max_lng - self.min_lng
        span_lat = self.max_lat - self.min_lat
        zoom_x = usable_w / span_lng if span_lng != 0.0 else 0.0
        zoom_y = usable_h / span_lat if span_lat != 0.0 else 0.0

        if zoom_x == 0.0:
            self.zoom = zoom_y
        elif zoom_y == 0.0:
            self.zoom = zoom_x
        else:
            self.zoom = min(zoom_x, zoom_y)

    def __call__(self, coords: Coordinates) -> Point:
        return Point(
            (coords.lng - self.min_lng) * self.zoom + self.padding,
            (self.max_lat - coords.lat) * self.zoom + self.padding,
        )


def perpendicular(a: Point, b: Point, offset: float) -> Point:
    """Offset vector perpendicular (to the left) of segment a -> b."""
    delta = b - a
    length = math.hypot(delta.x, delta.y)
    if length == 0.0:
        return Point()
    return Point(-delta.y / length * offset, delta.x / length * offset)


def lerp(a: Point, b: Point, t: float) -> Point:
    """Point at fraction ``t`` along a -> b."""
    return Point(a.x + (b.x - a.x) * t, a.y + (b.y - a.y) * t)
