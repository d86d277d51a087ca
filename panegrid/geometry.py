"""Rectangle primitives and aspect-ratio fitting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in container coordinates."""

    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        return self.width * self.height

    def translated(self, dx: float, dy: float) -> "Rect":
        return Rect(self.x + dx, self.y + dy, self.width, self.height)

    def scaled(self, factor: float, origin: Tuple[float, float] = (0.0, 0.0)) -> "Rect":
        """Scale around ``origin`` (position and size alike)."""

        ox, oy = origin
        return Rect(
            ox + (self.x - ox) * factor,
            oy + (self.y - oy) * factor,
            self.width * factor,
            self.height * factor,
        )


def fit_to_box(box_width: float, box_height: float, aspect_ratio: float) -> Tuple[float, float]:
    """Largest ``aspect_ratio`` rectangle that fits inside the box.

    Wider-than-box content is width-bound; everything else (equal ratios
    included) is height-bound. ``box_height`` must be positive.
    """

    box_ratio = box_width / box_height
    if aspect_ratio > box_ratio:
        return box_width, box_width / aspect_ratio
    return box_height * aspect_ratio, box_height


def centered_in(box: Rect, width: float, height: float) -> Rect:
    return Rect(
        box.x + (box.width - width) / 2,
        box.y + (box.height - height) / 2,
        width,
        height,
    )


def content_region(cell: Rect, aspect_ratio: float) -> Rect:
    """Visible picture inside ``cell``, with the letterbox margins removed."""

    if cell.width <= 0 or cell.height <= 0:
        return Rect(cell.x, cell.y, 0.0, 0.0)
    width, height = fit_to_box(cell.width, cell.height, aspect_ratio)
    return centered_in(cell, width, height)


def intersection(a: Rect, b: Rect) -> Rect:
    x1 = max(a.x, b.x)
    y1 = max(a.y, b.y)
    x2 = min(a.right, b.right)
    y2 = min(a.bottom, b.bottom)
    return Rect(x1, y1, max(0.0, x2 - x1), max(0.0, y2 - y1))


def overlap_area(a: Rect, b: Rect) -> float:
    return intersection(a, b).area


def bounding_box(rects) -> Rect:
    rects = list(rects)
    if not rects:
        return Rect(0.0, 0.0, 0.0, 0.0)
    min_x = min(r.x for r in rects)
    min_y = min(r.y for r in rects)
    max_x = max(r.right for r in rects)
    max_y = max(r.bottom for r in rects)
    return Rect(min_x, min_y, max_x - min_x, max_y - min_y)
