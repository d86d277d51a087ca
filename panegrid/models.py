"""Layout inputs and results shared by both layout modes."""

from __future__ import annotations

import math
from dataclasses import dataclass, field, replace
from typing import Hashable, Optional, Tuple

from panegrid.config import DEFAULT_ASPECT_RATIO
from panegrid.geometry import Rect


GRID_MODE = "grid"
SMART_MODE = "smart"
LAYOUT_MODES = (GRID_MODE, SMART_MODE)


@dataclass(frozen=True)
class Container:
    """Pixel size of the area the panes are laid out in."""

    width: float
    height: float

    def __post_init__(self) -> None:
        for label, value in (("width", self.width), ("height", self.height)):
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                raise ValueError(f"Container {label} must be a number, got {value!r}")
            if not math.isfinite(value) or value <= 0:
                raise ValueError(f"Container {label} must be finite and positive, got {value!r}")
        area = self.width * self.height
        if not math.isfinite(area) or area <= 0:
            raise ValueError(f"Container area out of range for {self.width!r}x{self.height!r}")

    @property
    def area(self) -> float:
        return self.width * self.height

    @property
    def aspect_ratio(self) -> float:
        return self.width / self.height

    @property
    def rect(self) -> Rect:
        return Rect(0.0, 0.0, float(self.width), float(self.height))


@dataclass(frozen=True)
class PaneSpec:
    """A video pane to be placed; only its aspect ratio matters to the engine."""

    pane_id: Hashable
    aspect_ratio: Optional[float] = None

    @property
    def effective_aspect_ratio(self) -> float:
        ar = self.aspect_ratio
        if ar is None or not isinstance(ar, (int, float)):
            return DEFAULT_ASPECT_RATIO
        if not math.isfinite(ar) or ar <= 0:
            return DEFAULT_ASPECT_RATIO
        return float(ar)


@dataclass(frozen=True)
class Cell:
    """Placed rectangle for one pane."""

    pane_id: Hashable
    x: float
    y: float
    width: float
    height: float
    z_index: Optional[int] = None
    row: Optional[int] = None
    col: Optional[int] = None

    @property
    def rect(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def area(self) -> float:
        return self.width * self.height

    def with_rect(self, rect: Rect) -> "Cell":
        return replace(self, x=rect.x, y=rect.y, width=rect.width, height=rect.height)


@dataclass(frozen=True)
class Layout:
    cells: Tuple[Cell, ...] = field(default_factory=tuple)
    rows: int = 0
    cols: int = 0
    efficiency: float = 0.0
    mode: str = GRID_MODE
    strategy: Optional[str] = None
    cell_width: Optional[float] = None
    cell_height: Optional[float] = None


def empty_layout(mode: str) -> Layout:
    return Layout(cells=(), rows=0, cols=0, efficiency=0.0, mode=mode)
