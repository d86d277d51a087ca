"""Uniform rescaling of a finished overlap layout."""

from __future__ import annotations

from itertools import combinations
from typing import List, Sequence

from panegrid.config import DEFAULT_CONFIG, LayoutConfig
from panegrid.geometry import bounding_box, overlap_area
from panegrid.models import Cell, Container


def max_pairwise_overlap(cells: Sequence[Cell]) -> float:
    """Largest overlap area over the smaller cell's area, across all pairs."""

    worst = 0.0
    for a, b in combinations(cells, 2):
        smaller = min(a.area, b.area)
        if smaller <= 0:
            continue
        worst = max(worst, overlap_area(a.rect, b.rect) / smaller)
    return worst


def center_cells(container: Container, cells: Sequence[Cell], scale: float = 1.0) -> List[Cell]:
    """Scale the group by ``scale`` and centre its bounding box."""

    box = bounding_box(c.rect for c in cells)
    offset_x = (container.width - box.width * scale) / 2
    offset_y = (container.height - box.height * scale) / 2
    placed: List[Cell] = []
    for cell in cells:
        rect = cell.rect.translated(-box.x, -box.y).scaled(scale).translated(offset_x, offset_y)
        placed.append(cell.with_rect(rect))
    return placed


def scale_layout_to_fit(
    container: Container,
    cells: Sequence[Cell],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> List[Cell]:
    """Grow the group so its bounding box fills the container's tighter axis.

    The factor is capped at ``config.max_layout_scale``. If any pair of the
    scaled cells overlaps by more than ``config.rescale_overlap_limit`` of the
    smaller cell, the unscaled group is centred instead.
    """

    if not cells:
        return list(cells)
    if len(cells) == 1:
        return center_cells(container, cells)

    box = bounding_box(c.rect for c in cells)
    if box.width <= 0 or box.height <= 0:
        return center_cells(container, cells)
    scale = min(
        container.width / box.width,
        container.height / box.height,
        config.max_layout_scale,
    )
    scaled = center_cells(container, cells, scale)
    if max_pairwise_overlap(scaled) > config.rescale_overlap_limit:
        return center_cells(container, cells)
    return scaled
