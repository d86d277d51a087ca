"""Scoring of finished layouts."""

from __future__ import annotations

from typing import Iterable, Sequence

from panegrid.config import DEFAULT_CONFIG, LayoutConfig
from panegrid.models import Cell, Container


def calculate_efficiency(container: Container, rects: Iterable) -> float:
    """Raw video area over container area (anything with width/height)."""

    video_area = sum(r.width * r.height for r in rects)
    return video_area / container.area


def overlap_compensation(count: int, config: LayoutConfig = DEFAULT_CONFIG) -> float:
    if count <= 1:
        return 1.0
    return max(config.overlap_compensation_floor, 1 - count * config.overlap_compensation_step)


def estimate_efficiency(
    container: Container,
    cells: Sequence[Cell],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> float:
    """Estimate the fraction of the container usefully covered by video.

    Raw cell area is discounted by a count-based overlap factor and capped at
    the container area. Layouts containing a pane narrower or shorter than the
    count-dependent minimum are penalised by ``smallest_ratio * 0.5`` so that
    one unusably small pane sinks the whole candidate.
    """

    count = len(cells)
    container_area = container.area
    min_fraction = config.min_efficiency_fraction(count)
    min_width = container.width * min_fraction
    min_height = container.height * min_fraction

    video_area = 0.0
    smallest_ratio = 1.0
    has_tiny = False
    for cell in cells:
        video_area += cell.width * cell.height
        size_ratio = min(cell.width / container.width, cell.height / container.height)
        smallest_ratio = min(smallest_ratio, size_ratio)
        if cell.width < min_width or cell.height < min_height:
            has_tiny = True

    visible_area = min(video_area * overlap_compensation(count, config), container_area)
    efficiency = visible_area / container_area
    if has_tiny:
        efficiency *= smallest_ratio * config.tiny_pane_penalty
    return efficiency
