"""Diagonal cascade strategy."""

from __future__ import annotations

from typing import List, Sequence

from panegrid.config import DEFAULT_CONFIG, LayoutConfig
from panegrid.models import Cell, Container, Layout, PaneSpec
from panegrid.strategies.common import build_smart_layout, pane_entries


def diagonal_width(container: Container, count: int, config: LayoutConfig = DEFAULT_CONFIG) -> float:
    """Common pane width: shrinks with count, floored by the minimum side."""

    multiplier = config.diagonal_base_width - count * config.diagonal_width_step
    multiplier = max(config.diagonal_min_width, min(config.diagonal_max_width, multiplier))
    return max(container.width * multiplier, container.width * config.min_side_fraction(count))


def try_diagonal(
    container: Container,
    panes: Sequence[PaneSpec],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Layout:
    """Step panes from the top-left margin toward the bottom-right corner.

    The first pane is drawn on top.
    """

    entries = pane_entries(panes)
    count = len(entries)
    width = diagonal_width(container, count, config)
    heights = [min(width / e.aspect_ratio, container.height * config.diagonal_max_height) for e in entries]
    tallest = max(heights) if heights else 0.0

    margin = min(container.width, container.height) * config.diagonal_margin
    steps = max(1, count - 1)
    step_x = (container.width - 2 * margin - width) / steps
    step_y = (container.height - 2 * margin - tallest) / steps

    cells: List[Cell] = []
    for entry, height in zip(entries, heights):
        x = margin + entry.index * step_x
        y = margin + entry.index * step_y
        x = max(0.0, min(container.width - width, x))
        y = max(0.0, min(container.height - height, y))
        z_index = config.z_index_base + count - entry.index
        cells.append(Cell(entry.pane_id, x, y, width, height, z_index=z_index))
    return build_smart_layout(container, cells, "diagonal", config)
