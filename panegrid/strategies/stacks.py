"""Edge-to-edge row and column strategies."""

from __future__ import annotations

from typing import List, Sequence

from panegrid.config import DEFAULT_CONFIG, LayoutConfig
from panegrid.models import Cell, Container, Layout, PaneSpec
from panegrid.strategies.common import build_smart_layout, pane_entries


def try_horizontal_stack(
    container: Container,
    panes: Sequence[PaneSpec],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Layout:
    """All panes share one height and sit side by side, row centred."""

    entries = pane_entries(panes)
    target_height = container.height * config.stack_fill
    total_width = sum(target_height * e.aspect_ratio for e in entries)
    scale = min(container.width / total_width, 1.0) if total_width > 0 else 1.0
    height = target_height * scale

    widths = [height * e.aspect_ratio for e in entries]
    cursor_x = (container.width - sum(widths)) / 2
    y = (container.height - height) / 2

    cells: List[Cell] = []
    for entry, width in zip(entries, widths):
        z_index = config.z_index_base + entry.index
        cells.append(Cell(entry.pane_id, cursor_x, y, width, height, z_index=z_index))
        cursor_x += width
    return build_smart_layout(container, cells, "horizontal", config)


def try_vertical_stack(
    container: Container,
    panes: Sequence[PaneSpec],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Layout:
    """All panes share one width and are stacked top to bottom, column centred."""

    entries = pane_entries(panes)
    target_width = container.width * config.stack_fill
    total_height = sum(target_width / e.aspect_ratio for e in entries)
    scale = min(container.height / total_height, 1.0) if total_height > 0 else 1.0
    width = target_width * scale

    heights = [width / e.aspect_ratio for e in entries]
    cursor_y = (container.height - sum(heights)) / 2
    x = (container.width - width) / 2

    cells: List[Cell] = []
    for entry, height in zip(entries, heights):
        z_index = config.z_index_base + entry.index
        cells.append(Cell(entry.pane_id, x, cursor_y, width, height, z_index=z_index))
        cursor_y += height
    return build_smart_layout(container, cells, "vertical", config)
