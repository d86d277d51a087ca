"""Mosaic strategy: one featured pane with a side column of the rest."""

from __future__ import annotations

from dataclasses import replace
from typing import List, Sequence

from panegrid.config import DEFAULT_CONFIG, LayoutConfig
from panegrid.models import Cell, Container, Layout, PaneSpec
from panegrid.strategies.common import build_smart_layout, pane_entries
from panegrid.strategies.stacks import try_horizontal_stack


def try_mosaic(
    container: Container,
    panes: Sequence[PaneSpec],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Layout:
    entries = pane_entries(panes)
    count = len(entries)
    if count <= 2:
        return replace(try_horizontal_stack(container, panes, config), strategy="mosaic")

    ordered = sorted(entries, key=lambda e: e.aspect_ratio)
    featured = ordered[-1]
    others = ordered[:-1]

    featured_height = min(
        container.width * config.mosaic_featured_width / featured.aspect_ratio,
        container.height,
    )
    featured_width = featured_height * featured.aspect_ratio
    cells: List[Cell] = [
        Cell(
            featured.pane_id,
            0.0,
            (container.height - featured_height) / 2,
            featured_width,
            featured_height,
            z_index=config.z_index_base + count,
        )
    ]

    side_width = container.width - featured_width
    slot_height = container.height / len(others)
    for i, entry in enumerate(others):
        ar = entry.aspect_ratio
        height = min(slot_height * config.mosaic_side_fill, side_width / ar)
        width = height * ar
        cells.append(
            Cell(
                entry.pane_id,
                featured_width + (side_width - width) / 2,
                i * slot_height + (slot_height - height) / 2,
                width,
                height,
                z_index=config.z_index_base + i,
            )
        )
    return build_smart_layout(container, cells, "mosaic", config)
