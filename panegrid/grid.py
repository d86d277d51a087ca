"""Partition mode: non-overlapping rows x cols tiling of the container."""

from __future__ import annotations

import math
from typing import List, Sequence, Tuple

from panegrid.config import DEFAULT_CONFIG, LayoutConfig
from panegrid.efficiency import calculate_efficiency
from panegrid.geometry import Rect, centered_in, fit_to_box
from panegrid.models import GRID_MODE, SMART_MODE, Cell, Container, Layout, PaneSpec, empty_layout


def single_pane_layout(container: Container, pane: PaneSpec, mode: str = GRID_MODE) -> Layout:
    """Maximise one pane inside the container, centred."""

    width, height = fit_to_box(container.width, container.height, pane.effective_aspect_ratio)
    rect = centered_in(container.rect, width, height)
    cell = Cell(pane.pane_id, rect.x, rect.y, rect.width, rect.height, row=0, col=0)
    return Layout(
        cells=(cell,),
        rows=1,
        cols=1,
        efficiency=calculate_efficiency(container, [rect]),
        mode=mode,
        strategy="single" if mode == SMART_MODE else None,
    )


def grid_score(
    container: Container,
    count: int,
    rows: int,
    cols: int,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> float:
    cell_ratio = (container.width / cols) / (container.height / rows)
    target = config.grid_target_ratio
    ratio_score = 1 - abs(cell_ratio - target) / target
    fill_score = count / (rows * cols)
    return config.grid_ratio_weight * ratio_score + config.grid_fill_weight * fill_score


def find_optimal_grid(
    container: Container,
    count: int,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Tuple[int, int, float]:
    """Return ``(rows, cols, score)`` for ``count`` panes.

    Candidates leaving an entire row empty are skipped. The first candidate
    (fewest rows) wins ties.
    """

    best = (1, count, -math.inf)
    for rows in range(1, count + 1):
        cols = math.ceil(count / rows)
        empty_cells = rows * cols - count
        if empty_cells >= cols:
            continue
        score = grid_score(container, count, rows, cols, config)
        if score > best[2]:
            best = (rows, cols, score)
    return best


def compute_grid_layout(
    container: Container,
    panes: Sequence[PaneSpec],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Layout:
    """Tile ``panes`` row-major over the best scoring grid."""

    count = len(panes)
    if count == 0:
        return empty_layout(GRID_MODE)
    if count == 1:
        return single_pane_layout(container, panes[0], GRID_MODE)

    rows, cols, _ = find_optimal_grid(container, count, config)
    cell_width = container.width / cols
    cell_height = container.height / rows

    cells: List[Cell] = []
    for index, pane in enumerate(panes):
        row, col = divmod(index, cols)
        slot = Rect(col * cell_width, row * cell_height, cell_width, cell_height)
        width, height = fit_to_box(cell_width, cell_height, pane.effective_aspect_ratio)
        rect = centered_in(slot, width, height)
        cells.append(Cell(pane.pane_id, rect.x, rect.y, rect.width, rect.height, row=row, col=col))

    return Layout(
        cells=tuple(cells),
        rows=rows,
        cols=cols,
        efficiency=calculate_efficiency(container, cells),
        mode=GRID_MODE,
        cell_width=cell_width,
        cell_height=cell_height,
    )
