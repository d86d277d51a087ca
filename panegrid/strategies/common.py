"""Helpers shared by the smart-mode strategies."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Sequence

from panegrid.config import DEFAULT_CONFIG, LayoutConfig
from panegrid.efficiency import estimate_efficiency
from panegrid.models import SMART_MODE, Cell, Container, Layout, PaneSpec


@dataclass(frozen=True)
class PaneEntry:
    """A pane together with its input position and resolved aspect ratio."""

    pane: PaneSpec
    index: int
    aspect_ratio: float

    @property
    def pane_id(self):
        return self.pane.pane_id


def pane_entries(panes: Sequence[PaneSpec]) -> List[PaneEntry]:
    return [PaneEntry(p, i, p.effective_aspect_ratio) for i, p in enumerate(panes)]


def smart_grid_shape(count: int) -> tuple:
    if count == 0:
        return 0, 0
    rows = math.ceil(math.sqrt(count))
    return rows, math.ceil(count / rows)


def build_smart_layout(
    container: Container,
    cells: Sequence[Cell],
    strategy: str,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Layout:
    rows, cols = smart_grid_shape(len(cells))
    return Layout(
        cells=tuple(cells),
        rows=rows,
        cols=cols,
        efficiency=estimate_efficiency(container, cells, config),
        mode=SMART_MODE,
        strategy=strategy,
    )
