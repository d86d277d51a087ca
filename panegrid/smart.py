"""Smart mode: run every strategy and keep the most efficient layout."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from panegrid.config import DEFAULT_CONFIG, LayoutConfig
from panegrid.grid import compute_grid_layout, single_pane_layout
from panegrid.models import GRID_MODE, LAYOUT_MODES, SMART_MODE, Container, Layout, PaneSpec, empty_layout
from panegrid.strategies import STRATEGY_REGISTRY


def evaluate_strategies(
    container: Container,
    panes: Sequence[PaneSpec],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> List[Tuple[str, Layout]]:
    """Every strategy's candidate layout, in evaluation order."""

    return [(name, strategy(container, panes, config)) for name, strategy in STRATEGY_REGISTRY.items()]


def select_best(candidates: Sequence[Tuple[str, Layout]]) -> Layout:
    """Highest efficiency wins; the earliest candidate keeps ties."""

    best = candidates[0][1]
    for _, layout in candidates[1:]:
        if layout.efficiency > best.efficiency:
            best = layout
    return best


def compute_smart_layout(
    container: Container,
    panes: Sequence[PaneSpec],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Layout:
    count = len(panes)
    if count == 0:
        return empty_layout(SMART_MODE)
    if count == 1:
        return single_pane_layout(container, panes[0], SMART_MODE)
    return select_best(evaluate_strategies(container, panes, config))


def compute_layout(
    container: Container,
    panes: Sequence[PaneSpec],
    mode: str = GRID_MODE,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Layout:
    if mode not in LAYOUT_MODES:
        raise ValueError(f"Unknown layout mode '{mode}', expected one of {LAYOUT_MODES}")
    if mode == SMART_MODE:
        return compute_smart_layout(container, panes, config)
    return compute_grid_layout(container, panes, config)
