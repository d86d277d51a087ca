"""Overlap strategy: letterbox-aware placement search.

Panes are placed one at a time, widest first. Each pane searches a small
ladder of sizes and a coarse lattice of positions, scoring every candidate
against what is already on screen. Two regions are tracked per placed pane:
the *content* region (visible picture) and the *cell* region (the whole
allocation including letterbox bars). Picture-on-picture overlap is limited
much more strictly than bar-on-bar overlap, which is what lets panes tuck
into each other's black bars.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from panegrid.config import DEFAULT_CONFIG, LayoutConfig
from panegrid.geometry import Rect, centered_in, content_region, fit_to_box, overlap_area
from panegrid.models import Cell, Container, Layout, PaneSpec
from panegrid.scaling import scale_layout_to_fit
from panegrid.strategies.common import PaneEntry, build_smart_layout, pane_entries

_EPS = 1e-9


@dataclass(frozen=True)
class Placement:
    """Where the placer put one pane, before the layout is rescaled."""

    entry: PaneEntry
    cell: Cell
    content: Rect
    score: float
    scale: Optional[float]
    fallback: bool = False


def _touches_edges(container: Container, rect: Rect, tolerance: float) -> Tuple[bool, bool]:
    """Return (touches left/right edge, touches top/bottom edge)."""

    side = rect.x <= tolerance or rect.right >= container.width - tolerance
    cap = rect.y <= tolerance or rect.bottom >= container.height - tolerance
    return side, cap


def score_candidate(
    container: Container,
    candidate: Rect,
    aspect_ratio: float,
    content_regions: Sequence[Rect],
    cell_regions: Sequence[Rect],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> float:
    """Score placing a pane at ``candidate``; ``-inf`` means inadmissible."""

    content = content_region(candidate, aspect_ratio)
    content_area = content.area
    cell_area = candidate.area
    score = config.base_score

    for occupied in content_regions:
        fraction = overlap_area(content, occupied) / content_area if content_area > 0 else 0.0
        if fraction > config.content_overlap_limit:
            return -math.inf
        score -= fraction ** 2 * config.content_overlap_penalty

    for occupied in cell_regions:
        fraction = overlap_area(candidate, occupied) / cell_area if cell_area > 0 else 0.0
        if fraction > config.cell_overlap_limit:
            return -math.inf
        score -= fraction * config.cell_overlap_penalty

    if (
        candidate.x >= -_EPS
        and candidate.y >= -_EPS
        and candidate.right <= container.width + _EPS
        and candidate.bottom <= container.height + _EPS
    ):
        score += config.on_screen_bonus

    side, cap = _touches_edges(container, candidate, config.edge_tolerance)
    if side and cap:
        score += config.corner_bonus
    elif side or cap:
        score += config.edge_bonus

    score += candidate.area / container.area * config.size_bonus_weight
    return score


def _lattice(span: float, steps: int) -> List[float]:
    if span <= 0:
        return [0.0]
    points = [span * i / (steps - 1) for i in range(steps - 1)]
    points.append(span)
    return points


def candidate_positions(
    container: Container,
    width: float,
    height: float,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> List[Tuple[float, float]]:
    """Lattice positions followed by the nine strategic anchors.

    Empty when the size does not fit inside the container.
    """

    span_x = container.width - width
    span_y = container.height - height
    if span_x < -_EPS or span_y < -_EPS:
        return []
    span_x = max(0.0, span_x)
    span_y = max(0.0, span_y)

    steps = config.position_grid_steps
    positions = [(x, y) for x in _lattice(span_x, steps) for y in _lattice(span_y, steps)]
    mid_x = span_x / 2
    mid_y = span_y / 2
    positions.extend([
        (0.0, 0.0),
        (span_x, 0.0),
        (0.0, span_y),
        (span_x, span_y),
        (mid_x, 0.0),
        (mid_x, span_y),
        (0.0, mid_y),
        (span_x, mid_y),
        (mid_x, mid_y),
    ])
    return positions


def find_best_position(
    container: Container,
    width: float,
    height: float,
    aspect_ratio: float,
    content_regions: Sequence[Rect],
    cell_regions: Sequence[Rect],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Optional[Tuple[float, Rect]]:
    best: Optional[Tuple[float, Rect]] = None
    best_score = -math.inf
    for x, y in candidate_positions(container, width, height, config):
        rect = Rect(x, y, width, height)
        score = score_candidate(container, rect, aspect_ratio, content_regions, cell_regions, config)
        if score > best_score:
            best_score = score
            best = (score, rect)
    return best


def target_size(
    container: Container,
    aspect_ratio: float,
    count: int,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Tuple[float, float, float, float]:
    """Return ``(width, height, min_width, min_height)`` for one pane."""

    area_share = container.area / max(1.0, count * config.area_share_factor)
    height = math.sqrt(area_share / aspect_ratio)
    width = height * aspect_ratio

    min_fraction = config.min_side_fraction(count)
    min_width = container.width * min_fraction
    min_height = container.height * min_fraction
    if width < min_width:
        width = min_width
        height = width / aspect_ratio
    if height < min_height:
        height = min_height
        width = height * aspect_ratio
    return width, height, min_width, min_height


def fallback_rect(
    container: Container,
    aspect_ratio: float,
    slot_index: int,
    count: int,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Rect:
    """Deterministic grid slot used when no admissible position exists."""

    cols = math.ceil(math.sqrt(count))
    rows = math.ceil(count / cols)
    slot_width = container.width / cols
    slot_height = container.height / rows
    row, col = divmod(slot_index, cols)
    slot = Rect(col * slot_width, row * slot_height, slot_width, slot_height)
    width, height = fit_to_box(
        slot_width * config.fallback_fill, slot_height * config.fallback_fill, aspect_ratio
    )
    return centered_in(slot, width, height)


def _clamp_to_container(container: Container, rect: Rect) -> Rect:
    x = max(0.0, min(container.width - rect.width, rect.x))
    y = max(0.0, min(container.height - rect.height, rect.y))
    return Rect(x, y, rect.width, rect.height)


def place_panes(
    container: Container,
    panes: Sequence[PaneSpec],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> List[Placement]:
    """Place every pane, widest first, without the final rescale."""

    entries = pane_entries(panes)
    count = len(entries)
    ordered = sorted(entries, key=lambda e: e.aspect_ratio, reverse=True)

    content_regions: List[Rect] = []
    cell_regions: List[Rect] = []
    placements: List[Placement] = []

    for slot_index, entry in enumerate(ordered):
        ar = entry.aspect_ratio
        width, height, min_width, min_height = target_size(container, ar, count, config)

        best: Optional[Tuple[float, Rect]] = None
        best_scale: Optional[float] = None
        for scale in config.scale_ladder:
            w = max(width * scale, min_width)
            h = max(height * scale, min_height)
            found = find_best_position(container, w, h, ar, content_regions, cell_regions, config)
            if found is not None and (best is None or found[0] > best[0]):
                best = found
                best_scale = scale

        if best is None:
            rect = fallback_rect(container, ar, slot_index, count, config)
            score, fallback = 0.0, True
        else:
            score, rect = best
            fallback = False
        rect = _clamp_to_container(container, rect)

        z_index = config.z_index_base + count - entry.index
        cell = Cell(entry.pane_id, rect.x, rect.y, rect.width, rect.height, z_index=z_index)
        content = content_region(rect, ar)
        placements.append(Placement(entry, cell, content, score, best_scale, fallback))
        content_regions.append(content)
        cell_regions.append(rect)

    return placements


def try_overlap_layout(
    container: Container,
    panes: Sequence[PaneSpec],
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Layout:
    placements = place_panes(container, panes, config)
    cells = scale_layout_to_fit(container, [p.cell for p in placements], config)
    return build_smart_layout(container, cells, "overlap", config)
