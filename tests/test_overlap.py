import math

import pytest

from panegrid.config import LayoutConfig
from panegrid.geometry import Rect, overlap_area
from panegrid.models import Container, PaneSpec
from panegrid.strategies.overlap import (
    candidate_positions,
    fallback_rect,
    place_panes,
    score_candidate,
    target_size,
    try_overlap_layout,
)


SQUARE = Container(1000, 1000)


def _panes(*ratios):
    return [PaneSpec(pane_id=f"p{i}", aspect_ratio=r) for i, r in enumerate(ratios)]


def test_unobstructed_corner_candidate_scores_all_bonuses():
    score = score_candidate(SQUARE, Rect(0, 0, 400, 400), 1.0, [], [])
    # base + on-screen + corner + size
    assert score == pytest.approx(100 + 30 + 15 + 0.16 * 20)


def test_edge_and_center_candidates():
    edge = score_candidate(SQUARE, Rect(0, 300, 400, 400), 1.0, [], [])
    center = score_candidate(SQUARE, Rect(300, 300, 400, 400), 1.0, [], [])
    assert edge == pytest.approx(100 + 30 + 8 + 3.2)
    assert center == pytest.approx(100 + 30 + 3.2)


def test_content_overlap_above_limit_is_rejected():
    placed = [Rect(0, 0, 400, 400)]
    # 100px of a 400px wide picture overlaps: 25% of its content
    score = score_candidate(SQUARE, Rect(300, 0, 400, 400), 1.0, placed, [])
    assert score == -math.inf


def test_small_overlaps_are_penalised_not_rejected():
    placed = [Rect(0, 0, 400, 400)]
    score = score_candidate(SQUARE, Rect(360, 0, 400, 400), 1.0, placed, placed)
    # 10% overlap: 0.1^2 * 1000 for content, 0.1 * 150 for the cell
    assert score == pytest.approx(100 - 10 - 15 + 30 + 8 + 3.2)


def test_cell_overlap_above_limit_is_rejected():
    score = score_candidate(SQUARE, Rect(200, 0, 400, 400), 1.0, [], [Rect(0, 0, 400, 400)])
    assert score == -math.inf


def test_letterbox_bars_may_overlap_more_than_picture():
    # A 4:1 picture in a square cell leaves 150px bars above and below.
    candidate = Rect(0, 0, 400, 400)
    placed_cell = Rect(0, 280, 400, 400)
    placed_content = Rect(0, 430, 400, 100)
    score = score_candidate(SQUARE, candidate, 4.0, [placed_content], [placed_cell])
    assert overlap_area(candidate, placed_cell) / candidate.area == pytest.approx(0.3)
    assert score == pytest.approx(100 - 0.3 * 150 + 30 + 15 + 3.2)


def test_candidate_positions_cover_lattice_and_anchors():
    positions = candidate_positions(SQUARE, 400, 300)
    assert len(positions) == 12 * 12 + 9
    assert (0.0, 0.0) in positions
    assert (600.0, 700.0) in positions
    assert (300.0, 350.0) in positions
    assert all(0 <= x <= 600 and 0 <= y <= 700 for x, y in positions)


def test_oversized_candidate_has_no_positions():
    assert candidate_positions(SQUARE, 1001, 100) == []


def test_target_size_respects_minimum_footprint():
    width, height, min_w, min_h = target_size(SQUARE, 16 / 9, 6)
    assert (min_w, min_h) == (250, 250)
    assert width >= min_w - 1e-9 and height >= min_h - 1e-9
    assert width / height == pytest.approx(16 / 9)


def test_accepted_placements_respect_overlap_limits():
    inputs = [
        (Container(1920, 1080), _panes(16 / 9, 4 / 3, 21 / 9)),
        (Container(1920, 1080), _panes(*[16 / 9] * 6)),
        (Container(1080, 1920), _panes(9 / 16, 16 / 9, 1.0, 4 / 3, 2.35)),
        (Container(800, 800), _panes(*[4 / 3, 16 / 9] * 4)),
    ]
    for container, panes in inputs:
        placements = place_panes(container, panes)
        for k, placed in enumerate(placements):
            if placed.fallback:
                continue
            assert placed.score > -math.inf
            for earlier in placements[:k]:
                content_fraction = overlap_area(placed.content, earlier.content) / placed.content.area
                cell_fraction = overlap_area(placed.cell.rect, earlier.cell.rect) / placed.cell.area
                assert content_fraction <= 0.15 + 1e-9
                assert cell_fraction <= 0.35 + 1e-9


def test_widest_pane_is_placed_first_but_z_order_follows_input():
    placements = place_panes(Container(1920, 1080), _panes(16 / 9, 4 / 3, 21 / 9))
    assert [p.entry.pane_id for p in placements] == ["p2", "p0", "p1"]
    z = {p.cell.pane_id: p.cell.z_index for p in placements}
    assert z == {"p0": 13, "p1": 12, "p2": 11}


def test_fallback_slots_when_nothing_fits():
    config = LayoutConfig().with_overrides(scale_ladder=(10.0,))
    placements = place_panes(SQUARE, _panes(1.0, 1.0, 1.0, 1.0), config)
    assert all(p.fallback for p in placements)
    assert all(p.score == 0 for p in placements)
    rects = [p.cell.rect for p in placements]
    first, last = rects[0], rects[3]
    assert (first.x, first.y, first.width, first.height) == pytest.approx((12.5, 12.5, 475, 475))
    assert (last.x, last.y, last.width, last.height) == pytest.approx((512.5, 512.5, 475, 475))
    assert rects[0] == fallback_rect(SQUARE, 1.0, 0, 4, config)


def test_overlap_layout_keeps_every_pane_even_with_fallbacks():
    config = LayoutConfig().with_overrides(scale_ladder=(10.0,))
    layout = try_overlap_layout(SQUARE, _panes(*[16 / 9] * 5), config)
    assert len(layout.cells) == 5
    assert sorted(c.pane_id for c in layout.cells) == [f"p{i}" for i in range(5)]
    assert layout.strategy == "overlap"


def test_overlap_layout_stays_on_screen():
    container = Container(1920, 1080)
    layout = try_overlap_layout(container, _panes(16 / 9, 16 / 9, 4 / 3, 9 / 16))
    for cell in layout.cells:
        assert cell.x >= -1e-6 and cell.y >= -1e-6
        assert cell.x + cell.width <= container.width + 1e-6
        assert cell.y + cell.height <= container.height + 1e-6
