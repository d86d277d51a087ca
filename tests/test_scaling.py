import pytest

from panegrid.geometry import content_region, overlap_area
from panegrid.models import Cell, Container
from panegrid.scaling import max_pairwise_overlap, scale_layout_to_fit


SQUARE = Container(1000, 1000)


def _box(cell):
    return (cell.x, cell.y, cell.width, cell.height)


def test_single_cell_is_centered_without_scaling():
    (cell,) = scale_layout_to_fit(SQUARE, [Cell("a", 0, 0, 100, 50, z_index=11)])
    assert _box(cell) == pytest.approx((450, 475, 100, 50))
    assert cell.z_index == 11


def test_scale_is_capped():
    cells = [Cell("a", 0, 0, 100, 100), Cell("b", 100, 0, 100, 100)]
    a, b = scale_layout_to_fit(SQUARE, cells)
    assert _box(a) == pytest.approx((370, 435, 130, 130))
    assert _box(b) == pytest.approx((500, 435, 130, 130))


def test_scale_fills_the_tighter_axis():
    cells = [Cell("a", 100, 100, 400, 200), Cell("b", 500, 100, 400, 200)]
    a, b = scale_layout_to_fit(Container(1000, 500), cells)
    # bounding box 800x200 grows by 1.25 to span the full width
    assert _box(a) == pytest.approx((0, 125, 500, 250))
    assert _box(b) == pytest.approx((500, 125, 500, 250))


def test_heavy_overlap_keeps_original_size():
    cells = [Cell("a", 0, 0, 100, 100), Cell("b", 50, 0, 100, 100)]
    assert max_pairwise_overlap(cells) == pytest.approx(0.5)
    a, b = scale_layout_to_fit(SQUARE, cells)
    assert _box(a) == pytest.approx((425, 450, 100, 100))
    assert _box(b) == pytest.approx((475, 450, 100, 100))


def test_rescale_check_is_looser_than_placement_content_limit():
    # 30% picture overlap would be rejected at placement time (limit 0.15),
    # but passes the aggregate 0.4 check after rescaling.
    cells = [Cell("a", 0, 0, 100, 100), Cell("b", 70, 0, 100, 100)]
    a, b = scale_layout_to_fit(SQUARE, cells)
    assert a.width == pytest.approx(130)
    content_a = content_region(a.rect, 1.0)
    content_b = content_region(b.rect, 1.0)
    assert overlap_area(content_b, content_a) / content_b.area == pytest.approx(0.3)


def test_empty_input_is_returned_unchanged():
    assert scale_layout_to_fit(SQUARE, []) == []
