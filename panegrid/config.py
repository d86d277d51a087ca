"""Named tuning constants for the layout engine."""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, Tuple


DEFAULT_ASPECT_RATIO = 16 / 9

# Partition mode scoring
GRID_TARGET_RATIO = 16 / 9
GRID_RATIO_WEIGHT = 0.6
GRID_FILL_WEIGHT = 0.4

# Overlap evaluator
BASE_SCORE = 100.0
CONTENT_OVERLAP_LIMIT = 0.15
CELL_OVERLAP_LIMIT = 0.35
CONTENT_OVERLAP_PENALTY = 1000.0
CELL_OVERLAP_PENALTY = 150.0
ON_SCREEN_BONUS = 30.0
CORNER_BONUS = 15.0
EDGE_BONUS = 8.0
EDGE_TOLERANCE_PX = 10.0
SIZE_BONUS_WEIGHT = 20.0

# Overlap placer
AREA_SHARE_FACTOR = 0.7
SCALE_LADDER: Tuple[float, ...] = (1.3, 1.2, 1.1, 1.0, 0.9, 0.8)
POSITION_GRID_STEPS = 12
FALLBACK_FILL = 0.95

# Layout scaler
MAX_LAYOUT_SCALE = 1.3
RESCALE_OVERLAP_LIMIT = 0.4

# Alternative strategies
STACK_FILL = 0.95
MOSAIC_FEATURED_WIDTH = 0.65
MOSAIC_SIDE_FILL = 0.95
DIAGONAL_BASE_WIDTH = 0.85
DIAGONAL_WIDTH_STEP = 0.07
DIAGONAL_MIN_WIDTH = 0.35
DIAGONAL_MAX_WIDTH = 0.7
DIAGONAL_MAX_HEIGHT = 0.85
DIAGONAL_MARGIN = 0.02

# Efficiency estimator
OVERLAP_COMPENSATION_STEP = 0.05
OVERLAP_COMPENSATION_FLOOR = 0.7
TINY_PANE_PENALTY = 0.5

# Count buckets: <=2 panes, <=4 panes, more
MIN_SIDE_FRACTIONS: Tuple[float, float, float] = (0.4, 0.3, 0.25)
MIN_EFFICIENCY_FRACTIONS: Tuple[float, float, float] = (0.3, 0.2, 0.15)

# z-order base for every smart strategy
Z_INDEX_BASE = 10

_TUPLE_FIELDS = ("scale_ladder", "min_side_fractions", "min_efficiency_fractions")
_INT_FIELDS = ("position_grid_steps", "z_index_base")


def _as_number(key: str, value: Any) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{key} must be a number, got {value!r}")
    try:
        number = float(value)
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} must be a number, got {value!r}") from exc
    if not math.isfinite(number):
        raise ValueError(f"{key} must be finite, got {value!r}")
    return number


def _bucket(fractions: Tuple[float, float, float], count: int) -> float:
    if count <= 2:
        return fractions[0]
    if count <= 4:
        return fractions[1]
    return fractions[2]


@dataclass(frozen=True)
class LayoutConfig:
    """Weights and thresholds used by both layout modes.

    The defaults reproduce the stock engine behaviour. Override single values
    with :meth:`with_overrides` or build one from a JSON mapping with
    :meth:`from_dict`.
    """

    grid_target_ratio: float = GRID_TARGET_RATIO
    grid_ratio_weight: float = GRID_RATIO_WEIGHT
    grid_fill_weight: float = GRID_FILL_WEIGHT

    base_score: float = BASE_SCORE
    content_overlap_limit: float = CONTENT_OVERLAP_LIMIT
    cell_overlap_limit: float = CELL_OVERLAP_LIMIT
    content_overlap_penalty: float = CONTENT_OVERLAP_PENALTY
    cell_overlap_penalty: float = CELL_OVERLAP_PENALTY
    on_screen_bonus: float = ON_SCREEN_BONUS
    corner_bonus: float = CORNER_BONUS
    edge_bonus: float = EDGE_BONUS
    edge_tolerance: float = EDGE_TOLERANCE_PX
    size_bonus_weight: float = SIZE_BONUS_WEIGHT

    area_share_factor: float = AREA_SHARE_FACTOR
    scale_ladder: Tuple[float, ...] = SCALE_LADDER
    position_grid_steps: int = POSITION_GRID_STEPS
    fallback_fill: float = FALLBACK_FILL

    max_layout_scale: float = MAX_LAYOUT_SCALE
    rescale_overlap_limit: float = RESCALE_OVERLAP_LIMIT

    stack_fill: float = STACK_FILL
    mosaic_featured_width: float = MOSAIC_FEATURED_WIDTH
    mosaic_side_fill: float = MOSAIC_SIDE_FILL
    diagonal_base_width: float = DIAGONAL_BASE_WIDTH
    diagonal_width_step: float = DIAGONAL_WIDTH_STEP
    diagonal_min_width: float = DIAGONAL_MIN_WIDTH
    diagonal_max_width: float = DIAGONAL_MAX_WIDTH
    diagonal_max_height: float = DIAGONAL_MAX_HEIGHT
    diagonal_margin: float = DIAGONAL_MARGIN

    overlap_compensation_step: float = OVERLAP_COMPENSATION_STEP
    overlap_compensation_floor: float = OVERLAP_COMPENSATION_FLOOR
    tiny_pane_penalty: float = TINY_PANE_PENALTY

    z_index_base: int = Z_INDEX_BASE
    min_side_fractions: Tuple[float, float, float] = MIN_SIDE_FRACTIONS
    min_efficiency_fractions: Tuple[float, float, float] = MIN_EFFICIENCY_FRACTIONS

    def min_side_fraction(self, count: int) -> float:
        """Minimum pane side (as a fraction of the container) for placement."""

        return _bucket(self.min_side_fractions, count)

    def min_efficiency_fraction(self, count: int) -> float:
        """Side fraction below which a pane counts as tiny for scoring."""

        return _bucket(self.min_efficiency_fractions, count)

    def with_overrides(self, **overrides: Any) -> "LayoutConfig":
        known = {f.name for f in fields(self)}
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise ValueError(f"Unknown layout config keys: {unknown}")
        for key, value in list(overrides.items()):
            if key in _TUPLE_FIELDS:
                if isinstance(value, (str, bytes, dict)):
                    raise ValueError(f"{key} must be a list of numbers")
                try:
                    overrides[key] = tuple(_as_number(key, v) for v in value)
                except TypeError as exc:
                    raise ValueError(f"{key} must be a list of numbers") from exc
            elif key in _INT_FIELDS:
                number = _as_number(key, value)
                if not number.is_integer():
                    raise ValueError(f"{key} must be a whole number, got {value!r}")
                overrides[key] = int(number)
            else:
                overrides[key] = _as_number(key, value)
        if "scale_ladder" in overrides:
            ladder = overrides["scale_ladder"]
            if not ladder or any(s <= 0 for s in ladder):
                raise ValueError("scale_ladder must contain positive scales")
        for key in ("min_side_fractions", "min_efficiency_fractions"):
            if key in overrides and len(overrides[key]) != 3:
                raise ValueError(f"{key} needs one value per count bucket (3)")
        if "position_grid_steps" in overrides and overrides["position_grid_steps"] < 2:
            raise ValueError("position_grid_steps must be at least 2")
        return replace(self, **overrides)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LayoutConfig":
        if not isinstance(data, dict):
            raise ValueError("Layout config must be a JSON object")
        return cls().with_overrides(**data)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        for key in _TUPLE_FIELDS:
            data[key] = list(getattr(self, key))
        return data


DEFAULT_CONFIG = LayoutConfig()
