"""Smart-mode layout strategies, in evaluation order."""

from .overlap import try_overlap_layout
from .stacks import try_horizontal_stack, try_vertical_stack
from .mosaic import try_mosaic
from .diagonal import try_diagonal

STRATEGY_REGISTRY = {
    "overlap": try_overlap_layout,
    "horizontal": try_horizontal_stack,
    "vertical": try_vertical_stack,
    "mosaic": try_mosaic,
    "diagonal": try_diagonal,
}

__all__ = ["STRATEGY_REGISTRY"]
