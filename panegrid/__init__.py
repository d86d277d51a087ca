"""Layout engine for tiling and overlapping video panes.

The package is organised around:

- layout inputs and results (`models.py`)
- tuning constants (`config.py`)
- partition mode (`grid.py`)
- smart mode and its strategies (`smart.py`, `strategies/`)
- request loading, JSON output and previews (`utils/`, `preview.py`)
- command line and Streamlit entry points (`cli.py`, `app.py`)
"""

from .config import DEFAULT_CONFIG, LayoutConfig
from .efficiency import calculate_efficiency, estimate_efficiency
from .geometry import Rect, fit_to_box
from .grid import compute_grid_layout
from .models import Cell, Container, Layout, PaneSpec
from .smart import compute_layout, compute_smart_layout, evaluate_strategies

__all__ = [
    "DEFAULT_CONFIG",
    "LayoutConfig",
    "Rect",
    "fit_to_box",
    "calculate_efficiency",
    "estimate_efficiency",
    "compute_grid_layout",
    "compute_smart_layout",
    "compute_layout",
    "evaluate_strategies",
    "Cell",
    "Container",
    "Layout",
    "PaneSpec",
]
