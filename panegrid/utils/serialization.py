"""JSON output for computed layouts."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List

from panegrid.models import Cell, Layout


def cell_to_dict(cell: Cell) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "pane_id": cell.pane_id,
        "x": float(cell.x),
        "y": float(cell.y),
        "width": float(cell.width),
        "height": float(cell.height),
    }
    if cell.z_index is not None:
        data["z_index"] = int(cell.z_index)
    if cell.row is not None:
        data["row"] = int(cell.row)
    if cell.col is not None:
        data["col"] = int(cell.col)
    return data


def layout_to_dict(layout: Layout) -> Dict[str, Any]:
    data: Dict[str, Any] = {
        "mode": layout.mode,
        "rows": layout.rows,
        "cols": layout.cols,
        "efficiency": float(layout.efficiency),
        "cells": [cell_to_dict(c) for c in layout.cells],
    }
    if layout.strategy is not None:
        data["strategy"] = layout.strategy
    if layout.cell_width is not None and layout.cell_height is not None:
        data["cell_width"] = float(layout.cell_width)
        data["cell_height"] = float(layout.cell_height)
    return data


def strategy_summary(candidates) -> List[Dict[str, Any]]:
    return [
        {"strategy": name, "efficiency": float(layout.efficiency)}
        for name, layout in candidates
    ]


def write_json(path: Path, data: Any) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as fh:
        json.dump(data, fh, indent=2)
