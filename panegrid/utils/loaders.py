"""Layout request loading helpers."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from panegrid.models import Container, PaneSpec


def parse_ratio(ratio: str) -> float:
    parts = ratio.split(":")
    if len(parts) != 2:
        raise ValueError(f"Invalid ratio '{ratio}', expected W:H")
    w = float(parts[0])
    h = float(parts[1])
    if w <= 0 or h <= 0:
        raise ValueError("Ratio components must be positive")
    return w / h


def parse_aspect_ratio(value: Any) -> Optional[float]:
    """Accept a number, a ``"W:H"`` string, or nothing.

    Numbers are passed through untouched; the engine substitutes the default
    for missing or non-positive ratios.
    """

    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid aspect ratio {value!r}")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if ":" in text:
            return parse_ratio(text)
        try:
            return float(text)
        except ValueError as exc:
            raise ValueError(f"Invalid aspect ratio '{value}'") from exc
    raise ValueError(f"Invalid aspect ratio {value!r}")


def parse_ratio_list(text: str) -> List[Optional[float]]:
    """Parse ``"16:9, 4:3, 1.5"`` into aspect ratios (blank entries skipped)."""

    return [parse_aspect_ratio(part) for part in text.split(",") if part.strip()]


def panes_from_dicts(items: Sequence[Dict[str, Any]]) -> List[PaneSpec]:
    panes: List[PaneSpec] = []
    for idx, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f"Pane #{idx} must be an object")
        pane_id = item.get("id", f"pane_{idx}")
        if isinstance(pane_id, (list, dict)):
            raise ValueError(f"Pane #{idx} id must be a string or number")
        ratio = item.get("aspect_ratio", item.get("aspectRatio"))
        panes.append(PaneSpec(pane_id=pane_id, aspect_ratio=parse_aspect_ratio(ratio)))
    return panes


def container_from_dict(data: Dict[str, Any]) -> Container:
    if not isinstance(data, dict) or "width" not in data or "height" not in data:
        raise ValueError("Request must include container.width and container.height")
    return Container(width=data["width"], height=data["height"])


def request_from_dict(data: Dict[str, Any]) -> Tuple[Container, List[PaneSpec]]:
    if not isinstance(data, dict):
        raise ValueError("Layout request must be a JSON object")
    container = container_from_dict(data.get("container"))
    panes = data.get("panes", [])
    if not isinstance(panes, list):
        raise ValueError("'panes' must be a list")
    return container, panes_from_dicts(panes)


def load_request(path: Path) -> Tuple[Container, List[PaneSpec]]:
    """Read ``{"container": {...}, "panes": [...]}`` from a JSON file."""

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Layout request not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Layout request {path} is not valid JSON: {exc}") from exc
    return request_from_dict(data)


def load_config_overrides(path: Path) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ValueError(f"Config file {path} is not valid JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("Config file must contain a JSON object")
    return data
