"""Request loading and layout output helpers."""

from .loaders import load_request, parse_aspect_ratio, parse_ratio, panes_from_dicts
from .serialization import layout_to_dict, write_json

__all__ = [
    "load_request",
    "parse_aspect_ratio",
    "parse_ratio",
    "panes_from_dicts",
    "layout_to_dict",
    "write_json",
]
