from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from panegrid.config import LayoutConfig
from panegrid.models import GRID_MODE, LAYOUT_MODES, SMART_MODE
from panegrid.preview import save_preview
from panegrid.smart import compute_layout, evaluate_strategies
from panegrid.utils.loaders import load_config_overrides, load_request
from panegrid.utils.serialization import layout_to_dict, strategy_summary, write_json


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="panegrid",
        description="Compute grid or smart (overlapping) layouts for video panes.",
    )
    parser.add_argument("request", help="JSON file with {\"container\": {...}, \"panes\": [...]}")
    parser.add_argument("--mode", choices=list(LAYOUT_MODES), default=GRID_MODE, help="Layout mode (default: grid)")
    parser.add_argument("--output", help="Write the layout JSON here instead of stdout")
    parser.add_argument("--preview", help="Render a PNG preview of the layout to this path")
    parser.add_argument("--config", help="JSON file with layout config overrides")
    parser.add_argument("--verbose", action="store_true", help="Print per-strategy efficiencies in smart mode")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        container, panes = load_request(Path(args.request))
        config = LayoutConfig()
        if args.config:
            config = LayoutConfig.from_dict(load_config_overrides(Path(args.config)))
    except (FileNotFoundError, ValueError) as exc:
        parser.error(str(exc))

    if args.verbose:
        print(f"[layout] {len(panes)} panes in {container.width}x{container.height} ({args.mode})", file=sys.stderr)
        if args.mode == SMART_MODE and len(panes) > 1:
            for row in strategy_summary(evaluate_strategies(container, panes, config)):
                print(f"[smart] {row['strategy']}: {row['efficiency']:.3f}", file=sys.stderr)

    layout = compute_layout(container, panes, mode=args.mode, config=config)
    data = layout_to_dict(layout)

    if args.output:
        write_json(Path(args.output), data)
        print(f"[layout] saved {args.output}", file=sys.stderr)
    else:
        print(json.dumps(data, indent=2))

    if args.preview:
        save_preview(container, layout, panes, args.preview)
        print(f"[preview] saved {args.preview}", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
