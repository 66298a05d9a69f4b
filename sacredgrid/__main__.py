import argparse
import json
import logging
from dataclasses import asdict
from typing import Any, Dict, Optional, Sequence

from sacredgrid import (
    GridConfig,
    GridEngine,
    ViewportBounds,
    clamp_scale,
)

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _add_grid_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--grid", choices=["hex", "diamond"], default="hex", help="Grid type (default: hex)")
    parser.add_argument("--unit", choices=["cm", "inch"], default="cm", help="Measurement unit (default: cm)")
    parser.add_argument("--scale", type=float, default=1.0, help="Zoom scale, clamped to [0.05, 5] (default: 1)")
    parser.add_argument(
        "--tier",
        choices=["full", "constrained"],
        default="full",
        help="Device tier selecting generation budgets (default: full)",
    )
    parser.add_argument(
        "--tolerance",
        type=float,
        default=10.0,
        help="Snap tolerance in screen pixels (default: 10)",
    )


def _config_from_args(args: argparse.Namespace) -> GridConfig:
    scale = clamp_scale(args.scale)
    if scale != args.scale:
        logger.warning("Scale %s clamped to %s", args.scale, scale)
    return GridConfig(
        grid_type=args.grid,
        unit=args.unit,
        scale=scale,
        tier=args.tier,
        snap_threshold=args.tolerance,
    )


def _primitives_payload(engine: GridEngine, viewport: ViewportBounds) -> Dict[str, Any]:
    primitives = engine.primitives(viewport)
    return {
        "viewport": asdict(viewport),
        "counts": {
            "circles": len(primitives.circles),
            "intersections": len(primitives.intersections),
            "cells": len(primitives.cells),
        },
        "circles": [asdict(c) for c in primitives.circles],
        "intersections": [asdict(p) for p in primitives.intersections],
        "cells": [asdict(c) for c in primitives.cells],
        "style": asdict(primitives.style) if primitives.style else None,
    }


def _pointer_payload(engine: GridEngine, x: float, y: float) -> Dict[str, Any]:
    result = engine.pointer((x, y))
    payload: Dict[str, Any] = {
        "snapped": result.snap.snapped,
        "point": asdict(result.point),
        "guides": [asdict(g) for g in result.guides],
    }
    source = getattr(result.snap, "source", None)
    if source is not None:
        payload["feature"] = {"kind": source.kind, "distance": source.distance}
    return payload


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Inspect sacred-geometry grids and snapping")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--indent", type=int, default=None, help="Indent JSON output")
    subparsers = parser.add_subparsers(dest="command", required=True)

    prim = subparsers.add_parser("primitives", help="Generate grid primitives for a viewport")
    prim.add_argument(
        "--viewport",
        type=float,
        nargs=4,
        metavar=("MINX", "MINY", "MAXX", "MAXY"),
        required=True,
        help="Viewport bounds in logical coordinates",
    )
    prim.add_argument("--counts-only", action="store_true", help="Print element counts only")
    _add_grid_arguments(prim)

    snap_parser = subparsers.add_parser("snap", help="Snap a point and print guides")
    snap_parser.add_argument("x", type=float)
    snap_parser.add_argument("y", type=float)
    _add_grid_arguments(snap_parser)

    args = parser.parse_args(argv)
    _configure_logging(args.log_level)

    engine = GridEngine(_config_from_args(args))
    if args.command == "primitives":
        viewport = ViewportBounds(*args.viewport)
        logger.info("Generating %s primitives for %s", args.grid, viewport)
        payload = _primitives_payload(engine, viewport)
        if args.counts_only:
            payload = {"counts": payload["counts"]}
    else:
        logger.info("Snapping (%s, %s) on %s grid", args.x, args.y, args.grid)
        payload = _pointer_payload(engine, args.x, args.y)

    print(json.dumps(payload, indent=args.indent))


if __name__ == "__main__":
    main()
