#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
run_query.py
------------
Run a single path or reachability query and print the result as JSON.

The map is either loaded (--map, .npy/.json/text) or generated
(--size/--density/--seed). Settings come from --config (JSON) and are
overridden by --topology/--wall-cost/--log-level.

Examples:
  python -m cli.run_query path  --map level.txt --start 0,0 --goal 7,5 --topology hex
  python -m cli.run_query reach --size 12x12 --density 0.2 --seed 3 --start 5,5 --budget 3
"""

from __future__ import annotations
import argparse
import json
import logging
import sys
from typing import List, Optional, Tuple

import numpy as np

from grids.cost_map import CostMap
from grids.generator import generate_cost_map
from grids.io import load_cost_map
from planners.a_star import AStarPlanner
from planners.config import SearchConfig, load_config
from planners.reachability import ReachabilityPlanner

from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def _parse_size(s: str) -> Tuple[int, int]:
    token = s.strip().lower()
    try:
        w, h = token.split("x")
        return int(w), int(h)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Bad size '{s}', expected like 30x20 (width x height)")


def _parse_coord(s: str) -> Tuple[int, int]:
    try:
        x, y = s.split(",")
        return int(x), int(y)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Bad coordinate '{s}', expected like 3,4")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Path / reachability query on a cost map")
    common = argparse.ArgumentParser(add_help=False)
    src = common.add_mutually_exclusive_group(required=True)
    src.add_argument("--map", help="cost map file (.npy, .json or whitespace text)")
    src.add_argument("--size", type=_parse_size, help="generate a WxH map instead of loading one")
    common.add_argument("--density", type=float, default=0.2, help="wall density for generated maps")
    common.add_argument("--seed", type=int, default=0, help="seed for generated maps")
    common.add_argument("--config", help="JSON settings file")
    common.add_argument("--topology", help="hex | square4 | square8")
    common.add_argument("--wall-cost", type=int, dest="wall_cost", help="cost value marking walls")
    common.add_argument("--log-level", dest="log_level", help="DEBUG, INFO, WARNING, ...")
    common.add_argument("--start", type=_parse_coord, required=True, help="x,y")

    sub = ap.add_subparsers(dest="command", required=True)
    p = sub.add_parser("path", parents=[common], help="lowest-cost path start -> goal")
    p.add_argument("--goal", type=_parse_coord, required=True, help="x,y")
    r = sub.add_parser("reach", parents=[common], help="cells reachable within a hop budget")
    r.add_argument("--budget", type=int, required=True, help="number of hops")
    return ap


def _load_map(args, cfg: SearchConfig) -> CostMap:
    if args.map:
        # .json maps carry their own wall value unless one was configured
        explicit = args.config is not None or args.wall_cost is not None
        try:
            return load_cost_map(args.map, wall_cost=cfg.wall_cost if explicit else None)
        except OSError as e:
            raise SystemExit(f"Could not read map '{args.map}': {e}")
    w, h = args.size
    keep = [args.start] + ([args.goal] if getattr(args, "goal", None) else [])
    gm = generate_cost_map(w, h, wall_density=args.density, keep_free=keep,
                           rng=np.random.default_rng(args.seed), wall_cost=cfg.wall_cost)
    logger.info("generated %dx%d map, seed %d, wall fraction %.2f", w, h, args.seed, gm.wall_fraction)
    return gm.cost_map


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        cfg = load_config(args.config) if args.config else SearchConfig()
        cfg = cfg.merged(topology=args.topology, wall_cost=args.wall_cost, log_level=args.log_level)
    except OSError as e:
        raise SystemExit(f"Could not read config '{args.config}': {e}")
    except ValueError as e:
        raise SystemExit(str(e))
    # stdout carries the JSON result
    configure_logging(cfg.level, stream=sys.stderr)

    try:
        cost_map = _load_map(args, cfg)
        if args.command == "path":
            res = AStarPlanner(cfg.topology).plan(cost_map, args.start, args.goal)
        else:
            res = ReachabilityPlanner(cfg.topology).plan(cost_map, args.start, args.budget)
    except (IndexError, ValueError) as e:
        raise SystemExit(str(e))

    if args.command == "path":
        out = {
            "success": res["success"],
            "path": [list(c) for c in res["path"]],
            "cost": res["cost"],
            "expanded": res["expanded"],
            "reason": res["reason"],
        }
    else:
        out = {
            "success": res["success"],
            "cells": [list(c) for c in res["cells"]],
        }
    out["topology"] = cfg.topology
    print(json.dumps(out))
    return 0


if __name__ == "__main__":
    sys.exit(main())
