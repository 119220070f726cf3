# -*- coding: utf-8 -*-
"""
Planners on cost maps with a unified API:
planner.plan(cost_map, start: (x,y), target) -> dict

- AStarPlanner.plan(cost_map, start, goal)
    -> {'success', 'path', 'cost', 'expanded', 'reason'}
- ReachabilityPlanner.plan(cost_map, start, budget)
    -> {'success', 'cells', 'hops'}

find_path() and reachable() are the plain-function forms.
"""

from __future__ import annotations
from typing import Any, Dict, Type

from .a_star import AStarPlanner, find_path, heuristic
from .reachability import ReachabilityPlanner, reachable
from .node_store import SearchNode, SearchNodeStore
from .config import SearchConfig, load_config

# Mapping used by factories/CLIs
PLANNERS: Dict[str, Type] = {
    "a_star": AStarPlanner,
    "reachability": ReachabilityPlanner,
}


def get_planner(name: str, **kwargs) -> Any:
    """
    Factory: instantiate a planner by name.

    Parameters
    ----------
    name : str
        One of: 'a_star', 'reachability'
    kwargs : dict
        Passed to the planner constructor (e.g., topology="square8")
    """
    name = name.strip().lower()
    if name not in PLANNERS:
        raise ValueError(f"Unknown planner '{name}'. Available: {sorted(PLANNERS)}")
    return PLANNERS[name](**kwargs)


__all__ = [
    "AStarPlanner",
    "ReachabilityPlanner",
    "SearchNode",
    "SearchNodeStore",
    "SearchConfig",
    "find_path",
    "reachable",
    "heuristic",
    "load_config",
    "get_planner",
    "PLANNERS",
]
