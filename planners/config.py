#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Search settings shared by the CLIs.

Settings live in a small JSON file, e.g.
    {"topology": "hex", "wall_cost": -1, "log_level": "INFO"}
Command-line flags override file values.
"""

from __future__ import annotations
from dataclasses import asdict, dataclass, fields
from typing import Any, Dict
import json
import logging

from grids.cost_map import WALL_COST
from grids.topology import parse_topology

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


@dataclass
class SearchConfig:
    topology: str = "hex"
    wall_cost: int = WALL_COST
    log_level: str = "WARNING"

    def __post_init__(self):
        self.topology = parse_topology(self.topology).value
        self.wall_cost = int(self.wall_cost)
        level = str(self.log_level).upper()
        if level not in _LEVELS:
            raise ValueError(f"Unknown log level '{self.log_level}'. Available: {list(_LEVELS)}")
        self.log_level = level

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchConfig":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown config keys {unknown}. Available: {sorted(known)}")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def merged(self, **overrides) -> "SearchConfig":
        """Copy with every non-None override applied."""
        data = self.to_dict()
        data.update({k: v for k, v in overrides.items() if v is not None})
        return SearchConfig.from_dict(data)


def load_config(path: str) -> SearchConfig:
    with open(path, "r") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object")
    return SearchConfig.from_dict(data)
