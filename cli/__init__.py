# -*- coding: utf-8 -*-
"""
Command-line entry points (run with `python -m cli.<name>`):

- run_query : one path / reachability query, JSON on stdout
- run_bench : timing sweep over generated maps, CSV output
"""
__all__ = [
    "run_query",
    "run_bench",
]
