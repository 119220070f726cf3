"""
Logging setup for the command-line entry points.

Library modules only create loggers; call configure_logging() once from a
CLI main() to see their records on stdout.
"""

from __future__ import annotations

import logging
import sys


def configure_logging(level: int = logging.INFO, stream=None) -> None:
    """
    Configure root logging if no handlers are attached yet.

    Args:
        level: default logging level (e.g., logging.INFO, logging.DEBUG)
        stream: handler stream, stdout by default
    """
    root = logging.getLogger()

    # Don't duplicate handlers if someone already configured logging.
    if root.handlers:
        root.setLevel(level)
        return

    handler = logging.StreamHandler(stream=stream or sys.stdout)
    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    )
    handler.setFormatter(formatter)
    root.addHandler(handler)
    root.setLevel(level)
