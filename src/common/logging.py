"""
Lightweight logging helpers for the project.

Notes:
- Every module gets its logger with `logging.getLogger(__name__)`; library
  code only emits DEBUG records and never configures handlers.
- Entry points (the CLI) call `setup_default_logging` once to get a sane
  minimal configuration when the host application has none.
"""

from __future__ import annotations

import logging


def setup_default_logging(level: int | str = "INFO") -> None:
    """Apply a minimal logging configuration once.

    - No-op when the root logger already has handlers
    - Intended to be called from runners/CLI entry points
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.INFO)
    else:
        lvl = int(level)

    root = logging.getLogger()
    if root.handlers:
        # Assume the app has configured logging
        return
    logging.basicConfig(
        level=lvl,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )


__all__ = ["setup_default_logging"]
