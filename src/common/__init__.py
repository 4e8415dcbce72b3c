"""
Where: `common` package.
What: lightweight shared infrastructure (logging setup, environment settings).
Why: keep the color library free of process-level concerns while the CLI
     and host applications reuse one configuration path.
"""

from .logging import setup_default_logging

__all__ = [
    "setup_default_logging",
]
