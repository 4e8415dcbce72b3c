"""
Where: `common.env`
What: small typed parsers for environment variables.
Why: avoid scattering `os.getenv` plus fallback/guard logic across modules.
"""

from __future__ import annotations

import os
from typing import Optional


def env_str(name: str, default: Optional[str] = None) -> Optional[str]:
    """Return a string environment variable (unset or blank -> default)."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    return raw.strip()


def env_int(
    name: str, default: Optional[int] = None, *, min_value: Optional[int] = None
) -> Optional[int]:
    """Return an integer environment variable (unset/invalid -> default).

    Parameters
    ----------
    name : str
        Variable name.
    default : Optional[int]
        Fallback value (`None` is allowed).
    min_value : Optional[int]
        Lower bound; smaller values are raised to it.

    Returns
    -------
    Optional[int]
        Parsed integer, or `default` when unset or not an integer.
    """
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        val = int(raw)
    except ValueError:
        return default
    if min_value is not None and val < min_value:
        val = min_value
    return val


def env_bool(name: str, default: bool = False) -> bool:
    """Return a boolean environment variable (accepts 0/1, true/false)."""
    raw = os.getenv(name)
    if raw is None:
        return bool(default)
    try:
        # numbers first
        return int(raw) != 0
    except ValueError:
        s = raw.strip().lower()
        if s in {"true", "t", "yes", "y", "on"}:
            return True
        if s in {"false", "f", "no", "n", "off"}:
            return False
        return bool(default)
