"""Shared fixtures.

- Seed colors used across swatch/harmony/theme tests
- Environment isolation for `common.settings`
"""

from __future__ import annotations

from typing import Iterator

import pytest

from common import settings
from palette_plus import Color


@pytest.fixture()
def red() -> Color:
    return Color.from_argb32(0xFFFF0000)


@pytest.fixture()
def blue() -> Color:
    """Material blue 500."""
    return Color.from_argb32(0xFF2196F3)


@pytest.fixture()
def dark_navy() -> Color:
    """HSL lightness below 0.2."""
    return Color.from_argb32(0xFF0A1628)


@pytest.fixture()
def pale_blue() -> Color:
    """HSL lightness above 0.8."""
    return Color.from_argb32(0xFFE3F2FD)


@pytest.fixture()
def clean_env(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    for name in ("PALETTE_PLUS_LOG_LEVEL", "PALETTE_PLUS_CONFIG"):
        monkeypatch.delenv(name, raising=False)
    settings.reload_from_env()
    yield
    monkeypatch.undo()
    settings.reload_from_env()
