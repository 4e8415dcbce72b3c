from __future__ import annotations

"""Helper utilities for integrating palette_plus into external UIs.

This module exposes label/enum pairs for harmony types, brightness and
export formats, and provides export helpers that convert colors, swatches
and color schemes into plain values (HEX/ARGB/RGBA/NumPy) that UI code
can consume directly.
"""

from enum import Enum
from typing import Dict, Iterable, List, Mapping

import numpy as np

from .color_types import Color
from .harmony import HarmonyType
from .roles import Brightness, ColorRole


class ExportFormat(Enum):
    """Supported output formats for exported colors."""

    HEX = "hex"
    ARGB32 = "argb32"
    RGBA_01 = "rgba_01"
    RGBA_255 = "rgba_255"
    ARRAY = "array"

    @classmethod
    def from_value(cls, value: str) -> "ExportFormat":
        for fmt in cls:
            if fmt.value == value:
                return fmt
        raise ValueError(f"Unknown export format: {value}")


# Label/Enum pairs for UI choices
HARMONY_TYPE_OPTIONS: List[tuple[str, HarmonyType]] = [
    ("Analogous", HarmonyType.ANALOGOUS),
    ("Complementary", HarmonyType.COMPLEMENTARY),
    ("Monochromatic", HarmonyType.MONOCHROMATIC),
]
BRIGHTNESS_OPTIONS: List[tuple[str, Brightness]] = [
    ("Light", Brightness.LIGHT),
    ("Dark", Brightness.DARK),
]
EXPORT_FORMAT_OPTIONS: List[tuple[str, ExportFormat]] = [
    ("HEX", ExportFormat.HEX),
    ("ARGB (0xAARRGGBB)", ExportFormat.ARGB32),
    ("RGBA (0-1)", ExportFormat.RGBA_01),
    ("RGBA (0-255)", ExportFormat.RGBA_255),
    ("NumPy array", ExportFormat.ARRAY),
]

HARMONY_TYPE_LABEL_MAP: Dict[str, HarmonyType] = {
    label: value for label, value in HARMONY_TYPE_OPTIONS
}
BRIGHTNESS_LABEL_MAP: Dict[str, Brightness] = {
    label: value for label, value in BRIGHTNESS_OPTIONS
}


def _resolve(fmt: ExportFormat | str) -> ExportFormat:
    return fmt if isinstance(fmt, ExportFormat) else ExportFormat.from_value(fmt)


def _export_one(color: Color, fmt: ExportFormat) -> object:
    if fmt == ExportFormat.HEX:
        return color.to_hex(with_alpha=color.a < 1.0)
    if fmt == ExportFormat.ARGB32:
        return color.to_argb32()
    if fmt == ExportFormat.RGBA_01:
        return color.to_rgba()
    if fmt == ExportFormat.RGBA_255:
        argb = color.to_argb32()
        return ((argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF, (argb >> 24) & 0xFF)
    raise ValueError(f"Unsupported export format: {fmt}")


def export_colors(colors: Iterable[Color], fmt: ExportFormat | str) -> object:
    """Convert a sequence of colors to the desired format.

    Returns a list, or an ``(N, 4)`` float32 RGBA array for ``ARRAY``.
    """
    export_fmt = _resolve(fmt)
    if export_fmt == ExportFormat.ARRAY:
        rows = [c.to_rgba() for c in colors]
        return np.asarray(rows, dtype=np.float32).reshape(len(rows), 4)
    return [_export_one(c, export_fmt) for c in colors]


def export_swatch(swatch: Mapping[int, Color], fmt: ExportFormat | str) -> object:
    """Convert a swatch to ``{shade: value}``, or a (10, 4) array for ``ARRAY``."""
    export_fmt = _resolve(fmt)
    if export_fmt == ExportFormat.ARRAY:
        return export_colors(swatch.values(), export_fmt)
    return {index: _export_one(color, export_fmt) for index, color in swatch.items()}


def export_scheme(scheme: Mapping[ColorRole, Color], fmt: ExportFormat | str) -> object:
    """Convert a color scheme to ``{roleName: value}``.

    ``ARRAY`` yields rows in :class:`ColorRole` declaration order.
    """
    export_fmt = _resolve(fmt)
    if export_fmt == ExportFormat.ARRAY:
        return export_colors((scheme[role] for role in ColorRole), export_fmt)
    return {role.value: _export_one(color, export_fmt) for role, color in scheme.items()}


__all__ = [
    "ExportFormat",
    "HARMONY_TYPE_OPTIONS",
    "BRIGHTNESS_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
    "HARMONY_TYPE_LABEL_MAP",
    "BRIGHTNESS_LABEL_MAP",
    "export_colors",
    "export_swatch",
    "export_scheme",
]
