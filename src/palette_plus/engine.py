from __future__ import annotations

"""Color conversion engine for HSL and sRGB.

This module defines the :class:`ColorEngine` protocol and a default
implementation that converts between sRGB channels and HSL, and computes
the relative luminance used for contrast decisions.
"""

import colorsys
from typing import Protocol, Tuple


HSL = Tuple[float, float, float]
SRGB = Tuple[float, float, float]


class ColorEngine(Protocol):
    """Protocol abstracting color space conversions."""

    def srgb_to_hsl(self, r: float, g: float, b: float) -> HSL: ...

    def hsl_to_srgb(self, h: float, s: float, l: float) -> SRGB: ...

    def normalize_hue(self, h: float) -> float: ...

    def relative_luminance(self, r: float, g: float, b: float) -> float: ...


class DefaultColorEngine:
    """Default implementation based on the standard RGB <-> HSL model."""

    def normalize_hue(self, h: float) -> float:
        """Normalize hue angle into [0, 360)."""
        h_norm = (h % 360.0 + 360.0) % 360.0
        # -1e-17 % 360.0 rounds up to exactly 360.0
        return 0.0 if h_norm >= 360.0 else h_norm

    def srgb_to_hsl(self, r: float, g: float, b: float) -> HSL:
        """Convert sRGB in [0, 1] to (hue in degrees, saturation, lightness)."""
        h, l, s = colorsys.rgb_to_hls(_clip01(r), _clip01(g), _clip01(b))
        return (self.normalize_hue(h * 360.0), _clip01(s), _clip01(l))

    def hsl_to_srgb(self, h: float, s: float, l: float) -> SRGB:
        """Convert HSL (hue in degrees) to sRGB in [0, 1]."""
        h_unit = self.normalize_hue(h) / 360.0
        r, g, b = colorsys.hls_to_rgb(h_unit, _clip01(l), _clip01(s))
        return (_clip01(r), _clip01(g), _clip01(b))

    def relative_luminance(self, r: float, g: float, b: float) -> float:
        """Relative luminance of an sRGB color (WCAG 2.x definition)."""
        rl, gl, bl = _srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b)
        return 0.2126 * rl + 0.7152 * gl + 0.0722 * bl


def _srgb_to_linear(c: float) -> float:
    if c <= 0.03928:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def _clip01(x: float) -> float:
    return max(0.0, min(1.0, x))


DEFAULT_ENGINE = DefaultColorEngine()
