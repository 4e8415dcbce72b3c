from __future__ import annotations

"""Core color types used by the palette_plus library.

This module defines small immutable value types for colors in ARGB and
HSL, plus the compositing and luminance helpers the theme layer relies on.
"""

from dataclasses import dataclass, replace
from typing import Optional

from util.color import format_hex, normalize_color, to_argb32

from .engine import DEFAULT_ENGINE, ColorEngine


def _clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


@dataclass(frozen=True)
class Color:
    """Immutable ARGB color with channels normalized to [0, 1].

    Attributes
    ----------
    a, r, g, b:
        Alpha, red, green and blue channels in [0, 1]. Equality is
        componentwise.
    """

    a: float
    r: float
    g: float
    b: float

    def __post_init__(self) -> None:
        for name in ("a", "r", "g", "b"):
            v = getattr(self, name)
            if not (0.0 <= v <= 1.0):
                raise ValueError(f"{name} must be in [0, 1], got {v!r}.")

    @classmethod
    def from_argb(cls, a: int, r: int, g: int, b: int) -> "Color":
        """Create a Color from 8-bit channels (0-255)."""
        for name, v in (("a", a), ("r", r), ("g", g), ("b", b)):
            if not (0 <= v <= 255):
                raise ValueError(f"{name} must be in [0, 255].")
        return cls(a / 255.0, r / 255.0, g / 255.0, b / 255.0)

    @classmethod
    def from_argb32(cls, value: int) -> "Color":
        """Create a Color from a packed 0xAARRGGBB integer."""
        r, g, b, a = normalize_color(int(value))
        return cls(a, r, g, b)

    @classmethod
    def from_rgbo(cls, r: int, g: int, b: int, opacity: float) -> "Color":
        """Create a Color from 8-bit RGB and an opacity in [0, 1]."""
        return cls.from_argb(int(round(_clamp01(opacity) * 255)), r, g, b)

    @classmethod
    def from_hex(cls, hex_str: str) -> "Color":
        """Create a Color from "#RRGGBB" or "#AARRGGBB"."""
        r, g, b, a = normalize_color(hex_str)
        return cls(a, r, g, b)

    @classmethod
    def parse(cls, value: object) -> "Color":
        """Create a Color from any form accepted by :func:`util.color.normalize_color`."""
        if isinstance(value, Color):
            return value
        r, g, b, a = normalize_color(value)
        return cls(a, r, g, b)

    def to_rgba(self) -> tuple[float, float, float, float]:
        """Return (r, g, b, a) in [0, 1]."""
        return (self.r, self.g, self.b, self.a)

    def to_argb32(self) -> int:
        """Return the packed 0xAARRGGBB integer (8-bit rounding)."""
        return to_argb32(self.to_rgba())

    def to_hex(self, with_alpha: bool = False) -> str:
        """Return "#RRGGBB" (or "#AARRGGBB" when `with_alpha`)."""
        return format_hex(self.to_rgba(), with_alpha=with_alpha)

    def with_alpha(self, alpha: float) -> "Color":
        """Return a copy with alpha replaced (clamped to [0, 1])."""
        return replace(self, a=_clamp01(alpha))

    def to_hsl(self, engine: Optional[ColorEngine] = None) -> "HSLColor":
        """Return the HSL representation of this color."""
        return HSLColor.from_color(self, engine)

    def compute_luminance(self, engine: Optional[ColorEngine] = None) -> float:
        """Return the relative luminance in [0, 1] (alpha ignored)."""
        if engine is None:
            engine = DEFAULT_ENGINE
        return engine.relative_luminance(self.r, self.g, self.b)

    def __str__(self) -> str:
        return self.to_hex(with_alpha=self.a < 1.0)


@dataclass(frozen=True)
class HSLColor:
    """HSL representation used as an intermediate computation basis.

    Attributes
    ----------
    alpha:
        Opacity in [0, 1].
    hue:
        Hue angle in degrees, normalized to [0, 360).
    saturation, lightness:
        Values in [0, 1].
    """

    alpha: float
    hue: float
    saturation: float
    lightness: float

    @classmethod
    def from_ahsl(
        cls,
        alpha: float,
        hue: float,
        saturation: float,
        lightness: float,
        engine: Optional[ColorEngine] = None,
    ) -> "HSLColor":
        """Create an HSLColor, normalizing hue and clamping the other components."""
        if engine is None:
            engine = DEFAULT_ENGINE
        return cls(
            alpha=_clamp01(alpha),
            hue=engine.normalize_hue(hue),
            saturation=_clamp01(saturation),
            lightness=_clamp01(lightness),
        )

    @classmethod
    def from_color(cls, color: Color, engine: Optional[ColorEngine] = None) -> "HSLColor":
        """Convert a Color to HSL using the given ColorEngine."""
        if engine is None:
            engine = DEFAULT_ENGINE
        h, s, l = engine.srgb_to_hsl(color.r, color.g, color.b)
        return cls(alpha=color.a, hue=h, saturation=s, lightness=l)

    def to_color(self, engine: Optional[ColorEngine] = None) -> Color:
        """Convert back to an ARGB Color."""
        if engine is None:
            engine = DEFAULT_ENGINE
        r, g, b = engine.hsl_to_srgb(self.hue, self.saturation, self.lightness)
        return Color(self.alpha, r, g, b)

    def with_lightness(self, lightness: float) -> "HSLColor":
        """Return a copy with lightness replaced (clamped to [0, 1])."""
        return replace(self, lightness=_clamp01(lightness))

    def with_hue(self, hue: float, engine: Optional[ColorEngine] = None) -> "HSLColor":
        """Return a copy with hue replaced (normalized to [0, 360))."""
        if engine is None:
            engine = DEFAULT_ENGINE
        return replace(self, hue=engine.normalize_hue(hue))


def alpha_blend(foreground: Color, background: Color) -> Color:
    """Composite `foreground` over `background` (Porter-Duff "over")."""
    alpha = foreground.a
    if alpha == 0.0:
        return background
    inv_alpha = 1.0 - alpha
    back_alpha = background.a
    if back_alpha == 1.0:
        return Color(
            1.0,
            _clamp01(foreground.r * alpha + background.r * inv_alpha),
            _clamp01(foreground.g * alpha + background.g * inv_alpha),
            _clamp01(foreground.b * alpha + background.b * inv_alpha),
        )
    back_alpha = back_alpha * inv_alpha
    out_alpha = alpha + back_alpha
    if out_alpha == 0.0:
        return Color(0.0, 0.0, 0.0, 0.0)
    return Color(
        _clamp01(out_alpha),
        _clamp01((foreground.r * alpha + background.r * back_alpha) / out_alpha),
        _clamp01((foreground.g * alpha + background.g * back_alpha) / out_alpha),
        _clamp01((foreground.b * alpha + background.b * back_alpha) / out_alpha),
    )


BLACK = Color(1.0, 0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0, 1.0)
TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)
