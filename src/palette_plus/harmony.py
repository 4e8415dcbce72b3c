from __future__ import annotations

"""Color harmonies derived from a base hue.

This module defines :class:`HarmonyType` and the three generators it
dispatches to. All generators work in HSL space and preserve the alpha of
the base color.
"""

from enum import Enum
from typing import List, Optional

from .color_types import Color, HSLColor
from .engine import ColorEngine


class InvalidStepsError(ValueError):
    """Raised when a harmony generator is asked for too few steps."""

    def __init__(self, steps: int, minimum: int) -> None:
        super().__init__(f"Steps must be at least {minimum}, got {steps}.")
        self.steps = steps
        self.minimum = minimum


class HarmonyType(Enum):
    """Strategies for deriving related colors from a base hue."""

    ANALOGOUS = "analogous"
    COMPLEMENTARY = "complementary"
    MONOCHROMATIC = "monochromatic"

    @classmethod
    def from_value(cls, value: "HarmonyType | str") -> "HarmonyType":
        if isinstance(value, HarmonyType):
            return value
        key = str(value).strip().lower()
        for harmony in cls:
            if harmony.value == key or harmony.name.lower() == key:
                return harmony
        raise ValueError(f"Unknown harmony type: {value!r}")


def monochromatic(
    base: Color,
    steps: int = 5,
    engine: Optional[ColorEngine] = None,
) -> List[Color]:
    """Generate `steps` colors sharing the hue and saturation of `base`.

    Lightness follows ``0.15 + 0.7 * t**2`` with ``t = i / (steps - 1)``,
    a quadratic ease-in that places more samples near the dark end.

    Raises
    ------
    InvalidStepsError
        If `steps` is less than 2.
    """
    if steps < 2:
        raise InvalidStepsError(steps, 2)

    hsl = HSLColor.from_color(base, engine)
    colors: List[Color] = []
    for i in range(steps):
        t = i / (steps - 1)
        lightness = 0.15 + 0.7 * t * t
        colors.append(hsl.with_lightness(lightness).to_color(engine))
    return colors


def analogous(
    base: Color,
    steps: int = 3,
    angle: float = 30.0,
    engine: Optional[ColorEngine] = None,
) -> List[Color]:
    """Generate `steps` colors whose hues are centered on the base hue.

    The hue offset of entry ``i`` is ``(i - (steps - 1) / 2) * angle``, so
    ``steps=3`` yields offsets ``[-angle, 0, +angle]``. Saturation and
    lightness are unchanged.

    Raises
    ------
    InvalidStepsError
        If `steps` is less than 1.
    """
    if steps < 1:
        raise InvalidStepsError(steps, 1)

    hsl = HSLColor.from_color(base, engine)
    colors: List[Color] = []
    for i in range(steps):
        offset = (i - (steps - 1) / 2.0) * angle
        colors.append(hsl.with_hue(hsl.hue + offset, engine).to_color(engine))
    return colors


def complementary(base: Color, engine: Optional[ColorEngine] = None) -> List[Color]:
    """Return ``[base, complement]``.

    The complement sits 180 degrees away. Its lightness is scaled by 0.8
    when the base lightness is strictly above 0.5 and by 1.2 otherwise, then
    clamped to [0, 1].
    """
    hsl = HSLColor.from_color(base, engine)
    if hsl.lightness > 0.5:
        lightness = hsl.lightness * 0.8
    else:
        lightness = hsl.lightness * 1.2
    complement = hsl.with_hue(hsl.hue + 180.0, engine).with_lightness(lightness)
    return [base, complement.to_color(engine)]


def generate_harmonic_colors(
    base: Color,
    harmony_type: HarmonyType,
    steps: int = 3,
    angle: float = 30.0,
    engine: Optional[ColorEngine] = None,
) -> List[Color]:
    """Dispatch to the generator selected by `harmony_type`.

    `steps` is used by analogous and monochromatic, `angle` by analogous only.
    """
    if harmony_type == HarmonyType.ANALOGOUS:
        return analogous(base, steps=steps, angle=angle, engine=engine)
    if harmony_type == HarmonyType.COMPLEMENTARY:
        return complementary(base, engine=engine)
    if harmony_type == HarmonyType.MONOCHROMATIC:
        return monochromatic(base, steps=steps, engine=engine)

    raise ValueError(f"Unsupported HarmonyType: {harmony_type}")


__all__ = [
    "HarmonyType",
    "InvalidStepsError",
    "monochromatic",
    "analogous",
    "complementary",
    "generate_harmonic_colors",
]
