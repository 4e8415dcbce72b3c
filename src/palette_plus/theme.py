from __future__ import annotations

"""Material 3 color scheme assembly.

This module turns a single seed color into a complete role -> color map:
harmonic colors seed the secondary and tertiary branches, each branch gets
its own swatch for container shades, and every "on" color is a binary
black/white pick by relative luminance. Caller overrides are merged last.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Mapping, Optional

from .color_types import BLACK, WHITE, Color, HSLColor, alpha_blend
from .config import ThemeConfig
from .engine import ColorEngine
from .harmony import generate_harmonic_colors
from .roles import Brightness, ColorRole
from .swatch import generate_swatch

logger = logging.getLogger(__name__)

LIGHT_ERROR = Color.from_argb32(0xFFB00020)
DARK_ERROR = Color.from_argb32(0xFFCF6679)

INVERSE_SURFACE_TINT = 0.05
SURFACE_CONTAINER_NUDGE = 0.05
NEUTRAL_CONTAINER_LIGHTNESS = {Brightness.LIGHT: 0.95, Brightness.DARK: 0.07}

# Roles without their own rule; they take the resolved value of another role.
_ALIASES: Mapping[ColorRole, ColorRole] = {
    ColorRole.BACKGROUND: ColorRole.SURFACE,
    ColorRole.ON_BACKGROUND: ColorRole.ON_SURFACE,
    ColorRole.SURFACE_BRIGHT: ColorRole.SURFACE,
    ColorRole.SURFACE_DIM: ColorRole.SURFACE,
    ColorRole.SURFACE_VARIANT: ColorRole.SURFACE_CONTAINER_HIGHEST,
    ColorRole.PRIMARY_FIXED: ColorRole.PRIMARY,
    ColorRole.PRIMARY_FIXED_DIM: ColorRole.PRIMARY,
    ColorRole.ON_PRIMARY_FIXED: ColorRole.ON_PRIMARY,
    ColorRole.ON_PRIMARY_FIXED_VARIANT: ColorRole.ON_PRIMARY,
    ColorRole.SECONDARY_FIXED: ColorRole.SECONDARY,
    ColorRole.SECONDARY_FIXED_DIM: ColorRole.SECONDARY,
    ColorRole.ON_SECONDARY_FIXED: ColorRole.ON_SECONDARY,
    ColorRole.ON_SECONDARY_FIXED_VARIANT: ColorRole.ON_SECONDARY,
    ColorRole.TERTIARY_FIXED: ColorRole.TERTIARY,
    ColorRole.TERTIARY_FIXED_DIM: ColorRole.TERTIARY,
    ColorRole.ON_TERTIARY_FIXED: ColorRole.ON_TERTIARY,
    ColorRole.ON_TERTIARY_FIXED_VARIANT: ColorRole.ON_TERTIARY,
}


class ColorScheme(Mapping[ColorRole, Color]):
    """Total, read-only mapping from every :class:`ColorRole` to a Color.

    Roles are also reachable as snake_case attributes
    (``scheme.on_primary_container``).
    """

    __slots__ = ("_colors", "_brightness")

    def __init__(self, brightness: Brightness, colors: Mapping[ColorRole, Color]) -> None:
        missing = [role.value for role in ColorRole if role not in colors]
        if missing:
            raise ValueError(f"color scheme is missing roles: {missing}")
        self._brightness = brightness
        self._colors: Dict[ColorRole, Color] = {role: colors[role] for role in ColorRole}

    @property
    def brightness(self) -> Brightness:
        return self._brightness

    def __getitem__(self, role: ColorRole) -> Color:
        return self._colors[role]

    def __iter__(self) -> Iterator[ColorRole]:
        return iter(self._colors)

    def __len__(self) -> int:
        return len(self._colors)

    def __getattr__(self, name: str) -> Color:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._colors[ColorRole[name.upper()]]
        except KeyError:
            raise AttributeError(f"{type(self).__name__} has no role {name!r}") from None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorScheme):
            return NotImplemented
        return self._brightness == other._brightness and self._colors == other._colors

    def __hash__(self) -> int:
        return hash((self._brightness, tuple(self._colors.items())))

    def __repr__(self) -> str:
        return f"ColorScheme(brightness={self._brightness.value}, roles={len(self._colors)})"

    def to_dict(self) -> Dict[str, Color]:
        """Return a plain dict keyed by camelCase role name."""
        return {role.value: color for role, color in self._colors.items()}


@dataclass(frozen=True)
class Theme:
    """Generated theme: a color scheme and the brightness it was built for."""

    color_scheme: ColorScheme
    brightness: Brightness
    use_material3: bool = True


@dataclass(frozen=True)
class ThemePair:
    """Light and dark themes built from the same seed and harmony settings."""

    light: Theme
    dark: Theme


def on_color(background: Color, engine: Optional[ColorEngine] = None) -> Color:
    """Return black or white, whichever reads better on `background`.

    Binary threshold: black when relative luminance is above 0.5.
    """
    return BLACK if background.compute_luminance(engine) > 0.5 else WHITE


def error_color(brightness: Brightness) -> Color:
    """Default error color for the given brightness."""
    return LIGHT_ERROR if brightness == Brightness.LIGHT else DARK_ERROR


def _harmonic_at(harmonic_colors: List[Color], index: int) -> Color:
    # Short harmonies (complementary, steps=2) reuse their last entry.
    return harmonic_colors[min(index, len(harmonic_colors) - 1)]


def surface_color(
    base: Color,
    harmonic_colors: List[Color],
    brightness: Brightness,
    engine: Optional[ColorEngine] = None,
) -> Color:
    """Pick the surface color from the base lightness.

    Very dark bases (< 0.2) use the second harmonic color, very light bases
    (> 0.8) the third; anything else uses white (light) or black (dark).
    """
    lightness = HSLColor.from_color(base, engine).lightness
    if lightness < 0.2:
        logger.debug("surface: dark base (L=%.3f), using harmonic color 1", lightness)
        return _harmonic_at(harmonic_colors, 1)
    if lightness > 0.8:
        logger.debug("surface: light base (L=%.3f), using harmonic color 2", lightness)
        return _harmonic_at(harmonic_colors, 2)
    return WHITE if brightness == Brightness.LIGHT else BLACK


def adjust_surface_container(
    surface: Color, brightness: Brightness, engine: Optional[ColorEngine] = None
) -> Color:
    """Derive the surfaceContainer color from `surface`.

    Pure black or white surfaces map to a neutral gray (0.95 light, 0.07
    dark). Otherwise the surface lightness is nudged by 0.05, darker in
    light mode and lighter in dark mode.
    """
    if surface == BLACK or surface == WHITE:
        gray = int(round(NEUTRAL_CONTAINER_LIGHTNESS[brightness] * 255))
        return Color.from_rgbo(gray, gray, gray, 1.0)

    hsl = HSLColor.from_color(surface, engine)
    if brightness == Brightness.LIGHT:
        lightness = hsl.lightness - SURFACE_CONTAINER_NUDGE
    else:
        lightness = hsl.lightness + SURFACE_CONTAINER_NUDGE
    return hsl.with_lightness(lightness).to_color(engine)


def _default_colors(
    base: Color, config: ThemeConfig, engine: Optional[ColorEngine]
) -> Dict[ColorRole, Color]:
    brightness = config.brightness
    harmony = config.harmony
    swatch = generate_swatch(base, engine)

    harmonic_colors = generate_harmonic_colors(
        base,
        harmony.harmony_type,
        steps=harmony.harmony_steps,
        angle=harmony.analogous_angle,
        engine=engine,
    )
    logger.debug(
        "harmony=%s steps=%d angle=%.1f -> %d colors",
        harmony.harmony_type.value,
        harmony.harmony_steps,
        harmony.analogous_angle,
        len(harmonic_colors),
    )
    secondary = _harmonic_at(harmonic_colors, 1)
    tertiary = _harmonic_at(harmonic_colors, 2)
    surface = surface_color(base, harmonic_colors, brightness, engine)
    error = error_color(brightness)

    primary = swatch[500]
    primary_container = swatch[700]
    secondary_container = generate_swatch(secondary, engine)[700]
    tertiary_container = generate_swatch(tertiary, engine)[700]
    error_container = generate_swatch(error, engine)[700]
    surface_swatch = generate_swatch(surface, engine)
    inverse_base = BLACK if brightness == Brightness.LIGHT else WHITE

    return {
        ColorRole.PRIMARY: primary,
        ColorRole.ON_PRIMARY: on_color(primary, engine),
        ColorRole.PRIMARY_CONTAINER: primary_container,
        ColorRole.ON_PRIMARY_CONTAINER: on_color(primary_container, engine),
        ColorRole.SECONDARY: secondary,
        ColorRole.ON_SECONDARY: on_color(secondary, engine),
        ColorRole.SECONDARY_CONTAINER: secondary_container,
        ColorRole.ON_SECONDARY_CONTAINER: on_color(secondary_container, engine),
        ColorRole.TERTIARY: tertiary,
        ColorRole.ON_TERTIARY: on_color(tertiary, engine),
        ColorRole.TERTIARY_CONTAINER: tertiary_container,
        ColorRole.ON_TERTIARY_CONTAINER: on_color(tertiary_container, engine),
        ColorRole.ERROR: error,
        ColorRole.ON_ERROR: on_color(error, engine),
        ColorRole.ERROR_CONTAINER: error_container,
        ColorRole.ON_ERROR_CONTAINER: on_color(error_container, engine),
        ColorRole.SURFACE: surface,
        ColorRole.ON_SURFACE: on_color(surface, engine),
        ColorRole.SURFACE_CONTAINER: adjust_surface_container(surface, brightness, engine),
        ColorRole.SURFACE_CONTAINER_HIGH: surface_swatch[700],
        ColorRole.SURFACE_CONTAINER_HIGHEST: surface_swatch[800],
        ColorRole.SURFACE_CONTAINER_LOW: surface_swatch[300],
        ColorRole.SURFACE_CONTAINER_LOWEST: surface_swatch[200],
        ColorRole.ON_SURFACE_VARIANT: on_color(surface_swatch[200], engine),
        ColorRole.OUTLINE: surface_swatch[400],
        ColorRole.OUTLINE_VARIANT: surface_swatch[200],
        ColorRole.SHADOW: BLACK,
        ColorRole.SCRIM: BLACK,
        ColorRole.INVERSE_SURFACE: alpha_blend(
            primary.with_alpha(INVERSE_SURFACE_TINT), inverse_base
        ),
        ColorRole.ON_INVERSE_SURFACE: on_color(inverse_base, engine),
        ColorRole.INVERSE_PRIMARY: generate_swatch(primary, engine)[200],
    }


def generate_color_scheme(
    base: Color,
    config: Optional[ThemeConfig] = None,
    engine: Optional[ColorEngine] = None,
) -> ColorScheme:
    """Assemble the full role map for `base`.

    Parameters
    ----------
    base:
        Seed color; becomes the primary color unless overridden.
    config:
        Brightness, harmony settings and per-role overrides. If None, a
        light theme with analogous (30 degrees, 3 steps) harmony is built.
    engine:
        Color math used for HSL conversion and luminance. If None, the
        default engine is used.

    Returns
    -------
    ColorScheme
        Mapping covering every ColorRole.
    """
    if config is None:
        config = ThemeConfig()

    colors = _default_colors(base, config, engine)
    overrides = config.color_overrides
    for role, color in overrides.items():
        if role not in _ALIASES:
            colors[role] = color
    for role, source in _ALIASES.items():
        colors[role] = overrides.get(role, colors[source])

    if overrides:
        logger.debug("applied %d role overrides: %s", len(overrides), [r.value for r in overrides])
    return ColorScheme(config.brightness, colors)


def generate_theme(
    base: Color,
    config: Optional[ThemeConfig] = None,
    engine: Optional[ColorEngine] = None,
) -> Theme:
    """Generate a :class:`Theme` for `base`."""
    if config is None:
        config = ThemeConfig()
    return Theme(
        color_scheme=generate_color_scheme(base, config, engine),
        brightness=config.brightness,
    )


def generate_theme_pair(
    base: Color,
    config: Optional[ThemeConfig] = None,
    engine: Optional[ColorEngine] = None,
) -> ThemePair:
    """Generate light and dark themes sharing seed, harmony and overrides.

    `config` describes the light half; the dark half is the same
    configuration with brightness replaced.
    """
    light_config = (config or ThemeConfig()).with_brightness(Brightness.LIGHT)
    dark_config = light_config.copy_with_dark()
    return ThemePair(
        light=generate_theme(base, light_config, engine),
        dark=generate_theme(base, dark_config, engine),
    )


__all__ = [
    "ColorScheme",
    "Theme",
    "ThemePair",
    "on_color",
    "error_color",
    "surface_color",
    "adjust_surface_container",
    "generate_color_scheme",
    "generate_theme",
    "generate_theme_pair",
]
