"""Public entrypoint for the palette_plus library.

This module re-exports the main user-facing types and functions so that
applications can simply import from ``palette_plus`` instead of individual
submodules.
"""

from .color_types import BLACK, TRANSPARENT, WHITE, Color, HSLColor, alpha_blend
from .config import ColorSchemeConfig, ThemeConfig
from .config_loader import load_theme_config
from .harmony import (
    HarmonyType,
    InvalidStepsError,
    analogous,
    complementary,
    generate_harmonic_colors,
    monochromatic,
)
from .roles import Brightness, ColorRole
from .swatch import (
    SHADE_INDICES,
    InvalidShadeIndexError,
    Swatch,
    generate_swatch,
    get_all_shades,
    get_shade,
)
from .theme import (
    ColorScheme,
    Theme,
    ThemePair,
    generate_color_scheme,
    generate_theme,
    generate_theme_pair,
    on_color,
)
from .ui_helpers import (
    BRIGHTNESS_OPTIONS,
    EXPORT_FORMAT_OPTIONS,
    HARMONY_TYPE_OPTIONS,
    ExportFormat,
    export_colors,
    export_scheme,
    export_swatch,
)

__version__ = "0.1.0"

__all__ = [
    # Colors
    "Color",
    "HSLColor",
    "BLACK",
    "WHITE",
    "TRANSPARENT",
    "alpha_blend",
    # Swatches
    "SHADE_INDICES",
    "Swatch",
    "InvalidShadeIndexError",
    "generate_swatch",
    "get_shade",
    "get_all_shades",
    # Harmonies
    "HarmonyType",
    "InvalidStepsError",
    "monochromatic",
    "analogous",
    "complementary",
    "generate_harmonic_colors",
    # Themes
    "Brightness",
    "ColorRole",
    "ColorSchemeConfig",
    "ThemeConfig",
    "ColorScheme",
    "Theme",
    "ThemePair",
    "on_color",
    "generate_color_scheme",
    "generate_theme",
    "generate_theme_pair",
    "load_theme_config",
    # UI helpers
    "ExportFormat",
    "export_colors",
    "export_swatch",
    "export_scheme",
    "HARMONY_TYPE_OPTIONS",
    "BRIGHTNESS_OPTIONS",
    "EXPORT_FORMAT_OPTIONS",
]
