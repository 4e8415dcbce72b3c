from __future__ import annotations

"""Semantic color roles of a Material 3 color scheme.

Member values are the camelCase role identifiers used in configuration
files (``"onPrimary"``), member names are their Python spelling.
"""

import re
from enum import Enum


class Brightness(Enum):
    """Target brightness of a theme."""

    LIGHT = "light"
    DARK = "dark"

    @classmethod
    def from_value(cls, value: "Brightness | str") -> "Brightness":
        if isinstance(value, Brightness):
            return value
        key = str(value).strip().lower()
        for b in cls:
            if b.value == key:
                return b
        raise ValueError(f"Unknown brightness: {value!r}")


class ColorRole(Enum):
    """Closed set of semantic color slots."""

    # Core colors
    PRIMARY = "primary"
    ON_PRIMARY = "onPrimary"
    PRIMARY_CONTAINER = "primaryContainer"
    ON_PRIMARY_CONTAINER = "onPrimaryContainer"
    SECONDARY = "secondary"
    ON_SECONDARY = "onSecondary"
    SECONDARY_CONTAINER = "secondaryContainer"
    ON_SECONDARY_CONTAINER = "onSecondaryContainer"
    TERTIARY = "tertiary"
    ON_TERTIARY = "onTertiary"
    TERTIARY_CONTAINER = "tertiaryContainer"
    ON_TERTIARY_CONTAINER = "onTertiaryContainer"

    # Error colors
    ERROR = "error"
    ON_ERROR = "onError"
    ERROR_CONTAINER = "errorContainer"
    ON_ERROR_CONTAINER = "onErrorContainer"

    # Neutral colors
    BACKGROUND = "background"
    ON_BACKGROUND = "onBackground"
    SURFACE = "surface"
    ON_SURFACE = "onSurface"
    SURFACE_BRIGHT = "surfaceBright"
    SURFACE_DIM = "surfaceDim"
    SURFACE_CONTAINER_LOWEST = "surfaceContainerLowest"
    SURFACE_CONTAINER_LOW = "surfaceContainerLow"
    SURFACE_CONTAINER = "surfaceContainer"
    SURFACE_CONTAINER_HIGH = "surfaceContainerHigh"
    SURFACE_CONTAINER_HIGHEST = "surfaceContainerHighest"

    # Neutral variant colors
    SURFACE_VARIANT = "surfaceVariant"
    ON_SURFACE_VARIANT = "onSurfaceVariant"
    OUTLINE = "outline"
    OUTLINE_VARIANT = "outlineVariant"

    # Inverse colors
    INVERSE_SURFACE = "inverseSurface"
    ON_INVERSE_SURFACE = "onInverseSurface"
    INVERSE_PRIMARY = "inversePrimary"

    # Shadow
    SHADOW = "shadow"
    SCRIM = "scrim"

    # Fixed colors
    PRIMARY_FIXED = "primaryFixed"
    PRIMARY_FIXED_DIM = "primaryFixedDim"
    ON_PRIMARY_FIXED = "onPrimaryFixed"
    ON_PRIMARY_FIXED_VARIANT = "onPrimaryFixedVariant"
    SECONDARY_FIXED = "secondaryFixed"
    SECONDARY_FIXED_DIM = "secondaryFixedDim"
    ON_SECONDARY_FIXED = "onSecondaryFixed"
    ON_SECONDARY_FIXED_VARIANT = "onSecondaryFixedVariant"
    TERTIARY_FIXED = "tertiaryFixed"
    TERTIARY_FIXED_DIM = "tertiaryFixedDim"
    ON_TERTIARY_FIXED = "onTertiaryFixed"
    ON_TERTIARY_FIXED_VARIANT = "onTertiaryFixedVariant"

    @property
    def attr_name(self) -> str:
        """snake_case attribute name, e.g. ``on_primary_container``."""
        return self.name.lower()

    @classmethod
    def from_value(cls, value: "ColorRole | str") -> "ColorRole":
        """Resolve a role from its camelCase value, snake_case or enum name."""
        if isinstance(value, ColorRole):
            return value
        key = str(value).strip()
        try:
            return cls(key)
        except ValueError:
            pass
        snake = re.sub(r"(?<!^)(?=[A-Z])", "_", key).upper() if not key.isupper() else key
        try:
            return cls[snake]
        except KeyError:
            raise ValueError(f"Unknown color role: {value!r}") from None


__all__ = ["Brightness", "ColorRole"]
