from __future__ import annotations

"""Configuration objects for theme generation.

:class:`ColorSchemeConfig` selects how secondary and tertiary seeds are
derived; :class:`ThemeConfig` adds brightness and per-role overrides.
Both are immutable and can be built from plain dicts (e.g. parsed YAML).
"""

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .color_types import Color
from .harmony import HarmonyType
from .roles import Brightness, ColorRole


@dataclass(frozen=True)
class ColorSchemeConfig:
    """Harmony settings used to derive secondary and tertiary colors.

    Attributes
    ----------
    harmony_type:
        Strategy used to generate the harmonic colors.
    analogous_angle:
        Degrees between analogous hues. Only used for ANALOGOUS.
    harmony_steps:
        Number of generated colors for ANALOGOUS and MONOCHROMATIC.
    """

    harmony_type: HarmonyType = HarmonyType.ANALOGOUS
    analogous_angle: float = 30.0
    harmony_steps: int = 3

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ColorSchemeConfig":
        """Build from a mapping with ``type``/``analogous_angle``/``steps`` keys."""
        known = {"type", "harmony_type", "analogous_angle", "angle", "steps", "harmony_steps"}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown harmony config keys: {sorted(unknown)}")
        kwargs: dict[str, Any] = {}
        harmony = data.get("type", data.get("harmony_type"))
        if harmony is not None:
            kwargs["harmony_type"] = HarmonyType.from_value(harmony)
        angle = data.get("analogous_angle", data.get("angle"))
        if angle is not None:
            try:
                kwargs["analogous_angle"] = float(angle)
            except (TypeError, ValueError) as e:
                raise ValueError(f"analogous_angle must be a number, got {angle!r}") from e
        steps = data.get("steps", data.get("harmony_steps"))
        if steps is not None:
            try:
                kwargs["harmony_steps"] = int(steps)
            except (TypeError, ValueError) as e:
                raise ValueError(f"steps must be an integer, got {steps!r}") from e
        return cls(**kwargs)


def _freeze_overrides(overrides: Optional[Mapping[Any, Any]]) -> Mapping[ColorRole, Color]:
    if not overrides:
        return MappingProxyType({})
    return MappingProxyType(
        {ColorRole.from_value(role): Color.parse(color) for role, color in overrides.items()}
    )


@dataclass(frozen=True)
class ThemeConfig:
    """Theme generation settings.

    Attributes
    ----------
    brightness:
        Light or dark mode; drives surface, error and inverse colors.
    color_overrides:
        Sparse role -> Color map. Roles absent here use generated defaults.
        Keys may be given as ColorRole or role names; values as Color or
        anything :meth:`Color.parse` accepts.
    color_scheme_config:
        Harmony settings. None means the ColorSchemeConfig defaults.
    """

    brightness: Brightness = Brightness.LIGHT
    color_overrides: Mapping[ColorRole, Color] = field(
        default_factory=lambda: MappingProxyType({})
    )
    color_scheme_config: Optional[ColorSchemeConfig] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "brightness", Brightness.from_value(self.brightness))
        object.__setattr__(self, "color_overrides", _freeze_overrides(self.color_overrides))

    def __hash__(self) -> int:
        return hash(
            (self.brightness, tuple(self.color_overrides.items()), self.color_scheme_config)
        )

    @property
    def harmony(self) -> ColorSchemeConfig:
        """Effective harmony settings (defaults applied)."""
        return self.color_scheme_config or ColorSchemeConfig()

    def with_brightness(self, brightness: Brightness) -> "ThemeConfig":
        """Return a copy with only the brightness replaced."""
        return replace(self, brightness=brightness)

    def copy_with_dark(self) -> "ThemeConfig":
        """Return the dark variant of this configuration."""
        return self.with_brightness(Brightness.DARK)

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]]) -> "ThemeConfig":
        """Build from a mapping with ``brightness``/``harmony``/``overrides`` keys."""
        if not data:
            return cls()
        unknown = set(data) - {"brightness", "harmony", "overrides"}
        if unknown:
            raise ValueError(f"Unknown theme config keys: {sorted(unknown)}")
        harmony = data.get("harmony")
        if harmony is not None and not isinstance(harmony, Mapping):
            raise ValueError("'harmony' must be a mapping")
        overrides = data.get("overrides")
        if overrides is not None and not isinstance(overrides, Mapping):
            raise ValueError("'overrides' must be a mapping")
        return cls(
            brightness=Brightness.from_value(data.get("brightness", "light")),
            color_overrides=overrides or {},
            color_scheme_config=ColorSchemeConfig.from_dict(harmony) if harmony else None,
        )


__all__ = ["ColorSchemeConfig", "ThemeConfig"]
