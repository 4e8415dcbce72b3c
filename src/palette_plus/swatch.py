from __future__ import annotations

"""Material-style tonal swatches.

A swatch is the 10-entry shade ladder (50 ... 900) anchored at a base
color. Every non-500 shade keeps the base hue and saturation and pins the
HSL lightness to a fixed fraction; the 500 entry is the base color itself.
"""

from types import MappingProxyType
from typing import Dict, Iterator, Mapping, Optional, Tuple

from .color_types import Color, HSLColor
from .engine import ColorEngine

SHADE_INDICES: Tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)

# Target HSL lightness per shade. 500 is the base color and has no entry.
SHADE_LIGHTNESS: Mapping[int, float] = MappingProxyType(
    {
        50: 0.95,
        100: 0.88,
        200: 0.80,
        300: 0.70,
        400: 0.60,
        600: 0.40,
        700: 0.30,
        800: 0.20,
        900: 0.12,
    }
)


class InvalidShadeIndexError(ValueError):
    """Raised when a shade index is not one of :data:`SHADE_INDICES`."""

    def __init__(self, index: object) -> None:
        super().__init__(
            f"Invalid shade index {index!r}. Must be one of: {list(SHADE_INDICES)}"
        )
        self.index = index


class Swatch(Mapping[int, Color]):
    """Read-only mapping from shade index to Color.

    Lookups with an index outside :data:`SHADE_INDICES` raise
    :class:`InvalidShadeIndexError` (a ``KeyError`` is never exposed).
    """

    __slots__ = ("_base", "_shades")

    def __init__(self, base: Color, shades: Mapping[int, Color]) -> None:
        missing = [i for i in SHADE_INDICES if i not in shades]
        if missing:
            raise ValueError(f"swatch is missing shades: {missing}")
        self._base = base
        self._shades: Dict[int, Color] = {i: shades[i] for i in SHADE_INDICES}

    @property
    def base(self) -> Color:
        """The anchor color (always equal to ``self[500]``)."""
        return self._base

    def __getitem__(self, index: int) -> Color:
        try:
            return self._shades[index]
        except (KeyError, TypeError):
            raise InvalidShadeIndexError(index) from None

    def __contains__(self, index: object) -> bool:
        return index in self._shades

    def get(self, index: int, default: Optional[Color] = None) -> Optional[Color]:
        return self._shades.get(index, default)

    def __iter__(self) -> Iterator[int]:
        return iter(self._shades)

    def __len__(self) -> int:
        return len(self._shades)

    def __repr__(self) -> str:
        inner = ", ".join(f"{i}: {c.to_hex(with_alpha=c.a < 1.0)}" for i, c in self._shades.items())
        return f"Swatch({{{inner}}})"

    def __hash__(self) -> int:
        return hash(tuple(self._shades.items()))


def _validate_index(index: int) -> None:
    if isinstance(index, bool) or index not in SHADE_INDICES:
        raise InvalidShadeIndexError(index)


def generate_swatch(base: Color, engine: Optional[ColorEngine] = None) -> Swatch:
    """Generate the 10-step swatch for `base`.

    Parameters
    ----------
    base:
        Anchor color; returned unchanged as shade 500.
    engine:
        Optional ColorEngine for the HSL conversion. If None, the default
        engine is used.

    Returns
    -------
    Swatch
        Shades ordered 50 (lightest) to 900 (darkest).
    """
    hsl = HSLColor.from_color(base, engine)
    shades: Dict[int, Color] = {}
    for index in SHADE_INDICES:
        if index == 500:
            shades[index] = base
        else:
            shades[index] = hsl.with_lightness(SHADE_LIGHTNESS[index]).to_color(engine)
    return Swatch(base, shades)


def get_shade(base: Color, index: int, engine: Optional[ColorEngine] = None) -> Color:
    """Return a single shade of `base`.

    Raises
    ------
    InvalidShadeIndexError
        If `index` is not one of 50, 100, 200, ..., 900.
    """
    _validate_index(index)
    return generate_swatch(base, engine)[index]


def get_all_shades(base: Color, engine: Optional[ColorEngine] = None) -> Mapping[int, Color]:
    """Return all ten shades of `base` as a read-only mapping."""
    swatch = generate_swatch(base, engine)
    return MappingProxyType({i: swatch[i] for i in SHADE_INDICES})


__all__ = [
    "SHADE_INDICES",
    "SHADE_LIGHTNESS",
    "InvalidShadeIndexError",
    "Swatch",
    "generate_swatch",
    "get_shade",
    "get_all_shades",
]
