from __future__ import annotations

"""Export helpers used by UI front ends."""

import numpy as np
import pytest

from palette_plus import (
    SHADE_INDICES,
    Color,
    ColorRole,
    ExportFormat,
    complementary,
    export_colors,
    export_scheme,
    export_swatch,
    generate_color_scheme,
    generate_swatch,
)
from palette_plus.ui_helpers import HARMONY_TYPE_LABEL_MAP


def test_export_colors_formats(red: Color) -> None:
    colors = complementary(red)
    assert export_colors(colors, "hex") == ["#FF0000", "#33FFFF"]
    assert export_colors(colors, ExportFormat.ARGB32) == [0xFFFF0000, 0xFF33FFFF]
    assert export_colors(colors, "rgba_255") == [(255, 0, 0, 255), (51, 255, 255, 255)]
    rgba = export_colors(colors, "rgba_01")
    assert rgba[0] == (1.0, 0.0, 0.0, 1.0)


def test_export_hex_keeps_translucency() -> None:
    assert export_colors([Color.from_hex("#80FF0000")], "hex") == ["#80FF0000"]


def test_export_array(blue: Color) -> None:
    arr = export_swatch(generate_swatch(blue), ExportFormat.ARRAY)
    assert isinstance(arr, np.ndarray)
    assert arr.shape == (10, 4)
    assert arr.dtype == np.float32
    assert np.allclose(arr[5], blue.to_rgba())
    # lighter shades first
    assert arr[0, :3].sum() > arr[-1, :3].sum()

    empty = export_colors([], "array")
    assert empty.shape == (0, 4)


def test_export_swatch_and_scheme(blue: Color) -> None:
    shades = export_swatch(generate_swatch(blue), "hex")
    assert list(shades) == list(SHADE_INDICES)
    assert shades[500] == "#2196F3"

    scheme = export_scheme(generate_color_scheme(blue), "hex")
    assert len(scheme) == len(ColorRole)
    assert scheme["primary"] == "#2196F3"
    assert scheme["surface"] == "#FFFFFF"

    rows = export_scheme(generate_color_scheme(blue), "array")
    assert rows.shape == (len(ColorRole), 4)


def test_unknown_format(blue: Color) -> None:
    with pytest.raises(ValueError):
        export_colors([blue], "cmyk")


def test_label_maps() -> None:
    assert set(HARMONY_TYPE_LABEL_MAP) == {"Analogous", "Complementary", "Monochromatic"}
