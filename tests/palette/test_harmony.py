from __future__ import annotations

"""Monochromatic / analogous / complementary generators and dispatch."""

import pytest

from palette_plus import (
    Color,
    HarmonyType,
    InvalidStepsError,
    analogous,
    complementary,
    generate_harmonic_colors,
    monochromatic,
)


def _hue_delta(h1: float, h2: float) -> float:
    return (h1 - h2 + 180.0) % 360.0 - 180.0


def test_monochromatic_rejects_fewer_than_two_steps(red: Color) -> None:
    with pytest.raises(InvalidStepsError):
        monochromatic(red, steps=1)
    with pytest.raises(ValueError):
        monochromatic(red, steps=0)


def test_monochromatic_two_steps_spans_curve_ends(red: Color) -> None:
    colors = monochromatic(red, steps=2)
    assert len(colors) == 2
    lightness = [c.to_hsl().lightness for c in colors]
    assert lightness == pytest.approx([0.15, 0.85])
    for c in colors:
        hsl = c.to_hsl()
        assert hsl.hue == pytest.approx(0.0, abs=1e-9)
        assert hsl.saturation == pytest.approx(1.0)


def test_monochromatic_quadratic_curve(blue: Color) -> None:
    colors = monochromatic(blue)
    assert len(colors) == 5
    expected = [0.15 + 0.7 * (i / 4) ** 2 for i in range(5)]
    assert [c.to_hsl().lightness for c in colors] == pytest.approx(expected)


def test_monochromatic_preserves_alpha() -> None:
    base = Color(0.4, 0.2, 0.5, 0.8)
    assert all(c.a == 0.4 for c in monochromatic(base, steps=4))


def test_analogous_rejects_zero_steps(blue: Color) -> None:
    with pytest.raises(InvalidStepsError) as excinfo:
        analogous(blue, steps=0)
    assert excinfo.value.minimum == 1


def test_analogous_offsets_are_centered(blue: Color) -> None:
    base = blue.to_hsl()
    colors = analogous(blue, steps=3, angle=30)
    offsets = [_hue_delta(c.to_hsl().hue, base.hue) for c in colors]
    assert offsets == pytest.approx([-30.0, 0.0, 30.0], abs=1e-6)
    for c in colors:
        hsl = c.to_hsl()
        assert hsl.saturation == pytest.approx(base.saturation)
        assert hsl.lightness == pytest.approx(base.lightness)


def test_analogous_wraps_hue(red: Color) -> None:
    hues = [c.to_hsl().hue for c in analogous(red, steps=3, angle=30)]
    assert hues == pytest.approx([330.0, 0.0, 30.0], abs=1e-6)


def test_analogous_even_steps_and_single_step(blue: Color) -> None:
    base = blue.to_hsl()
    offsets = [_hue_delta(c.to_hsl().hue, base.hue) for c in analogous(blue, steps=4, angle=20)]
    assert offsets == pytest.approx([-30.0, -10.0, 10.0, 30.0], abs=1e-6)

    single = analogous(blue, steps=1, angle=45)
    assert len(single) == 1
    assert single[0].to_argb32() == blue.to_argb32()


def test_complementary_of_pure_red(red: Color) -> None:
    colors = complementary(red)
    assert len(colors) == 2
    assert colors[0] == red
    hsl = colors[1].to_hsl()
    assert hsl.hue == pytest.approx(180.0)
    # lightness 0.5 is not > 0.5, so it is scaled up by 1.2
    assert hsl.lightness == pytest.approx(0.6)
    assert colors[1].to_hex() == "#33FFFF"


def test_complementary_light_base_is_darkened(pale_blue: Color) -> None:
    base = pale_blue.to_hsl()
    comp = complementary(pale_blue)[1].to_hsl()
    assert comp.lightness == pytest.approx(base.lightness * 0.8)
    assert abs(_hue_delta(comp.hue, base.hue)) == pytest.approx(180.0, abs=1e-6)


def test_harmony_dispatch(blue: Color) -> None:
    assert generate_harmonic_colors(blue, HarmonyType.ANALOGOUS, steps=5, angle=10) == analogous(
        blue, steps=5, angle=10
    )
    assert generate_harmonic_colors(blue, HarmonyType.COMPLEMENTARY, steps=7) == complementary(blue)
    assert generate_harmonic_colors(blue, HarmonyType.MONOCHROMATIC, steps=4) == monochromatic(
        blue, steps=4
    )


def test_harmony_type_from_value() -> None:
    assert HarmonyType.from_value("Complementary") is HarmonyType.COMPLEMENTARY
    assert HarmonyType.from_value(HarmonyType.ANALOGOUS) is HarmonyType.ANALOGOUS
    with pytest.raises(ValueError):
        HarmonyType.from_value("triadic")


def test_generators_are_deterministic(blue: Color) -> None:
    assert monochromatic(blue, steps=6) == monochromatic(blue, steps=6)
    assert analogous(blue, steps=3, angle=25) == analogous(blue, steps=3, angle=25)
    assert complementary(blue) == complementary(blue)
