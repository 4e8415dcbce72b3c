"""
Where: `util.color`.
What: normalize color specs (hex ARGB, RGBA 0-1, RGBA 0-255) into one form.
Why: configuration files, the CLI and `Color` constructors share one set of
     accepted inputs and error messages.
"""

from __future__ import annotations

from typing import Sequence


def _clamp01(x: float) -> float:
    return 0.0 if x < 0.0 else 1.0 if x > 1.0 else float(x)


def parse_hex_color_str(s: str) -> tuple[float, float, float, float]:
    """Return RGBA (0-1) from a hex string.

    Accepted: "#RRGGBB", "#AARRGGBB", "0xRRGGBB", "0xAARRGGBB", "RRGGBB", "AARRGGBB".
    The 8-digit form carries alpha first, as in 0xAARRGGBB color literals.
    Case-insensitive.
    """
    t = s.strip()
    if t.startswith("#"):
        t = t[1:]
    elif t.lower().startswith("0x"):
        t = t[2:]
    if len(t) not in (6, 8):
        raise ValueError(f"invalid hex color length: '{s}' (expected RRGGBB or AARRGGBB)")
    if len(t) == 6:
        t = "FF" + t
    try:
        a = int(t[0:2], 16)
        r = int(t[2:4], 16)
        g = int(t[4:6], 16)
        b = int(t[6:8], 16)
    except ValueError as e:
        raise ValueError(f"invalid hex color: '{s}'") from e
    return (r / 255.0, g / 255.0, b / 255.0, a / 255.0)


def _as_sequence(value: object) -> Sequence[float | int] | None:
    if isinstance(value, (list, tuple)):
        return value  # type: ignore[return-value]
    return None


def normalize_color(value: object) -> tuple[float, float, float, float]:
    """Normalize a color to RGBA (0-1).

    - Accepts: hex string, 0xAARRGGBB integer, (r, g, b[, a]) in 0-1 or 0-255
    - Tuples are classified as a whole: if any element is outside 0-1 every
      element, alpha included, is read as 0-255 (`(255, 0, 0, 1.0)` has alpha 1/255)
    - Returns: (r, g, b, a) in 0-1
    """
    if isinstance(value, str):
        return parse_hex_color_str(value)
    if isinstance(value, int) and not isinstance(value, bool):
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"ARGB integer out of range: {value!r}")
        return (
            ((value >> 16) & 0xFF) / 255.0,
            ((value >> 8) & 0xFF) / 255.0,
            (value & 0xFF) / 255.0,
            ((value >> 24) & 0xFF) / 255.0,
        )
    seq = _as_sequence(value)
    if seq is None:
        raise ValueError(f"unsupported color type: {type(value)!r}")
    if len(seq) not in (3, 4):
        raise ValueError("color tuple/list must be length 3 or 4")
    try:
        fseq = [float(v) for v in seq]
    except (TypeError, ValueError) as e:
        raise ValueError(f"invalid color tuple/list: {value!r}") from e
    if len(fseq) == 3:
        fseq.append(1.0 if all(0.0 <= x <= 1.0 for x in fseq) else 255.0)
    # float (0-1) first: accepted as-is when every element is within 0..1
    if all(0.0 <= x <= 1.0 for x in fseq):
        r, g, b, a = fseq
        return (_clamp01(r), _clamp01(g), _clamp01(b), _clamp01(a))
    # otherwise treat as 0-255, round, then scale to 0-1
    r_i, g_i, b_i, a_i = (max(0, min(255, int(round(x)))) for x in fseq)
    return (r_i / 255.0, g_i / 255.0, b_i / 255.0, a_i / 255.0)


def to_u8_rgba(value: object) -> tuple[int, int, int, int]:
    """Convert a color to RGBA (0-255)."""
    r, g, b, a = normalize_color(value)
    return (int(round(r * 255)), int(round(g * 255)), int(round(b * 255)), int(round(a * 255)))


def to_argb32(value: object) -> int:
    """Convert a color to a packed 0xAARRGGBB integer."""
    r, g, b, a = to_u8_rgba(value)
    return (a << 24) | (r << 16) | (g << 8) | b


def format_hex(value: object, *, with_alpha: bool = False) -> str:
    """Format a color as "#RRGGBB" (or "#AARRGGBB" with `with_alpha`)."""
    r, g, b, a = to_u8_rgba(value)
    if with_alpha:
        return f"#{a:02X}{r:02X}{g:02X}{b:02X}"
    return f"#{r:02X}{g:02X}{b:02X}"


__all__ = [
    "parse_hex_color_str",
    "normalize_color",
    "to_u8_rgba",
    "to_argb32",
    "format_hex",
]
