"""
Command line front end for palette_plus.

Usage:
    python -m palette_plus swatch "#2196F3"
    python -m palette_plus harmony "#2196F3" --type analogous --steps 5 --angle 20
    python -m palette_plus theme "#2196F3" --pair --config theme.yaml

Every subcommand prints JSON to stdout.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import replace
from typing import Any, List, Optional

from common import settings
from common.logging import setup_default_logging

from .color_types import Color
from .config_loader import load_theme_config
from .harmony import HarmonyType, generate_harmonic_colors
from .roles import Brightness
from .swatch import generate_swatch
from .theme import Theme, generate_theme, generate_theme_pair
from .ui_helpers import ExportFormat, export_colors, export_scheme, export_swatch

logger = logging.getLogger(__name__)

_TEXT_FORMATS = [f.value for f in ExportFormat if f != ExportFormat.ARRAY]


def _parse_color(value: str) -> Color:
    try:
        return Color.parse(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="palette-plus",
        description="Derive swatches, harmonies and Material 3 color schemes from a seed color.",
    )
    parser.add_argument("--log-level", default=None, help="logging level (default: env or WARNING)")
    parser.add_argument(
        "--format",
        choices=_TEXT_FORMATS,
        default=ExportFormat.HEX.value,
        help="color output format",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_swatch = sub.add_parser("swatch", help="print the 50-900 shade ladder")
    p_swatch.add_argument("color", type=_parse_color)

    p_harmony = sub.add_parser("harmony", help="print a harmony palette")
    p_harmony.add_argument("color", type=_parse_color)
    p_harmony.add_argument(
        "--type",
        dest="harmony_type",
        choices=[h.value for h in HarmonyType],
        default=HarmonyType.ANALOGOUS.value,
    )
    p_harmony.add_argument("--steps", type=int, default=None)
    p_harmony.add_argument("--angle", type=float, default=30.0)

    p_theme = sub.add_parser("theme", help="print a full role -> color scheme")
    p_theme.add_argument("color", type=_parse_color)
    p_theme.add_argument("--config", default=None, help="YAML theme config file")
    p_theme.add_argument(
        "--harmony",
        choices=[h.value for h in HarmonyType],
        default=None,
        help="override the harmony type from the config",
    )
    mode = p_theme.add_mutually_exclusive_group()
    mode.add_argument("--dark", action="store_true", help="generate the dark theme")
    mode.add_argument("--pair", action="store_true", help="generate light and dark themes")
    return parser


def _theme_payload(theme: Theme, fmt: ExportFormat) -> dict[str, Any]:
    return {
        "brightness": theme.brightness.value,
        "colors": export_scheme(theme.color_scheme, fmt),
    }


def _run(args: argparse.Namespace) -> Any:
    fmt = ExportFormat.from_value(args.format)

    if args.command == "swatch":
        return {str(k): v for k, v in export_swatch(generate_swatch(args.color), fmt).items()}

    if args.command == "harmony":
        harmony_type = HarmonyType.from_value(args.harmony_type)
        steps = args.steps
        if steps is None:
            steps = 5 if harmony_type == HarmonyType.MONOCHROMATIC else 3
        colors = generate_harmonic_colors(args.color, harmony_type, steps=steps, angle=args.angle)
        return export_colors(colors, fmt)

    config = load_theme_config(args.config)
    if args.harmony is not None:
        harmony = replace(config.harmony, harmony_type=HarmonyType.from_value(args.harmony))
        config = replace(config, color_scheme_config=harmony)
    if args.pair:
        pair = generate_theme_pair(args.color, config)
        return {"light": _theme_payload(pair.light, fmt), "dark": _theme_payload(pair.dark, fmt)}
    if args.dark:
        config = config.with_brightness(Brightness.DARK)
    return _theme_payload(generate_theme(args.color, config), fmt)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_default_logging(args.log_level or settings.get().LOG_LEVEL)

    try:
        payload = _run(args)
    except (ValueError, FileNotFoundError) as e:
        logger.debug("command failed", exc_info=True)
        print(f"palette-plus: error: {e}", file=sys.stderr)
        return 2

    json.dump(payload, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


__all__ = ["build_parser", "main"]
