"""Command-line shade generation.

    python -m shadecraft shades "#3b82f6" --mode vivid --format hex
    python -m shadecraft palette primary=#3b82f6 neutral=zinc --css
"""

from __future__ import annotations

import argparse
import json
import logging
import sys

from shadecraft import defaults
from shadecraft.css import generate_palette_css
from shadecraft.errors import ColorFormatError
from shadecraft.palette import generate_palettes
from shadecraft.shades import generate_shades
from shadecraft.theme import process_colors
from shadecraft.types import ShadeConfig


def _config_from_args(args: argparse.Namespace) -> ShadeConfig:
    return ShadeConfig(mode=args.mode, format=args.format, exact_match=not args.no_exact_match)


def _parse_assignments(pairs: list[str]) -> dict[str, str]:
    colors = {}
    for pair in pairs:
        name, sep, value = pair.partition("=")
        if not sep or not name or not value:
            raise argparse.ArgumentTypeError(f"expected NAME=COLOR, got {pair!r}")
        colors[name.strip()] = value.strip()
    return colors


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shadecraft",
        description="Generate OKLCH shade ramps (50-950) from base colors.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "--mode",
        default=defaults.DEFAULT_MODE,
        help=f"Generation mode: {', '.join(defaults.MODE_PROFILES)} (default: {defaults.DEFAULT_MODE})",
    )
    common.add_argument(
        "--format",
        choices=defaults.OUTPUT_FORMATS,
        default=defaults.DEFAULT_FORMAT,
        help=f"Output color format (default: {defaults.DEFAULT_FORMAT})",
    )
    common.add_argument(
        "--no-exact-match",
        action="store_true",
        help="Use the fixed lightness scale; shade 500 may differ from the input",
    )

    sub = parser.add_subparsers(dest="command", required=True)

    shades = sub.add_parser("shades", parents=[common], help="Print the ramp for one color")
    shades.add_argument("color", help="Base color (hex, rgb(), hsl() or oklch())")

    palette = sub.add_parser("palette", parents=[common], help="Print ramps for named colors")
    palette.add_argument("colors", nargs="*", metavar="NAME=COLOR", help="Named colors")
    palette.add_argument("--css", action="store_true", help="Emit a :root block of custom properties")
    palette.add_argument(
        "--defaults",
        action="store_true",
        help="Fill in default theme colors and resolve neutral presets",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = _config_from_args(args)

    try:
        if args.command == "shades":
            shades = generate_shades(args.color, config)
            for level, value in shades.items():
                print(f"{level}: {value}")
            return 0

        try:
            colors = _parse_assignments(args.colors)
        except argparse.ArgumentTypeError as e:
            parser.error(str(e))

        if args.defaults:
            settings = process_colors(colors)
            for warning in settings.warnings:
                print(f"warning: {warning}", file=sys.stderr)
            if not settings.valid:
                for error in settings.errors:
                    print(f"error: {error}", file=sys.stderr)
                return 2
            colors = settings.colors

        palettes = generate_palettes(colors, config)
        if args.css:
            print(generate_palette_css(palettes))
        else:
            print(json.dumps(palettes, indent=2))
        return 0

    except ColorFormatError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
