"""Perceptual shade ramps from a single color.

This package provides:
- parse_color: CSS color strings (hex, rgb, hsl, oklch) -> OKLCH
- generate_shades: 11-level ramp (50-950) with gamut-safe colors
- generate_palettes: ramps for a set of named colors
- format_oklch / format_hex: CSS text output

Example:
    from shadecraft import generate_shades

    shades = generate_shades("#3b82f6", {"mode": "natural", "format": "hex"})
    shades[500]  # '#3b82f6'
"""

from .errors import ShadeError, ColorFormatError
from .types import OKLCH, ShadeConfig, Ok, Err

from .parse import parse_color, try_parse_color, is_valid_color
from .format import format_oklch, format_hex
from .shades import (
    generate_shades,
    compute_shades,
    get_shade_levels,
    get_available_modes,
)
from .palette import (
    generate_palettes,
    resolve_entry,
    LiteralColor,
    PrebuiltRamp,
    GeneratorOverride,
)
from .theme import ColorSettings, process_colors, validate_colors
from .css import generate_palette_vars, generate_palette_css

__all__ = [
    # Errors
    'ShadeError',
    'ColorFormatError',
    # Types
    'OKLCH',
    'ShadeConfig',
    'Ok',
    'Err',
    # Parsing / formatting
    'parse_color',
    'try_parse_color',
    'is_valid_color',
    'format_oklch',
    'format_hex',
    # Shades
    'generate_shades',
    'compute_shades',
    'get_shade_levels',
    'get_available_modes',
    # Palettes
    'generate_palettes',
    'resolve_entry',
    'LiteralColor',
    'PrebuiltRamp',
    'GeneratorOverride',
    # Theme colors
    'ColorSettings',
    'process_colors',
    'validate_colors',
    'generate_palette_vars',
    'generate_palette_css',
]
