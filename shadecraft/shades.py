"""OKLCH shade ramp generation.

Builds an 11-step ramp (levels 50-950) from one base color.

Modes:
- 'fixed' (default): constant hue, lightness redistributed around the
  base color, chroma scaled per level.
- 'natural': hue drifts with color temperature, chroma follows a curve.
- 'vivid': like natural with a stronger chroma curve.

With exact matching on (the default) level 500 is the input color itself
and the other levels are spread proportionally between it and the table
extremes. With it off, the lightness table is used as-is and level 500
is computed like any other level.

Every computed level is gamut-mapped by chroma reduction, so lightness
and hue targets are kept exactly.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

import numpy as np

from shadecraft import defaults
from shadecraft.colorspace import max_chroma, oklch_to_rgb255
from shadecraft.format import format_hex, format_oklch
from shadecraft.parse import parse_color
from shadecraft.types import OKLCH, ShadeConfig

logger = logging.getLogger(__name__)

_LEVELS = defaults.SHADE_LEVELS
_REF = defaults.REFERENCE_INDEX

_LIGHTNESS = np.array([defaults.LIGHTNESS[level] for level in _LEVELS])
_CHROMA_SCALE = np.array([defaults.CHROMA_SCALE[level] for level in _LEVELS])
_RELATIVE_POSITION = np.array([defaults.RELATIVE_POSITION[level] for level in _LEVELS])

_LIGHT_HALF = np.arange(len(_LEVELS)) <= _REF
# Curve parameter: 0 at the light/dark endpoint, 1 at the base color
_T = np.where(
    _LIGHT_HALF,
    np.arange(len(_LEVELS)) / _REF,
    1 - (np.arange(len(_LEVELS)) - _REF) / (len(_LEVELS) - 1 - _REF),
)


def get_shade_levels() -> list[int]:
    """Shade levels in order, as a fresh list."""
    return list(_LEVELS)


def get_available_modes() -> list[str]:
    """Names of the generation modes."""
    return list(defaults.MODE_PROFILES)


def is_warm_hue(h: float) -> bool:
    """Reds, oranges and yellows (and magenta-reds past 300 degrees)."""
    return 0 <= h < 120 or h > 300


def _quad_bezier(a, control, b, t):
    mt = 1 - t
    return mt * mt * a + 2 * mt * t * control + t * t * b


def fixed_targets(base: OKLCH, exact_match: bool = True) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Target (L, C, H) per level for the fixed-hue algorithm, before gamut mapping."""
    if exact_match:
        # Inputs past a table extreme pin that half of the ramp to the input
        light_end = max(_LIGHTNESS[0], base.l)
        dark_end = min(_LIGHTNESS[-1], base.l)
        L = np.where(
            _LIGHT_HALF,
            base.l + _RELATIVE_POSITION * (light_end - base.l),
            base.l - _RELATIVE_POSITION * (base.l - dark_end),
        )
    else:
        L = _LIGHTNESS.copy()

    C = base.c * _CHROMA_SCALE
    H = np.full(len(_LEVELS), base.h)
    return L, C, H


def curved_targets(base: OKLCH, profile: defaults.ModeProfile) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Target (L, C, H) per level for the hue-shifted algorithm, before gamut mapping.

    Each half of the ramp runs from an endpoint (table extreme lightness,
    shifted hue, reduced chroma) to the base color. Lightness and hue are
    linear in t; chroma follows a quadratic Bezier that peaks at the base.
    """
    if is_warm_hue(base.h):
        shift_light, shift_dark = profile.hue_shift_light, profile.hue_shift_dark
    else:
        shift_light, shift_dark = -profile.hue_shift_light, -profile.hue_shift_dark

    light_c = base.c * profile.light_end_chroma
    dark_c = base.c * profile.dark_end_chroma
    peak_c = base.c * profile.chroma_boost

    end_L = np.where(_LIGHT_HALF, max(_LIGHTNESS[0], base.l), min(_LIGHTNESS[-1], base.l))
    end_C = np.where(_LIGHT_HALF, light_c, dark_c)
    end_shift = np.where(_LIGHT_HALF, shift_light, shift_dark)

    L = end_L + (base.l - end_L) * _T
    # Interpolating the offset keeps the hue on the short arc across 0/360
    H = (base.h + end_shift * (1 - _T)) % 360
    C = _quad_bezier(end_C, (end_C + peak_c) / 2, peak_c, _T)
    return L, C, H


def compute_shades(base: OKLCH, config: ShadeConfig | Mapping[str, Any] | None = None) -> dict[int, OKLCH]:
    """Compute the in-gamut OKLCH color for every shade level."""
    config = ShadeConfig.coerce(config)

    profile = defaults.MODE_PROFILES.get(config.mode)
    if profile is None:
        logger.debug("Unknown shade mode %r, using %r", config.mode, defaults.MODE_FIXED)

    if profile is None or config.mode == defaults.MODE_FIXED:
        L, C, H = fixed_targets(base, config.exact_match)
    else:
        L, C, H = curved_targets(base, profile)

    C = max_chroma(L, H, C)

    shades = {level: OKLCH(L[i], C[i], H[i]) for i, level in enumerate(_LEVELS)}
    if config.exact_match:
        shades[defaults.REFERENCE_LEVEL] = base
    return shades


def format_shade(color: OKLCH, fmt: str = defaults.FORMAT_OKLCH) -> str:
    """Render one shade in the requested output format (oklch unless 'hex')."""
    if fmt == defaults.FORMAT_HEX:
        return format_hex(*oklch_to_rgb255(color.l, color.c, color.h))
    return format_oklch(color.l, color.c, color.h)


def generate_shades(color: str, config: ShadeConfig | Mapping[str, Any] | None = None) -> dict[int, str]:
    """Generate the 11-level shade ramp for a color string.

    Args:
        color: Base color in any notation parse_color() accepts
        config: ShadeConfig, or a mapping with any of 'mode', 'format',
                'exact_match'/'exactMatch'

    Returns:
        Dict keyed by shade level (50 ... 950) in ascending order.

    Raises:
        ColorFormatError: If `color` cannot be parsed.

    Example:
        generate_shades("#3b82f6")
        generate_shades("#3b82f6", {"mode": "vivid", "format": "hex"})
    """
    config = ShadeConfig.coerce(config)
    base = parse_color(color)
    shades = compute_shades(base, config)
    ramp = {level: format_shade(shade, config.format) for level, shade in shades.items()}

    # Hex input is echoed verbatim at the reference level
    source = color.strip()
    if config.exact_match and config.format == defaults.FORMAT_HEX and source.startswith("#"):
        ramp[defaults.REFERENCE_LEVEL] = source
    return ramp
