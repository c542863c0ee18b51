"""OKLCH color space conversions and gamut mapping.

This module provides:
- sRGB <-> linear RGB <-> OKLab <-> OKLCH conversions
- 8-bit sRGB composites used by the parser and formatter
- Gamut mapping by chroma reduction (binary search)
"""

from .oklch import (
    oklch_to_oklab,
    oklab_to_oklch,
    oklab_to_linear_rgb,
    linear_rgb_to_oklab,
    linear_to_srgb,
    srgb_to_linear,
    rgb255_to_oklch,
    oklch_to_srgb255,
    oklch_to_rgb255,
)

from .gamut import (
    is_in_gamut,
    max_chroma,
)

__all__ = [
    # OKLCH conversions
    'oklch_to_oklab',
    'oklab_to_oklch',
    'oklab_to_linear_rgb',
    'linear_rgb_to_oklab',
    'linear_to_srgb',
    'srgb_to_linear',
    'rgb255_to_oklch',
    'oklch_to_srgb255',
    'oklch_to_rgb255',
    # Gamut mapping
    'is_in_gamut',
    'max_chroma',
]
