"""Render colors as CSS text."""

from decimal import Decimal, ROUND_HALF_UP

import numpy as np


def _fixed(value: float, places: int) -> str:
    """Fixed-point text with round-half-up on the exact binary value."""
    quantum = Decimal(1).scaleb(-places)
    text = str(Decimal(float(value)).quantize(quantum, rounding=ROUND_HALF_UP))
    if text.startswith("-") and Decimal(text) == 0:
        text = text[1:]
    return text


def format_oklch(l: float, c: float, h: float) -> str:
    """Format OKLCH values as a CSS oklch() string.

    Lightness is written as a percentage with one decimal, chroma with four
    decimals, hue with one decimal.

    Example:
        >>> format_oklch(0.55, 0.2, 250)
        'oklch(55.0% 0.2000 250.0)'
    """
    return f"oklch({_fixed(l * 100, 1)}% {_fixed(c, 4)} {_fixed(h, 1)})"


def format_hex(r: float, g: float, b: float) -> str:
    """Format RGB channels (0-255) as a lowercase #rrggbb string.

    Channels are rounded half up and clamped to [0, 255].

    Example:
        >>> format_hex(0, 15, 255)
        '#000fff'
    """
    channels = np.clip(np.floor(np.asarray([r, g, b], dtype=np.float64) + 0.5), 0, 255)
    return "#" + "".join(f"{int(v):02x}" for v in channels)
