"""Gamut mapping for OKLCH targets.

Not all (L, C, H) combinations produce displayable sRGB; high chroma at
extreme lightness is the usual offender. Mapping here only ever lowers
chroma, so the target lightness and hue are preserved.
"""

import numpy as np

from shadecraft import defaults
from .oklch import oklch_to_srgb255


def is_in_gamut(L, C, H, tolerance: float = defaults.GAMUT_TOLERANCE):
    """Check if OKLCH values produce valid sRGB.

    Each channel must lie within [-tolerance, 255 + tolerance] before
    rounding, so values that round onto the edge still count.
    """
    rgb = oklch_to_srgb255(L, C, H)
    in_range = (rgb >= -tolerance) & (rgb <= 255 + tolerance)
    return np.all(in_range, axis=-1)


def max_chroma(L, H, desired_C, steps: int = defaults.GAMUT_SEARCH_STEPS):
    """Largest chroma in [0, desired_C] that stays in gamut at (L, H).

    Fixed-iteration binary search; the best in-gamut midpoint is returned,
    or 0 if none was found. Works elementwise on arrays.
    """
    L = np.asarray(L, dtype=np.float64)
    H = np.asarray(H, dtype=np.float64)
    hi = np.maximum(np.asarray(desired_C, dtype=np.float64), 0.0)
    L, H, hi = np.broadcast_arrays(L, H, hi)

    lo = np.zeros_like(hi)
    best = np.zeros_like(hi)

    for _ in range(steps):
        mid = (lo + hi) / 2
        valid = is_in_gamut(L, mid, H)
        best = np.where(valid, mid, best)
        lo = np.where(valid, mid, lo)
        hi = np.where(valid, hi, mid)

    if best.ndim == 0:
        return float(best)
    return best

