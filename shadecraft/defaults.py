"""Central place for shadecraft reference tables and default settings.

Tables are exposed as read-only mappings and built once at import time.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

# Shade levels (Tailwind-style scale, lightest to darkest)
SHADE_LEVELS: tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900, 950)
REFERENCE_LEVEL: int = 500
REFERENCE_INDEX: int = SHADE_LEVELS.index(REFERENCE_LEVEL)

# Target OKLCH lightness per level
LIGHTNESS: Mapping[int, float] = MappingProxyType({
    50: 0.97,   # almost white
    100: 0.93,
    200: 0.87,
    300: 0.78,
    400: 0.68,
    500: 0.55,
    600: 0.48,
    700: 0.40,
    800: 0.32,
    900: 0.24,
    950: 0.14,  # almost black
})

# Fraction of the base chroma kept at each level
CHROMA_SCALE: Mapping[int, float] = MappingProxyType({
    50: 0.15,
    100: 0.25,
    200: 0.40,
    300: 0.65,
    400: 0.85,
    500: 1.0,
    600: 0.95,
    700: 0.85,
    800: 0.75,
    900: 0.60,
    950: 0.45,
})


def _relative_positions(lightness: Mapping[int, float]) -> Mapping[int, float]:
    """Position of each level between the reference level and its extreme.

    0 at the reference level, 1 at level 50 (light half) or 950 (dark half).
    """
    ref = lightness[REFERENCE_LEVEL]
    light_range = lightness[SHADE_LEVELS[0]] - ref
    dark_range = ref - lightness[SHADE_LEVELS[-1]]
    positions = {}
    for level in SHADE_LEVELS:
        if level < REFERENCE_LEVEL:
            positions[level] = (lightness[level] - ref) / light_range
        elif level > REFERENCE_LEVEL:
            positions[level] = (ref - lightness[level]) / dark_range
        else:
            positions[level] = 0.0
    return MappingProxyType(positions)


RELATIVE_POSITION: Mapping[int, float] = _relative_positions(LIGHTNESS)

# Gamut search
GAMUT_SEARCH_STEPS: int = 8  # calibrated against 8-bit channel output
GAMUT_TOLERANCE: float = 0.5  # channel units (0-255 scale) allowed past the edge


@dataclass(frozen=True)
class ModeProfile:
    """Curve parameters for one generation mode.

    Hue shifts are in degrees and apply to warm hues; cool hues use the
    negated shifts.
    """
    hue_shift_light: float
    hue_shift_dark: float
    chroma_boost: float
    light_end_chroma: float
    dark_end_chroma: float


MODE_FIXED = "fixed"
MODE_NATURAL = "natural"
MODE_VIVID = "vivid"

MODE_PROFILES: Mapping[str, ModeProfile] = MappingProxyType({
    MODE_FIXED: ModeProfile(0.0, 0.0, 1.0, 0.15, 0.45),
    MODE_NATURAL: ModeProfile(5.0, -15.0, 1.1, 0.20, 0.40),
    MODE_VIVID: ModeProfile(3.0, -10.0, 1.4, 0.35, 0.55),
})

# Output formats
FORMAT_OKLCH = "oklch"
FORMAT_HEX = "hex"
OUTPUT_FORMATS: tuple[str, ...] = (FORMAT_OKLCH, FORMAT_HEX)

# Generation defaults
DEFAULT_MODE: str = MODE_FIXED
DEFAULT_FORMAT: str = FORMAT_OKLCH
DEFAULT_EXACT_MATCH: bool = True

# Theme color defaults
DEFAULT_COLORS: Mapping[str, str] = MappingProxyType({
    "primary": "#3b82f6",    # blue
    "secondary": "#64748b",  # slate
    "accent": "#8b5cf6",     # purple
    "neutral": "#78716c",    # stone
})

NEUTRAL_PRESETS: Mapping[str, str] = MappingProxyType({
    "stone": "#78716c",
    "zinc": "#71717a",
    "gray": "#6b7280",
    "slate": "#64748b",
    "neutral": "#737373",
})
