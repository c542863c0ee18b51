"""Build shade palettes for a set of named colors.

Each entry in a color mapping is resolved once into one of three kinds:
- LiteralColor: a plain color string, generated with the shared config
- GeneratorOverride: a mapping with a 'base' color; its other keys
  override the shared config for that color only
- PrebuiltRamp: a mapping keyed by shade levels, used verbatim
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Any, Mapping, Union

from shadecraft.shades import generate_shades
from shadecraft.types import ShadeConfig

logger = logging.getLogger(__name__)

_NUMERIC_KEY_RE = re.compile(r"\s*[-+]?\d")


@dataclass(frozen=True)
class LiteralColor:
    """A single color string."""
    color: str


@dataclass(frozen=True)
class PrebuiltRamp:
    """A caller-supplied ramp, passed through untouched."""
    shades: Mapping


@dataclass(frozen=True)
class GeneratorOverride:
    """A base color with per-color generation options."""
    base: str
    options: Mapping[str, Any] = field(default_factory=dict)


PaletteEntry = Union[LiteralColor, PrebuiltRamp, GeneratorOverride]


def _looks_numeric(key) -> bool:
    if isinstance(key, bool):
        return False
    if isinstance(key, (int, float)):
        return True
    return isinstance(key, str) and bool(_NUMERIC_KEY_RE.match(key))


def resolve_entry(value: Any) -> PaletteEntry | None:
    """Classify one color config value. Returns None for unusable shapes."""
    if isinstance(value, str):
        return LiteralColor(value)

    if isinstance(value, Mapping):
        base = value.get("base")
        if base:
            options = {k: v for k, v in value.items() if k != "base"}
            return GeneratorOverride(base, options)
        if any(_looks_numeric(key) for key in value):
            return PrebuiltRamp(value)

    return None


def build_palette(entry: PaletteEntry, config: ShadeConfig) -> Mapping:
    """Produce the ramp for one resolved entry."""
    if isinstance(entry, PrebuiltRamp):
        return entry.shades
    if isinstance(entry, GeneratorOverride):
        return generate_shades(entry.base, ShadeConfig.from_options(entry.options, base=config))
    return generate_shades(entry.color, config)


def generate_palettes(
    colors: Mapping[str, Any],
    config: ShadeConfig | Mapping[str, Any] | None = None,
) -> dict[str, Mapping]:
    """Generate shade ramps for multiple named colors.

    Args:
        colors: Color name -> color string, {'base': color, **options},
                or a pre-built {level: value} ramp
        config: Defaults applied to every generated color

    Returns:
        Dict of name -> ramp, in the input's order. Pre-built ramps are
        the caller's own objects. Entries of any other shape are skipped.

    Raises:
        ColorFormatError: If any color to be generated cannot be parsed.

    Example:
        generate_palettes({
            'primary': {'base': '#3b82f6', 'mode': 'vivid'},
            'secondary': '#64748b',
            'brand': {50: '#fff7ed', 500: '#f97316', 950: '#431407'},
        })
    """
    config = ShadeConfig.coerce(config)
    palettes: dict[str, Mapping] = {}

    for name, value in colors.items():
        entry = resolve_entry(value)
        if entry is None:
            logger.warning("Skipping color %r: unsupported value %r", name, value)
            continue
        if isinstance(entry, PrebuiltRamp):
            logger.debug("Using pre-built shades for %r", name)
        palettes[name] = build_palette(entry, config)

    return palettes
