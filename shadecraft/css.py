"""Emit palettes as CSS custom properties."""

from __future__ import annotations

from typing import Mapping

from shadecraft import defaults


def _shade_value(shades: Mapping, level: int):
    """Look up a level by int or string key."""
    value = shades.get(level)
    if value is None:
        value = shades.get(str(level))
    return value


def generate_palette_vars(palettes: Mapping[str, Mapping], indent: str = "  ") -> str:
    """One `--<name>-<level>: <value>;` declaration per shade, in level order.

    Levels a pre-built ramp does not define are skipped.
    """
    lines = []
    for name, shades in palettes.items():
        for level in defaults.SHADE_LEVELS:
            value = _shade_value(shades, level)
            if value:
                lines.append(f"{indent}--{name}-{level}: {value};")
    return "\n".join(lines)


def generate_palette_css(palettes: Mapping[str, Mapping], selector: str = ":root") -> str:
    """Wrap the palette declarations in a single rule block."""
    return f"{selector} {{\n{generate_palette_vars(palettes)}\n}}"
