"""Theme color settings: validation, defaults and neutral presets.

Validation here collects messages instead of raising, so a theme with a
bad color can still be reported on as a whole. Whether a message is fatal
is up to the caller.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping

from shadecraft import defaults
from shadecraft.parse import is_valid_color

logger = logging.getLogger(__name__)


@dataclass
class ColorSettings:
    """Resolved theme colors plus any problems found while resolving them."""
    colors: dict[str, Any] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def valid(self) -> bool:
        return not self.errors


def resolve_neutral(value: Any) -> Any:
    """Map a neutral preset name (stone, zinc, gray, slate, neutral) to its hex."""
    if isinstance(value, str):
        return defaults.NEUTRAL_PRESETS.get(value.strip().lower(), value)
    return value


def validate_colors(colors: Mapping[str, Any] | None) -> list[str]:
    """Check a color mapping. Returns a list of error messages."""
    errors: list[str] = []
    if not colors:
        return errors

    for name, value in colors.items():
        # Pre-built ramps and generator options are not inspected
        if isinstance(value, Mapping):
            continue

        if not isinstance(value, str):
            errors.append(
                f'Color "{name}" must be a string or shade mapping, got {type(value).__name__}'
            )
            continue

        if name == "neutral" and value.strip().lower() in defaults.NEUTRAL_PRESETS:
            continue

        if not is_valid_color(value):
            errors.append(f'Color "{name}" has invalid value: {value}')

    return errors


def process_colors(colors: Mapping[str, Any] | None = None) -> ColorSettings:
    """Merge user colors over the defaults and resolve neutral presets.

    Example:
        settings = process_colors({'primary': '#e35d25', 'neutral': 'zinc'})
        settings.colors['neutral']  # '#71717a'
    """
    colors = dict(colors or {})
    settings = ColorSettings(errors=validate_colors(colors))

    if not colors.get("primary"):
        settings.warnings.append(
            f"No primary color specified, using default blue ({defaults.DEFAULT_COLORS['primary']})"
        )

    if colors.get("neutral"):
        colors["neutral"] = resolve_neutral(colors["neutral"])
    else:
        settings.warnings.append(
            f"No neutral color specified, using default stone ({defaults.DEFAULT_COLORS['neutral']})"
        )

    # Entries that failed validation fall back to the defaults
    for name, value in list(colors.items()):
        if isinstance(value, Mapping):
            continue
        if not value or not isinstance(value, str) or not is_valid_color(value):
            del colors[name]

    settings.colors = {**defaults.DEFAULT_COLORS, **colors}

    for message in settings.errors:
        logger.warning(message)
    return settings
