"""Core data types for shadecraft."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Mapping, TypeVar, Union

from shadecraft import defaults
from shadecraft.errors import ColorFormatError


@dataclass(frozen=True)
class OKLCH:
    """A color in OKLCH polar form.

    Attributes:
        l: Lightness (0-1)
        c: Chroma (>= 0, roughly 0-0.4 for sRGB colors)
        h: Hue in degrees, normalized to [0, 360)
    """
    l: float
    c: float
    h: float

    def __post_init__(self):
        object.__setattr__(self, "l", float(self.l))
        object.__setattr__(self, "c", float(self.c))
        object.__setattr__(self, "h", float(self.h) % 360.0)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.l, self.c, self.h)


_FALSE_STRINGS = frozenset({"false", "0", "no", "off", ""})


def _as_flag(value: Any) -> bool:
    """Read a boolean option that may arrive as text from a config file."""
    if isinstance(value, str):
        return value.strip().lower() not in _FALSE_STRINGS
    return bool(value)


@dataclass(frozen=True)
class ShadeConfig:
    """Options for one shade generation call.

    Attributes:
        mode: 'fixed', 'natural' or 'vivid'. Unrecognized modes run the
            fixed algorithm.
        format: 'oklch' for oklch() text, 'hex' for #rrggbb.
        exact_match: Keep the input color verbatim at level 500 and
            redistribute the other levels around its lightness.
    """
    mode: str = defaults.DEFAULT_MODE
    format: str = defaults.DEFAULT_FORMAT
    exact_match: bool = defaults.DEFAULT_EXACT_MATCH

    @classmethod
    def from_options(cls, options: Mapping[str, Any] | None = None, base: ShadeConfig | None = None) -> ShadeConfig:
        """Build a config from an options mapping, layered over `base`.

        Accepts `exact_match` or the theme-file spelling `exactMatch`.
        Keys that are absent (or None) keep the base value.
        """
        base = base if base is not None else cls()
        if not options:
            return base

        mode = options.get("mode")
        fmt = options.get("format")
        exact = options.get("exact_match", options.get("exactMatch"))

        return cls(
            mode=base.mode if mode is None else str(mode),
            format=base.format if fmt is None else str(fmt),
            exact_match=base.exact_match if exact is None else _as_flag(exact),
        )

    @classmethod
    def coerce(cls, config: ShadeConfig | Mapping[str, Any] | None) -> ShadeConfig:
        if isinstance(config, ShadeConfig):
            return config
        return cls.from_options(config)


T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful parse result."""
    value: T


@dataclass(frozen=True)
class Err:
    """Failed parse result carrying the error that would have been raised."""
    error: ColorFormatError


ParseResult = Union[Ok[OKLCH], Err]
