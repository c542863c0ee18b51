"""Parse CSS color strings into OKLCH.

Supported notations (case-insensitive, surrounding whitespace ignored):
- hex: #rgb, #rgba, #rrggbb, #rrggbbaa, with or without the leading '#'
- rgb()/rgba() with comma- or space-separated channels (0-255)
- hsl()/hsla() with comma- or space-separated components
- oklch() with lightness as 0-1 or a percentage, hue optionally in 'deg'

Alpha is accepted where the notation allows it and ignored. Everything
other than oklch() resolves to 8-bit sRGB channels first and goes through
the same conversion, so equal colors parse to equal OKLCH values.
"""

from __future__ import annotations

import re

from shadecraft.colorspace import rgb255_to_oklch
from shadecraft.errors import ColorFormatError
from shadecraft.types import OKLCH, Ok, Err, ParseResult

_NUM = r"(\d*\.?\d+)"
_SEP = r"(?:\s*,\s*|\s+)"
_ALPHA = r"(?:\s*[,/]\s*\d*\.?\d+%?)?"

_HEX_RE = re.compile(r"#?([0-9a-f]{3}|[0-9a-f]{4}|[0-9a-f]{6}|[0-9a-f]{8})")
_RGB_RE = re.compile(
    rf"rgba?\(\s*{_NUM}{_SEP}{_NUM}{_SEP}{_NUM}{_ALPHA}\s*\)"
)
_HSL_RE = re.compile(
    rf"hsla?\(\s*{_NUM}(?:deg)?{_SEP}{_NUM}%{_SEP}{_NUM}%{_ALPHA}\s*\)"
)
_OKLCH_RE = re.compile(
    rf"oklch\(\s*{_NUM}(%?)\s+{_NUM}\s+{_NUM}(?:deg)?{_ALPHA}\s*\)"
)


def parse_color(color: str) -> OKLCH:
    """Parse a color string into OKLCH.

    Raises:
        ColorFormatError: If the input is not a non-empty string in one of
            the supported notations.
    """
    result = try_parse_color(color)
    if isinstance(result, Err):
        raise result.error
    return result.value


def try_parse_color(color) -> ParseResult:
    """Parse a color string, returning Ok(OKLCH) or Err(ColorFormatError)."""
    if not isinstance(color, str) or not color.strip():
        return Err(ColorFormatError(f"Invalid color: {color!r}", color))

    text = color.strip().lower()

    if text.startswith("oklch("):
        parser = _parse_oklch
    elif text.startswith("rgb"):
        parser = _parse_rgb
    elif text.startswith("hsl"):
        parser = _parse_hsl
    elif _HEX_RE.fullmatch(text):
        parser = _parse_hex
    else:
        return Err(ColorFormatError(f"Unsupported color format: {color!r}", color))

    try:
        return Ok(parser(text))
    except ColorFormatError as e:
        return Err(e)


def is_valid_color(color) -> bool:
    """True if `color` parses. Never raises."""
    return isinstance(try_parse_color(color), Ok)


def hex_to_rgb(text: str) -> tuple[int, int, int]:
    """Hex string (3, 4, 6 or 8 digits, optional '#') -> (r, g, b) in 0-255.

    Alpha digits are dropped.
    """
    match = _HEX_RE.fullmatch(text.strip().lower())
    if not match:
        raise ColorFormatError(f"Invalid hex color: {text!r}", text)
    digits = match.group(1)
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    return (int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """HSL -> RGB, all components in [0, 1] except h in degrees."""
    if s == 0:
        return (l, l, l)

    hue = (h % 360) / 360
    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return (
        _hue_to_rgb(p, q, hue + 1 / 3),
        _hue_to_rgb(p, q, hue),
        _hue_to_rgb(p, q, hue - 1 / 3),
    )


def _hue_to_rgb(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def _from_rgb255(r: float, g: float, b: float) -> OKLCH:
    L, C, H = rgb255_to_oklch(r, g, b)
    return OKLCH(L, C, H)


def _parse_hex(text: str) -> OKLCH:
    return _from_rgb255(*hex_to_rgb(text))


def _parse_rgb(text: str) -> OKLCH:
    match = _RGB_RE.fullmatch(text)
    if not match:
        raise ColorFormatError(f"Invalid rgb format: {text!r}", text)
    r, g, b = (min(float(v), 255.0) for v in match.groups())
    return _from_rgb255(r, g, b)


def _parse_hsl(text: str) -> OKLCH:
    match = _HSL_RE.fullmatch(text)
    if not match:
        raise ColorFormatError(f"Invalid hsl format: {text!r}", text)
    h = float(match.group(1))
    s = min(float(match.group(2)) / 100, 1.0)
    l = min(float(match.group(3)) / 100, 1.0)
    r, g, b = hsl_to_rgb(h, s, l)
    return _from_rgb255(r * 255, g * 255, b * 255)


def _parse_oklch(text: str) -> OKLCH:
    match = _OKLCH_RE.fullmatch(text)
    if not match:
        raise ColorFormatError(f"Invalid oklch format: {text!r}", text)
    l = float(match.group(1))
    if match.group(2) == "%":
        l /= 100
    return OKLCH(l, float(match.group(3)), float(match.group(4)))
