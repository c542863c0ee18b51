"""Test configuration for shadecraft."""

import re

_OKLCH_TEXT_RE = re.compile(r"oklch\(([\d.]+)% ([\d.]+) ([\d.]+)\)")


def read_oklch(text: str) -> tuple[float, float, float]:
    """Split formatted oklch() output into (L, C, H) with L in 0-1."""
    match = _OKLCH_TEXT_RE.fullmatch(text)
    assert match, f"not oklch text: {text}"
    return float(match.group(1)) / 100, float(match.group(2)), float(match.group(3))
