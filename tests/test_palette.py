"""Tests for multi-color palette generation."""

import logging

import pytest

from shadecraft import (
    ColorFormatError,
    GeneratorOverride,
    LiteralColor,
    PrebuiltRamp,
    generate_palettes,
    generate_shades,
    resolve_entry,
)


class TestResolveEntry:
    def test_string(self):
        assert resolve_entry("#3b82f6") == LiteralColor("#3b82f6")

    def test_override(self):
        entry = resolve_entry({"base": "#3b82f6", "mode": "vivid"})
        assert entry == GeneratorOverride("#3b82f6", {"mode": "vivid"})

    def test_prebuilt_string_keys(self):
        shades = {"50": "#eff6ff", "500": "#3b82f6"}
        entry = resolve_entry(shades)
        assert isinstance(entry, PrebuiltRamp)
        assert entry.shades is shades

    def test_prebuilt_int_keys(self):
        assert isinstance(resolve_entry({50: "#eff6ff"}), PrebuiltRamp)

    def test_base_wins_over_numeric_keys(self):
        entry = resolve_entry({"base": "#3b82f6", "500": "#000000"})
        assert isinstance(entry, GeneratorOverride)

    @pytest.mark.parametrize("value", [None, 42, {"foo": "bar"}, {"base": ""}, ["#fff"]])
    def test_unusable(self, value):
        assert resolve_entry(value) is None


class TestGeneratePalettes:
    def test_multiple_colors(self):
        palettes = generate_palettes({"primary": "#3b82f6", "secondary": "#64748b"})
        assert list(palettes) == ["primary", "secondary"]
        assert len(palettes["primary"]) == 11
        assert len(palettes["secondary"]) == 11

    def test_prebuilt_passes_through(self):
        predefined = {"50": "#fafafa", "500": "#737373", "950": "#0a0a0a"}
        palettes = generate_palettes({"custom": predefined, "primary": "#3b82f6"})
        assert palettes["custom"] is predefined
        assert len(palettes["primary"]) == 11

    def test_shared_config(self):
        palettes = generate_palettes({"primary": "#3b82f6"}, {"format": "hex"})
        assert palettes["primary"][500] == "#3b82f6"

    def test_per_color_override(self):
        palettes = generate_palettes(
            {
                "primary": {"base": "#3b82f6", "mode": "vivid"},
                "secondary": "#3b82f6",
            },
            {"format": "hex"},
        )
        assert palettes["primary"] == generate_shades("#3b82f6", {"mode": "vivid", "format": "hex"})
        assert palettes["secondary"] == generate_shades("#3b82f6", {"format": "hex"})

    def test_override_exact_match_camel_case(self):
        palettes = generate_palettes({"primary": {"base": "#3b82f6", "exactMatch": False}})
        assert palettes["primary"] == generate_shades("#3b82f6", {"exact_match": False})

    def test_insertion_order(self):
        names = ["zeta", "alpha", "mid"]
        palettes = generate_palettes({name: "#3b82f6" for name in names})
        assert list(palettes) == names

    def test_invalid_color_propagates(self):
        with pytest.raises(ColorFormatError):
            generate_palettes({"primary": "#3b82f6", "broken": "not-a-color"})

    def test_invalid_override_base_propagates(self):
        with pytest.raises(ColorFormatError):
            generate_palettes({"primary": {"base": "nope"}})

    def test_unusable_entries_skipped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="shadecraft.palette"):
            palettes = generate_palettes({"primary": "#3b82f6", "weird": 42})
        assert list(palettes) == ["primary"]
        assert "weird" in caplog.text

    def test_empty(self):
        assert generate_palettes({}) == {}
