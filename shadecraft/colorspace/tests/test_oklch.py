"""Tests for OKLCH color space conversions."""

import numpy as np

from shadecraft.colorspace import (
    oklch_to_oklab,
    oklab_to_oklch,
    oklab_to_linear_rgb,
    linear_rgb_to_oklab,
    linear_to_srgb,
    srgb_to_linear,
    rgb255_to_oklch,
    oklch_to_srgb255,
    oklch_to_rgb255,
)


class TestBasicConversions:
    """Test 8-bit sRGB <-> OKLCH conversions."""

    def test_black(self):
        """Black: L=0 should give RGB (0,0,0)."""
        rgb = oklch_to_rgb255(0.0, 0.0, 0.0)
        np.testing.assert_array_equal(rgb, [0, 0, 0])

    def test_white(self):
        """White: L=1, C=0 should give RGB (255,255,255)."""
        rgb = oklch_to_rgb255(1.0, 0.0, 0.0)
        np.testing.assert_array_equal(rgb, [255, 255, 255])

    def test_white_lightness(self):
        L, C, _ = rgb255_to_oklch(255, 255, 255)
        assert abs(L - 1.0) < 1e-4
        assert C < 1e-4

    def test_gray(self):
        """Mid gray: L=0.5, C=0 should give neutral gray."""
        r, g, b = oklch_to_srgb255(0.5, 0.0, 0.0)
        assert abs(r - g) < 1e-3
        assert abs(g - b) < 1e-3

    def test_known_blue(self):
        """#3b82f6 is roughly oklch(62.3% 0.188 259.8)."""
        L, C, H = rgb255_to_oklch(59, 130, 246)
        assert abs(L - 0.623) < 2e-3
        assert abs(C - 0.188) < 2e-3
        assert 259 < H < 260.5

    def test_primary_hues(self):
        """Red, green and blue land in their expected hue bands."""
        _, _, h_red = rgb255_to_oklch(255, 0, 0)
        _, _, h_green = rgb255_to_oklch(0, 255, 0)
        _, _, h_blue = rgb255_to_oklch(0, 0, 255)
        assert 20 < h_red < 40
        assert 130 < h_green < 160
        assert 260 < h_blue < 280

    def test_unrounded_channels_out_of_gamut(self):
        """High chroma produces channels outside 0-255 before rounding."""
        rgb = oklch_to_srgb255(0.5, 0.4, 30.0)
        assert (rgb < 0).any() or (rgb > 255).any()

    def test_rounded_channels_clamped(self):
        rgb = oklch_to_rgb255(0.5, 0.4, 30.0)
        assert rgb.dtype.kind == 'i'
        assert (rgb >= 0).all()
        assert (rgb <= 255).all()


class TestRoundTrip:
    """Test sRGB -> OKLCH -> sRGB round trips."""

    def test_roundtrip_primaries(self):
        """Primary and secondary colors should round-trip exactly."""
        colors = np.array([
            [255, 0, 0],
            [0, 255, 0],
            [0, 0, 255],
            [255, 255, 0],
            [255, 0, 255],
            [0, 255, 255],
        ])

        L, C, H = rgb255_to_oklch(colors[:, 0], colors[:, 1], colors[:, 2])
        rgb_back = oklch_to_rgb255(L, C, H)

        np.testing.assert_array_equal(rgb_back, colors)

    def test_roundtrip_random(self):
        """Random 8-bit colors should round-trip exactly."""
        rng = np.random.default_rng(42)
        colors = rng.integers(0, 256, size=(200, 3))

        L, C, H = rgb255_to_oklch(colors[:, 0], colors[:, 1], colors[:, 2])
        rgb_back = oklch_to_rgb255(L, C, H)

        np.testing.assert_array_equal(rgb_back, colors)


class TestGammaEncoding:
    """Test sRGB gamma encoding/decoding."""

    def test_gamma_roundtrip(self):
        """Linear -> sRGB -> Linear should round-trip."""
        linear = np.linspace(0, 1, 100)
        srgb = linear_to_srgb(linear)
        linear_back = srgb_to_linear(srgb)
        np.testing.assert_allclose(linear_back, linear, atol=1e-9)

    def test_gamma_threshold(self):
        """Values near the linear segment threshold should be handled correctly."""
        linear = np.array([0.001, 0.003, 0.0031308, 0.004, 0.01])
        srgb = linear_to_srgb(linear)
        linear_back = srgb_to_linear(srgb)
        np.testing.assert_allclose(linear_back, linear, atol=1e-9)

    def test_linear_segment(self):
        """Below the threshold the curve is a straight 12.92 slope."""
        np.testing.assert_allclose(linear_to_srgb(0.001), 0.01292)
        np.testing.assert_allclose(srgb_to_linear(0.01292), 0.001)

    def test_negative_values_stay_finite(self):
        """Out-of-gamut linear values must not produce NaN."""
        srgb = linear_to_srgb(np.array([-0.2, 1.3]))
        assert np.isfinite(srgb).all()
        assert srgb[0] < 0
        assert srgb[1] > 1


class TestOklabOklch:
    """Test OKLab <-> OKLCH conversions."""

    def test_oklch_to_oklab_zero_chroma(self):
        """Zero chroma should give a=b=0."""
        L_out, a, b = oklch_to_oklab(np.array([0.5]), np.array([0.0]), np.array([123.0]))

        assert L_out[0] == 0.5
        np.testing.assert_allclose(a, [0], atol=1e-10)
        np.testing.assert_allclose(b, [0], atol=1e-10)

    def test_hue_wraps_to_positive(self):
        """Negative atan2 angles are returned in [0, 360)."""
        _, C, H = oklab_to_oklch(0.5, 0.1, -0.1)
        np.testing.assert_allclose(C, np.sqrt(0.02))
        np.testing.assert_allclose(H, 315.0)

    def test_oklab_oklch_roundtrip(self):
        """OKLab -> OKLCH -> OKLab should round-trip."""
        L = np.array([0.7])
        a = np.array([0.1])
        b = np.array([-0.05])

        L2, C, H = oklab_to_oklch(L, a, b)
        L3, a2, b2 = oklch_to_oklab(L2, C, H)

        np.testing.assert_allclose(L3, L, atol=1e-10)
        np.testing.assert_allclose(a2, a, atol=1e-10)
        np.testing.assert_allclose(b2, b, atol=1e-10)


class TestLinearRGBConversions:
    """Test OKLab <-> Linear RGB conversions."""

    def test_oklab_linear_rgb_roundtrip(self):
        """OKLab -> Linear RGB -> OKLab should round-trip."""
        L = np.array([0.5, 0.7, 0.3])
        a = np.array([0.1, -0.05, 0.0])
        b = np.array([-0.05, 0.1, 0.05])

        r, g, b_lin = oklab_to_linear_rgb(L, a, b)
        L2, a2, b2 = linear_rgb_to_oklab(r, g, b_lin)

        np.testing.assert_allclose(L2, L, atol=1e-6)
        np.testing.assert_allclose(a2, a, atol=1e-6)
        np.testing.assert_allclose(b2, b, atol=1e-6)
