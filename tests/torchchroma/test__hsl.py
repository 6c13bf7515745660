"""Tests for the Hsl color space."""

import hypothesis
import pytest
import torch

from torchchroma import (
    Hsl,
    Hsv,
    Rgb,
    conversion_path,
    hsl,
    hsl_to_rgb,
    hsv,
    linear_rgb,
    rgb_to_hsl,
    rgb_to_hsv,
)
from torchchroma.testing import assert_color_close, colors

f64 = torch.float64


class TestRgbToHsl:
    """Tests for RGB to HSL."""

    @pytest.mark.parametrize(
        "rgb, expected",
        [
            ((1.0, 0.0, 0.0), (0.0, 1.0, 0.5)),
            ((0.0, 0.0, 1.0), (240.0, 1.0, 0.5)),
            ((1.0, 1.0, 1.0), (0.0, 0.0, 1.0)),
            ((0.5, 0.5, 0.5), (0.0, 0.0, 0.5)),
            ((0.0, 0.0, 0.0), (0.0, 0.0, 0.0)),
            ((0.5, 0.25, 0.25), (0.0, 1.0 / 3.0, 0.375)),
        ],
    )
    def test_values(self, rgb, expected):
        c = rgb_to_hsl(linear_rgb(*rgb, dtype=f64))
        assert_color_close(c, hsl(*expected, dtype=f64), atol=1e-12, rtol=0)


class TestHslToRgb:
    """Tests for HSL to RGB."""

    def test_blue(self):
        c = hsl_to_rgb(hsl(240.0, 1.0, 0.5, dtype=f64))
        assert_color_close(c, linear_rgb(0.0, 0.0, 1.0, dtype=f64))

    def test_gray(self):
        c = hsl_to_rgb(hsl(0.0, 0.0, 0.3, dtype=f64))
        assert_color_close(c, linear_rgb(0.3, 0.3, 0.3, dtype=f64))

    @hypothesis.given(color=colors(Hsl, margin=0.05))
    def test_round_trip(self, color):
        assert_color_close(
            color.into(Rgb).into(Hsl), color, atol=1e-9, rtol=0
        )


class TestHslToHsv:
    """Tests for conversions between the two hexcone spaces."""

    def test_path_through_rgb(self):
        assert conversion_path(Hsl, Hsv) == (hsl_to_rgb, rgb_to_hsv)

    def test_red(self):
        c = hsl(0.0, 1.0, 0.5, dtype=f64).into(Hsv)
        assert_color_close(c, hsv(0.0, 1.0, 1.0, dtype=f64))


class TestHslShade:
    """Tests for lightening HSL."""

    def test_lighten_moves_lightness(self):
        c = hsl(200.0, 0.5, 0.3).lighten(0.2)
        assert_color_close(c, hsl(200.0, 0.5, 0.5))

    def test_darken(self):
        c = hsl(200.0, 0.5, 0.3).darken(0.1)
        assert_color_close(c, hsl(200.0, 0.5, 0.2))
