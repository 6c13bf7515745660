"""Tests for the capability protocols."""

import pytest

from torchchroma import (
    Color,
    ColorSpace,
    Hsl,
    Hsv,
    Lab,
    Lch,
    Luma,
    Mix,
    Rgb,
    Shade,
    Xyz,
)

SPACES = [Xyz, Rgb, Luma, Lab, Lch, Hsv, Hsl]


class TestCapabilities:
    """Every space implements every capability."""

    @pytest.mark.parametrize("space", SPACES)
    def test_color_space(self, space):
        assert isinstance(space.default(), ColorSpace)

    @pytest.mark.parametrize("space", SPACES)
    def test_mix(self, space):
        assert isinstance(space.default(), Mix)

    @pytest.mark.parametrize("space", SPACES)
    def test_shade(self, space):
        assert isinstance(space.default(), Shade)

    @pytest.mark.parametrize("space", SPACES)
    def test_color(self, space):
        assert issubclass(space, Color)

    def test_number_is_not_a_color_space(self):
        assert not isinstance(1.0, ColorSpace)

    @pytest.mark.parametrize("space", SPACES)
    def test_default_is_opaque_black(self, space):
        c = space.default()
        assert c.is_valid()
        assert c.alpha.item() == 1.0
        for name in space._RANGES:
            if name != "alpha":
                assert getattr(c, name).item() == 0.0

    @pytest.mark.parametrize("space", SPACES)
    def test_alpha_is_last(self, space):
        assert list(space._RANGES)[-1] == "alpha"
