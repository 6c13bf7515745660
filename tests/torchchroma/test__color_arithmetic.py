"""Tests for channel-wise color arithmetic."""

import math

import hypothesis
import hypothesis.strategies
import pytest
import torch

from torchchroma import (
    Luma,
    Rgb,
    Xyz,
    color_add,
    color_divide,
    color_multiply,
    color_subtract,
    hsv,
    lab,
    xyz,
)
from torchchroma.testing import assert_color_close, colors, shapes


class TestColorArithmeticColors:
    """Tests for operations between two colors."""

    def test_add(self):
        c = xyz(0.1, 0.2, 0.3, 0.4) + xyz(0.1, 0.1, 0.1, 0.1)
        assert_color_close(c, xyz(0.2, 0.3, 0.4, 0.5))

    def test_subtract(self):
        c = xyz(0.5, 0.5, 0.5, 1.0) - xyz(0.1, 0.2, 0.3, 0.5)
        assert_color_close(c, xyz(0.4, 0.3, 0.2, 0.5))

    def test_multiply(self):
        c = xyz(0.5, 0.5, 0.5, 1.0) * xyz(0.5, 0.2, 0.0, 0.5)
        assert_color_close(c, xyz(0.25, 0.1, 0.0, 0.5))

    def test_divide(self):
        c = xyz(0.5, 0.4, 0.3, 1.0) / xyz(0.5, 0.8, 0.6, 0.5)
        assert_color_close(c, xyz(1.0, 0.5, 0.5, 2.0))

    def test_divide_by_zero_is_infinite(self):
        c = xyz(0.1, 0.2, 0.3, 1.0) / xyz(0.1, 0.2, 0.3, 0.0)
        assert math.isinf(c.alpha.item())

    def test_hue_is_not_wrapped(self):
        c = hsv(300.0, 0.5, 0.5) + hsv(100.0, 0.1, 0.1)
        assert c.hue.item() == pytest.approx(400.0)
        assert not c.is_valid()

    def test_result_is_not_clamped(self):
        c = xyz(0.8, 0.8, 0.8) + xyz(0.8, 0.8, 0.8)
        assert c.x.item() == pytest.approx(1.6)

    def test_broadcast_batches(self):
        c = xyz(torch.rand(3), 0.1, 0.1) + xyz(torch.rand(2, 1), 0.1, 0.1)
        assert c.batch_size == torch.Size([2, 3])

    def test_different_spaces_raise(self):
        with pytest.raises(TypeError):
            xyz(0.1, 0.2, 0.3) + lab(0.1, 0.2, 0.3)

    def test_different_dtypes_raise(self):
        a = xyz(0.1, 0.2, 0.3, dtype=torch.float32)
        b = xyz(0.1, 0.2, 0.3, dtype=torch.float64)
        with pytest.raises(TypeError, match="cannot combine"):
            a + b

    def test_functions(self):
        a = xyz(0.4, 0.4, 0.4)
        b = xyz(0.2, 0.2, 0.2)
        assert_color_close(color_add(a, b), a + b)
        assert_color_close(color_subtract(a, b), a - b)
        assert_color_close(color_multiply(a, b), a * b)
        assert_color_close(color_divide(a, b), a / b)

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            xyz(0.1, 0.2, 0.3) + "red"


class TestColorArithmeticScalars:
    """Tests for operations with numbers and tensors."""

    def test_add_number(self):
        assert_color_close(
            xyz(0.1, 0.2, 0.3, 0.4) + 0.1, xyz(0.2, 0.3, 0.4, 0.5)
        )

    def test_reflected_add(self):
        assert_color_close(0.1 + xyz(0.1, 0.2, 0.3, 0.4), xyz(0.2, 0.3, 0.4, 0.5))

    def test_reflected_subtract(self):
        assert_color_close(1.0 - xyz(0.1, 0.2, 0.3, 0.4), xyz(0.9, 0.8, 0.7, 0.6))

    def test_multiply_integer(self):
        assert_color_close(xyz(0.1, 0.2, 0.3, 0.4) * 2, xyz(0.2, 0.4, 0.6, 0.8))

    def test_reflected_multiply(self):
        assert_color_close(2.0 * xyz(0.1, 0.2, 0.3, 0.4), xyz(0.2, 0.4, 0.6, 0.8))

    def test_reflected_divide(self):
        assert_color_close(1.0 / xyz(0.5, 0.25, 1.0, 1.0), xyz(2.0, 4.0, 1.0, 1.0))

    def test_tensor_scalar_broadcasts(self):
        c = xyz(0.1, 0.2, 0.3) * torch.tensor([1.0, 2.0])
        assert c.batch_size == torch.Size([2])
        torch.testing.assert_close(c.y, torch.tensor([0.2, 0.4]))

    def test_scalar_takes_color_dtype(self):
        c = xyz(0.1, 0.2, 0.3) + torch.tensor(0.1, dtype=torch.float64)
        assert c.x.dtype == torch.float32

    def test_alpha_included(self):
        assert (xyz(0.1, 0.2, 0.3, 0.5) * 0.5).alpha.item() == 0.25


class TestColorArithmeticProperties:
    """Algebraic properties over every space."""

    @hypothesis.given(data=hypothesis.strategies.data())
    def test_add_subtract(self, data):
        space = data.draw(hypothesis.strategies.sampled_from([Xyz, Rgb, Luma]))
        shape = data.draw(shapes())
        a = data.draw(colors(space, shape=shape))
        b = data.draw(colors(space, shape=shape))
        assert_color_close(a + b - b, a, atol=1e-12, rtol=0)

    @hypothesis.given(data=hypothesis.strategies.data())
    def test_divide_self_is_one(self, data):
        space = data.draw(hypothesis.strategies.sampled_from([Xyz, Rgb, Luma]))
        a = data.draw(colors(space, margin=0.05))
        result = a / a
        for name in space._RANGES:
            torch.testing.assert_close(
                getattr(result, name),
                torch.ones_like(getattr(a, name)),
            )

    @hypothesis.given(color=colors(Xyz))
    def test_multiply_commutes(self, color):
        assert_color_close(color * 0.5, 0.5 * color)
