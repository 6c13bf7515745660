"""Testing utilities for color spaces.

Example usage:

    import hypothesis

    from torchchroma import Lab, Xyz
    from torchchroma.testing import assert_color_close, colors

    @hypothesis.given(colors(Lab))
    def test_round_trip(color):
        result = Lab.from_color(color.into(Xyz))
        assert_color_close(result, color, atol=1e-6, rtol=0)
"""

from ._assert_color_close import assert_color_close
from .strategies import (
    colors,
    real_number_dtypes,
    shapes,
    tensors,
)

__all__ = [
    "assert_color_close",
    "colors",
    "real_number_dtypes",
    "shapes",
    "tensors",
]
