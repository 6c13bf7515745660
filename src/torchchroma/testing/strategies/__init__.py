"""Hypothesis strategies for color testing."""

from ._colors import colors
from ._real_number_dtypes import real_number_dtypes
from ._shapes import shapes
from ._tensors import tensors

__all__ = [
    "colors",
    "real_number_dtypes",
    "shapes",
    "tensors",
]
