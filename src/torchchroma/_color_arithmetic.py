"""Channel-wise arithmetic between colors and scalars.

Every operator applies to all channels, alpha and hue included, with no
wrapping or clamping. Division by a zero channel gives IEEE infinities or NaN.
"""

import operator
from typing import Callable

from torch import Tensor

from ._numeric import as_scalar, build_color, check_compatible


def _is_color(value) -> bool:
    return hasattr(type(value), "_RANGES")


def _apply(op: Callable[[Tensor, Tensor], Tensor], left, right, name: str):
    if _is_color(left) and _is_color(right):
        check_compatible(left, right, name)

        color = left

        channels = {
            k: op(getattr(left, k), getattr(right, k)) for k in left._RANGES
        }
    elif _is_color(left):
        color = left

        scalar = as_scalar(left, right)

        channels = {k: op(getattr(left, k), scalar) for k in left._RANGES}
    else:
        color = right

        scalar = as_scalar(right, left)

        channels = {k: op(scalar, getattr(right, k)) for k in right._RANGES}

    return build_color(type(color), channels)


def color_add(left, right):
    """``left + right``, where either operand may be a scalar."""
    return _apply(operator.add, left, right, "add")


def color_subtract(left, right):
    """``left - right``, where either operand may be a scalar."""
    return _apply(operator.sub, left, right, "subtract")


def color_multiply(left, right):
    """``left * right``, where either operand may be a scalar."""
    return _apply(operator.mul, left, right, "multiply")


def color_divide(left, right):
    """``left / right``, where either operand may be a scalar."""
    return _apply(operator.truediv, left, right, "divide")
