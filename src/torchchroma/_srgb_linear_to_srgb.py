"""Linear sRGB to sRGB transfer function."""

import torch
from torch import Tensor


def srgb_linear_to_srgb(input: Tensor) -> Tensor:
    r"""Gamma-encode linear sRGB values.

    Mathematical Definition
    -----------------------
    .. math::
        f(x) = \begin{cases}
            12.92 x & \text{if } x \leq 0.0031308 \\
            1.055 x^{1/2.4} - 0.055 & \text{otherwise}
        \end{cases}

    Parameters
    ----------
    input : Tensor
        Linear values, any shape.

    Returns
    -------
    Tensor
        Gamma-encoded sRGB values, same shape and dtype.

    See Also
    --------
    srgb_to_srgb_linear : Inverse transfer function.
    """
    linear = torch.clamp(input, min=0.0031308)

    return torch.where(
        input <= 0.0031308,
        input * 12.92,
        1.055 * linear.pow(1.0 / 2.4) - 0.055,
    )
