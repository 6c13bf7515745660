"""sRGB to linear sRGB transfer function."""

import torch
from torch import Tensor


def srgb_to_srgb_linear(input: Tensor) -> Tensor:
    r"""Gamma-expand sRGB values.

    Mathematical Definition
    -----------------------
    .. math::
        f(x) = \begin{cases}
            \frac{x}{12.92} & \text{if } x \leq 0.04045 \\
            \left(\frac{x + 0.055}{1.055}\right)^{2.4} & \text{otherwise}
        \end{cases}

    Parameters
    ----------
    input : Tensor
        Gamma-encoded sRGB values, any shape.

    Returns
    -------
    Tensor
        Linear values, same shape and dtype.

    Examples
    --------
    >>> srgb_to_srgb_linear(torch.tensor([0.2, 0.5, 0.8]))
    tensor([0.0331, 0.2140, 0.6038])

    References
    ----------
    .. [1] IEC 61966-2-1:1999, "Multimedia systems and equipment - Colour
           measurement and management - Part 2-1: Colour management - Default
           RGB colour space - sRGB"
    """
    # the clamp keeps the unused branch finite for autograd
    encoded = torch.clamp((input + 0.055) / 1.055, min=0.0)

    return torch.where(input <= 0.04045, input / 12.92, encoded.pow(2.4))
