"""Generic clamp for Python numbers and tensors."""

from typing import Union

import torch
from torch import Tensor

Number = Union[int, float]


def clamp(
    value: Union[Number, Tensor],
    low: Union[Number, Tensor],
    high: Union[Number, Tensor],
) -> Union[Number, Tensor]:
    r"""Bound ``value`` to the closed interval ``[low, high]``.

    Returns ``low`` where ``value < low``, ``high`` where ``value > high`` and
    ``value`` otherwise. NaN is neither below nor above any bound, so it is
    returned unchanged.

    Parameters
    ----------
    value : Number or Tensor
        Value to bound. Tensors are clamped element-wise.
    low, high : Number or Tensor
        Bounds. Tensor bounds broadcast against ``value`` and are cast to its
        dtype.

    Returns
    -------
    Number or Tensor
        Bounded value. A tensor result keeps the dtype of ``value``.

    Examples
    --------
    >>> clamp(1.5, 0.0, 1.0)
    1.0
    >>> clamp(torch.tensor([-0.5, 0.5, 1.5]), 0.0, 1.0)
    tensor([0.0000, 0.5000, 1.0000])
    """
    if not any(isinstance(v, Tensor) for v in (value, low, high)):
        if value < low:
            return low
        if value > high:
            return high
        return value

    if not isinstance(value, Tensor):
        reference = low if isinstance(low, Tensor) else high
        value = torch.as_tensor(
            value, dtype=reference.dtype, device=reference.device
        )

    if isinstance(low, Tensor) or isinstance(high, Tensor):
        low = torch.as_tensor(low, dtype=value.dtype, device=value.device)
        high = torch.as_tensor(high, dtype=value.dtype, device=value.device)

    return torch.clamp(value, low, high)
