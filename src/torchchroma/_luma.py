"""Luma tensorclass."""

from __future__ import annotations

from typing import ClassVar, Dict, Optional, Tuple, Union

import torch
from tensordict import tensorclass
from torch import Tensor

from ._channel_range import UNIT, ChannelRange
from ._color import Color
from ._numeric import Scalar, make_color


@tensorclass
class Luma(Color):
    """Gray scale color with an alpha channel.

    Attributes
    ----------
    luma : Tensor
        Luminance, 0 is black and 1 is white. Equal to the Y channel of the
        corresponding XYZ color.
    alpha : Tensor
        Opacity.
    """

    _RANGES: ClassVar[Dict[str, ChannelRange]] = {
        "luma": UNIT,
        "alpha": UNIT,
    }

    _LIGHTNESS: ClassVar[Tuple[str, ...]] = ("luma",)

    luma: Tensor
    alpha: Tensor


def luma(
    luma: Scalar,
    alpha: Scalar = 1.0,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[str, torch.device]] = None,
) -> Luma:
    """Create a gray scale color."""
    return make_color(
        Luma,
        {"luma": luma, "alpha": alpha},
        dtype=dtype,
        device=device,
    )
