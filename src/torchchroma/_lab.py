"""CIE L*a*b* tensorclass."""

from __future__ import annotations

from typing import ClassVar, Dict, Optional, Tuple, Union

import torch
from tensordict import tensorclass
from torch import Tensor

from ._channel_range import SIGNED_UNIT, UNIT, ChannelRange
from ._color import Color
from ._numeric import Scalar, make_color


@tensorclass
class Lab(Color):
    """CIE L*a*b* (CIELAB) color with an alpha channel.

    Lab is a perceptually uniform space: equal distances correspond to
    roughly equal perceived differences. Channels are scaled so that every
    range is at most [-1, 1]; multiply L by 100 and a, b by 128 to obtain the
    usual CIELAB numbers.

    Attributes
    ----------
    l : Tensor
        Lightness, 0 is black and 1 is diffuse white.
    a : Tensor
        Green (negative) to red (positive) axis, in [-1, 1].
    b : Tensor
        Blue (negative) to yellow (positive) axis, in [-1, 1].
    alpha : Tensor
        Opacity.
    """

    _RANGES: ClassVar[Dict[str, ChannelRange]] = {
        "l": UNIT,
        "a": SIGNED_UNIT,
        "b": SIGNED_UNIT,
        "alpha": UNIT,
    }

    _LIGHTNESS: ClassVar[Tuple[str, ...]] = ("l",)

    l: Tensor  # noqa: E741
    a: Tensor
    b: Tensor
    alpha: Tensor


def lab(
    l: Scalar,  # noqa: E741
    a: Scalar,
    b: Scalar,
    alpha: Scalar = 1.0,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[str, torch.device]] = None,
) -> Lab:
    """Create a CIE L*a*b* color from scaled channels.

    Examples
    --------
    CIELAB (53.24, 80.09, 67.20) is ``lab(0.5324, 80.09 / 128, 67.20 / 128)``.
    """
    return make_color(
        Lab,
        {"l": l, "a": a, "b": b, "alpha": alpha},
        dtype=dtype,
        device=device,
    )
