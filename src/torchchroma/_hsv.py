"""HSV tensorclass."""

from __future__ import annotations

from typing import ClassVar, Dict, Optional, Tuple, Union

import torch
from tensordict import tensorclass
from torch import Tensor

from ._channel_range import HUE, UNIT, ChannelRange
from ._color import Color
from ._numeric import Scalar, make_color


@tensorclass
class Hsv(Color):
    """Hue, saturation and value, a cylindrical form of :class:`Rgb`.

    Attributes
    ----------
    hue : Tensor
        Hue angle in degrees, in [0, 360). 0 is red, 120 green, 240 blue.
    saturation : Tensor
        Colorfulness, 0 is gray and 1 is fully saturated.
    value : Tensor
        Brightness, 0 is black.
    alpha : Tensor
        Opacity.
    """

    _RANGES: ClassVar[Dict[str, ChannelRange]] = {
        "hue": HUE,
        "saturation": UNIT,
        "value": UNIT,
        "alpha": UNIT,
    }

    _LIGHTNESS: ClassVar[Tuple[str, ...]] = ("value",)

    hue: Tensor
    saturation: Tensor
    value: Tensor
    alpha: Tensor


def hsv(
    hue: Scalar,
    saturation: Scalar,
    value: Scalar,
    alpha: Scalar = 1.0,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[str, torch.device]] = None,
) -> Hsv:
    """Create an HSV color. ``hue`` is in degrees."""
    return make_color(
        Hsv,
        {
            "hue": hue,
            "saturation": saturation,
            "value": value,
            "alpha": alpha,
        },
        dtype=dtype,
        device=device,
    )
