"""HSL tensorclass."""

from __future__ import annotations

from typing import ClassVar, Dict, Optional, Tuple, Union

import torch
from tensordict import tensorclass
from torch import Tensor

from ._channel_range import HUE, UNIT, ChannelRange
from ._color import Color
from ._numeric import Scalar, make_color


@tensorclass
class Hsl(Color):
    """Hue, saturation and lightness, a cylindrical form of :class:`Rgb`.

    Attributes
    ----------
    hue : Tensor
        Hue angle in degrees, in [0, 360).
    saturation : Tensor
        Colorfulness, 0 is gray.
    lightness : Tensor
        0 is black, 0.5 the pure hue and 1 white.
    alpha : Tensor
        Opacity.
    """

    _RANGES: ClassVar[Dict[str, ChannelRange]] = {
        "hue": HUE,
        "saturation": UNIT,
        "lightness": UNIT,
        "alpha": UNIT,
    }

    _LIGHTNESS: ClassVar[Tuple[str, ...]] = ("lightness",)

    hue: Tensor
    saturation: Tensor
    lightness: Tensor
    alpha: Tensor


def hsl(
    hue: Scalar,
    saturation: Scalar,
    lightness: Scalar,
    alpha: Scalar = 1.0,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[str, torch.device]] = None,
) -> Hsl:
    """Create an HSL color. ``hue`` is in degrees."""
    return make_color(
        Hsl,
        {
            "hue": hue,
            "saturation": saturation,
            "lightness": lightness,
            "alpha": alpha,
        },
        dtype=dtype,
        device=device,
    )
