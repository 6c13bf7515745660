"""CIE L*C*h° tensorclass."""

from __future__ import annotations

from typing import ClassVar, Dict, Optional, Tuple, Union

import torch
from tensordict import tensorclass
from torch import Tensor

from ._channel_range import CHROMA, HUE, UNIT, ChannelRange
from ._color import Color
from ._numeric import Scalar, make_color


@tensorclass
class Lch(Color):
    """CIE L*C*h° color, the cylindrical form of :class:`Lab`.

    Attributes
    ----------
    l : Tensor
        Lightness, same as :attr:`Lab.l`.
    chroma : Tensor
        Colorfulness, the distance from the gray axis, in [0, √2].
    hue : Tensor
        Hue angle in degrees, in [0, 360).
    alpha : Tensor
        Opacity.
    """

    _RANGES: ClassVar[Dict[str, ChannelRange]] = {
        "l": UNIT,
        "chroma": CHROMA,
        "hue": HUE,
        "alpha": UNIT,
    }

    _LIGHTNESS: ClassVar[Tuple[str, ...]] = ("l",)

    l: Tensor  # noqa: E741
    chroma: Tensor
    hue: Tensor
    alpha: Tensor


def lch(
    l: Scalar,  # noqa: E741
    chroma: Scalar,
    hue: Scalar,
    alpha: Scalar = 1.0,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[str, torch.device]] = None,
) -> Lch:
    """Create a CIE L*C*h° color. ``hue`` is in degrees."""
    return make_color(
        Lch,
        {"l": l, "chroma": chroma, "hue": hue, "alpha": alpha},
        dtype=dtype,
        device=device,
    )
