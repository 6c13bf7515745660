"""Linear RGB tensorclass."""

from __future__ import annotations

from typing import ClassVar, Dict, Optional, Tuple, Union

import torch
from tensordict import tensorclass
from torch import Tensor

from ._channel_range import UNIT, ChannelRange
from ._color import Color
from ._numeric import Scalar, make_color
from ._srgb_linear_to_srgb import srgb_linear_to_srgb
from ._srgb_to_srgb_linear import srgb_to_srgb_linear


@tensorclass
class Rgb(Color):
    """Linear sRGB color with an alpha channel.

    Channels are stored linear (gamma-expanded) so that blending, arithmetic
    and the matrix transform to XYZ are physically meaningful. Use
    :func:`srgb` to build a color from display (gamma-encoded) values and
    :meth:`to_srgb` to get them back.

    Attributes
    ----------
    red, green, blue : Tensor
        Linear primaries, in [0, 1].
    alpha : Tensor
        Opacity.
    """

    _RANGES: ClassVar[Dict[str, ChannelRange]] = {
        "red": UNIT,
        "green": UNIT,
        "blue": UNIT,
        "alpha": UNIT,
    }

    _LIGHTNESS: ClassVar[Tuple[str, ...]] = ("red", "green", "blue")

    red: Tensor
    green: Tensor
    blue: Tensor
    alpha: Tensor

    def to_srgb(self) -> Tensor:
        """Gamma-encoded channels, shape (..., 4), alpha last and unchanged."""
        return torch.stack(
            [
                srgb_linear_to_srgb(self.red),
                srgb_linear_to_srgb(self.green),
                srgb_linear_to_srgb(self.blue),
                self.alpha,
            ],
            dim=-1,
        )


def linear_rgb(
    red: Scalar,
    green: Scalar,
    blue: Scalar,
    alpha: Scalar = 1.0,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[str, torch.device]] = None,
) -> Rgb:
    """Create an RGB color from linear channel values.

    Examples
    --------
    >>> linear_rgb(1.0, 0.0, 0.0).into(Xyz).x
    tensor(0.4124)
    """
    return make_color(
        Rgb,
        {"red": red, "green": green, "blue": blue, "alpha": alpha},
        dtype=dtype,
        device=device,
    )


def srgb(
    red: Scalar,
    green: Scalar,
    blue: Scalar,
    alpha: Scalar = 1.0,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[str, torch.device]] = None,
) -> Rgb:
    """Create an RGB color from gamma-encoded sRGB values.

    The primaries are gamma-expanded with :func:`srgb_to_srgb_linear`; alpha
    is stored as given.

    Examples
    --------
    >>> srgb(0.5, 0.5, 0.5).red
    tensor(0.2140)
    """
    color = linear_rgb(red, green, blue, alpha, dtype=dtype, device=device)

    color.red = srgb_to_srgb_linear(color.red)
    color.green = srgb_to_srgb_linear(color.green)
    color.blue = srgb_to_srgb_linear(color.blue)

    return color
