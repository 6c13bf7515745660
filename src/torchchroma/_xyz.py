"""CIE 1931 XYZ tensorclass, the hub of the conversion graph."""

from __future__ import annotations

from typing import ClassVar, Dict, Optional, Tuple, Union

import torch
from tensordict import tensorclass
from torch import Tensor

from ._channel_range import UNIT, ChannelRange
from ._color import Color
from ._numeric import Scalar, make_color


@tensorclass
class Xyz(Color):
    """CIE 1931 XYZ color with an alpha channel.

    XYZ relates perceived colors to their wavelengths. Every other space
    converts to and from XYZ, directly or through a secondary hub, so it is
    the canonical intermediate of the conversion graph. Conversions assume the
    CIE Standard Illuminant D65 white point and the 2° standard observer.

    Attributes
    ----------
    x : Tensor
        Response of the long-wavelength cone cells, in [0, 1].
    y : Tensor
        Luminance, 0 is black and 1 is white.
    z : Tensor
        Blue stimulation, in [0, 1].
    alpha : Tensor
        Opacity, 0 is fully transparent and 1 fully opaque.
    """

    _RANGES: ClassVar[Dict[str, ChannelRange]] = {
        "x": UNIT,
        "y": UNIT,
        "z": UNIT,
        "alpha": UNIT,
    }

    _LIGHTNESS: ClassVar[Tuple[str, ...]] = ("y",)

    x: Tensor
    y: Tensor
    z: Tensor
    alpha: Tensor


def xyz(
    x: Scalar,
    y: Scalar,
    z: Scalar,
    alpha: Scalar = 1.0,
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[str, torch.device]] = None,
) -> Xyz:
    """Create a CIE XYZ color.

    Parameters
    ----------
    x, y, z : float or Tensor
        Tristimulus values. Tensors broadcast to a common batch shape.
    alpha : float or Tensor, default=1.0
        Opacity.
    dtype : torch.dtype, optional
        Floating point channel dtype.
    device : str or torch.device, optional
        Channel device.

    Returns
    -------
    Xyz
        Color value.

    Examples
    --------
    >>> c = xyz(0.95047, 1.0, 1.08883)
    >>> c.y
    tensor(1.)
    """
    return make_color(
        Xyz,
        {"x": x, "y": y, "z": z, "alpha": alpha},
        dtype=dtype,
        device=device,
    )
