from typing import Tuple

import torch
from torch import Tensor

from ._channel_range import HUE


def rgb_hue(
    red: Tensor,
    green: Tensor,
    blue: Tensor,
) -> Tuple[Tensor, Tensor, Tensor]:
    """Hexcone hue of an RGB triple.

    Returns
    -------
    hue : Tensor
        Hue in degrees, in [0, 360). 0 for gray.
    maximum : Tensor
        Largest primary.
    minimum : Tensor
        Smallest primary.
    """
    maximum = torch.maximum(torch.maximum(red, green), blue)

    minimum = torch.minimum(torch.minimum(red, green), blue)

    delta = maximum - minimum

    chromatic = delta > 0

    divisor = torch.where(chromatic, delta, torch.ones_like(delta))

    sector = torch.where(
        maximum == red,
        torch.remainder((green - blue) / divisor, 6.0),
        torch.where(
            maximum == green,
            (blue - red) / divisor + 2.0,
            (red - green) / divisor + 4.0,
        ),
    )

    hue = torch.where(
        chromatic, HUE.wrap(sector * 60.0), torch.zeros_like(sector)
    )

    return hue, maximum, minimum
