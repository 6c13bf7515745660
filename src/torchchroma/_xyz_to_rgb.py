"""CIE XYZ to linear RGB conversion."""

from typing import Final, Tuple

import torch

from ._conversion_graph import register_conversion
from ._numeric import build_color, linear_transform
from ._rgb import Rgb
from ._rgb_to_xyz import RGB_TO_XYZ
from ._xyz import Xyz

# exact inverse of RGB_TO_XYZ, so the round trip is lossless
XYZ_TO_RGB: Final[Tuple[Tuple[float, float, float], ...]] = tuple(
    tuple(row)
    for row in torch.linalg.inv(
        torch.tensor(RGB_TO_XYZ, dtype=torch.float64)
    ).tolist()
)


@register_conversion(Xyz, Rgb)
def xyz_to_rgb(input: Xyz) -> Rgb:
    """Convert CIE XYZ to linear RGB.

    Applies the inverse of the matrix used by :func:`rgb_to_xyz`, computed
    once in double precision. Colors outside the sRGB gamut give channels
    outside [0, 1].

    Parameters
    ----------
    input : Xyz
        XYZ color.

    Returns
    -------
    Rgb
        Linear RGB color, alpha unchanged.
    """
    red, green, blue = linear_transform(XYZ_TO_RGB, input.x, input.y, input.z)

    return build_color(
        Rgb,
        {
            "red": red,
            "green": green,
            "blue": blue,
            "alpha": input.alpha.clone(),
        },
    )
