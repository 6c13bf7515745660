import torch
from torch import Tensor

from ._conversion_graph import register_conversion
from ._hsv import Hsv
from ._numeric import build_color
from ._rgb import Rgb


def _primary(input: Hsv, n: float) -> Tensor:
    k = torch.remainder(n + input.hue / 60.0, 6.0)

    weight = torch.clamp(torch.minimum(k, 4.0 - k), 0.0, 1.0)

    return input.value - input.value * input.saturation * weight


@register_conversion(Hsv, Rgb)
def hsv_to_rgb(input: Hsv) -> Rgb:
    r"""Convert HSV to RGB.

    Mathematical Definition
    -----------------------
    .. math::
        f(n) = V - V S \max(0, \min(k, 4 - k, 1)), \qquad
        k = (n + H / 60) \bmod 6

    with :math:`(R, G, B) = (f(5), f(3), f(1))`.

    Parameters
    ----------
    input : Hsv
        HSV color.

    Returns
    -------
    Rgb
        RGB color, alpha unchanged.
    """
    return build_color(
        Rgb,
        {
            "red": _primary(input, 5.0),
            "green": _primary(input, 3.0),
            "blue": _primary(input, 1.0),
            "alpha": input.alpha.clone(),
        },
    )
