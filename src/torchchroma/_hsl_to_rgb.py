import torch
from torch import Tensor

from ._conversion_graph import register_conversion
from ._hsl import Hsl
from ._numeric import build_color
from ._rgb import Rgb


def _primary(input: Hsl, n: float) -> Tensor:
    k = torch.remainder(n + input.hue / 30.0, 12.0)

    lightness = input.lightness

    a = input.saturation * torch.minimum(lightness, 1.0 - lightness)

    weight = torch.clamp(torch.minimum(k - 3.0, 9.0 - k), -1.0, 1.0)

    return lightness - a * weight


@register_conversion(Hsl, Rgb)
def hsl_to_rgb(input: Hsl) -> Rgb:
    r"""Convert HSL to RGB.

    Mathematical Definition
    -----------------------
    .. math::
        f(n) = L - S \min(L, 1 - L) \max(-1, \min(k - 3, 9 - k, 1)), \qquad
        k = (n + H / 30) \bmod 12

    with :math:`(R, G, B) = (f(0), f(8), f(4))`.

    Parameters
    ----------
    input : Hsl
        HSL color.

    Returns
    -------
    Rgb
        RGB color, alpha unchanged.
    """
    return build_color(
        Rgb,
        {
            "red": _primary(input, 0.0),
            "green": _primary(input, 8.0),
            "blue": _primary(input, 4.0),
            "alpha": input.alpha.clone(),
        },
    )
