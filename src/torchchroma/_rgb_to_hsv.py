import torch

from ._conversion_graph import register_conversion
from ._hsv import Hsv
from ._numeric import build_color
from ._rgb import Rgb
from ._rgb_hue import rgb_hue


@register_conversion(Rgb, Hsv)
def rgb_to_hsv(input: Rgb) -> Hsv:
    r"""Convert RGB to HSV.

    Mathematical Definition
    -----------------------
    With :math:`M = \max(R, G, B)`, :math:`m = \min(R, G, B)` and
    :math:`\Delta = M - m`:

    .. math::
        V = M, \qquad S = \begin{cases} \Delta / M & M \neq 0 \\
        0 & \text{otherwise} \end{cases}

    and the hexcone hue in degrees, 0 for gray colors. The formulas act on the
    stored linear channels.

    Parameters
    ----------
    input : Rgb
        RGB color.

    Returns
    -------
    Hsv
        HSV color, alpha unchanged.
    """
    hue, maximum, minimum = rgb_hue(input.red, input.green, input.blue)

    nonzero = maximum != 0

    divisor = torch.where(nonzero, maximum, torch.ones_like(maximum))

    saturation = torch.where(
        nonzero, (maximum - minimum) / divisor, torch.zeros_like(maximum)
    )

    return build_color(
        Hsv,
        {
            "hue": hue,
            "saturation": saturation,
            "value": maximum,
            "alpha": input.alpha.clone(),
        },
    )
