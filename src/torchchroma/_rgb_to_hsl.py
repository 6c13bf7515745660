import torch

from ._conversion_graph import register_conversion
from ._hsl import Hsl
from ._numeric import build_color
from ._rgb import Rgb
from ._rgb_hue import rgb_hue


@register_conversion(Rgb, Hsl)
def rgb_to_hsl(input: Rgb) -> Hsl:
    r"""Convert RGB to HSL.

    Mathematical Definition
    -----------------------
    .. math::
        L = \frac{M + m}{2}, \qquad
        S = \frac{M - m}{1 - |2L - 1|}

    with :math:`M` and :math:`m` the largest and smallest primaries. Gray
    colors get saturation 0 and hue 0.

    Parameters
    ----------
    input : Rgb
        RGB color.

    Returns
    -------
    Hsl
        HSL color, alpha unchanged.
    """
    hue, maximum, minimum = rgb_hue(input.red, input.green, input.blue)

    lightness = (maximum + minimum) / 2.0

    delta = maximum - minimum

    denominator = 1.0 - torch.abs(2.0 * lightness - 1.0)

    chromatic = (delta > 0) & (denominator != 0)

    divisor = torch.where(chromatic, denominator, torch.ones_like(denominator))

    saturation = torch.where(
        chromatic, delta / divisor, torch.zeros_like(delta)
    )

    return build_color(
        Hsl,
        {
            "hue": hue,
            "saturation": saturation,
            "lightness": lightness,
            "alpha": input.alpha.clone(),
        },
    )
