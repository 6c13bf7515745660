import torch

from ._channel_range import HUE
from ._conversion_graph import register_conversion
from ._lab import Lab
from ._lch import Lch
from ._numeric import build_color


@register_conversion(Lab, Lch)
def lab_to_lch(input: Lab) -> Lch:
    """Convert L*a*b* to L*C*h°.

    Chroma is the length of ``(a, b)`` and hue its angle in degrees, wrapped
    into [0, 360). Gray colors get hue 0.
    """
    return build_color(
        Lch,
        {
            "l": input.l.clone(),
            "chroma": torch.hypot(input.a, input.b),
            "hue": HUE.wrap(torch.rad2deg(torch.atan2(input.b, input.a))),
            "alpha": input.alpha.clone(),
        },
    )
