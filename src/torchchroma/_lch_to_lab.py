import torch

from ._conversion_graph import register_conversion
from ._lab import Lab
from ._lch import Lch
from ._numeric import build_color


@register_conversion(Lch, Lab)
def lch_to_lab(input: Lch) -> Lab:
    """Convert L*C*h° to L*a*b* (polar to Cartesian on chroma and hue)."""
    hue = torch.deg2rad(input.hue)

    return build_color(
        Lab,
        {
            "l": input.l.clone(),
            "a": input.chroma * torch.cos(hue),
            "b": input.chroma * torch.sin(hue),
            "alpha": input.alpha.clone(),
        },
    )
