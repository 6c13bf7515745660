import torch

from ._conversion_graph import register_conversion
from ._luma import Luma
from ._numeric import build_color
from ._xyz import Xyz


@register_conversion(Luma, Xyz)
def luma_to_xyz(input: Luma) -> Xyz:
    """Convert luma to CIE XYZ: ``x = 0``, ``y = luma``, ``z = 0``."""
    return build_color(
        Xyz,
        {
            "x": torch.zeros_like(input.luma),
            "y": input.luma.clone(),
            "z": torch.zeros_like(input.luma),
            "alpha": input.alpha.clone(),
        },
    )
