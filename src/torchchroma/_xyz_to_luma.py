from ._conversion_graph import register_conversion
from ._luma import Luma
from ._numeric import build_color
from ._xyz import Xyz


@register_conversion(Xyz, Luma)
def xyz_to_luma(input: Xyz) -> Luma:
    """Convert CIE XYZ to luma, keeping only the luminance ``y``."""
    return build_color(
        Luma,
        {"luma": input.y.clone(), "alpha": input.alpha.clone()},
    )
