"""Linear RGB to CIE XYZ conversion."""

from typing import Final, Tuple

from ._conversion_graph import register_conversion
from ._numeric import build_color, linear_transform
from ._rgb import Rgb
from ._xyz import Xyz

RGB_TO_XYZ: Final[Tuple[Tuple[float, float, float], ...]] = (
    (0.4124, 0.3576, 0.1805),
    (0.2126, 0.7152, 0.0722),
    (0.0193, 0.1192, 0.9505),
)


@register_conversion(Rgb, Xyz)
def rgb_to_xyz(input: Rgb) -> Xyz:
    r"""Convert linear RGB to CIE XYZ.

    Mathematical Definition
    -----------------------
    .. math::
        \begin{bmatrix} X \\ Y \\ Z \end{bmatrix} =
        \begin{bmatrix}
            0.4124 & 0.3576 & 0.1805 \\
            0.2126 & 0.7152 & 0.0722 \\
            0.0193 & 0.1192 & 0.9505
        \end{bmatrix}
        \begin{bmatrix} R \\ G \\ B \end{bmatrix}

    The matrix expects linear channels, which is what :class:`Rgb` stores.

    Parameters
    ----------
    input : Rgb
        Linear RGB color.

    Returns
    -------
    Xyz
        XYZ color, alpha unchanged.

    Examples
    --------
    >>> rgb_to_xyz(linear_rgb(1.0, 0.0, 0.0))
    Xyz(x=tensor(0.4124), y=tensor(0.2126), z=tensor(0.0193), ...)
    """
    x, y, z = linear_transform(
        RGB_TO_XYZ, input.red, input.green, input.blue
    )

    return build_color(
        Xyz,
        {"x": x, "y": y, "z": z, "alpha": input.alpha.clone()},
    )
