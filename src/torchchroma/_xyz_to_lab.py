"""CIE XYZ to CIE L*a*b* conversion."""

import torch
from torch import Tensor

from ._conversion_graph import register_conversion
from ._lab import Lab
from ._numeric import build_color
from ._tristimulus import X_N, Y_N, Z_N
from ._xyz import Xyz

_DELTA = 6.0 / 29.0


def _f(t: Tensor) -> Tensor:
    cube_root = torch.clamp(t, min=_DELTA**3).pow(1.0 / 3.0)

    return torch.where(
        t > _DELTA**3,
        cube_root,
        t / (3.0 * _DELTA**2) + 4.0 / 29.0,
    )


@register_conversion(Xyz, Lab)
def xyz_to_lab(input: Xyz) -> Lab:
    r"""Convert CIE XYZ to CIE L*a*b*.

    Mathematical Definition
    -----------------------
    .. math::
        f(t) = \begin{cases}
            t^{1/3} & \text{if } t > \delta^3 \\
            \frac{t}{3\delta^2} + \frac{4}{29} & \text{otherwise}
        \end{cases}

    .. math::
        L = \frac{116 f(Y/Y_n) - 16}{100}, \quad
        a = \frac{500 (f(X/X_n) - f(Y/Y_n))}{128}, \quad
        b = \frac{200 (f(Y/Y_n) - f(Z/Z_n))}{128}

    with :math:`\delta = 6/29` and the D65 white point.

    Parameters
    ----------
    input : Xyz
        XYZ color.

    Returns
    -------
    Lab
        Lab color with scaled channels, alpha unchanged.

    See Also
    --------
    lab_to_xyz : Inverse conversion.
    """
    fx = _f(input.x / X_N)

    fy = _f(input.y / Y_N)

    fz = _f(input.z / Z_N)

    return build_color(
        Lab,
        {
            "l": (116.0 * fy - 16.0) / 100.0,
            "a": 500.0 * (fx - fy) / 128.0,
            "b": 200.0 * (fy - fz) / 128.0,
            "alpha": input.alpha.clone(),
        },
    )
