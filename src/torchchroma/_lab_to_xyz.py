"""CIE L*a*b* to CIE XYZ conversion."""

import torch
from torch import Tensor

from ._conversion_graph import register_conversion
from ._lab import Lab
from ._numeric import build_color
from ._tristimulus import X_N, Y_N, Z_N
from ._xyz import Xyz

_DELTA = 6.0 / 29.0


def _f_inv(t: Tensor) -> Tensor:
    return torch.where(
        t > _DELTA,
        t * t * t,
        3.0 * _DELTA**2 * (t - 4.0 / 29.0),
    )


@register_conversion(Lab, Xyz)
def lab_to_xyz(input: Lab) -> Xyz:
    r"""Convert CIE L*a*b* to CIE XYZ.

    Mathematical Definition
    -----------------------
    With the scaled channels expanded back to CIELAB numbers,

    .. math::
        f_y = \frac{100 L + 16}{116}, \quad
        f_x = f_y + \frac{128 a}{500}, \quad
        f_z = f_y - \frac{128 b}{200}

    and the inverse of the CIELAB nonlinearity

    .. math::
        f^{-1}(t) = \begin{cases}
            t^3 & \text{if } t > \delta \\
            3\delta^2 (t - \frac{4}{29}) & \text{otherwise}
        \end{cases}

    with :math:`\delta = 6/29`, the result is
    :math:`X = X_n f^{-1}(f_x)`, :math:`Y = Y_n f^{-1}(f_y)`,
    :math:`Z = Z_n f^{-1}(f_z)` for the D65 white point
    :math:`(X_n, Y_n, Z_n) = (0.95047, 1.0, 1.08883)`.

    Parameters
    ----------
    input : Lab
        Lab color.

    Returns
    -------
    Xyz
        XYZ color, alpha unchanged.

    Examples
    --------
    >>> lab_to_xyz(lab(1.0, 0.0, 0.0))
    Xyz(x=tensor(0.9505), y=tensor(1.), z=tensor(1.0888), ...)

    References
    ----------
    .. [1] CIE 15:2004, "Colorimetry, 3rd Edition"
    """
    fy = (input.l * 100.0 + 16.0) / 116.0

    fx = fy + input.a * 128.0 / 500.0

    fz = fy - input.b * 128.0 / 200.0

    return build_color(
        Xyz,
        {
            "x": X_N * _f_inv(fx),
            "y": Y_N * _f_inv(fy),
            "z": Z_N * _f_inv(fz),
            "alpha": input.alpha.clone(),
        },
    )
