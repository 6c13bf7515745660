import torch

from ._capabilities import Mix
from ._numeric import Scalar, as_scalar, build_color, check_compatible


def color_mix(color: Mix, other: Mix, factor: Scalar) -> Mix:
    r"""Blend two colors of the same space.

    Mathematical Definition
    -----------------------
    With :math:`f = \mathrm{clamp}(\text{factor}, 0, 1)` every channel is

    .. math::
        c = a + f (b - a)

    Periodic (hue) channels travel the shorter arc instead:

    .. math::
        \delta = ((b - a + 180) \bmod 360) - 180, \qquad
        c = (a + f \delta) \bmod 360

    Parameters
    ----------
    color, other : Color
        Colors of the same space and dtype.
    factor : float or Tensor
        Blend factor, broadcast against the batch. 0 gives ``color``, 1 gives
        ``other``.

    Returns
    -------
    Color
        Blended color.

    Raises
    ------
    TypeError
        If the operands belong to different spaces or have different dtypes.

    Examples
    --------
    >>> color_mix(xyz(0.0, 0.0, 0.0), xyz(1.0, 1.0, 1.0), 0.25).y
    tensor(0.2500)
    """
    check_compatible(color, other, "mix")

    factor = torch.clamp(as_scalar(color, factor), 0.0, 1.0)

    channels = {}

    for name, bounds in color._RANGES.items():
        start = getattr(color, name)

        end = getattr(other, name)

        if bounds.periodic:
            half = bounds.span / 2

            delta = torch.remainder(end - start + half, bounds.span) - half

            channels[name] = bounds.wrap(start + factor * delta)
        else:
            channels[name] = torch.lerp(start, end, factor)

    return build_color(type(color), channels)
