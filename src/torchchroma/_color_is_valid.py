from torch import Tensor

from ._capabilities import ColorSpace


def color_is_valid(color: ColorSpace) -> Tensor:
    """Whether every channel of ``color`` lies in its declared range.

    Parameters
    ----------
    color : Color
        Color value.

    Returns
    -------
    Tensor
        Boolean tensor with the batch shape of ``color``. A single color gives
        a 0-d tensor, usable directly in ``if`` statements.
    """
    result = None

    for name, bounds in color._RANGES.items():
        inside = bounds.contains(getattr(color, name))

        result = inside if result is None else result & inside

    return result
