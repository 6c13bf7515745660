from ._capabilities import Shade
from ._numeric import Scalar, as_scalar, build_color


def color_lighten(color: Shade, amount: Scalar) -> Shade:
    """Add ``amount`` to the lightness channels of ``color``.

    The lightness channel is Y for Xyz, L for Lab and Lch, lightness for Hsl,
    value for Hsv, luma for Luma and every primary for Rgb. The result is not
    clamped.
    """
    amount = as_scalar(color, amount)

    channels = {name: getattr(color, name).clone() for name in color._RANGES}

    for name in color._LIGHTNESS:
        channels[name] = channels[name] + amount

    return build_color(type(color), channels)
