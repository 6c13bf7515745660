from ._capabilities import ColorSpace
from ._numeric import build_color


def color_clamp(color: ColorSpace) -> ColorSpace:
    """Copy of ``color`` with every channel brought into range.

    Non-periodic channels saturate at their bounds. Hue channels wrap into
    ``[0, 360)``.
    """
    return build_color(
        type(color),
        {
            name: bounds.clamp(getattr(color, name))
            for name, bounds in color._RANGES.items()
        },
    )


def color_clamp_(color: ColorSpace) -> None:
    """In-place version of :func:`color_clamp`."""
    for name, bounds in color._RANGES.items():
        setattr(color, name, bounds.clamp(getattr(color, name)))
