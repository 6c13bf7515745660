"""Behavior shared by every color space tensorclass."""

from __future__ import annotations

from typing import ClassVar, Dict, Optional, Tuple, Type, TypeVar, Union

import torch
from torch import Tensor

from ._channel_range import ChannelRange
from ._numeric import Scalar

C = TypeVar("C", bound="Color")


class Color:
    """Base of the color space tensorclasses.

    Subclasses are ``@tensorclass`` records with one tensor field per channel,
    alpha last, and declare two class-level tables:

    - ``_RANGES`` maps each channel, in field order, to its
      :class:`ChannelRange`. Validity, clamping, blending and tensor packing
      are all driven by this table, so hue channels differ from the others
      only through their ``periodic`` range.
    - ``_LIGHTNESS`` names the channels :meth:`lighten` moves.

    The methods here implement the :class:`ColorSpace`, :class:`Mix` and
    :class:`Shade` capabilities plus the arithmetic overlay:

        a + b, a - b, a * b, a / b    # channel-wise, same space
        a + 0.1, 2.0 * a, a / t       # with a number or tensor scalar
    """

    _RANGES: ClassVar[Dict[str, ChannelRange]]

    _LIGHTNESS: ClassVar[Tuple[str, ...]]

    @classmethod
    def default(
        cls: Type[C],
        *,
        dtype: Optional[torch.dtype] = None,
        device: Optional[Union[str, torch.device]] = None,
    ) -> C:
        """Opaque black: every channel 0 and alpha 1."""
        from ._numeric import make_color

        return make_color(
            cls,
            {name: 1.0 if name == "alpha" else 0.0 for name in cls._RANGES},
            dtype=dtype,
            device=device,
        )

    @classmethod
    def from_color(cls: Type[C], color: Color) -> C:
        """Convert ``color`` from any registered space into this one."""
        from ._conversion_graph import convert

        return convert(color, cls)

    def into(self, space: Type[C]) -> C:
        """Convert this color into ``space``."""
        from ._conversion_graph import convert

        return convert(self, space)

    @classmethod
    def from_tensor(cls: Type[C], input: Tensor) -> C:
        """Unpack a tensor with channels along the last dimension.

        Parameters
        ----------
        input : Tensor, shape (..., C) or (..., C - 1)
            Channels in field order, alpha last. Without the alpha column,
            alpha is 1.

        Returns
        -------
        Color
            Color with batch size ``input.shape[:-1]``.
        """
        from ._numeric import make_color

        names = list(cls._RANGES)

        if input.shape[-1] == len(names):
            values = input.unbind(-1)
        elif input.shape[-1] == len(names) - 1:
            values = input.unbind(-1) + (1.0,)
        else:
            raise ValueError(
                f"{cls.__name__}: input must have last dimension "
                f"{len(names) - 1} or {len(names)}, got {input.shape[-1]}"
            )

        return make_color(cls, dict(zip(names, values)))

    def as_tensor(self) -> Tensor:
        """Stack the channels along a new last dimension, alpha last."""
        return torch.stack([getattr(self, k) for k in self._RANGES], dim=-1)

    def is_valid(self) -> Tensor:
        from ._color_is_valid import color_is_valid

        return color_is_valid(self)

    def clamp(self: C) -> C:
        from ._color_clamp import color_clamp

        return color_clamp(self)

    def clamp_self(self) -> None:
        from ._color_clamp import color_clamp_

        color_clamp_(self)

    def mix(self: C, other: C, factor: Scalar) -> C:
        from ._color_mix import color_mix

        return color_mix(self, other, factor)

    def lighten(self: C, amount: Scalar) -> C:
        from ._color_lighten import color_lighten

        return color_lighten(self, amount)

    def darken(self: C, amount: Scalar) -> C:
        from ._color_lighten import color_lighten

        return color_lighten(self, -amount)

    def _is_operand(self, other) -> bool:
        return isinstance(other, (type(self), int, float, Tensor))

    def __add__(self, other):
        from ._color_arithmetic import color_add

        if not self._is_operand(other):
            return NotImplemented
        return color_add(self, other)

    def __radd__(self, other):
        from ._color_arithmetic import color_add

        if not self._is_operand(other):
            return NotImplemented
        return color_add(other, self)

    def __sub__(self, other):
        from ._color_arithmetic import color_subtract

        if not self._is_operand(other):
            return NotImplemented
        return color_subtract(self, other)

    def __rsub__(self, other):
        from ._color_arithmetic import color_subtract

        if not self._is_operand(other):
            return NotImplemented
        return color_subtract(other, self)

    def __mul__(self, other):
        from ._color_arithmetic import color_multiply

        if not self._is_operand(other):
            return NotImplemented
        return color_multiply(self, other)

    def __rmul__(self, other):
        from ._color_arithmetic import color_multiply

        if not self._is_operand(other):
            return NotImplemented
        return color_multiply(other, self)

    def __truediv__(self, other):
        from ._color_arithmetic import color_divide

        if not self._is_operand(other):
            return NotImplemented
        return color_divide(self, other)

    def __rtruediv__(self, other):
        from ._color_arithmetic import color_divide

        if not self._is_operand(other):
            return NotImplemented
        return color_divide(other, self)
