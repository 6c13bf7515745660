"""Declared ranges of color channels."""

import math
from typing import NamedTuple

import torch
from torch import Tensor


class ChannelRange(NamedTuple):
    """Closed range ``[low, high]`` of a color channel.

    A periodic channel (a hue angle) is half-open, ``[low, high)``: it clamps
    by wrapping around instead of saturating.

    Attributes
    ----------
    low : float
        Lower bound.
    high : float
        Upper bound.
    periodic : bool
        Whether the channel wraps around.
    """

    low: float
    high: float
    periodic: bool = False

    @property
    def span(self) -> float:
        return self.high - self.low

    def contains(self, value: Tensor) -> Tensor:
        """Element-wise membership test."""
        if self.periodic:
            return (value >= self.low) & (value < self.high)
        return (value >= self.low) & (value <= self.high)

    def clamp(self, value: Tensor) -> Tensor:
        """Bring ``value`` into range, wrapping periodic channels."""
        if self.periodic:
            return self.wrap(value)
        return torch.clamp(value, self.low, self.high)

    def wrap(self, value: Tensor) -> Tensor:
        """Reduce ``value`` modulo the span into ``[low, high)``."""
        wrapped = torch.remainder(value - self.low, self.span) + self.low
        # remainder of a tiny negative number can round up to the span
        return torch.where(wrapped >= self.high, wrapped - self.span, wrapped)


UNIT = ChannelRange(0.0, 1.0)

SIGNED_UNIT = ChannelRange(-1.0, 1.0)

CHROMA = ChannelRange(0.0, math.sqrt(2.0))

HUE = ChannelRange(0.0, 360.0, periodic=True)
