"""Capabilities shared by every color space."""

from typing import Protocol, TypeVar, runtime_checkable

from torch import Tensor

from ._numeric import Scalar

S = TypeVar("S")


@runtime_checkable
class ColorSpace(Protocol):
    """Validity checking and clamping against declared channel ranges."""

    def is_valid(self) -> Tensor:
        """Whether every channel, alpha included, lies in its range."""
        ...

    def clamp(self: S) -> S:
        """Copy with every channel brought into range."""
        ...

    def clamp_self(self) -> None:
        """Bring every channel into range in place."""
        ...


@runtime_checkable
class Mix(Protocol):
    """Blending of two values of one space."""

    def mix(self: S, other: S, factor: Scalar) -> S:
        """Interpolate towards ``other`` by ``factor``, clamped to [0, 1]."""
        ...


@runtime_checkable
class Shade(Protocol):
    """Lightening and darkening."""

    def lighten(self: S, amount: Scalar) -> S:
        """Add ``amount`` to the lightness channel, without clamping."""
        ...

    def darken(self: S, amount: Scalar) -> S:
        """Subtract ``amount`` from the lightness channel."""
        ...
