"""Channel tensors: precision, literal construction and broadcasting.

Every color space is generic over the floating-point dtype of its channel
tensors. Formulas are written with Python float literals, which torch applies
at the dtype of the tensor they meet, so no formula is tied to a precision.
"""

import functools
from typing import (
    Dict,
    Mapping,
    Optional,
    Sequence,
    Tuple,
    Type,
    TypeVar,
    Union,
)

import torch
from torch import Tensor

Scalar = Union[float, int, Tensor]

C = TypeVar("C")


def check_floating(space: str, dtype: torch.dtype) -> None:
    if not dtype.is_floating_point:
        raise TypeError(
            f"{space}: channels must have a floating point dtype, got {dtype}"
        )


def channel_dtype(color) -> torch.dtype:
    """Dtype shared by every channel of ``color``."""
    return getattr(color, next(iter(color._RANGES))).dtype


def channel_device(color) -> torch.device:
    return getattr(color, next(iter(color._RANGES))).device


def make_color(
    cls: Type[C],
    channels: Mapping[str, Scalar],
    *,
    dtype: Optional[torch.dtype] = None,
    device: Optional[Union[str, torch.device]] = None,
) -> C:
    """Construct ``cls`` from user supplied numbers or tensors.

    Channels are broadcast to a common shape, which becomes the batch size,
    and copied so that the color never aliases caller tensors.

    Parameters
    ----------
    cls : type
        Color tensorclass to construct.
    channels : Mapping[str, Scalar]
        Channel values keyed by field name.
    dtype : torch.dtype, optional
        Channel dtype. Defaults to the promoted dtype of the tensor arguments,
        or ``torch.get_default_dtype()`` when every argument is a number.
    device : str or torch.device, optional
        Channel device. Defaults to the device of the first tensor argument.

    Raises
    ------
    TypeError
        If the resulting dtype is not floating point.
    """
    tensors = [v for v in channels.values() if isinstance(v, Tensor)]

    if dtype is None:
        if tensors:
            dtype = functools.reduce(
                torch.promote_types, (t.dtype for t in tensors)
            )
        else:
            dtype = torch.get_default_dtype()

    check_floating(cls.__name__, dtype)

    if device is None and tensors:
        device = tensors[0].device

    values = torch.broadcast_tensors(
        *(
            torch.as_tensor(v, dtype=dtype, device=device)
            for v in channels.values()
        )
    )

    return cls(
        **{k: v.clone() for k, v in zip(channels.keys(), values)},
        batch_size=values[0].shape,
    )


def build_color(cls: Type[C], channels: Dict[str, Tensor]) -> C:
    """Construct ``cls`` from computed channel tensors of a common dtype."""
    shape = torch.broadcast_shapes(*(t.shape for t in channels.values()))

    return cls(
        **{
            k: v if v.shape == shape else v.expand(shape).clone()
            for k, v in channels.items()
        },
        batch_size=shape,
    )


def as_scalar(color, value: Scalar) -> Tensor:
    """Cast a number or tensor operand to the precision of ``color``."""
    return torch.as_tensor(
        value, dtype=channel_dtype(color), device=channel_device(color)
    )


def check_compatible(color, other, operation: str) -> None:
    """Both operands must be the same space at the same precision."""
    if type(color) is not type(other):
        raise TypeError(
            f"{operation}: expected {type(color).__name__}, "
            f"got {type(other).__name__}"
        )

    if channel_dtype(color) != channel_dtype(other):
        raise TypeError(
            f"{operation}: cannot combine {channel_dtype(color)} and "
            f"{channel_dtype(other)} colors"
        )


def linear_transform(
    matrix: Sequence[Sequence[float]],
    first: Tensor,
    second: Tensor,
    third: Tensor,
) -> Tuple[Tensor, Tensor, Tensor]:
    """Apply a 3x3 matrix of Python floats to three channel tensors."""
    return tuple(
        row[0] * first + row[1] * second + row[2] * third for row in matrix
    )
