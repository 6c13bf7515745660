"""Conversion graph between color spaces.

Each color space registers a small number of edges: a conversion into the hub
space (Xyz) or into a neighboring secondary hub (Rgb for Hsv and Hsl, Lab for
Lch), and the conversion back. Every other pair is reached by composing edges
along the shortest path, so only O(N) formulas exist for N spaces.
"""

import collections
import functools
import warnings
from typing import Callable, Dict, Tuple, Type, TypeVar

from ._conversion_error import ConversionError

C = TypeVar("C")

Edge = Callable[[object], object]

_EDGES: Dict[type, Dict[type, Edge]] = {}


def register_conversion(source: type, target: type) -> Callable[[Edge], Edge]:
    """Register the decorated function as the edge ``source -> target``.

    Parameters
    ----------
    source : type
        Color space the function accepts.
    target : type
        Color space the function returns.

    Returns
    -------
    Callable
        Decorator returning the function unchanged.

    Warns
    -----
    RuntimeWarning
        If an edge between the two spaces was already registered. The new
        function replaces it.

    Examples
    --------
    >>> @register_conversion(Luma, Xyz)
    ... def luma_to_xyz(input: Luma) -> Xyz:
    ...     ...
    """

    def decorator(fn: Edge) -> Edge:
        edges = _EDGES.setdefault(source, {})

        if target in edges:
            warnings.warn(
                f"replacing conversion {source.__name__} -> {target.__name__}",
                RuntimeWarning,
                stacklevel=2,
            )

        edges[target] = fn

        conversion_path.cache_clear()

        return fn

    return decorator


@functools.lru_cache(maxsize=None)
def conversion_path(source: type, target: type) -> Tuple[Edge, ...]:
    """Shortest chain of registered edges from ``source`` to ``target``.

    Parameters
    ----------
    source, target : type
        Color spaces.

    Returns
    -------
    tuple of Callable
        Edge functions in application order. Empty when ``source`` is
        ``target``.

    Raises
    ------
    ConversionError
        If ``target`` is unreachable from ``source``.
    """
    previous: Dict[type, Tuple[type, Edge]] = {}

    visited = {source}

    queue = collections.deque([source])

    while queue and target not in visited:
        space = queue.popleft()

        for neighbor, edge in _EDGES.get(space, {}).items():
            if neighbor not in visited:
                visited.add(neighbor)

                previous[neighbor] = (space, edge)

                queue.append(neighbor)

    if target not in visited:
        raise ConversionError(
            f"no conversion from {source.__name__} to {target.__name__}"
        )

    path = []

    space = target

    while space is not source:
        space, edge = previous[space]

        path.append(edge)

    return tuple(reversed(path))


def convert(color, target: Type[C]) -> C:
    """Convert ``color`` into the color space ``target``.

    The conversion composes registered edges along the shortest path, for
    example ``Hsl -> Rgb -> Xyz -> Lab``. Converting into the space ``color``
    already belongs to returns a copy.

    Parameters
    ----------
    color : Color
        Color value in any registered space.
    target : type
        Destination color space.

    Returns
    -------
    Color
        Value in ``target`` with the same batch size and dtype as ``color``.

    Raises
    ------
    ConversionError
        If no path joins the two spaces.

    Examples
    --------
    >>> convert(hsv(120.0, 1.0, 1.0), Xyz)
    Xyz(...)
    """
    path = conversion_path(type(color), target)

    if not path:
        return color.clone()

    for edge in path:
        color = edge(color)

    return color
