# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import logging
from typing import Callable, Iterable, Sequence

from .backend import ArrayLike, namespace_of_arrays, shape as array_shape, to_host_list
from .errors import InvalidLength, InvalidShape
from .grid import Grid
from .nested import NestedLists, unnest
from .shape import Coord, Shape, as_shape

logger = logging.getLogger(__name__)

def generate[A](shape: Shape | Sequence[int], func: Callable[[int], A]) -> Grid[A]:
    """Build a grid by calling the function with every flat offset in increasing order."""
    shape = as_shape(shape)
    return Grid._from_trusted(shape, tuple(func(i) for i in range(shape.size())))

def tabulate[A](shape: Shape | Sequence[int], func: Callable[[Coord], A]) -> Grid[A]:
    """Build a grid by calling the function with every coordinate in row-major order."""
    shape = as_shape(shape)
    return Grid._from_trusted(shape, tuple(func(c) for c in shape.coords()))

def fill[A](shape: Shape | Sequence[int], value: A) -> Grid[A]:
    """Build a grid where every element equals the given value."""
    shape = as_shape(shape)
    return Grid._from_trusted(shape, (value,) * shape.size())

def from_list[A](shape: Shape | Sequence[int], xs: Iterable[A]) -> Grid[A]:
    """
    Convert a flat sequence in row-major order into a grid. Raises InvalidLength if the
    number of elements does not match the size of the shape.

        >>> from_list([2, 3], [0, 1, 2, 3])
        Traceback (most recent call last):
        fixedgrid.errors.InvalidLength: Expected 6 elements, got 4
    """
    shape = as_shape(shape)
    data = tuple(xs)
    if len(data) != shape.size():
        logger.debug("rejecting %d elements for %s", len(data), shape)
        raise InvalidLength(shape.size(), len(data))
    return Grid._from_trusted(shape, data)

def from_nested_lists[A](shape: Shape | Sequence[int], nested: NestedLists[A]) -> Grid[A]:
    """
    Convert a nested list structure into a grid. Required list nesting increases for each axis.
    The nested lists are flattened first, so only the total number of elements is checked.

        >>> from_nested_lists([2, 3], [[0, 1, 2], [3, 4, 5]])
        Grid([[0, 1, 2], [3, 4, 5]])
    """
    shape = as_shape(shape)
    return from_list(shape, unnest(shape, nested))

def from_array(data: ArrayLike) -> Grid:
    """Convert an array into a grid of the same shape holding its values as python scalars."""
    xp = namespace_of_arrays(data)
    extents = array_shape(data)
    if len(extents) == 0:
        raise InvalidShape(extents, "cannot build a grid from a zero dimensional array")
    shape = Shape(extents)
    flat = xp.reshape(data, (shape.size(),))
    return Grid._from_trusted(shape, tuple(to_host_list(flat)))
