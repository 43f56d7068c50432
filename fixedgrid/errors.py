# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional, Sequence

__all__ = [
    "GridError",
    "InvalidShape",
    "InvalidLength",
    "OutOfBounds",
    "ShapeMismatch",
]

class GridError(Exception):
    """
    Base error which all fixedgrid errors are sub-classed from.
    """

class InvalidShape(GridError, ValueError):
    """
    Raised when a shape has no axes or an extent below one.
    """

    #: The rejected extents.
    extents: tuple[Any, ...]

    def __init__(self, extents: Sequence[Any], reason: str) -> None:
        self.extents = tuple(extents)
        super().__init__(f"Invalid shape {list(self.extents)}: {reason}")

class InvalidLength(GridError, ValueError):
    """
    Raised when the number of supplied elements does not match the size of a shape.
    """

    #: Number of elements the shape requires.
    expected: int

    #: Number of elements that were supplied.
    actual: int

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Expected {expected} elements, got {actual}")

class OutOfBounds(GridError, IndexError):
    """
    Raised when a coordinate or flat offset lies outside a shape.
    If axis is None, the error is not tied to a single axis, e.g. for flat offsets,
    where extent is the size of the shape.
    """

    axis: Optional[int]
    value: Any
    extent: int

    def __init__(self, axis: Optional[int], value: Any, extent: int, msg: Optional[str] = None) -> None:
        self.axis = axis
        self.value = value
        self.extent = extent
        if msg is None:
            if axis is None:
                msg = f"Offset {value} out of range for size {extent}"
            else:
                msg = f"Index {value} out of range for axis {axis} with extent {extent}"
        super().__init__(msg)

class ShapeMismatch(GridError, ValueError):
    """
    Raised when grids of different shapes are combined.
    """

    expected: Any
    actual: Any

    def __init__(self, expected: Any, actual: Any) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Shapes do not match: {expected} and {actual}")
