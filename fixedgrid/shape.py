# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Iterator, Sequence, SupportsIndex, overload
from dataclasses import dataclass
from itertools import product
from operator import index
from math import prod

from .backend import ArrayLike, namespace_of_arrays, device, get_index_dtype, DType
from .axis import Axis
from .errors import InvalidShape, OutOfBounds

Coord = tuple[int, ...]

@dataclass(frozen=True, init=False)
class Shape(Sequence[Axis]):
    """
    The shape of a grid, represented as a non-empty sequence of axes. Elements are laid out
    in row-major order, so the last axis has stride one and every other axis has the product
    of the extents to its right as stride. If an integer is provided during initialization,
    the shape has a single axis.
    """

    #: The axes of the shape, ordered from the slowest to the fastest varying one.
    axes: tuple[Axis, ...]

    #-------------------------------------------------------------------------
    #constructor

    def __init__(self, extents: SupportsIndex | Sequence[SupportsIndex], /) -> None:
        if isinstance(extents, Sequence):
            extents = tuple(index(e) for e in extents)
        else:
            extents = (index(extents),)

        self._check_extents(extents)
        strides = [prod(extents[i+1:]) for i in range(len(extents))]
        axes = tuple(Axis(i, extent, stride) for i, (extent, stride) in enumerate(zip(extents, strides)))
        object.__setattr__(self, "axes", axes)

    def _check_extents(self, extents: Sequence[int]) -> None:
        if len(extents) == 0:
            raise InvalidShape(extents, "shape must have at least one axis")
        for extent in extents:
            if extent < 1:
                raise InvalidShape(extents, f"all extents must be positive, but got {extent}")

    #-------------------------------------------------------------------------
    #properties

    @property
    def ndims(self) -> int:
        return len(self)

    @property
    def extents(self) -> Coord:
        return tuple(a.extent for a in self)

    @property
    def strides(self) -> Coord:
        return tuple(a.stride for a in self)

    #-------------------------------------------------------------------------
    #methods

    def size(self) -> int:
        """Calculate the number of elements in a grid of this shape, i.e., the product of all extents."""
        return prod(self.extents)

    def to_coord(self, offset: SupportsIndex) -> Coord:
        """Convert a flat offset into the coordinate it addresses."""
        offset = index(offset)
        if not 0 <= offset < self.size():
            raise OutOfBounds(None, offset, self.size())
        return tuple((offset // a.stride) % a.extent for a in self)

    def from_coord(self, coord: SupportsIndex | Sequence[SupportsIndex]) -> int:
        """Convert a coordinate into the flat offset of the element it addresses."""
        coord = self.check_coord(coord)
        return sum(c * a.stride for c, a in zip(coord, self))

    def check_coord(self, coord: SupportsIndex | Sequence[SupportsIndex]) -> Coord:
        """
        Validate a coordinate against the extents and return it as a tuple of ints.
        A single integer is accepted for shapes with one axis.
        """
        coord = _as_coord(coord)
        if len(coord) != len(self):
            raise OutOfBounds(None, coord, len(self),
                              f"Coordinate {coord} has {len(coord)} indices, shape has {len(self)} axes")
        for c, a in zip(coord, self):
            if not a.contains(c):
                raise OutOfBounds(a.idx, c, a.extent)
        return coord

    def contains(self, coord: SupportsIndex | Sequence[SupportsIndex]) -> bool:
        """Check if the coordinate lies inside the shape. A single integer is accepted for shapes with one axis."""
        coord = _as_coord(coord)
        return len(coord) == len(self) and all(a.contains(c) for c, a in zip(coord, self))

    def coords(self) -> Iterator[Coord]:
        """Iterate over all coordinates in row-major order."""
        return product(*(range(a.extent) for a in self))

    def to_coords[T: ArrayLike](self, offsets: T) -> T:
        """
        Convert flat offsets with shape (...) to coordinates with shape (len(Shape), ...).
        """
        xp = namespace_of_arrays(offsets)
        int_type = get_index_dtype(xp)
        self._check_dtype(int_type, offsets)
        if xp.any(offsets < 0) or xp.any(offsets >= self.size()):
            raise OutOfBounds(None, offsets, self.size(), f"Offsets out of range for size {self.size()}")
        coords = xp.zeros((len(self), *offsets.shape),
                          dtype=int_type,
                          device=device(offsets))
        for a in self:
            coords[a.idx, ...] = (offsets // a.stride) % a.extent
        return coords

    def to_offsets[T: ArrayLike](self, coords: T) -> T:
        """
        Convert coordinates with shape (len(Shape), ...) to flat offsets with shape (...).
        """
        xp = namespace_of_arrays(coords)
        int_type = get_index_dtype(xp)
        self._check_dtype(int_type, coords)
        if coords.ndim == 0 or coords.shape[0] != len(self):
            raise ValueError(f"Expect a tensor of shape ({len(self)}, ...)")
        for a in self:
            if xp.any(coords[a.idx, ...] < 0) or xp.any(coords[a.idx, ...] >= a.extent):
                raise OutOfBounds(a.idx, coords[a.idx, ...], a.extent,
                                  f"Indices out of range for axis {a.idx} with extent {a.extent}")
        trans = xp.asarray(self.strides,
                           dtype=int_type,
                           device=device(coords))
        offsets = coords * xp.reshape(trans, (len(self), *[1]*(coords.ndim-1)))
        return xp.sum(offsets, axis=0)

    def _check_dtype(self, index_dtype: DType, inp: ArrayLike) -> None:
        if inp.dtype != index_dtype:
            raise ValueError(f"Input should have dtype={index_dtype}")

    #-------------------------------------------------------------------------
    #container behaviour

    def __len__(self) -> int:
        return len(self.axes)

    def __iter__(self) -> Iterator[Axis]:
        return iter(self.axes)

    def __reversed__(self) -> Iterator[Axis]:
        return reversed(self.axes)

    @overload
    def __getitem__(self, idx: SupportsIndex) -> Axis: ...
    @overload
    def __getitem__(self, idx: slice) -> tuple[Axis, ...]: ...
    #implementation
    def __getitem__(self, idx: SupportsIndex | slice) -> Axis | tuple[Axis, ...]:
        return self.axes[idx]

    #-------------------------------------------------------------------------
    #some magic

    def __str__(self) -> str:
        return f"Shape({list(self.extents)})"

    def __repr__(self) -> str:
        return str(self)

    def __hash__(self) -> int:
        return hash(self.extents)

    def __eq__(self, other) -> bool:
        return isinstance(other, Shape) and self.extents == other.extents

def total_size(shape: Shape) -> int:
    return shape.size()

def as_shape(shape: Shape | SupportsIndex | Sequence[SupportsIndex]) -> Shape:
    return shape if isinstance(shape, Shape) else Shape(shape)

def _as_coord(coord: SupportsIndex | Sequence[SupportsIndex]) -> Coord:
    if isinstance(coord, Sequence):
        return tuple(index(c) for c in coord)
    return (index(coord),)
