# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Iterable, Iterator, Sequence, SupportsIndex

from .errors import InvalidLength, ShapeMismatch
from .nested import NestedLists, nest
from .shape import Coord, Shape, as_shape

class Grid[A]:
    """
    N-dimensional grid of fixed shape. The elements are stored in a flat tuple in
    row-major order and are addressed by coordinates, one index per axis.
    Grids are immutable, all modifying operations return a new grid.

    e.g. a grid of shape [2, 3] looks like:

        >>> generate([2, 3], lambda i: i)
        Grid([[0, 1, 2], [3, 4, 5]])
    """

    __slots__ = ("_shape", "_data")

    _shape: Shape
    _data: tuple[A, ...]

    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def data(self) -> Sequence[A]:
        """Flat row-major store. Cannot be set."""
        return self._data

    def __init__(self,
                 shape: Shape | Sequence[int],
                 data: Iterable[A]) -> None:
        shape = as_shape(shape)
        data = tuple(data)
        if len(data) != shape.size():
            raise InvalidLength(shape.size(), len(data))
        self._shape = shape
        self._data = data

    @classmethod
    def _from_trusted(cls, shape: Shape, data: tuple[A, ...]) -> "Grid[A]":
        grid = cls.__new__(cls)
        grid._shape = shape
        grid._data = data
        return grid

    # ------------------------------------------------------------------------
    # access

    def index(self, coord: SupportsIndex | Sequence[SupportsIndex]) -> A:
        """Return the element at the given coordinate."""
        return self._data[self._shape.from_coord(coord)]

    def __getitem__(self, coord: SupportsIndex | Sequence[SupportsIndex]) -> A:
        return self.index(coord)

    def items(self) -> Iterator[tuple[Coord, A]]:
        """Iterate over (coordinate, element) pairs in row-major order."""
        return zip(self._shape.coords(), self._data)

    def to_list(self) -> list[A]:
        return list(self._data)

    def to_nested_lists(self) -> NestedLists[A]:
        """
        Turn the grid into a nested list structure. List nesting increases for each axis.

            >>> generate([2, 3], lambda i: i).to_nested_lists()
            [[0, 1, 2], [3, 4, 5]]
        """
        return nest(self._shape, self._data)

    # ------------------------------------------------------------------------
    # update

    def update(self, pairs: Iterable[tuple[SupportsIndex | Sequence[SupportsIndex], A]]) -> "Grid[A]":
        """
        Return a new grid with the elements at the given coordinates replaced. If a coordinate
        appears more than once, the last value wins. All coordinates are validated before any
        element is replaced.
        """
        changes = [(self._shape.from_coord(coord), value) for coord, value in pairs]
        data = list(self._data)
        for offset, value in changes:
            data[offset] = value
        return Grid._from_trusted(self._shape, tuple(data))

    # ------------------------------------------------------------------------
    # elementwise

    def map[B](self, func: Callable[[A], B]) -> "Grid[B]":
        """Apply a function to every element."""
        return Grid._from_trusted(self._shape, tuple(func(x) for x in self._data))

    def zip_with[B](self, func: Callable[..., B], other: "Grid[Any]", *others: "Grid[Any]") -> "Grid[B]":
        """
        Combine this grid with other grids of the same shape offset by offset. The function
        receives one element of every grid, in the order the grids were passed.
        """
        grids = (self, other, *others)
        grids_match(*grids)
        data = tuple(func(*xs) for xs in zip(*(g._data for g in grids)))
        return Grid._from_trusted(self._shape, data)

    # ------------------------------------------------------------------------
    # magic stuff

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[A]:
        return iter(self._data)

    def __contains__(self, item: Any) -> bool:
        return item in self._data

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Grid)\
               and self._shape == other._shape\
               and self._data == other._data

    def __hash__(self) -> int:
        return hash((self._shape, self._data))

    def __repr__(self) -> str:
        return f"Grid({self.to_nested_lists()!r})"

def grids_match(*grids: Grid) -> None:
    ref = grids[0]
    for grid in grids[1:]:
        if ref.shape != grid.shape:
            raise ShapeMismatch(ref.shape, grid.shape)

def to_nested_lists[A](grid: Grid[A]) -> NestedLists[A]:
    return grid.to_nested_lists()

def update[A](grid: Grid[A], pairs: Iterable[tuple[SupportsIndex | Sequence[SupportsIndex], A]]) -> Grid[A]:
    return grid.update(pairs)
