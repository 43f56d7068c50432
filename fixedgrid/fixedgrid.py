# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

import logging
from typing import Any, Callable, Iterable, Optional, Sequence, SupportsIndex

from .backend import ArrayNamespace, Device, DType, get_index_dtype, get_namespace
from .shape import Coord, Shape, as_shape
from .grid import Grid
from .nested import NestedLists
from .construct import (
    generate as _generate,
    tabulate as _tabulate,
    fill as _fill,
    from_list as _from_list,
    from_nested_lists as _from_nested_lists,
    from_array as _from_array
)
from .to_array import to_array as _to_array
from .monoid import Monoid, mempty as _mempty, mappend as _mappend, mconcat as _mconcat
from .options import ConversionOptions, OptionType, Options, set_options, get_options, current_options

logger = logging.getLogger(__name__)

class FixedGrid[NDArray: Any]:
    """
    Entry point bound to one array namespace. Grids themselves hold arbitrary python
    values, the namespace is used for vectorized index conversions and for converting
    grids from and to dense arrays.
    """

    #: Array namespace for the underlying array library.
    namespace: ArrayNamespace[NDArray]

    #: Internally used index type.
    index_type: Any

    def __init__(self, namespace: Any) -> None:
        object.__setattr__(self, "namespace", get_namespace(namespace))
        object.__setattr__(self, "index_type", get_index_dtype(self.namespace))
        logger.debug("using namespace %s with index type %s", self.namespace, self.index_type)

        set_options(self.conversion())

    #-------------------------------------------------------------------------------------------------
    # base wrapper

    def shape(self, *extents: SupportsIndex | Sequence[SupportsIndex]) -> Shape:
        """
        Shape of a grid, defined by the extent of every axis in row-major order.
        The extents can be passed one by one or as a single sequence.
        """
        if len(extents) == 1 and isinstance(extents[0], Sequence):
            return Shape(extents[0])
        return Shape(extents)

    def monoid[A](self, combine: Callable[[A, A], A], empty: A) -> Monoid[A]:
        """
        Associative operation with an identity element, combined pointwise by mappend and mconcat.
        """
        return Monoid(combine, empty)

    #-------------------------------------------------------------------------------------------------
    # construction wrapper

    def generate[A](self, shape: Shape | Sequence[int], func: Callable[[int], A]) -> Grid[A]:
        """
        Construct a grid by calling func with every flat offset in increasing order.
        """
        return _generate(shape, func)

    def tabulate[A](self, shape: Shape | Sequence[int], func: Callable[[Coord], A]) -> Grid[A]:
        """
        Construct a grid by calling func with every coordinate in row-major order.
        """
        return _tabulate(shape, func)

    def fill[A](self, shape: Shape | Sequence[int], value: A) -> Grid[A]:
        """
        Construct a grid where all entries are set to the given value.
        """
        return _fill(shape, value)

    def from_list[A](self, shape: Shape | Sequence[int], xs: Iterable[A]) -> Grid[A]:
        """
        Construct a grid from a flat sequence in row-major order. The sequence must hold
        exactly as many elements as the shape.
        """
        return _from_list(shape, xs)

    def from_nested_lists[A](self, shape: Shape | Sequence[int], nested: NestedLists[A]) -> Grid[A]:
        """
        Construct a grid from nested lists with one level of nesting per axis.
        """
        return _from_nested_lists(shape, nested)

    def from_array(self, data: NDArray) -> Grid:
        """
        Construct a grid with the shape and values of an array.
        """
        return _from_array(data)

    #-------------------------------------------------------------------------------------------------
    # conversion wrapper

    def to_array(self, grid: Grid) -> NDArray:
        """
        Convert a grid into a dense array. Data type and device are taken from the current
        conversion options of the calling thread, or the defaults if none were set.
        """
        opts = current_options(self.namespace, OptionType.CONVERSION)
        return _to_array(grid, self.namespace, dtype=opts.dtype, device=opts.device)

    def coords(self, shape: Shape | Sequence[int]) -> NDArray:
        """
        All coordinates of the shape in row-major order as an index array of shape (ndims, size).
        """
        shape = as_shape(shape)
        return shape.to_coords(self.offsets(shape))

    def offsets(self, shape: Shape | Sequence[int]) -> NDArray:
        """
        All flat offsets of the shape as an index array.
        """
        shape = as_shape(shape)
        return self.namespace.arange(shape.size(), dtype=self.index_type)

    #-------------------------------------------------------------------------------------------------
    # monoid wrapper

    def mempty[A](self, monoid: Monoid[A], shape: Shape | Sequence[int]) -> Grid[A]:
        """
        Identity grid of the monoid, filled with its identity element.
        """
        return _mempty(monoid, shape)

    def mappend[A](self, monoid: Monoid[A], grid1: Grid[A], grid2: Grid[A], *grids: Grid[A]) -> Grid[A]:
        """
        Combine grids of the same shape pointwise.
        """
        return _mappend(monoid, grid1, grid2, *grids)

    def mconcat[A](self, monoid: Monoid[A], shape: Shape | Sequence[int], grids: Iterable[Grid[A]]) -> Grid[A]:
        """
        Combine any number of grids of the same shape pointwise.
        """
        return _mconcat(monoid, shape, grids)

    #-------------------------------------------------------------------------------------------------
    # options

    def conversion(self, dtype: Optional[DType] = None, device: Optional[Device] = None) -> ConversionOptions:
        """
        Options for converting grids into arrays. Can be used as a context manager.
        """
        return ConversionOptions(namespace=self.namespace, dtype=dtype, device=device)

    def set_options(self, opts: ConversionOptions) -> None:
        """
        Set the options for the current thread.
        """
        set_options(opts)

    def get_options(self, otype: OptionType) -> Options:
        """
        Get the options for the current thread.
        """
        return get_options(self.namespace, otype)
