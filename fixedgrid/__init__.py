# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Fixed-shape N-dimensional grids stored contiguously in row-major order."""

from .fixedgrid import FixedGrid
from .axis import Axis
from .shape import Shape, Coord, total_size
from .grid import Grid, to_nested_lists, update
from .nested import NestedLists
from .construct import generate, tabulate, fill, from_list, from_nested_lists, from_array
from .to_array import to_array
from .monoid import Monoid, SUM, PRODUCT, ALL, ANY, mempty, mappend, mconcat
from .errors import GridError, InvalidShape, InvalidLength, OutOfBounds, ShapeMismatch

__all__ = [
    "FixedGrid",
    "Axis",
    "Shape",
    "Coord",
    "total_size",
    "Grid",
    "NestedLists",
    "generate",
    "tabulate",
    "fill",
    "from_list",
    "from_nested_lists",
    "from_array",
    "to_array",
    "to_nested_lists",
    "update",
    "Monoid",
    "SUM",
    "PRODUCT",
    "ALL",
    "ANY",
    "mempty",
    "mappend",
    "mconcat",
    "GridError",
    "InvalidShape",
    "InvalidLength",
    "OutOfBounds",
    "ShapeMismatch",
]
