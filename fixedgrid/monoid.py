# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""
Pointwise monoids over grids. A monoid on the element type, i.e., an associative
binary operation with an identity element, lifts to grids of a fixed shape by
combining offset by offset. The identity grid is filled with the element identity.
"""

from typing import Callable, Iterable, Sequence
from dataclasses import dataclass
from functools import reduce
import operator

from .construct import fill
from .grid import Grid
from .shape import Shape

@dataclass(frozen=True)
class Monoid[A]:
    """Associative binary operation together with its identity element."""

    #: Associative operation combining two elements.
    combine: Callable[[A, A], A]

    #: Identity element of the operation.
    empty: A

    def concat(self, *xs: A) -> A:
        return reduce(self.combine, xs, self.empty)

SUM = Monoid(operator.add, 0)
PRODUCT = Monoid(operator.mul, 1)
ALL = Monoid(operator.and_, True)
ANY = Monoid(operator.or_, False)

def mempty[A](monoid: Monoid[A], shape: Shape | Sequence[int]) -> Grid[A]:
    return fill(shape, monoid.empty)

def mappend[A](monoid: Monoid[A], grid1: Grid[A], grid2: Grid[A], *grids: Grid[A]) -> Grid[A]:
    """Combine grids of the same shape pointwise, from left to right."""
    return grid1.zip_with(monoid.concat, grid2, *grids)

def mconcat[A](monoid: Monoid[A], shape: Shape | Sequence[int], grids: Iterable[Grid[A]]) -> Grid[A]:
    """Fold any number of grids of the given shape. Returns the identity grid for no grids."""
    empty = mempty(monoid, shape)
    grids = list(grids)
    if len(grids) == 0:
        return empty
    return mappend(monoid, empty, *grids)
