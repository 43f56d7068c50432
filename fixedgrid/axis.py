# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from __future__ import annotations
from dataclasses import dataclass

from .errors import InvalidShape

@dataclass(frozen=True, init=False)
class Axis:
    """
    A single axis of a shape.
    """

    #-------------------------------------------------------------------------
    #members & properties

    #: The position of the axis within its shape.
    idx: int

    #: The extent of the axis, i.e., the number of possible index values.
    extent: int

    #: The stride of the axis, i.e., the product of the extents of all subsequent axes.
    stride: int

    #----------------------------------------------------------------------
    #constructor

    def __init__(self, idx: int, extent: int, stride: int) -> None:
        self._check_input(idx, extent, stride)
        object.__setattr__(self, "idx", idx)
        object.__setattr__(self, "extent", extent)
        object.__setattr__(self, "stride", stride)

    def _check_input(self, idx: int, extent: int, stride: int) -> None:
        if extent < 1:
            raise InvalidShape([extent], f"extent must be positive, but got {extent}")
        if stride < 1:
            raise ValueError(f"Stride must be positive, but got {stride}")
        if idx < 0:
            raise ValueError(f"Index must be non-negative, but got {idx}")

    #----------------------------------------------------------------------
    #methods

    def contains(self, value: int) -> bool:
        return 0 <= value < self.extent

    def __str__(self) -> str:
        return f"Axis(extent={self.extent},stride={self.stride},idx={self.idx})"
