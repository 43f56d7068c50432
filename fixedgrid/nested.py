# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""
Conversion between the flat row-major store of a grid and nested lists, whose nesting
depth equals the number of axes.

    >>> nest(Shape([2, 3]), [0, 1, 2, 3, 4, 5])
    [[0, 1, 2], [3, 4, 5]]
"""

from typing import Any, Sequence

from .shape import Shape

type NestedLists[A] = list[A] | list[NestedLists[A]]

def nest[A](shape: Shape, data: Sequence[A]) -> NestedLists[A]:
    """Regroup a flat sequence into nested lists, one level per axis."""
    return _nest(shape.strides, data)

def _nest[A](strides: Sequence[int], data: Sequence[A]) -> NestedLists[A]:
    if len(strides) == 1:
        return list(data)
    chunk = strides[0]
    return [_nest(strides[1:], data[i:i+chunk]) for i in range(0, len(data), chunk)]

def unnest[A](shape: Shape, nested: NestedLists[A]) -> list[A]:
    """
    Flatten nested lists by concatenating the inner sequences, outermost axis first.
    Only the nesting depth is determined by the shape, the lengths of the inner
    sequences are not checked.
    """
    flat: list[A] = []
    _unnest(len(shape), nested, flat)
    return flat

def _unnest(depth: int, nested: Any, flat: list) -> None:
    if not _is_level(nested):
        raise TypeError(f"Expected a nested sequence, got {type(nested).__name__}")
    if depth == 1:
        flat.extend(nested)
        return
    for sub in nested:
        _unnest(depth-1, sub, flat)

def _is_level(obj: Any) -> bool:
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes, bytearray))
