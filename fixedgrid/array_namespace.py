# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Structural types for the parts of the array API standard used by fixedgrid."""

from typing import Any, Protocol, Self, Sequence

Device = Any
DType = Any

class ArrayLike(Protocol):

    @property
    def dtype(self) -> DType: ...
    @property
    def shape(self) -> tuple[int | None, ...]: ...
    @property
    def ndim(self) -> int: ...
    @property
    def device(self) -> Device: ...

    def __getitem__(self, key: Any, /) -> Self: ...
    def __setitem__(self, key: Any, value: Any, /) -> None: ...
    def __add__(self, other: Any, /) -> Self: ...
    def __mul__(self, other: Any, /) -> Self: ...
    def __floordiv__(self, other: Any, /) -> Self: ...
    def __mod__(self, other: Any, /) -> Self: ...
    def __lt__(self, other: Any, /) -> Self: ...
    def __ge__(self, other: Any, /) -> Self: ...

class ArrayNamespace[T: ArrayLike](Protocol):

    def __array_namespace_info__(self) -> Any: ...
    def asarray(self, obj: Any, /, *, dtype: DType = None, device: Device = None, copy: bool | None = None) -> T: ...
    def arange(self, start: int, /, stop: int | None = None, step: int = 1, *, dtype: DType = None, device: Device = None) -> T: ...
    def zeros(self, shape: int | Sequence[int], *, dtype: DType = None, device: Device = None) -> T: ...
    def reshape(self, x: T, /, shape: Sequence[int], *, copy: bool | None = None) -> T: ...
    def sum(self, x: T, /, *, axis: int | None = None) -> T: ...
    def any(self, x: T, /) -> T: ...
    def all(self, x: T, /) -> T: ...
