# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Optional

from .backend import ArrayLike, ArrayNamespace, Device, DType
from .grid import Grid

def to_array[T: ArrayLike](
        grid: Grid,
        xp: ArrayNamespace[T],
        dtype: Optional[DType] = None,
        device: Optional[Device] = None) -> T:
    """Convert the grid into a dense array whose shape equals the extents of the grid."""
    flat = xp.asarray(list(grid.data), dtype=dtype, device=device)
    return xp.reshape(flat, grid.shape.extents)
