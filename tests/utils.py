from typing import Sequence
from math import prod
import numpy as np
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#backends.append(api.array_namespace(tr.zeros(1)))

def row_major_strides(extents: Sequence[int]) -> list[int]:
    return [prod(extents[i+1:]) for i in range(len(extents))]

def all_coords(extents: Sequence[int]) -> list[tuple[int, ...]]:
    coords: list[tuple[int, ...]] = [()]
    for extent in extents:
        coords = [(*c, i) for c in coords for i in range(extent)]
    return coords
