# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Callable, Hashable, Optional, Self
from enum import Enum
import threading

from .backend import ArrayNamespace, Device, DType

class OptionType(Enum):
    CONVERSION = 0

class Options:
    """
    Options for one array namespace. Entering an instance as a context manager makes it
    the current options of the calling thread until the block is left, nested blocks
    shadow outer ones.
    """

    #: Namespace the options apply to.
    namespace: ArrayNamespace
    #: Kind of operation the options apply to.
    category: OptionType

    @property
    def key(self) -> Hashable:
        return (self.namespace, self.category)

    def __init__(self, namespace: ArrayNamespace, category: OptionType):
        self.namespace = namespace
        self.category = category

    def __enter__(self) -> Self:
        _stack(self.key).append(self)
        return self

    def __exit__(self, *_) -> None:
        _stack(self.key).pop()

class ConversionOptions(Options):
    """
    Context manager for the conversion of grids into arrays.
    """

    #: Data type of the created arrays. None lets the namespace infer it from the elements.
    dtype: Optional[DType]
    #: Device the arrays are created on. None uses the default device of the namespace.
    device: Optional[Device]

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            dtype: Optional[DType] = None,
            device: Optional[Device] = None):
        self.dtype = dtype
        self.device = device
        super().__init__(namespace, OptionType.CONVERSION)

_local = threading.local()

_defaults: dict[OptionType, Callable[[ArrayNamespace], Options]] = {
    OptionType.CONVERSION: lambda xp: ConversionOptions(namespace=xp),
}

def _stack(key: Hashable) -> list[Options]:
    # one registry per thread
    if not hasattr(_local, "opts"):
        _local.opts = {}
    return _local.opts.setdefault(key, [])

def get_options(namespace: ArrayNamespace, otype: OptionType) -> Options:
    """Current options of the calling thread. Raises KeyError if none were set."""
    stack = _stack((namespace, otype))
    if len(stack) == 0:
        raise KeyError("No options set for the current thread.")
    return stack[-1]

def current_options(namespace: ArrayNamespace, otype: OptionType) -> Options:
    """Current options of the calling thread, or the defaults of the category if none were set."""
    stack = _stack((namespace, otype))
    if len(stack) == 0:
        return _defaults[otype](namespace)
    return stack[-1]

def set_options(opts: Options) -> None:
    """Replace the current options of the calling thread."""
    stack = _stack(opts.key)
    if len(stack) == 0:
        stack.append(opts)
    else:
        stack[-1] = opts
