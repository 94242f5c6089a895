# core/storage.py
from __future__ import annotations
from functools import partial
from typing import Callable, Dict, Iterator, List, Tuple, Any

import numpy as np

from interfaces import FixedArray
from .geometry import Location
from .types import Square


# element type -> (dtype, fields per row, pack, unpack)
_CODECS: Dict[type, Tuple[Any, int, Callable, Callable]] = {
    Square: (np.int8, 1, lambda s: (int(s),), lambda row: Square(int(row[0]))),
    Location: (np.int64, 2, lambda l: (l.x, l.y), lambda row: Location(int(row[0]), int(row[1]))),
}


class NumpyArray(FixedArray):
    """Contiguous numpy-backed fixed array of Square or Location values."""

    def __init__(self, capacity: int, default: Any):
        kind = type(default)
        if kind not in _CODECS:
            raise TypeError(f"NumpyArray cannot store {kind.__name__}")
        dtype, fields, self._pack, self._unpack = _CODECS[kind]
        self._data = np.empty((int(capacity), fields), dtype=dtype)
        self._data[:] = self._pack(default)

    def __len__(self) -> int:
        return self._data.shape[0]

    def __getitem__(self, i: int):
        return self._unpack(self._data[i])

    def __setitem__(self, i: int, value) -> None:
        self._data[i] = self._pack(value)

    def __iter__(self) -> Iterator:
        for row in self._data:
            yield self._unpack(row)


class ListArray(FixedArray):
    """Heap-backed fixed array; the list is never appended to."""

    def __init__(self, capacity: int, default: Any):
        self._items: List[Any] = [default] * int(capacity)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, i: int):
        return self._items[i]

    def __setitem__(self, i: int, value) -> None:
        self._items[i] = value

    def __iter__(self) -> Iterator:
        return iter(self._items)


BACKENDS = {
    "numpy": NumpyArray,
    "list": ListArray,
}

def array_factory(backend: str, capacity: int, default: Any) -> Callable[[], FixedArray]:
    """Zero-arg factory producing default-filled arrays of `capacity` items."""
    try:
        cls = BACKENDS[backend]
    except KeyError:
        raise ValueError(f"unknown storage backend {backend!r}; choose from {sorted(BACKENDS)}") from None
    return partial(cls, capacity, default)
