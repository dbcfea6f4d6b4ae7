from __future__ import annotations

import threading
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterator


class MemoryCacheStore:
    """In-process key/value cache with no eviction, expiry or size bound.

    Values may be ``None``, so pass a sentinel ``default`` to ``get()`` or use ``has()``
    to tell a cached ``None`` from a miss.
    """

    def __init__(self) -> None:
        self._data: dict[str, object] = {}
        self._lock = threading.Lock()

    def get(self, key: str, default: object = None) -> object:
        """Return the cached value, or ``default`` on a miss."""
        with self._lock:
            return self._data.get(key, default)

    def has(self, key: str) -> bool:
        with self._lock:
            return key in self._data

    def set(self, key: str, value: object) -> None:
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def clear(self) -> None:
        with self._lock:
            self._data.clear()

    def keys(self) -> Iterator[str]:
        with self._lock:
            snapshot = list(self._data)
        return iter(snapshot)

    def __len__(self) -> int:
        with self._lock:
            return len(self._data)
