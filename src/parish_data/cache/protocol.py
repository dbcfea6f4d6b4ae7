from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Iterator


class CacheStore(Protocol):
    def get(self, key: str, default: object = None) -> object: ...

    def has(self, key: str) -> bool: ...

    def set(self, key: str, value: object) -> None: ...

    def delete(self, key: str) -> None: ...

    def clear(self) -> None: ...

    def keys(self) -> Iterator[str]: ...

    def __len__(self) -> int: ...
