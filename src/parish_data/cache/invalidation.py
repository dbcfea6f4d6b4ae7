"""Cache invalidation and inspection utilities.

Mounted hooks are not told when their key is invalidated. They pick up fresh
data on their next mount, key change or ``rerender()``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from parish_data.context import get_context

if TYPE_CHECKING:
    from parish_data.cache.protocol import CacheStore

logger = logging.getLogger(__name__)


def invalidate_cache(key: str | None = None, *, store: CacheStore | None = None) -> None:
    """Delete one cache entry, or every entry when ``key`` is None."""
    store = store if store is not None else get_context().store
    if key:
        store.delete(key)
        logger.debug("Invalidated cache key=%s", key)
    else:
        store.clear()
        logger.debug("Cleared cache")


def get_cache_keys(*, store: CacheStore | None = None) -> list[str]:
    store = store if store is not None else get_context().store
    return list(store.keys())


def get_cache_size(*, store: CacheStore | None = None) -> int:
    store = store if store is not None else get_context().store
    return len(store)
