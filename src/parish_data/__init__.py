"""Cached data hooks for the parish website."""

from parish_data.cache.invalidation import get_cache_keys, get_cache_size, invalidate_cache
from parish_data.cache.memory_store import MemoryCacheStore
from parish_data.context import app_context, get_context, init_context, new_context, start_app, stop_app
from parish_data.hooks.data import DataHook, HookStatus, use_data

__all__ = [
    "DataHook",
    "HookStatus",
    "MemoryCacheStore",
    "app_context",
    "get_cache_keys",
    "get_cache_size",
    "get_context",
    "init_context",
    "invalidate_cache",
    "new_context",
    "start_app",
    "stop_app",
    "use_data",
]
