from parish_data.cache.memory_store import MemoryCacheStore
from parish_data.cache.protocol import CacheStore

__all__ = ["CacheStore", "MemoryCacheStore"]
