from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from parish_data.cache.memory_store import MemoryCacheStore

if TYPE_CHECKING:
    from parish_data.config import AppConfig


def create_cache_store(config: AppConfig | None = None) -> MemoryCacheStore:
    """Build the application cache store.

    The store is in-process only, so the config carries no settings for it yet.
    """
    return MemoryCacheStore()


def get_content_dir(config: AppConfig | None = None) -> Path:
    """Return the CMS content directory from the app config's ``content.dir``."""
    if config is None:
        from parish_data.config import create_config

        config = create_config()
    return Path(str(config["content.dir"])).expanduser()
