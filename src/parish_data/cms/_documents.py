from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import TYPE_CHECKING, Any

from parish_data.data import DATA_DIR
from parish_data.errors import ContentLoadError

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


@lru_cache(maxsize=8)
def _bundled_text(name: str) -> str:
    return (DATA_DIR / name).read_text(encoding="utf-8")


def deep_merge(base: Any, override: Any) -> Any:
    """Merge ``override`` onto ``base``. Nested dicts merge key by key; anything else is replaced."""
    if isinstance(base, dict) and isinstance(override, dict):
        merged = dict(base)
        for key, value in override.items():
            merged[key] = deep_merge(base[key], value) if key in base else value
        return merged
    return override


def read_document(path: Path) -> Any | None:
    """Parse a JSON content file, returning None when it does not exist.

    Raises:
        ContentLoadError: If the file exists but cannot be read or parsed.
    """
    if not path.exists():
        return None
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        raise ContentLoadError(f"Failed to load content file {path}: {e}") from e


def load_document(name: str, content_dir: Path | None = None) -> Any:
    """Load a content document: the bundled default, overlaid with ``content_dir/name`` if present.

    Every call returns a fresh object, so callers may mutate the result.
    """
    document = json.loads(_bundled_text(name))
    if content_dir is None:
        return document
    override = read_document(content_dir / name)
    if override is None:
        logger.debug("No %s in %s, using bundled defaults", name, content_dir)
        return document
    logger.debug("Loaded %s from %s", name, content_dir)
    return deep_merge(document, override)
