"""Shared pytest fixtures for test modules."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from parish_data.cache.memory_store import MemoryCacheStore
from parish_data.context import reset_context

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path


@pytest.fixture(autouse=True)
def reset_data_context() -> Iterator[None]:
    """Unbind any data context a test left behind."""
    yield
    reset_context()


@pytest.fixture
def store() -> MemoryCacheStore:
    return MemoryCacheStore()


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """An empty CMS content directory. Tests write the JSON files they need."""
    path = tmp_path / "content"
    path.mkdir()
    return path
