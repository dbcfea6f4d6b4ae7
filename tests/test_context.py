"""Tests for the context module."""

from __future__ import annotations

from dataclasses import FrozenInstanceError
from typing import TYPE_CHECKING
from unittest.mock import MagicMock

import pytest

from parish_data.cache.memory_store import MemoryCacheStore
from parish_data.context import (
    DataContext,
    app_context,
    current_content_dir,
    get_context,
    init_context,
    new_context,
    reset_context,
    start_app,
    stop_app,
)
from parish_data.errors import ContextNotInitializedError

if TYPE_CHECKING:
    from pathlib import Path


def _config(content_dir: Path) -> MagicMock:
    config = MagicMock()
    config.__getitem__ = MagicMock(return_value=str(content_dir))
    return config


class TestDataContext:
    """Tests for the DataContext dataclass."""

    def test_default_values(self) -> None:
        ctx = DataContext()
        assert isinstance(ctx.store, MemoryCacheStore)
        assert ctx.content_dir is None

    def test_each_default_gets_its_own_store(self) -> None:
        assert DataContext().store is not DataContext().store

    def test_frozen(self) -> None:
        ctx = DataContext()
        with pytest.raises(FrozenInstanceError):
            ctx.content_dir = None  # type: ignore[misc]

    def test_copy_with_overrides(self, content_dir: Path) -> None:
        ctx = DataContext()
        child = ctx.copy(content_dir=content_dir)

        assert child.content_dir == content_dir
        assert child.store is ctx.store
        assert ctx.content_dir is None


class TestGetContext:
    def test_raises_when_not_initialized(self) -> None:
        with pytest.raises(ContextNotInitializedError):
            get_context()

    def test_returns_initialized_context(self, store: MemoryCacheStore) -> None:
        ctx = init_context(store=store)
        assert get_context() is ctx
        assert get_context().store is store

    def test_reset_unbinds(self) -> None:
        init_context()
        reset_context()
        with pytest.raises(ContextNotInitializedError):
            get_context()


class TestNewContext:
    def test_child_context_restores_parent(self, store: MemoryCacheStore, content_dir: Path) -> None:
        parent = init_context(store=store)

        with new_context(content_dir=content_dir) as child:
            assert get_context() is child
            assert child.store is store
            assert current_content_dir() == content_dir

        assert get_context() is parent
        assert current_content_dir() is None

    def test_without_parent_uses_fresh_context(self) -> None:
        with new_context() as ctx:
            assert isinstance(ctx.store, MemoryCacheStore)
        with pytest.raises(ContextNotInitializedError):
            get_context()

    def test_nested_contexts_isolate_stores(self) -> None:
        outer_store = MemoryCacheStore()
        inner_store = MemoryCacheStore()

        with new_context(store=outer_store):
            with new_context(store=inner_store):
                get_context().store.set("k", 1)
            assert not get_context().store.has("k")

        assert inner_store.get("k") == 1


class TestAppLifecycle:
    def test_start_app_binds_configured_context(self, content_dir: Path) -> None:
        ctx = start_app(_config(content_dir))

        assert get_context() is ctx
        assert ctx.content_dir == content_dir
        assert len(ctx.store) == 0

    def test_stop_app_clears_store_and_unbinds(self, content_dir: Path) -> None:
        ctx = start_app(_config(content_dir))
        ctx.store.set("cms-content", {})

        stop_app()

        assert len(ctx.store) == 0
        with pytest.raises(ContextNotInitializedError):
            get_context()

    def test_stop_app_without_context_is_noop(self) -> None:
        stop_app()

    def test_app_context(self, content_dir: Path) -> None:
        with app_context(_config(content_dir)) as ctx:
            assert get_context() is ctx
        assert current_content_dir() is None
