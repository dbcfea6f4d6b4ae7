"""Ambient data context bound to the current execution scope.

Holds the cache store and content directory that hooks use when they are not
given an explicit store. The context is a ``contextvars`` value, so separate
tasks or tests can run against isolated caches.

Usage:
    # At application start
    start_app()

    hook = use_cms_content()  # uses get_context().store

    # Scoped, isolated cache (tests, background jobs)
    with new_context(store=MemoryCacheStore()):
        ...

    # At application stop
    stop_app()
"""

from __future__ import annotations

import logging
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import TYPE_CHECKING

from parish_data.cache.memory_store import MemoryCacheStore
from parish_data.errors import ContextNotInitializedError

if TYPE_CHECKING:
    from collections.abc import Generator

    from parish_data.cache.protocol import CacheStore
    from parish_data.config import AppConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DataContext:
    """Ambient dependencies for data hooks.

    Attributes:
        store: The cache shared by every hook bound to this context.
        content_dir: Directory holding the CMS JSON files, or None for bundled defaults only.
    """

    store: CacheStore = field(default_factory=MemoryCacheStore)
    content_dir: Path | None = None

    def copy(self, **overrides: object) -> DataContext:
        """Create a child context with the given fields replaced."""
        return replace(self, **overrides)  # type: ignore[arg-type]


_context: ContextVar[DataContext | None] = ContextVar("parish_data_context", default=None)


def get_context() -> DataContext:
    """Get the current context.

    Raises:
        ContextNotInitializedError: If no context has been initialized.
    """
    ctx = _context.get()
    if ctx is None:
        raise ContextNotInitializedError("Data context not initialized. Call init_context() or start_app() first.")
    return ctx


def init_context(
    *,
    store: CacheStore | None = None,
    content_dir: Path | None = None,
) -> DataContext:
    """Initialize the root context. Call once at application entry."""
    ctx = DataContext(store=store if store is not None else MemoryCacheStore(), content_dir=content_dir)
    _context.set(ctx)
    return ctx


def reset_context() -> None:
    """Unbind the current context. Primarily for testing."""
    _context.set(None)


@contextmanager
def new_context(**overrides: object) -> Generator[DataContext]:
    """Bind a child context for the duration of the block. Parent context unchanged.

    When no context is bound yet, the child is built from a fresh default context.
    """
    parent = _context.get() or DataContext()
    child = parent.copy(**overrides)
    token = _context.set(child)
    try:
        yield child
    finally:
        _context.reset(token)


def start_app(config: AppConfig | None = None) -> DataContext:
    """Create the application's cache store from config and bind it as the root context."""
    from parish_data.cache.factory import create_cache_store, get_content_dir

    ctx = init_context(store=create_cache_store(config), content_dir=get_content_dir(config))
    logger.debug("Started data context (content_dir=%s)", ctx.content_dir)
    return ctx


def stop_app() -> None:
    """Drop every cached entry and unbind the root context."""
    ctx = _context.get()
    if ctx is not None:
        ctx.store.clear()
        logger.debug("Stopped data context")
    reset_context()


@contextmanager
def app_context(config: AppConfig | None = None) -> Generator[DataContext]:
    """Run a block between ``start_app()`` and ``stop_app()``."""
    ctx = start_app(config)
    try:
        yield ctx
    finally:
        stop_app()


def current_content_dir() -> Path | None:
    """Content directory of the bound context, or None when no context is bound."""
    ctx = _context.get()
    return ctx.content_dir if ctx is not None else None
