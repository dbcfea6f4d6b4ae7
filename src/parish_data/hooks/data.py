"""Cache-backed data hook bound to a subscriber's lifecycle.

A ``DataHook`` holds the value delivered for one cache key. Mounting it checks
the cache and, on a miss, calls the fetcher once. Sync results are cached at
once; awaitable results are resolved on the running event loop and cached when
they complete.

Usage:
    hook = use_data("cms-content", get_cms_content)
    hook.value  # settings, already cached

    hook = use_data("mass-services", load_mass_services)
    hook.value  # None while pending
    await hook.wait()
    hook.value  # schedule

    hook.set_key("parish-events-all", load_parish_events)
    hook.unmount()

Results are guarded by a per-hook generation counter: a fetch that resolves
after the hook changed key or unmounted is discarded and never cached.
Concurrent hooks missing on the same key each call their own fetcher.
"""

from __future__ import annotations

import asyncio
import inspect
import logging
from enum import Enum
from typing import TYPE_CHECKING, Generic, TypeVar, cast

from parish_data.context import get_context
from parish_data.errors import HookError

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable
    from types import TracebackType

    from parish_data.cache.protocol import CacheStore

logger = logging.getLogger(__name__)

_MISSING = object()

T = TypeVar("T")


class HookStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class DataHook(Generic[T]):
    """Subscriber state for one cache key.

    Args:
        key: Cache key, or None to deliver nothing and skip fetching.
        fetcher: Zero-argument callable returning the value or an awaitable of it.
        store: Cache to read and populate. Defaults to the ambient context's store,
            looked up the first time a non-empty key is read.
    """

    def __init__(
        self,
        key: str | None,
        fetcher: Callable[[], T | Awaitable[T]],
        *,
        store: CacheStore | None = None,
    ) -> None:
        self._store: CacheStore | None = store
        self._key = key
        self._fetcher = fetcher
        self._value: T | None = None
        self._error: Exception | None = None
        self._status = HookStatus.IDLE
        self._generation = 0
        self._mounted = False
        self._task: asyncio.Task[None] | None = None
        self._listeners: list[Callable[[DataHook[T]], None]] = []

    @property
    def key(self) -> str | None:
        return self._key

    @property
    def value(self) -> T | None:
        return self._value

    @property
    def error(self) -> Exception | None:
        """The exception raised by the last fetch, if it failed."""
        return self._error

    @property
    def status(self) -> HookStatus:
        return self._status

    @property
    def is_loading(self) -> bool:
        return self._status is HookStatus.LOADING

    @property
    def mounted(self) -> bool:
        return self._mounted

    def mount(self) -> DataHook[T]:
        """Bind the hook to its key, reading the cache or starting a fetch."""
        if not self._mounted:
            self._mounted = True
            self._run()
        return self

    def unmount(self) -> None:
        """Detach the hook. Pending results are discarded and the local value dropped."""
        self._mounted = False
        self._generation += 1
        self._task = None
        self._value = None
        self._error = None
        self._status = HookStatus.IDLE
        self._listeners.clear()

    def set_key(self, key: str | None, fetcher: Callable[[], T | Awaitable[T]] | None = None) -> None:
        """Point the hook at a new key, fetching on a cache miss.

        Re-setting the current key does nothing, even with a new fetcher.
        """
        if not self._mounted:
            raise HookError("Cannot change the key of an unmounted hook")
        if fetcher is not None:
            self._fetcher = fetcher
        if key == self._key:
            return
        self._key = key
        self._run()

    def rerender(self) -> None:
        """Re-check the cache for the current key, fetching again on a miss."""
        if not self._mounted:
            raise HookError("Cannot re-render an unmounted hook")
        self._run()

    def subscribe(self, listener: Callable[[DataHook[T]], None]) -> Callable[[], None]:
        """Call ``listener`` whenever the delivered value, error or status changes.

        Returns:
            A function that removes the listener.
        """
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    async def wait(self) -> T | None:
        """Wait for any pending fetch to settle and return the current value.

        Raises:
            Exception: Whatever a subscriber raised while the fetch was being delivered.
        """
        while self._task is not None and not self._task.done():
            await asyncio.wait({self._task})
        task = self._task
        if task is not None and not task.cancelled():
            error = task.exception()
            if error is not None:
                raise error
        return self._value

    def _cache(self) -> CacheStore:
        if self._store is None:
            self._store = get_context().store
        return self._store

    def _run(self) -> None:
        self._generation += 1
        self._task = None
        generation = self._generation
        key = self._key

        if not key:
            self._deliver(None, None, HookStatus.IDLE)
            return

        cached = self._cache().get(key, _MISSING)
        if cached is not _MISSING:
            logger.debug("Cache hit [key=%s]", key)
            self._deliver(cast("T", cached), None, HookStatus.READY)
            return

        logger.debug("Cache miss [key=%s], fetching", key)
        self._deliver(None, None, HookStatus.LOADING)
        try:
            result = self._fetcher()
        except Exception as e:
            self._fail(key, e)
            return

        if not inspect.isawaitable(result):
            self._accept(key, generation, result)
            return

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            if inspect.iscoroutine(result):
                result.close()
            self._deliver(None, None, HookStatus.IDLE)
            raise HookError(f"Async fetcher for key {key!r} needs a running event loop") from None
        self._task = loop.create_task(self._resolve(key, generation, result))

    async def _resolve(self, key: str, generation: int, pending: Awaitable[T]) -> None:
        try:
            result = await pending
        except Exception as e:
            if generation == self._generation:
                self._fail(key, e)
            else:
                logger.debug("Ignoring failure of superseded fetch [key=%s]: %s", key, e)
            return
        self._accept(key, generation, result)

    def _accept(self, key: str, generation: int, result: T) -> None:
        if generation != self._generation:
            logger.debug("Discarding superseded result [key=%s]", key)
            return
        self._cache().set(key, result)
        logger.debug("Cached [key=%s]", key)
        self._deliver(result, None, HookStatus.READY)

    def _fail(self, key: str, error: Exception) -> None:
        logger.warning("Fetch failed [key=%s]: %s", key, error)
        self._deliver(None, error, HookStatus.ERROR)

    def _deliver(self, value: T | None, error: Exception | None, status: HookStatus) -> None:
        changed = value is not self._value or error is not self._error or status is not self._status
        self._value = value
        self._error = error
        self._status = status
        if changed:
            for listener in list(self._listeners):
                listener(self)

    def __enter__(self) -> DataHook[T]:
        return self.mount()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unmount()

    def __repr__(self) -> str:
        return f"DataHook(key={self._key!r}, status={self._status.value})"


def use_data(
    key: str | None,
    fetcher: Callable[[], T | Awaitable[T]],
    *,
    store: CacheStore | None = None,
) -> DataHook[T]:
    """Mount a ``DataHook`` for ``key``.

    Args:
        key: Cache key, or None to deliver None without fetching.
        fetcher: Produces the value on a cache miss, synchronously or as an awaitable.
        store: Cache to use instead of the ambient context's store.

    Returns:
        The mounted hook. Its ``value`` is already set on a cache hit or a sync fetch.

    Raises:
        HookError: If the fetcher returns an awaitable and no event loop is running.
    """
    return DataHook(key, fetcher, store=store).mount()
