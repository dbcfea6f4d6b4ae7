from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any, Generic, TypeVar

if TYPE_CHECKING:
    from collections.abc import Callable
    from types import TracebackType

    from parish_data.hooks.data import DataHook

_UNSET: Any = object()

T = TypeVar("T")


class DerivedValue(Generic[T]):
    """A value computed from one or more hooks, recomputed only when an input changes.

    Inputs are compared by identity, so a cached object delivered again does not
    trigger a recompute.
    """

    def __init__(self, compute: Callable[..., T], *hooks: DataHook[Any]) -> None:
        self._compute = compute
        self._hooks = hooks
        self._inputs: tuple[Any, ...] = _UNSET
        self._result: T = _UNSET

    @property
    def hooks(self) -> tuple[DataHook[Any], ...]:
        return self._hooks

    @property
    def value(self) -> T:
        inputs = tuple(hook.value for hook in self._hooks)
        if self._inputs is _UNSET or not _same(inputs, self._inputs):
            self._result = self._compute(*inputs)
            self._inputs = inputs
        return self._result

    @property
    def error(self) -> Exception | None:
        """The first input error, if any input failed."""
        for hook in self._hooks:
            if hook.error is not None:
                return hook.error
        return None

    @property
    def is_loading(self) -> bool:
        return any(hook.is_loading for hook in self._hooks)

    async def wait(self) -> T:
        await asyncio.gather(*(hook.wait() for hook in self._hooks))
        return self.value

    def unmount(self) -> None:
        for hook in self._hooks:
            hook.unmount()

    def __enter__(self) -> DerivedValue[T]:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.unmount()


def _same(left: tuple[Any, ...], right: tuple[Any, ...]) -> bool:
    return len(left) == len(right) and all(a is b for a, b in zip(left, right, strict=True))
