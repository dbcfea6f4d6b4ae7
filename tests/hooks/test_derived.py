from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pytest

from parish_data.cache.invalidation import invalidate_cache
from parish_data.hooks.data import use_data
from parish_data.hooks.derived import DerivedValue

if TYPE_CHECKING:
    from parish_data.cache.memory_store import MemoryCacheStore


class TestDerivedValue:
    def test_computes_from_hook_values(self, store: MemoryCacheStore) -> None:
        left = use_data("l", lambda: 2, store=store)
        right = use_data("r", lambda: 3, store=store)

        derived = DerivedValue(lambda a, b: a * b, left, right)

        assert derived.value == 6

    def test_memoised_while_inputs_unchanged(self, store: MemoryCacheStore) -> None:
        hook = use_data("l", lambda: [1, 2, 3], store=store)
        computed: list[int] = []

        def total(values: list[int] | None) -> int:
            computed.append(1)
            return sum(values or [])

        derived = DerivedValue(total, hook)
        derived.value
        hook.rerender()
        derived.value

        assert len(computed) == 1

    def test_recomputes_when_input_changes(self, store: MemoryCacheStore) -> None:
        values = iter([[1], [1, 2]])
        hook = use_data("l", lambda: next(values), store=store)
        derived = DerivedValue(lambda v: len(v), hook)
        assert derived.value == 1

        invalidate_cache("l", store=store)
        hook.rerender()

        assert derived.value == 2

    def test_reports_first_input_error(self, store: MemoryCacheStore) -> None:
        def fail() -> int:
            raise ValueError("nope")

        ok = use_data("ok", lambda: 1, store=store)
        bad = use_data("bad", fail, store=store)
        derived = DerivedValue(lambda a, b: (a, b), ok, bad)

        assert isinstance(derived.error, ValueError)
        assert derived.value == (1, None)

    def test_unmount_unmounts_inputs(self, store: MemoryCacheStore) -> None:
        hook = use_data("l", lambda: 1, store=store)

        with DerivedValue(lambda v: v, hook) as derived:
            assert derived.value == 1
        assert not hook.mounted

    @pytest.mark.asyncio
    async def test_wait_resolves_all_inputs(self, store: MemoryCacheStore) -> None:
        async def slow() -> int:
            await asyncio.sleep(0.01)
            return 4

        hook = use_data("slow", slow, store=store)
        derived = DerivedValue(lambda v: None if v is None else v + 1, hook)

        assert derived.value is None
        assert derived.is_loading
        assert await derived.wait() == 5
        assert not derived.is_loading

    @pytest.mark.asyncio
    async def test_wait_after_unmount_does_not_block(self, store: MemoryCacheStore) -> None:
        gate = asyncio.Event()

        async def blocked() -> int:
            await gate.wait()
            return 1

        hook = use_data("blocked", blocked, store=store)
        pending = hook._task
        derived = DerivedValue(lambda v: v, hook)

        derived.unmount()

        assert await asyncio.wait_for(derived.wait(), timeout=1) is None
        gate.set()
        assert pending is not None
        await pending
