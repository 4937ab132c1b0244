"""Tests for concurrent multi-key fetch: all-or-nothing and settled variants."""

import asyncio

import pytest

from ftx_derivatives.batch import fetch_many, fetch_many_settled
from ftx_derivatives.exceptions import FTXDerivativesError, TransportError


class _FakeFetcher:
    """Records calls; fails for the configured keys after an optional delay."""

    def __init__(self, failing: set[int] | None = None, delay: float = 0.0) -> None:
        self.failing = failing or set()
        self.delay = delay
        self.calls: list[int] = []
        self.completed: set[int] = set()
        self.in_flight = 0
        self.max_in_flight = 0

    async def __call__(self, key: int) -> str:
        self.calls.append(key)
        self.in_flight += 1
        self.max_in_flight = max(self.max_in_flight, self.in_flight)
        try:
            if key in self.failing:
                raise TransportError(f"boom {key}", status_code=500)
            await asyncio.sleep(self.delay)
            self.completed.add(key)
            return f"ticker-{key}"
        finally:
            self.in_flight -= 1


class TestFetchMany:
    @pytest.mark.asyncio
    async def test_all_succeed(self) -> None:
        fetcher = _FakeFetcher()
        result = await fetch_many([1, 2], fetcher)
        assert result == {1: "ticker-1", 2: "ticker-2"}

    @pytest.mark.asyncio
    async def test_values_match_single_fetch(self) -> None:
        fetcher = _FakeFetcher()
        result = await fetch_many([7, 3, 5], fetcher)
        for key, value in result.items():
            assert value == await fetcher(key)

    @pytest.mark.asyncio
    async def test_one_failure_fails_batch(self) -> None:
        fetcher = _FakeFetcher(failing={2})
        with pytest.raises(TransportError, match="boom 2"):
            await fetch_many([1, 2], fetcher)

    @pytest.mark.asyncio
    async def test_siblings_not_cancelled(self) -> None:
        fetcher = _FakeFetcher(failing={2}, delay=0.01)
        with pytest.raises(TransportError):
            await fetch_many([1, 2, 3], fetcher)
        await asyncio.sleep(0.05)
        assert fetcher.completed == {1, 3}

    @pytest.mark.asyncio
    async def test_runs_concurrently(self) -> None:
        fetcher = _FakeFetcher(delay=0.01)
        await fetch_many(range(10), fetcher)
        assert fetcher.max_in_flight == 10

    @pytest.mark.asyncio
    async def test_duplicate_keys_fetched_and_collapsed(self) -> None:
        fetcher = _FakeFetcher()
        result = await fetch_many([1, 1, 2], fetcher)
        assert sorted(fetcher.calls) == [1, 1, 2]
        assert result == {1: "ticker-1", 2: "ticker-2"}

    @pytest.mark.asyncio
    async def test_empty_keys(self) -> None:
        assert await fetch_many([], _FakeFetcher()) == {}


class TestFetchManySettled:
    @pytest.mark.asyncio
    async def test_partial_success_visible(self) -> None:
        fetcher = _FakeFetcher(failing={2})
        result = await fetch_many_settled([1, 2], fetcher)
        assert result[1] == "ticker-1"
        assert isinstance(result[2], TransportError)
        assert result[2].status_code == 500

    @pytest.mark.asyncio
    async def test_foreign_exceptions_propagate(self) -> None:
        async def broken(key: int) -> str:
            raise RuntimeError("not a client error")

        with pytest.raises(RuntimeError):
            await fetch_many_settled([1], broken)

    @pytest.mark.asyncio
    async def test_all_failed(self) -> None:
        fetcher = _FakeFetcher(failing={1, 2})
        result = await fetch_many_settled([1, 2], fetcher)
        assert all(isinstance(v, FTXDerivativesError) for v in result.values())
