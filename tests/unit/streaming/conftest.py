"""
Shared fixtures for DropStream tests.

Provides scripted inner producers whose pulls, suspensions and closing can
be observed from the tests.
"""

from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator, Callable
from typing import Any

import pytest


class ScriptedStream:
    """Async iterator replaying a fixed list of items.

    Pulls listed in ``suspend_before`` yield to the event loop before the
    item is handed out, so the awaiting task really suspends.
    """

    def __init__(self, items: list[Any], suspend_before: tuple[int, ...] = ()):
        self._items = list(items)
        self._suspend_before = set(suspend_before)
        self.index = 0
        self.pulls = 0
        self.suspensions = 0
        self.closed = False

    def __aiter__(self) -> ScriptedStream:
        return self

    async def __anext__(self) -> Any:
        self.pulls += 1
        if self.index >= len(self._items):
            raise StopAsyncIteration
        if self.index in self._suspend_before:
            self.suspensions += 1
            await asyncio.sleep(0)
        item = self._items[self.index]
        self.index += 1
        return item

    async def aclose(self) -> None:
        self.closed = True


class GatedStream:
    """Async iterator whose every pull waits until the gate is opened."""

    def __init__(self, value: Any):
        self._value = value
        self.gate = asyncio.Event()
        self.waiting = asyncio.Event()

    def __aiter__(self) -> GatedStream:
        return self

    async def __anext__(self) -> Any:
        self.waiting.set()
        await self.gate.wait()
        self.gate.clear()
        return self._value


async def repeat(value: Any) -> AsyncIterator[Any]:
    """Yield ``value`` forever."""
    while True:
        yield value


@pytest.fixture
def scripted_stream() -> type[ScriptedStream]:
    """Factory for scripted inner producers."""
    return ScriptedStream


@pytest.fixture
def gated_stream() -> type[GatedStream]:
    """Factory for inner producers that suspend until released."""
    return GatedStream


@pytest.fixture
def repeating() -> Callable[[Any], AsyncIterator[Any]]:
    """Factory for endless async generators repeating one value."""
    return repeat
