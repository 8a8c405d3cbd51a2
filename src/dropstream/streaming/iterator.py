# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Async iterator wrapper that runs a callback when the stream's lifetime ends.

This module provides the DropStream class. It forwards every pull to the
wrapped async iterator untouched and guarantees that a single-use callback
(the "dropper") runs exactly once when the wrapper goes away, however that
happens:

1. Explicit close() or aclose()
2. Exit of an ``async with`` block, including exit by task cancellation
3. Garbage collection once the last reference is dropped
4. Interpreter shutdown while the stream is still alive

Key Design Decisions:
- The dropper lives in a one-element slot shared by the instance and a
  weakref.finalize registration. Every path takes it out with list.pop()
  (extract-and-clear) before invoking it, so the callback can only be taken
  once.
- Explicit teardown also detaches the registration. A dropper already run
  by the interpreter-exit hook is noticed the next time the stream is used,
  and the stream moves to TORN_DOWN without touching the inner iterator.
- Exhaustion of the inner iterator is not teardown. Only the end of the
  wrapper's own lifetime runs the dropper.
- The dropper runs before the inner iterator is released or closed.
"""

from __future__ import annotations

import logging
import weakref
from collections.abc import AsyncGenerator, AsyncIterator, Callable
from types import TracebackType
from typing import Generic, TypeVar, cast

from typing_extensions import Self

from ..config import DEFAULT_CONFIG, DropStreamConfig
from ..exceptions import DropperInvariantError, StreamClosedError
from ..types.lifecycle import StreamState, TeardownReason

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _run_dropper(
    slot: list[Callable[[], object]],
    label: str,
    reason: TeardownReason = TeardownReason.COLLECTED,
) -> None:
    """
    Take the dropper out of its slot and invoke it.

    Whichever path pops the slot first runs the dropper; later callers find
    it empty and return. Kept at module level so the finalizer that holds
    the slot never references the stream it belongs to.
    """
    try:
        dropper = slot.pop()
    except IndexError:
        return
    logger.debug(f"Running dropper for {label} (reason: {reason.value})")
    dropper()


async def _close_inner(inner: AsyncIterator[object], label: str) -> None:
    """Close the inner iterator if it supports aclose()."""
    if not hasattr(inner, "aclose"):
        return
    try:
        await cast(AsyncGenerator[object, None], inner).aclose()
    except Exception as e:
        # Log but don't propagate - we're in cleanup
        logger.debug(
            f"Error closing inner iterator for {label}: {type(e).__name__}: {e}"
        )


class DropStream(AsyncIterator[T], Generic[T]):
    """
    Async iterator wrapper that runs a callback exactly once on teardown.

    The wrapper is transparent to consumers: it yields the same items as the
    underlying iterator, in the same order, and lets StopAsyncIteration and
    any exception from the inner iterator through unchanged. Suspension is
    left entirely to the inner iterator.

    Usage:
        closed = asyncio.Event()
        stream = DropStream(receive_messages(), closed.set)

        async with stream:
            async for message in stream:
                handle(message)
        # closed is set, whether the loop finished, raised or was cancelled

    Streams that are never scoped still run their dropper once the last
    reference goes away. The dropper must not capture the stream itself,
    or the stream can never be collected.
    """

    __slots__ = (
        "__weakref__",
        "_config",
        "_finalizer",
        "_inner",
        "_name",
        "_reason",
        "_slot",
        "_state",
    )

    def __init__(
        self,
        inner: AsyncIterator[T],
        dropper: Callable[[], object],
        *,
        config: DropStreamConfig | None = None,
        name: str | None = None,
    ) -> None:
        """
        Initialize the drop stream wrapper.

        Args:
            inner: The async iterator to wrap. The stream takes ownership of it.
            dropper: Zero-argument callback to run once when the stream ends.
            config: Teardown behavior, DEFAULT_CONFIG when omitted
            name: Optional label used in log records and repr
        """
        self._inner: AsyncIterator[T] | None = inner
        self._config = config if config is not None else DEFAULT_CONFIG
        self._name = name
        self._state = StreamState.ACTIVE
        self._reason: TeardownReason | None = None
        self._slot: list[Callable[[], object]] = [dropper]
        self._finalizer = weakref.finalize(self, _run_dropper, self._slot, self._label)

        logger.debug(f"Created drop stream {self._label}")

    @property
    def _label(self) -> str:
        return self._name or f"stream@{id(self):#x}"

    def _sync_state(self) -> StreamState:
        """
        Return the current state, catching up with the interpreter-exit hook.

        At shutdown the finalizer runs the dropper for streams that are still
        alive, without the stream seeing it. An ACTIVE stream whose slot is
        empty and whose registration is dead was torn down that way.
        """
        if (
            self._state is StreamState.ACTIVE
            and not self._slot
            and not self._finalizer.alive
        ):
            self._state = StreamState.TORN_DOWN
            self._reason = TeardownReason.COLLECTED
            self._inner = None
        return self._state

    def __aiter__(self) -> DropStream[T]:
        """Return self as the async iterator."""
        return self

    async def __anext__(self) -> T:
        """
        Pull the next item from the inner iterator.

        Returns:
            The next item from the inner iterator

        Raises:
            StopAsyncIteration: When the inner iterator is exhausted, or when
                the stream has already been torn down
            Exception: Anything the inner iterator raises, unchanged
        """
        if self._sync_state() is StreamState.TORN_DOWN:
            raise StopAsyncIteration
        return await cast(AsyncIterator[T], self._inner).__anext__()

    def _teardown(self, reason: TeardownReason) -> None:
        """
        Move an ACTIVE stream to TORN_DOWN and run the dropper.

        The registration is detached before the slot is popped, so no other
        path (including garbage collection) can reach the dropper again. The
        reference to the inner iterator is dropped only after the callback
        returns; callers that still need to close the inner iterator keep
        their own reference.
        """
        self._state = StreamState.TORN_DOWN
        self._reason = reason

        try:
            if self._finalizer.detach() is None or not self._slot:
                raise DropperInvariantError(self._name)

            try:
                _run_dropper(self._slot, self._label, reason)
            except Exception as e:
                logger.warning(
                    f"Dropper for {self._label} failed: {type(e).__name__}: {e}"
                )
                raise
        finally:
            self._inner = None

    def close(self) -> None:
        """
        Tear the stream down synchronously.

        Runs the dropper and releases the inner iterator without awaiting its
        aclose(). Use aclose() from async code to close the inner iterator
        as well. Calling close() on a torn-down stream does nothing.
        """
        if self._sync_state() is StreamState.TORN_DOWN:
            return
        self._teardown(TeardownReason.CLOSE)

    async def _aclose(self, reason: TeardownReason) -> None:
        if self._sync_state() is StreamState.TORN_DOWN:
            return

        inner = cast(AsyncIterator[object], self._inner)
        try:
            self._teardown(reason)
        finally:
            if self._config.close_inner:
                await _close_inner(inner, self._label)

    async def aclose(self) -> None:
        """
        Tear the stream down and close the inner iterator.

        The dropper runs first; the inner iterator's aclose() is then awaited
        when config.close_inner is set, even if the dropper raised. This
        method is idempotent.
        """
        await self._aclose(TeardownReason.ACLOSE)

    async def __aenter__(self) -> Self:
        if self._sync_state() is StreamState.TORN_DOWN:
            raise StreamClosedError(self._name)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self._aclose(TeardownReason.CONTEXT_EXIT)

    def on_drop(
        self,
        dropper: Callable[[], object],
        *,
        config: DropStreamConfig | None = None,
        name: str | None = None,
    ) -> DropStream[T]:
        """
        Wrap this stream in another DropStream with its own dropper.

        The outer dropper runs first; this stream's dropper follows when the
        outer wrapper releases or closes it.
        """
        return DropStream(self, dropper, config=config, name=name)

    @property
    def state(self) -> StreamState:
        """Current lifecycle state."""
        return self._sync_state()

    @property
    def torn_down(self) -> bool:
        """Whether the dropper has been consumed."""
        return self._sync_state() is StreamState.TORN_DOWN

    @property
    def teardown_reason(self) -> TeardownReason | None:
        """
        What ended the stream, or None while it is active.

        COLLECTED only shows up for a stream whose dropper was run by the
        interpreter-exit hook while the stream was still reachable.
        """
        self._sync_state()
        return self._reason

    @property
    def name(self) -> str | None:
        return self._name

    @property
    def config(self) -> DropStreamConfig:
        return self._config

    def __repr__(self) -> str:
        state = self._sync_state()
        return f"DropStream(name={self._name!r}, state={state.value})"


__all__ = ["DropStream"]
