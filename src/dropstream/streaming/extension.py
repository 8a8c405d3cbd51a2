# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Builder function for attaching a dropper to any async stream."""

from __future__ import annotations

from collections.abc import AsyncIterable, AsyncIterator, Callable
from typing import TypeVar

from ..config import DropStreamConfig
from ..protocols import DropperProtocol, PullStreamProtocol
from .iterator import DropStream

T = TypeVar("T")


def on_drop(
    stream: AsyncIterator[T] | AsyncIterable[T],
    dropper: Callable[[], object],
    *,
    config: DropStreamConfig | None = None,
    name: str | None = None,
) -> DropStream[T]:
    """
    Wrap an async stream so that ``dropper`` runs once when the wrapper ends.

    Equivalent to constructing DropStream directly. An async iterable that
    is not itself an iterator (such as an object whose ``__aiter__`` returns
    a fresh generator) is converted with ``__aiter__()`` and the resulting
    iterator is owned by the wrapper.

    Args:
        stream: Async iterator or async iterable to wrap
        dropper: Zero-argument callback to run at teardown
        config: Teardown behavior, DEFAULT_CONFIG when omitted
        name: Optional label used in log records and repr

    Returns:
        A new DropStream over ``stream``

    Raises:
        TypeError: If ``stream`` is not async-iterable or ``dropper`` is not
            callable

    Example:
        >>> released = []
        >>> stream = on_drop(ticker(), lambda: released.append(True))
    """
    if isinstance(stream, PullStreamProtocol):
        inner: AsyncIterator[T] = stream
    elif isinstance(stream, AsyncIterable):
        inner = stream.__aiter__()
    else:
        raise TypeError(
            f"on_drop() expects an async iterator or iterable, "
            f"got {type(stream).__name__}"
        )

    if not isinstance(dropper, DropperProtocol):
        raise TypeError(
            f"on_drop() expects a callable dropper, got {type(dropper).__name__}"
        )

    return DropStream(inner, dropper, config=config, name=name)


__all__ = ["on_drop"]
