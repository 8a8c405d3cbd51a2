# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for pull-based async streams."""

from collections.abc import AsyncIterator
from typing import Protocol, TypeVar, runtime_checkable

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class PullStreamProtocol(Protocol[T_co]):
    """
    Protocol for the producers a drop stream can wrap.

    Each ``__anext__`` call either returns an item, raises
    StopAsyncIteration once the sequence is exhausted, or suspends the
    awaiting task until the producer has something to hand out. Async
    generators and DropStream itself both satisfy it.
    """

    def __aiter__(self) -> AsyncIterator[T_co]:
        """Return the iterator to pull from."""
        ...

    async def __anext__(self) -> T_co:
        """Pull the next item, suspending if none is ready yet."""
        ...
