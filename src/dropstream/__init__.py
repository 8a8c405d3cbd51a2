# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""dropstream - Run a callback exactly once when an async stream goes away.

Libraries that hand out async streams often need to know when the consumer
has stopped listening: the other side dropped the connection, the consuming
task was cancelled, or the stream simply went out of scope. DropStream wraps
any async iterator, forwards every item untouched, and runs a single-use
callback exactly once when the wrapper's lifetime ends.

Quick Start:
    >>> import asyncio
    >>> from dropstream import on_drop
    >>>
    >>> async def ticks():
    ...     while True:
    ...         yield True
    >>>
    >>> disconnected = asyncio.Event()
    >>> stream = on_drop(ticks(), disconnected.set)
    >>> async with stream:
    ...     first = await anext(stream)
    >>> disconnected.is_set()
    True

Main Exports:
    - DropStream, on_drop: The wrapper and its builder
    - DropStreamConfig: Teardown behavior options
    - StreamState, TeardownReason: Lifecycle introspection
    - DropperProtocol, PullStreamProtocol: Collaborator interfaces

Version: 1.0.0
"""

__version__ = "1.0.0"

from .config import DEFAULT_CONFIG, DropStreamConfig
from .exceptions import (
    DropperInvariantError,
    DropStreamError,
    StreamClosedError,
)
from .protocols import (
    DropperProtocol,
    PullStreamProtocol,
)
from .streaming import (
    DropStream,
    on_drop,
)
from .types import (
    StreamState,
    TeardownReason,
)

__all__ = [
    "DEFAULT_CONFIG",
    "DropStream",
    "DropStreamConfig",
    # Exceptions
    "DropStreamError",
    "DropperInvariantError",
    # Protocols
    "DropperProtocol",
    "PullStreamProtocol",
    "StreamClosedError",
    # Lifecycle types
    "StreamState",
    "TeardownReason",
    "on_drop",
]
