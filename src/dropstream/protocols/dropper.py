# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Protocol for teardown callbacks."""

from typing import Protocol, runtime_checkable


@runtime_checkable
class DropperProtocol(Protocol):
    """
    Protocol for the single-use callback run when a drop stream ends.

    Any zero-argument callable qualifies: a function, a lambda, a bound
    method such as ``event.set`` or ``semaphore.release``. The callback is
    invoked from inside the stream's teardown, so it must not try to reach
    back into the stream or anything that owns it.
    """

    def __call__(self) -> object:
        """Run the teardown side effect. The return value is ignored."""
        ...
