# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Lifecycle states and teardown triggers of a drop stream."""

from enum import Enum


class StreamState(Enum):
    """
    State of a DropStream.

    - ACTIVE: the dropper is present and the inner producer may be polled.
    - TORN_DOWN: terminal. The dropper has been consumed and the inner
      producer is no longer reachable through the stream.
    """

    ACTIVE = "active"
    TORN_DOWN = "torn_down"


class TeardownReason(Enum):
    """What ended a DropStream's lifetime."""

    CLOSE = "close"
    """Explicit synchronous close()."""

    ACLOSE = "aclose"
    """Explicit asynchronous aclose()."""

    CONTEXT_EXIT = "context_exit"
    """Exit of an ``async with`` block, including exit by cancellation."""

    COLLECTED = "collected"
    """The stream was garbage collected or the interpreter shut down."""
