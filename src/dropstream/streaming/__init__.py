# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Drop stream wrappers.

This module provides an async iterator wrapper that runs a single-use
callback exactly once when the wrapper's lifetime ends: on explicit close,
on leaving an ``async with`` block (including by cancellation), or on
garbage collection.

Classes:
    DropStream: Pass-through async iterator wrapper with a teardown callback.

Functions:
    on_drop: Builder that wraps any async iterator or iterable in a DropStream.
"""

from .extension import on_drop
from .iterator import DropStream

__all__ = [
    "DropStream",
    "on_drop",
]
