# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Type definitions and constants."""

from .lifecycle import StreamState, TeardownReason

__all__ = [
    "StreamState",
    "TeardownReason",
]
