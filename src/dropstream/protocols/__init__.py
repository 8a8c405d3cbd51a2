# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Protocol definitions for drop stream collaborators.

Available protocols:
- DropperProtocol: Interface for the single-use teardown callback
- PullStreamProtocol: Interface for the wrapped pull-based async stream
"""

from .dropper import DropperProtocol
from .stream import PullStreamProtocol

__all__ = [
    "DropperProtocol",
    "PullStreamProtocol",
]
