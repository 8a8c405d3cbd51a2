# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""
Configuration for drop streams.

This module provides the DropStreamConfig dataclass controlling how a
DropStream behaves at teardown.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class DropStreamConfig:
    """
    Teardown behavior of a DropStream.

    The defaults suit almost every caller; a stream built without a config
    uses DEFAULT_CONFIG.
    """

    close_inner: bool = True
    """Await the inner producer's aclose() after the dropper runs in aclose()."""

    def __post_init__(self) -> None:
        if not isinstance(self.close_inner, bool):
            raise ValueError("close_inner must be a bool")


DEFAULT_CONFIG = DropStreamConfig()

__all__ = ["DEFAULT_CONFIG", "DropStreamConfig"]
