# Copyright 2026 Seth Bang
# SPDX-License-Identifier: Apache-2.0
"""Exception classes for the dropstream library.

Catchable errors inherit from DropStreamError. DropperInvariantError is the
one exception outside that hierarchy: it signals a broken internal invariant
and derives from BaseException so generic ``except Exception`` handlers in
consumer code do not swallow it.
"""


class DropStreamError(Exception):
    """Base exception for all recoverable dropstream errors.

    Example:
        try:
            async with stream:
                ...
        except DropStreamError as e:
            logger.error(f"Drop stream error: {e}")
    """

    pass


class StreamClosedError(DropStreamError):
    """Raised when entering a stream context after the stream was torn down.

    A torn-down stream has already run its dropper and released its inner
    producer, so it cannot be scoped again.

    Attributes:
        name: The label of the stream, if it was given one.
    """

    def __init__(self, name: str | None = None):
        label = f"Drop stream '{name}'" if name else "Drop stream"
        super().__init__(f"{label} is already torn down")
        self.name = name


class DropperInvariantError(BaseException):
    """Raised when teardown finds the dropper slot already empty.

    Teardown of an active stream always finds its dropper present. Reaching
    this error means the stream's own bookkeeping is corrupt; it is not a
    condition callers are expected to recover from.
    """

    def __init__(self, name: str | None = None):
        label = f"'{name}'" if name else "stream"
        super().__init__(f"Dropper for {label} was consumed before teardown")
        self.name = name
