"""Unit tests for the exceptions module.

Tests all exception classes defined in dropstream.exceptions.
"""

import pytest

from dropstream.exceptions import (
    DropperInvariantError,
    DropStreamError,
    StreamClosedError,
)


class TestDropStreamError:
    """Tests for the base DropStreamError exception."""

    def test_can_be_caught_as_exception(self):
        """DropStreamError can be caught as a standard Exception."""
        with pytest.raises(Exception):  # noqa: B017
            raise DropStreamError("test error")

    def test_message_preserved(self):
        """DropStreamError preserves its message."""
        error = DropStreamError("test message")
        assert str(error) == "test message"

    def test_can_be_raised_without_message(self):
        """DropStreamError can be raised without a message."""
        error = DropStreamError()
        assert str(error) == ""


class TestStreamClosedError:
    """Tests for StreamClosedError."""

    def test_can_be_caught_as_drop_stream_error(self):
        """StreamClosedError can be caught as DropStreamError."""
        with pytest.raises(DropStreamError):
            raise StreamClosedError("feed")

    def test_stores_name(self):
        """StreamClosedError stores the stream name."""
        error = StreamClosedError("feed")
        assert error.name == "feed"
        assert str(error) == "Drop stream 'feed' is already torn down"

    def test_message_without_name(self):
        """StreamClosedError has a generic message when unnamed."""
        error = StreamClosedError()
        assert error.name is None
        assert str(error) == "Drop stream is already torn down"


class TestDropperInvariantError:
    """Tests for DropperInvariantError."""

    def test_is_not_an_exception(self):
        """DropperInvariantError sits outside the Exception hierarchy."""
        assert issubclass(DropperInvariantError, BaseException)
        assert not issubclass(DropperInvariantError, Exception)
        assert not issubclass(DropperInvariantError, DropStreamError)

    def test_stores_name(self):
        """DropperInvariantError stores the stream name."""
        error = DropperInvariantError("feed")
        assert error.name == "feed"
        assert str(error) == "Dropper for 'feed' was consumed before teardown"

    def test_message_without_name(self):
        """DropperInvariantError has a generic message when unnamed."""
        error = DropperInvariantError()
        assert str(error) == "Dropper for stream was consumed before teardown"
