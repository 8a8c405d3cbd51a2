"""Tests for the names exported from the top-level dropstream package."""

import pytest


class TestTopLevelExports:
    """Test the public API of the dropstream module."""

    def test_all_names_resolve(self):
        """Every name in __all__ is importable from the package."""
        import dropstream

        for name in dropstream.__all__:
            assert getattr(dropstream, name) is not None

    def test_exports_are_the_implementations(self):
        """Top-level names are the same objects as the submodule ones."""
        import dropstream
        from dropstream.streaming.extension import on_drop
        from dropstream.streaming.iterator import DropStream

        assert dropstream.DropStream is DropStream
        assert dropstream.on_drop is on_drop

    def test_version(self):
        """The package exposes a version string."""
        import dropstream

        assert dropstream.__version__ == "1.0.0"

    def test_unknown_attribute_raises_attribute_error(self):
        """Unknown attributes raise AttributeError."""
        import dropstream

        with pytest.raises(AttributeError, match=r"has no attribute"):
            _ = dropstream.NonExistentAttribute
