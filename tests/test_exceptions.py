"""Unit Tests for the inline context exception hierarchy."""

from inline_context.exceptions import (
    ConfigurationError,
    ErrorCategory,
    InlineContextError,
    InvalidToolCallError,
)


class TestErrorCategory:
    """Test ErrorCategory enum."""

    def test_error_categories_exist(self):
        """All expected error categories should exist."""
        assert ErrorCategory.CONFIGURATION.value == "configuration"
        assert ErrorCategory.INPUT.value == "input"
        assert ErrorCategory.RENDERING.value == "rendering"


class TestInlineContextError:
    """Test base exception class."""

    def test_base_exception_creation(self):
        """Base exception should be creatable with message."""
        exc = InlineContextError("Test error message")
        assert str(exc) == "Test error message"
        assert exc.message == "Test error message"
        assert exc.category == ErrorCategory.RENDERING
        assert exc.technical_details == {}

    def test_technical_details(self):
        exc = InlineContextError("Test", technical_details={"path": "/x"})
        assert exc.technical_details == {"path": "/x"}


class TestSubclasses:
    """Test specialised exceptions."""

    def test_configuration_error(self):
        exc = ConfigurationError("bad", invalid_keys=["window.radius"])
        assert isinstance(exc, InlineContextError)
        assert exc.category == ErrorCategory.CONFIGURATION
        assert exc.invalid_keys == ["window.radius"]

    def test_invalid_tool_call_error(self):
        exc = InvalidToolCallError("broken round", technical_details={"entry": "(1,)"})
        assert exc.category == ErrorCategory.INPUT
        assert exc.technical_details == {"entry": "(1,)"}
