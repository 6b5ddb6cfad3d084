"""Exception Hierarchy for inline context assembly.

Rendering itself has no recoverable error surface: positions are clamped and
"nothing to render" is reported as ``None``. The exceptions below cover the
inputs that can genuinely be wrong - configuration files and malformed tool
round data handed over by the caller.

Error Categories:
    - CONFIGURATION: Invalid or unreadable configuration
    - INPUT: Malformed request data (e.g. a broken tool-call round)
    - RENDERING: Unexpected failure while producing output
"""

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Categorization of errors for reporting."""

    CONFIGURATION = "configuration"  # Invalid configuration
    INPUT = "input"  # Malformed caller-supplied data
    RENDERING = "rendering"  # Failure while rendering


class InlineContextError(Exception):
    """Base exception for all inline context errors.

    :param message: Human-readable error description
    :param category: Error category
    :param technical_details: Additional technical information for debugging
    """

    def __init__(
        self,
        message: str,
        category: ErrorCategory = ErrorCategory.RENDERING,
        technical_details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.technical_details = technical_details or {}


class ConfigurationError(InlineContextError):
    """Invalid configuration.

    Raised when the configuration file cannot be read or its values fail
    validation.

    :param message: Error description
    :param invalid_keys: List of invalid configuration keys
    """

    def __init__(
        self,
        message: str,
        invalid_keys: list[str] | None = None,
        **kwargs,
    ):
        super().__init__(message, category=ErrorCategory.CONFIGURATION, **kwargs)
        self.invalid_keys = invalid_keys or []


class InvalidToolCallError(InlineContextError):
    """Malformed tool-call round data.

    The offending entry is recorded in ``technical_details``.

    :param message: Error description
    """

    def __init__(self, message: str, **kwargs):
        super().__init__(message, category=ErrorCategory.INPUT, **kwargs)


__all__ = [
    "ConfigurationError",
    "ErrorCategory",
    "InlineContextError",
    "InvalidToolCallError",
]
