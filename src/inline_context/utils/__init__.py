"""Shared utilities.

Modules:
    logger: Component logging with Rich console output
"""

from . import logger

__all__ = ["logger"]
