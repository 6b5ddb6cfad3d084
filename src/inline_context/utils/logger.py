"""Component logging for inline context assembly.

Every module obtains a :class:`ComponentLogger` through :func:`get_logger`.
The component logger wraps a standard :mod:`logging` logger named
``inline_context.<component>`` and adds the semantic levels used across the
framework (``success``, ``key_info``, ``timing``). Console output goes through
Rich's :class:`~rich.logging.RichHandler`, installed once by
:func:`configure_logging`.

Usage::

    from inline_context.utils.logger import get_logger

    logger = get_logger("transcript")
    logger.debug("Assembling 3 rounds")
    logger.success("Transcript ready")
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER_NAME = "inline_context"

DEFAULT_COLORS = {
    "windows": "cyan",
    "feedback": "yellow",
    "transcript": "magenta",
    "turn": "bright_magenta",
    "formatters": "blue",
    "skills": "green",
    "config": "white",
}

_configured = False


def configure_logging(level: int | str = logging.INFO, console: Console | None = None) -> None:
    """Install the Rich console handler on the package root logger.

    Calling this more than once only updates the level.

    Args:
        level: Logging level for the package root logger
        console: Optional Rich console (defaults to stderr)
    """
    global _configured

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)
    if _configured:
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=True,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    root.propagate = False
    _configured = True


class ComponentLogger:
    """Logger bound to a single component.

    :param component_name: Short component name (e.g. ``"windows"``)
    :param color: Rich color used to tag the component in console output
    """

    def __init__(self, component_name: str, color: str | None = None):
        self.component_name = component_name
        self.color = color or DEFAULT_COLORS.get(component_name, "white")
        self._logger = logging.getLogger(f"{ROOT_LOGGER_NAME}.{component_name}")

    @property
    def base_logger(self) -> logging.Logger:
        """The wrapped standard library logger."""
        return self._logger

    def _prefix(self, message: str) -> str:
        return f"[{self.color}]{self.component_name}[/{self.color}]: {message}"

    def _log(self, level: int, message: str, semantic_level: str, **kwargs) -> None:
        extra = dict(kwargs.pop("extra", None) or {})
        extra.setdefault("semantic_level", semantic_level)
        extra.setdefault("component", self.component_name)
        self._logger.log(level, self._prefix(message), extra=extra, **kwargs)

    def debug(self, message: str, **kwargs) -> None:
        self._log(logging.DEBUG, message, "debug", **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._log(logging.INFO, message, "info", **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._log(logging.WARNING, message, "warning", **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._log(logging.ERROR, message, "error", **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        kwargs.setdefault("exc_info", True)
        self._log(logging.ERROR, message, "error", **kwargs)

    def success(self, message: str, **kwargs) -> None:
        """Log a completed operation."""
        self._log(logging.INFO, message, "success", **kwargs)

    def key_info(self, message: str, **kwargs) -> None:
        """Log an important operational detail."""
        self._log(logging.INFO, message, "key_info", **kwargs)

    def timing(self, message: str, **kwargs) -> None:
        """Log timing information."""
        self._log(logging.INFO, message, "timing", **kwargs)


def get_logger(name: str, color: str | None = None) -> ComponentLogger:
    """Get a component logger.

    Args:
        name: Component name
        color: Optional Rich color override

    Returns:
        ComponentLogger bound to ``inline_context.<name>``
    """
    return ComponentLogger(name, color=color)


__all__ = ["ComponentLogger", "configure_logging", "get_logger"]
