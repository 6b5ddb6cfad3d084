"""Fenced code block rendering."""

from __future__ import annotations

import re

_BACKTICK_RUN_RE = re.compile(r"`{3,}")


def code_fence_for(text: str) -> str:
    """Return a backtick fence longer than any backtick run in ``text``."""
    longest = max((len(m.group(0)) for m in _BACKTICK_RUN_RE.finditer(text)), default=2)
    return "`" * max(3, longest + 1)


def fenced_code_block(text: str, language_id: str = "") -> str:
    """Wrap ``text`` in a fenced code block tagged with ``language_id``."""
    fence = code_fence_for(text)
    return f"{fence}{language_id}\n{text}\n{fence}"


__all__ = ["code_fence_for", "fenced_code_block"]
