"""Large-file classification.

Large files are shown through a cropped view instead of their full content.
"""

from __future__ import annotations

from inline_context.config import DEFAULT_LARGE_FILE_LINE_THRESHOLD

LARGE_FILE_LINE_THRESHOLD = DEFAULT_LARGE_FILE_LINE_THRESHOLD


def is_large_file(line_count: int, threshold: int = LARGE_FILE_LINE_THRESHOLD) -> bool:
    """Return True when a file with ``line_count`` lines is considered large."""
    return line_count > threshold


__all__ = ["LARGE_FILE_LINE_THRESHOLD", "is_large_file"]
