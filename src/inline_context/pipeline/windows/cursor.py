"""Cursor window selector.

Shows the lines around the cursor with a literal marker at the cursor offset::

    ```python
    def handler(event):
        payload = event.$CURSOR$body
        return payload
    ```

The window spans ``radius`` lines on each side of the cursor line. When the
line just outside a window edge is blank, the edge moves outward across the
whole blank run and stops on the first non-blank line (or the file edge), so
the window never ends in a run of whitespace.
"""

from __future__ import annotations

from inline_context.config import DEFAULT_CURSOR_MARKER, DEFAULT_WINDOW_RADIUS, WindowConfig
from inline_context.documents import (
    DocumentSnapshot,
    Position,
    clamp_line,
    clamp_position,
    is_blank,
    utf16_to_index,
)
from inline_context.pipeline.windows.fence import fenced_code_block
from inline_context.utils.logger import get_logger

logger = get_logger("windows")


def _extend_over_blank_lines(
    snapshot: DocumentSnapshot, edge: int, step: int, last: int
) -> int:
    """Move ``edge`` by ``step`` across a run of blank lines beyond it.

    Returns the edge unchanged when the line beyond it is not blank.
    """
    crossed = False
    while 0 <= edge + step <= last and is_blank(snapshot.line_text(edge + step)):
        edge += step
        crossed = True
    if crossed and 0 <= edge + step <= last:
        edge += step
    return edge


class CursorWindowSelector:
    """Selector for the lines around the cursor.

    Args:
        radius: Lines shown above and below the cursor line
        marker: Token inserted at the cursor offset
    """

    def __init__(
        self,
        radius: int = DEFAULT_WINDOW_RADIUS,
        marker: str = DEFAULT_CURSOR_MARKER,
    ) -> None:
        self._radius = radius
        self._marker = marker

    @classmethod
    def from_config(cls, config: WindowConfig) -> CursorWindowSelector:
        return cls(radius=config.radius, marker=config.cursor_marker)

    @property
    def marker(self) -> str:
        return self._marker

    def select_lines(self, snapshot: DocumentSnapshot, position: Position) -> tuple[int, int]:
        """Compute the window bounds for a cursor position.

        Args:
            snapshot: Document snapshot
            position: Cursor position, clamped into the document

        Returns:
            Inclusive ``(start, end)`` line indices
        """
        last = max(snapshot.line_count - 1, 0)
        line = clamp_line(snapshot, position.line)

        start = max(line - self._radius, 0)
        end = min(line + self._radius, last)

        start = _extend_over_blank_lines(snapshot, start, -1, last)
        end = _extend_over_blank_lines(snapshot, end, 1, last)
        return start, end

    def select(self, snapshot: DocumentSnapshot, position: Position) -> str:
        """Render the cursor window as a fenced code block.

        Args:
            snapshot: Document snapshot
            position: Cursor position

        Returns:
            Fenced code block tagged with the document language
        """
        cursor = clamp_position(snapshot, position)
        start, end = self.select_lines(snapshot, cursor)

        lines = []
        for index in range(start, end + 1):
            text = snapshot.line_text(index)
            if index == cursor.line:
                split = utf16_to_index(text, cursor.character)
                text = f"{text[:split]}{self._marker}{text[split:]}"
            lines.append(text)

        logger.debug(
            f"Cursor window {start}-{end} around line {cursor.line} of {snapshot.line_count}"
        )
        return fenced_code_block("\n".join(lines), snapshot.language_id)

    render = select


__all__ = ["CursorWindowSelector"]
