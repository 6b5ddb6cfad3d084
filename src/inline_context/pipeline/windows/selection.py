"""Selection window selector.

Renders the selected lines in full. Selections are widened to whole lines, so
a partial-line selection never shows a partial line. A selection ending at
column 0 of line N still includes line N.
"""

from __future__ import annotations

from inline_context.documents import DocumentSnapshot, Range, clamp_line
from inline_context.pipeline.windows.fence import fenced_code_block
from inline_context.utils.logger import get_logger

logger = get_logger("windows")


class SelectionWindowSelector:
    """Selector for the whole lines covered by a selection."""

    def select_lines(self, snapshot: DocumentSnapshot, selection: Range) -> tuple[int, int]:
        """Return the inclusive ``(start, end)`` lines of the widened selection."""
        start = clamp_line(snapshot, selection.start.line)
        end = clamp_line(snapshot, selection.end.line)
        return start, max(start, end)

    def select(self, snapshot: DocumentSnapshot, selection: Range) -> str:
        """Render the selected lines as a fenced code block.

        Args:
            snapshot: Document snapshot
            selection: Selection range, possibly covering partial lines

        Returns:
            Fenced code block tagged with the document language
        """
        start, end = self.select_lines(snapshot, selection)
        text = "\n".join(snapshot.line_text(index) for index in range(start, end + 1))
        logger.debug(f"Selection window {start}-{end} of {snapshot.line_count}")
        return fenced_code_block(text, snapshot.language_id)

    render = select


__all__ = ["SelectionWindowSelector"]
