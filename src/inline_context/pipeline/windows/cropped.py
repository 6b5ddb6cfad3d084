"""Cropped content renderer for large files.

Large files are not echoed in full. The cropped renderer shows at most
``max_lines`` lines centred on the selection, with ``...`` marking the lines
left out above and below.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

from inline_context.config import DEFAULT_CROPPED_MAX_LINES, LargeFileConfig
from inline_context.documents import DocumentSnapshot, Range, clamp_line
from inline_context.pipeline.windows.fence import fenced_code_block
from inline_context.utils.logger import get_logger

logger = get_logger("windows")

ELISION = "..."

SnapshotLookup = Callable[[str], DocumentSnapshot]


class SnapshotCroppedRenderer:
    """Cropped renderer that reads snapshots through a lookup.

    Args:
        lookup: Mapping or callable resolving a file path to its current
            snapshot. A missing path raises ``KeyError`` to the caller.
        max_lines: Maximum number of file lines shown
    """

    def __init__(
        self,
        lookup: Mapping[str, DocumentSnapshot] | SnapshotLookup,
        max_lines: int = DEFAULT_CROPPED_MAX_LINES,
    ) -> None:
        if isinstance(lookup, Mapping):
            self._lookup: SnapshotLookup = lookup.__getitem__
        else:
            self._lookup = lookup
        self._max_lines = max(1, max_lines)

    @classmethod
    def from_config(
        cls,
        lookup: Mapping[str, DocumentSnapshot] | SnapshotLookup,
        config: LargeFileConfig,
    ) -> SnapshotCroppedRenderer:
        return cls(lookup, max_lines=config.cropped_max_lines)

    def crop_lines(self, snapshot: DocumentSnapshot, selection: Range) -> tuple[int, int]:
        """Return the inclusive ``(start, end)`` lines to show."""
        last = snapshot.line_count - 1
        sel_start = clamp_line(snapshot, selection.start.line)
        sel_end = clamp_line(snapshot, selection.end.line)

        if last + 1 <= self._max_lines:
            return 0, last

        # Selections taller than the budget keep their first lines
        if sel_end - sel_start + 1 >= self._max_lines:
            return sel_start, sel_start + self._max_lines - 1

        spare = self._max_lines - (sel_end - sel_start + 1)
        start = max(sel_start - spare // 2, 0)
        end = start + self._max_lines - 1
        if end > last:
            end = last
            start = end - self._max_lines + 1
        return start, end

    def render(self, filepath: str, selection: Range) -> str:
        """Render a cropped view of ``filepath`` around ``selection``."""
        snapshot = self._lookup(filepath)
        start, end = self.crop_lines(snapshot, selection)

        lines = [snapshot.line_text(index) for index in range(start, end + 1)]
        if start > 0:
            lines.insert(0, ELISION)
        if end < snapshot.line_count - 1:
            lines.append(ELISION)

        logger.debug(f"Cropped {filepath} to lines {start}-{end} of {snapshot.line_count}")
        return fenced_code_block("\n".join(lines), snapshot.language_id)


__all__ = ["ELISION", "SnapshotCroppedRenderer"]
