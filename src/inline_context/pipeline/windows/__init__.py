"""Window selectors for the inline context pipeline.

Window selectors decide which lines of the document the model sees.

Available selectors:
    - CursorWindowSelector: lines around the cursor with a cursor marker
    - SelectionWindowSelector: whole lines covered by the selection
    - SnapshotCroppedRenderer: cropped view of a large file
"""

from inline_context.pipeline.windows.cropped import SnapshotCroppedRenderer
from inline_context.pipeline.windows.cursor import CursorWindowSelector
from inline_context.pipeline.windows.fence import code_fence_for, fenced_code_block
from inline_context.pipeline.windows.selection import SelectionWindowSelector

__all__ = [
    "CursorWindowSelector",
    "SelectionWindowSelector",
    "SnapshotCroppedRenderer",
    "code_fence_for",
    "fenced_code_block",
]
