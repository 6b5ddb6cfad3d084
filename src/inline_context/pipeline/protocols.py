"""Protocol definitions for inline context pipeline stages.

These protocols define the interfaces that pipeline components implement.
Using Protocol (structural subtyping) so hosts can plug in their own
renderers without inheriting from package classes.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from inline_context.documents import DocumentSnapshot, Position, Range
    from inline_context.pipeline.types import CompletedToolCallRound, RenderRequest, Segment


@runtime_checkable
class WindowSelector(Protocol):
    """Protocol for window selectors.

    Window selectors pick the lines of a document the model gets to see.

    Implementations:
        - CursorWindowSelector: lines around the cursor, with a cursor marker
        - SelectionWindowSelector: whole lines covered by the selection
    """

    def select(self, snapshot: DocumentSnapshot, anchor: Position | Range) -> str:
        """Render the selected window as a fenced code block.

        Args:
            snapshot: Document snapshot
            anchor: Cursor position or selection range

        Returns:
            Fenced code block
        """
        ...


@runtime_checkable
class CroppedContentRenderer(Protocol):
    """Protocol for rendering a windowed view of a large file.

    Implementations:
        - SnapshotCroppedRenderer: crops a snapshot around the selection
    """

    def render(self, filepath: str, selection: Range) -> str:
        """Render a cropped view of ``filepath`` around ``selection``.

        Args:
            filepath: Path of the file to crop
            selection: Selection the view should be centred on

        Returns:
            Rendered text
        """
        ...


@runtime_checkable
class TranscriptAssembler(Protocol):
    """Protocol for transcript assemblers.

    Implementations:
        - ToolRoundTranscriptAssembler: alternating call/result segments
    """

    def assemble(
        self,
        rounds: Sequence[CompletedToolCallRound],
        request: RenderRequest | None = None,
    ) -> list[Segment] | None:
        """Assemble rounds into segments.

        Returns:
            Segments in transcript order, or None when there is nothing to render
        """
        ...


@runtime_checkable
class SegmentFormatter(Protocol):
    """Protocol for segment formatters.

    Implementations:
        - MessageFormatter: langchain_core chat messages
        - JSONFormatter: JSON-serialisable dicts
    """

    def format(self, segments: Sequence[Segment]) -> list[Any]:
        """Format segments for the chat-message assembly layer."""
        ...


__all__ = [
    "CroppedContentRenderer",
    "SegmentFormatter",
    "TranscriptAssembler",
    "WindowSelector",
]
