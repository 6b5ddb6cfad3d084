"""Inline chat turn composition.

Builds everything one inline chat turn needs from the context layer: the
document window the model currently sees, and the replayed tool history with
any retry feedback.

Architecture:
    RenderRequest -> window selector    -> document context (str)
                  -> transcript assembler -> segments | None
"""

from __future__ import annotations

from dataclasses import dataclass

from inline_context.config import InlineContextConfig
from inline_context.documents import DocumentSnapshot, Position, Range
from inline_context.pipeline.assemblers import ToolRoundTranscriptAssembler
from inline_context.pipeline.classify import is_large_file
from inline_context.pipeline.feedback import RetryFeedbackBuilder
from inline_context.pipeline.types import CompletedToolCallRound, RenderRequest, Segment
from inline_context.pipeline.windows import CursorWindowSelector, SelectionWindowSelector
from inline_context.utils.logger import get_logger

logger = get_logger("turn")


@dataclass(frozen=True)
class InlineChatTurn:
    """Rendered context for one inline chat turn.

    Attributes:
        document_context: Fenced code block of the cursor or selection window
        transcript: Tool history segments, or None when there is no history
    """

    document_context: str
    transcript: list[Segment] | None


class InlineChatTurnBuilder:
    """Composes the window selectors and the transcript assembler.

    An empty selection is treated as a cursor; anything else is rendered as a
    whole-line selection.
    """

    def __init__(
        self,
        cursor_selector: CursorWindowSelector | None = None,
        selection_selector: SelectionWindowSelector | None = None,
        assembler: ToolRoundTranscriptAssembler | None = None,
        large_file_threshold: int | None = None,
    ) -> None:
        self._cursor_selector = cursor_selector or CursorWindowSelector()
        self._selection_selector = selection_selector or SelectionWindowSelector()
        self._assembler = assembler or ToolRoundTranscriptAssembler(RetryFeedbackBuilder())
        self._large_file_threshold = large_file_threshold

    @classmethod
    def from_config(cls, config: InlineContextConfig) -> InlineChatTurnBuilder:
        return cls(
            cursor_selector=CursorWindowSelector.from_config(config.window),
            large_file_threshold=config.large_file.line_threshold,
        )

    def classify(self, snapshot: DocumentSnapshot) -> bool:
        """Classify a snapshot as large using the configured threshold."""
        if self._large_file_threshold is None:
            return is_large_file(snapshot.line_count)
        return is_large_file(snapshot.line_count, self._large_file_threshold)

    def make_request(
        self,
        snapshot: DocumentSnapshot,
        selection: Range,
        *,
        previous_rounds: tuple[CompletedToolCallRound, ...] | list[CompletedToolCallRound] = (),
        has_failed_edits: bool = False,
        document_version_at_request: int | None = None,
        is_large_file: bool | None = None,
        filepath: str | None = None,
    ) -> RenderRequest:
        """Build a RenderRequest, filling defaults from the snapshot.

        ``is_large_file`` defaults to classifying the snapshot, the request
        version to the snapshot version and the path to the snapshot URI.
        """
        return RenderRequest(
            previous_rounds=tuple(previous_rounds),
            has_failed_edits=has_failed_edits,
            snapshot=snapshot,
            document_version_at_request=(
                snapshot.version
                if document_version_at_request is None
                else document_version_at_request
            ),
            is_large_file=self.classify(snapshot) if is_large_file is None else is_large_file,
            selection=selection,
            filepath=snapshot.uri if filepath is None else filepath,
        )

    def document_context(
        self,
        snapshot: DocumentSnapshot,
        selection: Range,
        cursor: Position | None = None,
    ) -> str:
        """Render the cursor or selection window."""
        if selection.is_empty:
            return self._cursor_selector.select(snapshot, cursor or selection.start)
        return self._selection_selector.select(snapshot, selection)

    def build(self, request: RenderRequest, cursor: Position | None = None) -> InlineChatTurn:
        """Build the context for one turn.

        Args:
            request: Render request for the turn
            cursor: Cursor position; defaults to the selection start

        Returns:
            InlineChatTurn with the document window and transcript
        """
        context = self.document_context(request.snapshot, request.selection, cursor)
        transcript = self._assembler.render(request)
        logger.debug(
            f"Built turn for {request.filepath}: "
            f"{0 if transcript is None else len(transcript)} transcript segments"
        )
        return InlineChatTurn(document_context=context, transcript=transcript)


__all__ = ["InlineChatTurn", "InlineChatTurnBuilder"]
