"""Inline context pipeline.

This package renders the context of an inline chat turn: the window of the
document around the cursor or selection, and the replay of previous tool-call
rounds with retry feedback.

Architecture:
    Snapshot -> WindowSelector -> fenced code block
    Rounds   -> TranscriptAssembler (+ RetryFeedbackBuilder) -> Segments -> Formatter

Example:
    from inline_context.pipeline import (
        InlineChatTurnBuilder,
        MessageFormatter,
        SnapshotCroppedRenderer,
    )

    builder = InlineChatTurnBuilder()
    request = builder.make_request(snapshot, selection, previous_rounds=rounds)
    turn = builder.build(request)
    messages = MessageFormatter(SnapshotCroppedRenderer({path: snapshot})).format(
        turn.transcript or []
    )
"""

from inline_context.pipeline.assemblers import ToolRoundTranscriptAssembler
from inline_context.pipeline.classify import LARGE_FILE_LINE_THRESHOLD, is_large_file
from inline_context.pipeline.feedback import RetryFeedbackBuilder
from inline_context.pipeline.formatters import JSONFormatter, MessageFormatter
from inline_context.pipeline.protocols import (
    CroppedContentRenderer,
    SegmentFormatter,
    TranscriptAssembler,
    WindowSelector,
)
from inline_context.pipeline.turn import InlineChatTurn, InlineChatTurnBuilder
from inline_context.pipeline.types import (
    AssistantSegment,
    CompletedToolCallRound,
    CroppedFileContent,
    FeedbackSegment,
    FullFileContent,
    RenderRequest,
    Segment,
    ToolCall,
    ToolResult,
    ToolResultEntry,
    ToolSegment,
)
from inline_context.pipeline.windows import (
    CursorWindowSelector,
    SelectionWindowSelector,
    SnapshotCroppedRenderer,
)

__all__ = [
    # Turn
    "InlineChatTurn",
    "InlineChatTurnBuilder",
    # Stages
    "CursorWindowSelector",
    "JSONFormatter",
    "LARGE_FILE_LINE_THRESHOLD",
    "MessageFormatter",
    "RetryFeedbackBuilder",
    "SelectionWindowSelector",
    "SnapshotCroppedRenderer",
    "ToolRoundTranscriptAssembler",
    "is_large_file",
    # Protocols
    "CroppedContentRenderer",
    "SegmentFormatter",
    "TranscriptAssembler",
    "WindowSelector",
    # Types
    "AssistantSegment",
    "CompletedToolCallRound",
    "CroppedFileContent",
    "FeedbackSegment",
    "FullFileContent",
    "RenderRequest",
    "Segment",
    "ToolCall",
    "ToolResult",
    "ToolResultEntry",
    "ToolSegment",
]
