"""Tool-round transcript assembler.

Replays completed tool-call rounds as alternating segments::

    AssistantSegment(round 1 calls)
    ToolSegment(round 1 results)
    AssistantSegment(round 2 calls)
    ToolSegment(round 2 results)
    FeedbackSegment(...)            # only when an edit failed

Rounds are never merged or interleaved: every segment of round i precedes
every segment of round j for i < j. An empty history renders as None, not
as an empty list.
"""

from __future__ import annotations

from collections.abc import Sequence

from inline_context.pipeline.feedback import RetryFeedbackBuilder
from inline_context.pipeline.types import (
    AssistantSegment,
    CompletedToolCallRound,
    RenderRequest,
    Segment,
    ToolResultEntry,
    ToolSegment,
)
from inline_context.utils.logger import get_logger

logger = get_logger("transcript")


class ToolRoundTranscriptAssembler:
    """Assembler that replays tool rounds in chronological order.

    Args:
        feedback_builder: Builder for the trailing retry feedback segment
    """

    def __init__(self, feedback_builder: RetryFeedbackBuilder | None = None) -> None:
        self._feedback_builder = feedback_builder or RetryFeedbackBuilder()

    def _round_segments(
        self, round_: CompletedToolCallRound
    ) -> tuple[AssistantSegment, ToolSegment]:
        calls = round_.tool_calls
        results = tuple(
            ToolResultEntry(call_id=call.id, name=call.name, result=result)
            for call, result in round_.calls
        )
        return AssistantSegment(calls=calls), ToolSegment(results=results)

    def assemble(
        self,
        rounds: Sequence[CompletedToolCallRound],
        request: RenderRequest | None = None,
    ) -> list[Segment] | None:
        """Assemble rounds into transcript segments.

        Args:
            rounds: Completed rounds, oldest first
            request: Render request supplying the retry feedback inputs. Without
                a request no feedback segment is produced.

        Returns:
            Segments in transcript order, or None when there are no rounds
        """
        if not rounds:
            return None

        segments: list[Segment] = []
        for round_ in rounds:
            segments.extend(self._round_segments(round_))

        if request is not None:
            feedback = self._feedback_builder.build_for(request)
            if feedback is not None:
                segments.append(feedback)

        logger.debug(f"Assembled {len(rounds)} rounds into {len(segments)} segments")
        return segments

    def render(self, request: RenderRequest) -> list[Segment] | None:
        """Assemble the rounds and feedback described by a render request."""
        return self.assemble(request.previous_rounds, request)


__all__ = ["ToolRoundTranscriptAssembler"]
