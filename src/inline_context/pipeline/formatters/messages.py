"""Chat message formatter.

Turns transcript segments into ``langchain_core`` messages:

- AssistantSegment -> one ``AIMessage`` carrying all of the round's tool calls
- ToolSegment -> one ``ToolMessage`` per result, in call order
- FeedbackSegment -> one ``HumanMessage`` with a ``<feedback>`` block
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

from langchain_core.messages import AIMessage, BaseMessage, HumanMessage, ToolMessage
from langchain_core.messages.tool import tool_call as make_tool_call

from inline_context.pipeline.formatters.text import render_feedback_text
from inline_context.pipeline.protocols import CroppedContentRenderer
from inline_context.pipeline.types import (
    AssistantSegment,
    FeedbackSegment,
    Segment,
    ToolCall,
    ToolSegment,
)
from inline_context.utils.logger import get_logger

logger = get_logger("formatters")


def decode_arguments(call: ToolCall) -> dict[str, Any]:
    """Decode a call's serialized arguments into a dict.

    Payloads that are not a JSON object are kept verbatim under ``"input"``.
    """
    if not call.arguments.strip():
        return {}
    try:
        decoded = json.loads(call.arguments)
    except json.JSONDecodeError:
        decoded = None
    if isinstance(decoded, dict):
        return decoded
    logger.debug(f"Arguments of {call.name} ({call.id}) are not a JSON object, keeping raw")
    return {"input": call.arguments}


class MessageFormatter:
    """Formatter that produces langchain_core chat messages.

    Args:
        cropped_renderer: Renderer for cropped large-file content in feedback
    """

    def __init__(self, cropped_renderer: CroppedContentRenderer | None = None) -> None:
        self._cropped_renderer = cropped_renderer

    def format(self, segments: Sequence[Segment]) -> list[BaseMessage]:
        """Format segments as chat messages, preserving segment order."""
        messages: list[BaseMessage] = []
        for segment in segments:
            if isinstance(segment, AssistantSegment):
                messages.append(
                    AIMessage(
                        content="",
                        tool_calls=[
                            make_tool_call(name=call.name, args=decode_arguments(call), id=call.id)
                            for call in segment.calls
                        ],
                    )
                )
            elif isinstance(segment, ToolSegment):
                messages.extend(
                    ToolMessage(
                        content=entry.text,
                        tool_call_id=entry.call_id,
                        name=entry.name,
                        status="error" if entry.is_error else "success",
                    )
                    for entry in segment.results
                )
            elif isinstance(segment, FeedbackSegment):
                messages.append(
                    HumanMessage(content=render_feedback_text(segment, self._cropped_renderer))
                )
            else:
                raise TypeError(f"Unsupported segment: {type(segment).__name__}")
        return messages


__all__ = ["MessageFormatter", "decode_arguments"]
