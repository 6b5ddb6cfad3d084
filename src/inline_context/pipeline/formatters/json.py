"""JSON formatter for transcript segments.

Produces plain, JSON-serialisable dicts. Used by hosts that build their own
wire messages and for logging transcripts.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from inline_context.documents import Range
from inline_context.pipeline.types import (
    AssistantSegment,
    ContentBlock,
    CroppedFileContent,
    FeedbackSegment,
    FullFileContent,
    Segment,
    ToolSegment,
)


def _range_dict(selection: Range) -> dict[str, Any]:
    return {
        "start": {"line": selection.start.line, "character": selection.start.character},
        "end": {"line": selection.end.line, "character": selection.end.character},
    }


def _content_dict(content: ContentBlock | None) -> dict[str, Any] | None:
    if content is None:
        return None
    if isinstance(content, FullFileContent):
        return {
            "type": "full_file_content",
            "language_id": content.language_id,
            "code": content.text,
        }
    if isinstance(content, CroppedFileContent):
        return {
            "type": "cropped_file_content",
            "filepath": content.filepath,
            "selection": _range_dict(content.selection),
        }
    raise TypeError(f"Unsupported content block: {type(content).__name__}")


class JSONFormatter:
    """Formatter that produces JSON-serialisable dicts, one per segment."""

    def format(self, segments: Sequence[Segment]) -> list[dict[str, Any]]:
        """Format segments as dicts, preserving segment order."""
        output: list[dict[str, Any]] = []
        for segment in segments:
            if isinstance(segment, AssistantSegment):
                output.append(
                    {
                        "type": segment.kind,
                        "role": segment.role,
                        "tool_calls": [
                            {"id": call.id, "name": call.name, "arguments": call.arguments}
                            for call in segment.calls
                        ],
                    }
                )
            elif isinstance(segment, ToolSegment):
                output.append(
                    {
                        "type": segment.kind,
                        "role": segment.role,
                        "results": [
                            {
                                "tool_call_id": entry.call_id,
                                "name": entry.name,
                                "content": entry.text,
                                "is_error": entry.is_error,
                            }
                            for entry in segment.results
                        ],
                    }
                )
            elif isinstance(segment, FeedbackSegment):
                output.append(
                    {
                        "type": segment.kind,
                        "role": segment.role,
                        "message": segment.message,
                        "content": _content_dict(segment.content),
                    }
                )
            else:
                raise TypeError(f"Unsupported segment: {type(segment).__name__}")
        return output


__all__ = ["JSONFormatter"]
