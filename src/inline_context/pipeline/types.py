"""Shared data types for the inline context pipeline.

These types flow between the window selectors, the transcript assembler, the
retry-feedback builder and the formatters.

The assembled transcript is a sequence of tagged segments::

    AssistantSegment(calls) | ToolSegment(results) | FeedbackSegment(message, content)
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field, field_validator

from inline_context.documents import DocumentSnapshot, Range
from inline_context.exceptions import InvalidToolCallError

# === Tool Call Types ===


@dataclass(frozen=True)
class ToolCall:
    """A tool invocation proposed by the assistant.

    Attributes:
        id: Call identifier, unique within the round sequence
        name: Tool name
        arguments: Serialized argument payload (usually JSON), kept opaque
    """

    id: str
    name: str
    arguments: str = "{}"


@dataclass(frozen=True)
class ToolResult:
    """Result of executing a tool call.

    Attributes:
        content: Text payload, either a single string or ordered text parts
        is_error: Whether the tool reported an error
    """

    content: str | tuple[str, ...] = ""
    is_error: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.content, str):
            object.__setattr__(self, "content", tuple(self.content))

    @property
    def text(self) -> str:
        """The result text, with parts concatenated in order."""
        if isinstance(self.content, str):
            return self.content
        return "".join(self.content)


@dataclass(frozen=True)
class CompletedToolCallRound:
    """Calls proposed in one assistant turn, paired with their results.

    Pairs keep the order in which the calls were proposed.
    """

    calls: tuple[tuple[ToolCall, ToolResult], ...] = ()

    def __post_init__(self) -> None:
        pairs = tuple(tuple(pair) for pair in self.calls)
        for position, pair in enumerate(pairs):
            if (
                len(pair) != 2
                or not isinstance(pair[0], ToolCall)
                or not isinstance(pair[1], ToolResult)
            ):
                raise InvalidToolCallError(
                    f"Round entry {position} is not a (ToolCall, ToolResult) pair",
                    technical_details={"entry": repr(pair)},
                )
        object.__setattr__(self, "calls", pairs)

    @classmethod
    def of(cls, *pairs: tuple[ToolCall, ToolResult]) -> CompletedToolCallRound:
        return cls(calls=tuple(pairs))

    @property
    def tool_calls(self) -> tuple[ToolCall, ...]:
        return tuple(call for call, _ in self.calls)

    @property
    def tool_results(self) -> tuple[ToolResult, ...]:
        return tuple(result for _, result in self.calls)


# === Content Blocks ===


@dataclass(frozen=True)
class FullFileContent:
    """The complete current text of a file, rendered as a code block."""

    text: str
    language_id: str = ""


@dataclass(frozen=True)
class CroppedFileContent:
    """A windowed view of a large file.

    Only the path and selection are carried; the cropped renderer decides
    which lines to show.
    """

    filepath: str
    selection: Range


ContentBlock = FullFileContent | CroppedFileContent


# === Segment Types ===


@dataclass(frozen=True)
class ToolResultEntry:
    """A tool result tagged with the call it answers."""

    call_id: str
    name: str
    result: ToolResult

    @property
    def text(self) -> str:
        return self.result.text

    @property
    def is_error(self) -> bool:
        return self.result.is_error


@dataclass(frozen=True)
class AssistantSegment:
    """The assistant proposing one round of tool calls."""

    kind: ClassVar[str] = "assistant"
    role: ClassVar[str] = "assistant"

    calls: tuple[ToolCall, ...] = ()


@dataclass(frozen=True)
class ToolSegment:
    """The results of one round of tool calls, in call order."""

    kind: ClassVar[str] = "tool"
    role: ClassVar[str] = "tool"

    results: tuple[ToolResultEntry, ...] = ()


@dataclass(frozen=True)
class FeedbackSegment:
    """Feedback about a failed edit attempt.

    Attributes:
        message: Feedback text for the model
        content: Current file content to attach, or None when the file is
            unchanged since the request
    """

    kind: ClassVar[str] = "feedback"
    role: ClassVar[str] = "user"

    message: str
    content: ContentBlock | None = None


Segment = AssistantSegment | ToolSegment | FeedbackSegment


# === Request Types ===


class RenderRequest(BaseModel):
    """Inputs for rendering one turn's tool history and retry feedback.

    Built fresh by the caller for each render and never mutated.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    previous_rounds: tuple[CompletedToolCallRound, ...] = Field(
        default=(), description="Completed tool-call rounds, oldest first"
    )
    has_failed_edits: bool = Field(
        default=False, description="Whether an edit in the previous rounds failed"
    )
    snapshot: DocumentSnapshot = Field(description="Document snapshot at render time")
    document_version_at_request: int = Field(
        ge=0, description="Document version recorded when the request was made"
    )
    is_large_file: bool = Field(
        default=False, description="Render current content cropped instead of in full"
    )
    selection: Range = Field(description="Current selection in the document")
    filepath: str = Field(description="Path of the document, keys the cropped renderer")

    @field_validator("previous_rounds", mode="before")
    @classmethod
    def _rounds_as_tuple(cls, value: Iterable[CompletedToolCallRound]):
        return tuple(value)

    @property
    def document_changed(self) -> bool:
        """True when the snapshot version differs from the request version."""
        return self.snapshot.version != self.document_version_at_request


__all__ = [
    "AssistantSegment",
    "CompletedToolCallRound",
    "ContentBlock",
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
