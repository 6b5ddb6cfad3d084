"""Text rendering for feedback segments and content blocks."""

from __future__ import annotations

from inline_context.exceptions import ErrorCategory, InlineContextError
from inline_context.pipeline.protocols import CroppedContentRenderer
from inline_context.pipeline.types import (
    ContentBlock,
    CroppedFileContent,
    FeedbackSegment,
    FullFileContent,
)
from inline_context.pipeline.windows.fence import fenced_code_block

CURRENT_CONTENT_LEAD_IN = "Here is the current file content:"


def render_content_block(
    content: ContentBlock,
    cropped_renderer: CroppedContentRenderer | None = None,
) -> str:
    """Render a content block to text.

    Raises:
        InlineContextError: If cropped content is rendered without a renderer
    """
    if isinstance(content, FullFileContent):
        return fenced_code_block(content.text, content.language_id)

    if isinstance(content, CroppedFileContent):
        if cropped_renderer is None:
            raise InlineContextError(
                f"No cropped content renderer configured for {content.filepath}",
                category=ErrorCategory.RENDERING,
                technical_details={"filepath": content.filepath},
            )
        return cropped_renderer.render(content.filepath, content.selection)

    raise TypeError(f"Unsupported content block: {type(content).__name__}")


def render_feedback_text(
    segment: FeedbackSegment,
    cropped_renderer: CroppedContentRenderer | None = None,
) -> str:
    """Render a feedback segment as a ``<feedback>`` tagged block."""
    parts = [segment.message]
    if segment.content is not None:
        parts.append(CURRENT_CONTENT_LEAD_IN)
        parts.append(render_content_block(segment.content, cropped_renderer))
    body = "\n".join(parts)
    return f"<feedback>\n{body}\n</feedback>"


__all__ = ["CURRENT_CONTENT_LEAD_IN", "render_content_block", "render_feedback_text"]
