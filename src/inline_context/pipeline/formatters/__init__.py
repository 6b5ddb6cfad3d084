"""Formatter implementations for the inline context pipeline.

Formatters turn transcript segments into what the chat-message layer consumes.

Available formatters:
    - MessageFormatter: langchain_core AIMessage / ToolMessage / HumanMessage
    - JSONFormatter: JSON-serialisable dicts
"""

from inline_context.pipeline.formatters.json import JSONFormatter
from inline_context.pipeline.formatters.messages import MessageFormatter, decode_arguments
from inline_context.pipeline.formatters.text import (
    render_content_block,
    render_feedback_text,
)

__all__ = [
    "JSONFormatter",
    "MessageFormatter",
    "decode_arguments",
    "render_content_block",
    "render_feedback_text",
]
