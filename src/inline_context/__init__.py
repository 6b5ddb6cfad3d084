"""Inline chat context assembly.

Renders the context an inline coding assistant sends to a language model for
one in-editor chat turn: a bounded window of the document around the cursor
or selection, and a deterministic replay of previous tool-call rounds with
retry feedback after failed edits.

Modules:
    documents: Snapshot, position and range types
    pipeline: Window selectors, transcript assembly, feedback and formatters
    config: YAML-backed configuration
    skills: Skill directory location resolution
    exceptions: Error hierarchy
"""

from inline_context.config import InlineContextConfig, load_config
from inline_context.documents import (
    DocumentSnapshot,
    Position,
    Range,
    TextDocument,
    TextDocumentSnapshot,
)
from inline_context.exceptions import (
    ConfigurationError,
    InlineContextError,
    InvalidToolCallError,
)

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "DocumentSnapshot",
    "InlineContextConfig",
    "InlineContextError",
    "InvalidToolCallError",
    "Position",
    "Range",
    "TextDocument",
    "TextDocumentSnapshot",
    "load_config",
]
