"""Shared fixtures for inline context tests."""

from __future__ import annotations

from collections.abc import Callable

import pytest

from inline_context.documents import TextDocument, TextDocumentSnapshot
from inline_context.pipeline.types import CompletedToolCallRound, ToolCall, ToolResult

FILE_PATH = "/workspace/file.ts"


def _snapshot(content: str, language_id: str = "typescript") -> TextDocumentSnapshot:
    return TextDocumentSnapshot.from_text(content, uri=FILE_PATH, language_id=language_id)


def _round(*calls: tuple[str, str]) -> CompletedToolCallRound:
    return CompletedToolCallRound(
        calls=tuple(
            (ToolCall(id=call_id, name="replace_string_in_file"), ToolResult(content=text))
            for call_id, text in calls
        )
    )


@pytest.fixture
def file_path() -> str:
    return FILE_PATH


@pytest.fixture
def make_snapshot() -> Callable[..., TextDocumentSnapshot]:
    """Factory for snapshots of a TypeScript file at ``/workspace/file.ts``."""
    return _snapshot


@pytest.fixture
def make_round() -> Callable[..., CompletedToolCallRound]:
    """Factory for rounds built from ``(call_id, result_text)`` pairs."""
    return _round


@pytest.fixture
def five_line_snapshot() -> TextDocumentSnapshot:
    return _snapshot("line 1\nline 2\nline 3\nline 4\nline 5")


@pytest.fixture
def document() -> TextDocument:
    """A small editable TypeScript document."""
    return TextDocument("const x = 1;", uri=FILE_PATH, language_id="typescript")
