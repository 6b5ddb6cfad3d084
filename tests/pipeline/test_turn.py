"""Tests for inline chat turn composition and the render request model."""

from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from inline_context.config import InlineContextConfig
from inline_context.documents import Position, Range
from inline_context.exceptions import InvalidToolCallError
from inline_context.pipeline import (
    CompletedToolCallRound,
    FeedbackSegment,
    FullFileContent,
    InlineChatTurnBuilder,
    RenderRequest,
    ToolCall,
    ToolResult,
)
from inline_context.pipeline.types import CroppedFileContent


class TestRenderRequest:
    """Tests for the RenderRequest model."""

    def test_rounds_coerced_to_tuple(self, five_line_snapshot, make_round, file_path):
        request = RenderRequest(
            previous_rounds=[make_round(("a", "b"))],
            snapshot=five_line_snapshot,
            document_version_at_request=1,
            selection=Range.from_coords(0, 0, 0, 0),
            filepath=file_path,
        )

        assert isinstance(request.previous_rounds, tuple)
        assert request.has_failed_edits is False
        assert request.is_large_file is False

    def test_request_is_frozen(self, five_line_snapshot, file_path):
        request = RenderRequest(
            snapshot=five_line_snapshot,
            document_version_at_request=1,
            selection=Range.from_coords(0, 0, 0, 0),
            filepath=file_path,
        )

        with pytest.raises(ValidationError):
            request.has_failed_edits = True

    def test_negative_version_rejected(self, five_line_snapshot, file_path):
        with pytest.raises(ValidationError):
            RenderRequest(
                snapshot=five_line_snapshot,
                document_version_at_request=-1,
                selection=Range.from_coords(0, 0, 0, 0),
                filepath=file_path,
            )

    def test_document_changed(self, document, file_path):
        old_version = document.version
        document.set_text("const x = 2;")

        request = RenderRequest(
            snapshot=document.snapshot(),
            document_version_at_request=old_version,
            selection=Range.from_coords(0, 0, 0, 0),
            filepath=file_path,
        )

        assert request.document_changed is True


class TestCompletedToolCallRound:
    """Tests for round construction."""

    def test_pairs_keep_order(self):
        round_ = CompletedToolCallRound.of(
            (ToolCall("1", "a"), ToolResult("ra")),
            (ToolCall("2", "b"), ToolResult("rb")),
        )

        assert [c.id for c in round_.tool_calls] == ["1", "2"]
        assert [r.text for r in round_.tool_results] == ["ra", "rb"]

    def test_malformed_entry_rejected(self):
        with pytest.raises(InvalidToolCallError):
            CompletedToolCallRound(calls=((ToolCall("1", "a"),),))

        with pytest.raises(InvalidToolCallError):
            CompletedToolCallRound(calls=((ToolResult("x"), ToolCall("1", "a")),))

    def test_malformed_entry_details(self):
        with pytest.raises(InvalidToolCallError) as exc_info:
            CompletedToolCallRound(calls=((ToolCall("1", "a"),),))

        assert "Round entry 0" in exc_info.value.message
        assert "entry" in exc_info.value.technical_details

    def test_result_parts_joined(self):
        assert ToolResult(["part one, ", "part two"]).text == "part one, part two"


class TestInlineChatTurnBuilder:
    """Tests for InlineChatTurnBuilder."""

    def test_empty_selection_uses_cursor_window(self, five_line_snapshot):
        builder = InlineChatTurnBuilder()
        request = builder.make_request(five_line_snapshot, Range.from_coords(2, 3, 2, 3))

        turn = builder.build(request)

        assert "lin$CURSOR$e 3" in turn.document_context
        assert turn.transcript is None

    def test_logs_under_turn_component(self, five_line_snapshot, caplog):
        builder = InlineChatTurnBuilder()
        request = builder.make_request(five_line_snapshot, Range.from_coords(2, 3, 2, 3))

        with caplog.at_level(logging.DEBUG, logger="inline_context"):
            builder.build(request)

        turn_records = [r for r in caplog.records if r.name == "inline_context.turn"]
        assert turn_records
        assert turn_records[-1].component == "turn"

    def test_explicit_cursor_overrides_selection_start(self, five_line_snapshot):
        builder = InlineChatTurnBuilder()
        request = builder.make_request(five_line_snapshot, Range.from_coords(0, 0, 0, 0))

        turn = builder.build(request, cursor=Position(4, 0))

        assert "$CURSOR$line 5" in turn.document_context

    def test_non_empty_selection_uses_selection_window(self, five_line_snapshot):
        builder = InlineChatTurnBuilder()
        request = builder.make_request(five_line_snapshot, Range.from_coords(1, 0, 3, 6))

        turn = builder.build(request)

        assert "$CURSOR$" not in turn.document_context
        assert "line 1" not in turn.document_context
        assert "line 4" in turn.document_context

    def test_defaults_filled_from_snapshot(self, five_line_snapshot):
        request = InlineChatTurnBuilder().make_request(
            five_line_snapshot, Range.from_coords(0, 0, 0, 0)
        )

        assert request.document_version_at_request == five_line_snapshot.version
        assert request.filepath == five_line_snapshot.uri
        assert request.is_large_file is False

    def test_large_file_classified_from_line_count(self, make_snapshot):
        snapshot = make_snapshot("\n".join(str(i) for i in range(12)))
        builder = InlineChatTurnBuilder(large_file_threshold=10)

        request = builder.make_request(snapshot, Range.from_coords(0, 0, 0, 0))

        assert request.is_large_file is True

    def test_transcript_with_feedback(self, document, make_round):
        builder = InlineChatTurnBuilder()
        old_version = document.version
        document.set_text("const x = 2;")

        request = builder.make_request(
            document.snapshot(),
            Range.from_coords(0, 0, 0, 0),
            previous_rounds=[make_round(("call-1", "error"))],
            has_failed_edits=True,
            document_version_at_request=old_version,
        )
        turn = builder.build(request)

        assert isinstance(turn.transcript[-1], FeedbackSegment)
        assert turn.transcript[-1].content == FullFileContent("const x = 2;", "typescript")

    def test_large_changed_file_gets_cropped_feedback(self, document, make_round):
        builder = InlineChatTurnBuilder(large_file_threshold=3)
        old_version = document.version
        document.set_text("a\nb\nc\nd\ne")
        selection = Range.from_coords(2, 0, 2, 1)

        request = builder.make_request(
            document.snapshot(),
            selection,
            previous_rounds=[make_round(("call-1", "error"))],
            has_failed_edits=True,
            document_version_at_request=old_version,
        )
        turn = builder.build(request)

        assert turn.transcript[-1].content == CroppedFileContent(document.uri, selection)

    def test_from_config(self, five_line_snapshot):
        config = InlineContextConfig.from_dict(
            {"window": {"radius": 0, "cursor_marker": "|"}, "large_file": {"line_threshold": 4}}
        )
        builder = InlineChatTurnBuilder.from_config(config)

        request = builder.make_request(five_line_snapshot, Range.from_coords(2, 0, 2, 0))
        turn = builder.build(request)

        assert turn.document_context == "```typescript\n|line 3\n```"
        assert request.is_large_file is True
