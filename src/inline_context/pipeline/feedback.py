"""Retry feedback for failed edit attempts.

When an edit in the previous tool rounds failed, the model is told what state
the file is in now:

- failed edits, document version unchanged: the file was not touched, so the
  feedback says so and attaches no content;
- failed edits, document version changed: the feedback attaches the current
  content, in full for small files and as a cropped view for large files.

The document version is the only change signal. A version bump with
identical text still counts as a change.
"""

from __future__ import annotations

from inline_context.documents import DocumentSnapshot, Range
from inline_context.pipeline.types import (
    CroppedFileContent,
    FeedbackSegment,
    FullFileContent,
    RenderRequest,
)
from inline_context.utils.logger import get_logger

logger = get_logger("feedback")

NO_CHANGES_MESSAGE = (
    "No changes were made to the file. The previous edit attempt failed, "
    "so the file is exactly as it was when the request was made."
)
CHANGED_MESSAGE = (
    "The previous edit attempt failed, but the file has changed since the "
    "request was made. Base any further edits on the current file content."
)


class RetryFeedbackBuilder:
    """Builder for the retry feedback segment."""

    def build(
        self,
        failed_edits: bool,
        snapshot: DocumentSnapshot,
        request_version: int,
        is_large_file: bool,
        selection: Range,
        filepath: str,
    ) -> FeedbackSegment | None:
        """Build the feedback segment for a render.

        Args:
            failed_edits: Whether an edit in the previous rounds failed
            snapshot: Document snapshot at render time
            request_version: Document version recorded when the request was made
            is_large_file: Attach a cropped view instead of the full content
            selection: Current selection, passed on to the cropped view
            filepath: Document path, keys the cropped view

        Returns:
            FeedbackSegment, or None when there is nothing to report
        """
        if not failed_edits:
            return None

        if snapshot.version == request_version:
            logger.debug(f"Failed edits, {filepath} unchanged at version {request_version}")
            return FeedbackSegment(message=NO_CHANGES_MESSAGE)

        if is_large_file:
            content = CroppedFileContent(filepath=filepath, selection=selection)
        else:
            content = FullFileContent(text=snapshot.text, language_id=snapshot.language_id)

        logger.debug(
            f"Failed edits, {filepath} changed {request_version} -> {snapshot.version}, "
            f"attaching {'cropped' if is_large_file else 'full'} content"
        )
        return FeedbackSegment(message=CHANGED_MESSAGE, content=content)

    def build_for(self, request: RenderRequest) -> FeedbackSegment | None:
        """Build the feedback segment from a render request."""
        return self.build(
            failed_edits=request.has_failed_edits,
            snapshot=request.snapshot,
            request_version=request.document_version_at_request,
            is_large_file=request.is_large_file,
            selection=request.selection,
            filepath=request.filepath,
        )


__all__ = ["CHANGED_MESSAGE", "NO_CHANGES_MESSAGE", "RetryFeedbackBuilder"]
