"""Assembler implementations for the inline context pipeline.

Available assemblers:
    - ToolRoundTranscriptAssembler: alternating tool call/result segments
      followed by optional retry feedback
"""

from inline_context.pipeline.assemblers.transcript import ToolRoundTranscriptAssembler

__all__ = ["ToolRoundTranscriptAssembler"]
