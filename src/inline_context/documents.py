"""Document snapshot, position and range types.

The editor owns documents; renderers only ever read an immutable
:class:`DocumentSnapshot`. :class:`TextDocument` is a minimal mutable,
versioned document that produces snapshots, for hosts that keep their own
buffers and for tests.

Positions use 0-based lines and UTF-16 code-unit columns, the way editors
report them. :func:`utf16_to_index` converts such a column into a Python
string index.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, order=True)
class Position:
    """A (line, character) location. Both values are 0-based."""

    line: int
    character: int = 0


@dataclass(frozen=True)
class Range:
    """A half-open range between two positions.

    The constructor normalises the endpoints so ``start <= end`` always holds.
    """

    start: Position
    end: Position

    def __post_init__(self) -> None:
        if self.end < self.start:
            start, end = self.end, self.start
            object.__setattr__(self, "start", start)
            object.__setattr__(self, "end", end)

    @classmethod
    def from_coords(
        cls, start_line: int, start_character: int, end_line: int, end_character: int
    ) -> Range:
        return cls(Position(start_line, start_character), Position(end_line, end_character))

    @property
    def is_empty(self) -> bool:
        return self.start == self.end


@runtime_checkable
class DocumentSnapshot(Protocol):
    """Read-only view of a text document at one version.

    Implementations:
        - TextDocumentSnapshot: in-memory snapshot of a text buffer
    """

    @property
    def version(self) -> int: ...

    @property
    def language_id(self) -> str: ...

    @property
    def uri(self) -> str: ...

    @property
    def line_count(self) -> int: ...

    @property
    def text(self) -> str: ...

    def line_text(self, index: int) -> str: ...


def split_lines(text: str) -> tuple[str, ...]:
    """Split text into lines on CRLF, CR or LF.

    A trailing line break produces a trailing empty line, and the empty string
    is a single empty line, matching editor line addressing.
    """
    return tuple(_LINE_BREAK_RE.split(text))


def is_blank(line: str) -> bool:
    """True for empty or whitespace-only lines."""
    return not line.strip()


def utf16_to_index(text: str, offset: int) -> int:
    """Convert a UTF-16 code-unit offset into an index into ``text``.

    Offsets are clamped to the string. An offset that lands inside a surrogate
    pair resolves to the index after the character.
    """
    if offset <= 0:
        return 0
    units = 0
    for index, char in enumerate(text):
        if units >= offset:
            return index
        units += 2 if ord(char) > 0xFFFF else 1
    return len(text)


@dataclass(frozen=True)
class TextDocumentSnapshot:
    """Immutable snapshot of a document's text."""

    uri: str
    language_id: str
    version: int
    lines: tuple[str, ...] = field(repr=False)

    @classmethod
    def from_text(
        cls, text: str, *, uri: str, language_id: str = "plaintext", version: int = 1
    ) -> TextDocumentSnapshot:
        return cls(uri=uri, language_id=language_id, version=version, lines=split_lines(text))

    @property
    def line_count(self) -> int:
        return len(self.lines)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def line_text(self, index: int) -> str:
        """Return the text of line ``index``, clamped into the document."""
        return self.lines[clamp_line(self, index)]


class TextDocument:
    """A mutable, versioned text document.

    Every :meth:`set_text` call bumps the version, even if the text did not
    change. Version is the only change signal downstream.
    """

    def __init__(self, text: str, *, uri: str, language_id: str = "plaintext", version: int = 1):
        self.uri = uri
        self.language_id = language_id
        self.version = version
        self._text = text

    @property
    def text(self) -> str:
        return self._text

    def set_text(self, text: str) -> int:
        """Replace the document text and return the new version."""
        self._text = text
        self.version += 1
        return self.version

    def snapshot(self) -> TextDocumentSnapshot:
        return TextDocumentSnapshot.from_text(
            self._text, uri=self.uri, language_id=self.language_id, version=self.version
        )


def clamp_line(snapshot: DocumentSnapshot, line: int) -> int:
    """Clamp a line index into ``[0, line_count - 1]``."""
    last = max(snapshot.line_count - 1, 0)
    return min(max(line, 0), last)


def clamp_position(snapshot: DocumentSnapshot, position: Position) -> Position:
    """Clamp a position into the document bounds.

    The character is clamped in UTF-16 units to the length of its line.
    """
    line = clamp_line(snapshot, position.line)
    text = snapshot.line_text(line)
    utf16_length = len(text.encode("utf-16-le")) // 2
    character = min(max(position.character, 0), utf16_length)
    return Position(line, character)


__all__ = [
    "DocumentSnapshot",
    "Position",
    "Range",
    "TextDocument",
    "TextDocumentSnapshot",
    "clamp_line",
    "clamp_position",
    "is_blank",
    "split_lines",
    "utf16_to_index",
]
