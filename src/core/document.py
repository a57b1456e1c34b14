"""
SchemaDocument — immutable, ordered container of schema text lines.

The document is a read-only snapshot for the duration of one
formatting or diagnostic pass.  Edits never happen in place: applying
a patch returns a new document (see ``apply``), which mirrors how the
editor host owns the real buffer and the core only proposes changes.

Lines are addressed by 0-based position.  Splitting is done on ``\\n``
only; a trailing ``\\r`` from CRLF files is kept out of the line content
and remembered so ``text`` can re-join with the original line ending.
"""
from __future__ import annotations

import logging
from typing import Iterator, Optional, Sequence, overload

from core.position import Position, Range
from core.text_patch import TextPatch

logger = logging.getLogger(__name__)


class SchemaDocument(Sequence[str]):
    """
    Sequence of line strings with position / offset helpers.

    A document always holds at least one line (the empty string for
    empty text), matching how editors model an empty buffer.
    """

    __slots__ = ("_lines", "_eol", "file_path")

    def __init__(
        self,
        lines: Optional[Sequence[str]] = None,
        *,
        eol: str = "\n",
        file_path: Optional[str] = None,
    ):
        self._lines: tuple[str, ...] = tuple(lines) if lines else ("",)
        self._eol: str = eol
        self.file_path: Optional[str] = file_path

    @classmethod
    def from_text(cls, text: str, file_path: Optional[str] = None) -> SchemaDocument:
        eol = "\r\n" if "\r\n" in text else "\n"
        lines = text.split("\n")
        if eol == "\r\n":
            lines = [line[:-1] if line.endswith("\r") else line for line in lines]
        return cls(lines, eol=eol, file_path=file_path)

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------

    @property
    def lines(self) -> tuple[str, ...]:
        return self._lines

    @property
    def eol(self) -> str:
        return self._eol

    @property
    def text(self) -> str:
        return self._eol.join(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    @overload
    def __getitem__(self, position: int) -> str: ...

    @overload
    def __getitem__(self, position: slice) -> Sequence[str]: ...

    def __getitem__(self, position):
        return self._lines[position]

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, SchemaDocument):
            return self._lines == other._lines
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._lines)

    def __repr__(self) -> str:
        return f"SchemaDocument(lines={len(self._lines)}, file_path={self.file_path!r})"

    def full_range(self) -> Range:
        """Range covering the whole document, for whole-text replacement."""
        last = len(self._lines) - 1
        return Range(Position(0, 0), Position(last, len(self._lines[last])))

    def offset_at(self, pos: Position) -> int:
        """Convert a position to a character offset into ``text``.

        Positions past the end of a line or the document are clamped,
        the same way editors resolve out-of-range positions.
        """
        line = min(pos.line, len(self._lines) - 1)
        column = min(pos.column, len(self._lines[line]))
        eol_len = len(self._eol)
        return sum(len(text) + eol_len for text in self._lines[:line]) + column

    # ------------------------------------------------------------------
    # Derivation (never mutates self)
    # ------------------------------------------------------------------

    def apply(self, patch: TextPatch) -> SchemaDocument:
        """Return a new document with *patch* applied."""
        text = self.text
        start = self.offset_at(patch.range.start)
        end = self.offset_at(patch.range.end)
        logger.debug("Applying patch [%d:%d] -> %r", start, end, patch.new_text)
        new_text = text[:start] + patch.new_text.replace("\n", self._eol) + text[end:]
        return SchemaDocument.from_text(new_text, file_path=self.file_path)

    def replace_all(self, text: str) -> SchemaDocument:
        """Return a new document whose whole content is *text*."""
        return SchemaDocument.from_text(text, file_path=self.file_path)
