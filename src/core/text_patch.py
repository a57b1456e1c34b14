"""
TextPatch / QuickFix — single-edit changes proposed to the editor.

The core never mutates a document; it returns patches and the caller
applies them (``infrastructure.document_io.apply_patch``).
"""
from __future__ import annotations

from dataclasses import dataclass

from core.diagnostic import Diagnostic
from core.position import Range


@dataclass(frozen=True, slots=True)
class TextPatch:
    """Replace the text covered by *range* with *new_text*.

    An empty range turns the patch into a pure insertion.
    """
    range: Range
    new_text: str

    @property
    def is_insert(self) -> bool:
        return self.range.is_empty


@dataclass(frozen=True, slots=True)
class QuickFix:
    """A titled patch offered for one diagnostic."""
    title: str
    patch: TextPatch
    diagnostic: Diagnostic
    is_preferred: bool = False
