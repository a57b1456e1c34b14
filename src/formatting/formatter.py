"""
Formatter — re-indents a schema document, sorts attribute runs and
aligns struct fields in a single pass over its lines.

There is no parse step: every decision is made from the ``LineKind`` of
the current line plus a small ``FormatterState`` threaded through the
pass.  Unrecognised shapes fall through as ``OTHER`` and only get
re-indented, so formatting never fails.

Flow per line::

    BLANK               → flush attributes, emit ""   (or buffer in a struct body)
    ATTRIBUTE           → buffer
    STRUCT_OR_ENUM_OPEN → flush, emit, open block if it ends with '{'
    lone '{'            → flush, emit at pre-increment level, open block
    BLOCK_CLOSE         → flush fields (aligned), dedent, emit
    FIELD / in-body     → buffer (batch is aligned on close)
    OTHER               → flush, emit at current level

The result always replaces the whole document.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from core.format_options import FormatOptions
from core.line_kind import LineKind
from formatting.aligner import align_fields
from formatting.attributes import sort_attributes
from formatting.classifier import classify, is_lone_block_open, mentions_struct, opens_block

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class FormatterState:
    """
    Mutable state threaded line-by-line through one formatting run.

    Attributes:
        indent_level:       Current nesting depth; never negative.
        in_struct_body:     True between a struct's '{' and its '}'.
        pending_attributes: Attribute lines waiting for the end of their run.
        pending_fields:     Struct-body lines waiting to be aligned as one batch.
        output:             Lines emitted so far.
    """
    indent_level: int = 0
    in_struct_body: bool = False
    pending_attributes: list[str] = field(default_factory=list)
    pending_fields: list[str] = field(default_factory=list)
    output: list[str] = field(default_factory=list)

    @property
    def last_emitted(self) -> Optional[str]:
        return self.output[-1] if self.output else None


class SchemaFormatter:
    """Formats schema text with a fixed set of options."""

    def __init__(self, options: Optional[FormatOptions] = None):
        self.options = options or FormatOptions()

    def format(self, text: str) -> str:
        state = FormatterState()
        lines = text.split("\n")
        for line in lines:
            self._feed(state, line)
        self._finish(state)
        logger.debug(
            "Formatted %d lines (indent=%d, sort=%s, align=%s)",
            len(lines), self.options.indent_size,
            self.options.sort_attributes, self.options.align_fields,
        )
        return "\n".join(state.output)

    # ------------------------------------------------------------------
    # Per-line dispatch
    # ------------------------------------------------------------------

    def _feed(self, state: FormatterState, line: str) -> None:
        kind = classify(line, state.in_struct_body)
        trimmed = line.strip()

        if kind is LineKind.ATTRIBUTE:
            state.pending_attributes.append(trimmed)
            return

        self._flush_attributes(state)

        if kind is LineKind.BLOCK_CLOSE:
            self._flush_fields(state)
            state.indent_level = max(state.indent_level - 1, 0)
            state.in_struct_body = False
            self._emit(state, trimmed)
            return

        if kind is LineKind.STRUCT_OR_ENUM_OPEN:
            self._flush_fields(state)
            self._emit(state, trimmed)
            if opens_block(trimmed):
                state.indent_level += 1
                state.in_struct_body = mentions_struct(trimmed)
            return

        if is_lone_block_open(trimmed):
            self._flush_fields(state)
            previous = state.last_emitted
            self._emit(state, trimmed)
            state.indent_level += 1
            if previous is not None and mentions_struct(previous):
                state.in_struct_body = True
            return

        if state.in_struct_body:
            # Fields, blanks and stray lines keep their order inside the batch.
            state.pending_fields.append(trimmed)
            return

        if kind is LineKind.BLANK:
            state.output.append("")
            return

        self._emit(state, trimmed)

    def _finish(self, state: FormatterState) -> None:
        self._flush_attributes(state)
        self._flush_fields(state)

    # ------------------------------------------------------------------
    # Buffers
    # ------------------------------------------------------------------

    def _emit(self, state: FormatterState, trimmed: str) -> None:
        state.output.append(self.options.indent(state.indent_level) + trimmed)

    def _flush_attributes(self, state: FormatterState) -> None:
        if not state.pending_attributes:
            return
        ordered = sort_attributes(state.pending_attributes, self.options.sort_attributes)
        state.pending_attributes.clear()
        if state.in_struct_body:
            state.pending_fields.extend(ordered)
            return
        for attr in ordered:
            self._emit(state, attr)

    def _flush_fields(self, state: FormatterState) -> None:
        if not state.pending_fields:
            return
        state.output.extend(align_fields(
            state.pending_fields,
            state.indent_level,
            self.options.indent_size,
            align=self.options.align_fields,
        ))
        state.pending_fields.clear()


def format_text(text: str, options: Optional[FormatOptions] = None) -> str:
    """Format a whole schema document.  Never raises."""
    return SchemaFormatter(options).format(text)
