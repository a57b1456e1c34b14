"""
Location heuristics — guess where in the document an error message
points, without parsing the document.

The message is matched against a fixed list of buckets; the first
bucket whose marker appears in the message scans the document
top-to-bottom and stops at the first candidate line.  When no bucket
matches, or the scan finds nothing, the diagnostic is anchored at the
start of the document.

Known imprecision: with several candidate lines the first one wins,
even if the validator complained about a later one.
"""
from __future__ import annotations

import logging
import re
from typing import Callable, Optional, Sequence

from core.diagnostic import Diagnostic
from core.line_kind import LineKind
from core.position import Range
from diagnostics.extractor import extract_message
from formatting.classifier import BLOCK_OPEN, FIELD_SEPARATOR, TERMINATOR, classify

logger = logging.getLogger(__name__)

MISSING_SEPARATOR_MARKERS = ("expected `:`", 'expected ":"', "missing colon")
MISSING_TERMINATOR_MARKERS = ("expected `;`", 'expected ";"', "semicolon")
MISSING_BLOCK_OPEN_MARKERS = ("expected `{`", 'expected "{"', "missing brace")

_TWO_WORDS_RE = re.compile(r"^\w+\s+\w+$")
_STRUCT_DECL_RE = re.compile(r"struct\s+\w+")


def mentions_any(message: str, markers: Sequence[str]) -> bool:
    lowered = message.lower()
    return any(marker in lowered for marker in markers)


# ------------------------------------------------------------------
# Candidate-line scans (each returns a range or None)
# ------------------------------------------------------------------

def _end_of_line(line_no: int, text: str) -> Range:
    end = len(text)
    return Range.on_line(line_no, max(end - 1, 0), end)


def _find_field_without_separator(lines: Sequence[str]) -> Optional[Range]:
    for i, text in enumerate(lines):
        trimmed = text.strip()
        if FIELD_SEPARATOR in trimmed or not _TWO_WORDS_RE.match(trimmed):
            continue
        if classify(trimmed) is LineKind.STRUCT_OR_ENUM_OPEN:
            continue
        column = len(text) - len(text.lstrip())
        return Range.on_line(i, column, column + 1)
    return None


def _find_field_without_terminator(lines: Sequence[str]) -> Optional[Range]:
    for i, text in enumerate(lines):
        trimmed = text.strip()
        if FIELD_SEPARATOR not in text:
            continue
        if trimmed.endswith(TERMINATOR) or trimmed.endswith(BLOCK_OPEN):
            continue
        return _end_of_line(i, text)
    return None


def _find_struct_without_brace(lines: Sequence[str]) -> Optional[Range]:
    for i, text in enumerate(lines):
        if _STRUCT_DECL_RE.search(text) and BLOCK_OPEN not in text:
            return _end_of_line(i, text)
    return None


_BUCKETS: tuple[tuple[tuple[str, ...], Callable[[Sequence[str]], Optional[Range]]], ...] = (
    (MISSING_SEPARATOR_MARKERS, _find_field_without_separator),
    (MISSING_TERMINATOR_MARKERS, _find_field_without_terminator),
    (MISSING_BLOCK_OPEN_MARKERS, _find_struct_without_brace),
)


def default_range(lines: Sequence[str]) -> Range:
    """First character of the document (empty if the first line is empty)."""
    first = lines[0] if len(lines) else ""
    return Range.on_line(0, 0, min(1, len(first)))


def locate(message: str, lines: Sequence[str]) -> Range:
    """
    Map *message* to a range in *lines*.  Never raises; the result is
    always inside the document.
    """
    for markers, scan in _BUCKETS:
        if not mentions_any(message, markers):
            continue
        found = scan(lines)
        if found is not None:
            return found
        logger.debug("No candidate line for %r; using document start", message)
        break
    return default_range(lines)


def diagnose(error_output: Optional[str], lines: Sequence[str]) -> list[Diagnostic]:
    """
    Turn raw validator output into at most one diagnostic.

    Unrecognised output produces no diagnostic rather than a made-up one.
    """
    message = extract_message(error_output)
    if message is None:
        if error_output:
            logger.debug("No error marker in validator output; no diagnostic")
        return []
    return [Diagnostic(range=locate(message, lines), message=message)]
