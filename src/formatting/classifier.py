"""
Line classifier — maps one line of schema text to a ``LineKind``.

Classification is purely lexical: it looks at the trimmed text of the
current line plus a single bit of caller state (are we inside a struct
body?).  It never peeks at neighbouring lines, so a
comment containing ':' inside a struct is treated as a field line.

Rules, first match wins:
    1. empty after trimming          → BLANK
    2. starts with '#['              → ATTRIBUTE
    3. struct / enum / pub struct /
       pub enum keyword              → STRUCT_OR_ENUM_OPEN
    4. starts with '}'               → BLOCK_CLOSE
    5. in struct body and has ':'    → FIELD
    6. anything else                 → OTHER
"""
from __future__ import annotations

import re

from core.line_kind import LineKind

# ---- shared constants (formatter + locator + quick fixes) ----

ATTRIBUTE_MARKER = "#["
FIELD_SEPARATOR = ":"
TERMINATOR = ";"
BLOCK_OPEN = "{"
BLOCK_CLOSE = "}"

_DECLARATION_RE = re.compile(r"^(?:pub\s+)?(?:struct|enum)\b")
_STRUCT_WORD_RE = re.compile(r"\bstruct\b")


def is_blank(text: str) -> bool:
    return not text.strip()


def is_attribute(text: str) -> bool:
    return text.strip().startswith(ATTRIBUTE_MARKER)


def is_declaration(text: str) -> bool:
    return _DECLARATION_RE.match(text.strip()) is not None


def mentions_struct(text: str) -> bool:
    """True if *text* contains the ``struct`` keyword as a whole word."""
    return _STRUCT_WORD_RE.search(text) is not None


def opens_block(text: str) -> bool:
    return text.strip().endswith(BLOCK_OPEN)


def is_lone_block_open(text: str) -> bool:
    return text.strip() == BLOCK_OPEN


def classify(text: str, in_struct_body: bool = False) -> LineKind:
    """Classify a single raw line."""
    trimmed = text.strip()
    if not trimmed:
        return LineKind.BLANK
    if trimmed.startswith(ATTRIBUTE_MARKER):
        return LineKind.ATTRIBUTE
    if _DECLARATION_RE.match(trimmed):
        return LineKind.STRUCT_OR_ENUM_OPEN
    if trimmed.startswith(BLOCK_CLOSE):
        return LineKind.BLOCK_CLOSE
    if in_struct_body and FIELD_SEPARATOR in trimmed:
        return LineKind.FIELD
    return LineKind.OTHER
