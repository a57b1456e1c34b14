"""
Quick-fix rules — one trigger + builder pair per kind of fix.

A trigger sees the lowercased diagnostic message; a builder sees the
document lines and the diagnostic and returns a ``TextPatch`` or
``None`` when the anchor line does not have the expected shape.
Builders are pure: calling them twice gives the same patch.  Applying
a patch twice is *not* safe (e.g. a second ';' would be inserted);
callers re-validate after every edit.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from core.diagnostic import Diagnostic
from core.position import Range
from core.text_patch import TextPatch
from formatting.classifier import ATTRIBUTE_MARKER, FIELD_SEPARATOR, TERMINATOR, mentions_struct

# Lowercase spellings the validator rejects → canonical type names.
# Order matters: the first entry found on the anchor line wins.
TYPE_CASING: tuple[tuple[str, str], ...] = (
    ("pubkey", "PublicKey"),
    ("publickey", "PublicKey"),
    ("signature", "Signature"),
    ("vec", "Vec"),
    ("option", "Option"),
    ("string", "String"),
)

# Attributes the validator can demand; the first one named in the message wins.
REQUIRED_ATTRIBUTES: tuple[str, ...] = ("solana", "account")
DEFAULT_REQUIRED_ATTRIBUTE = "solana"

# How many lines below the diagnostic to search for the struct declaration.
STRUCT_LOOKAHEAD = 5

_TWO_TOKENS_RE = re.compile(r"(\w+)\s+(\w+)")
_LEADING_WS_RE = re.compile(r"^\s*")


@dataclass(frozen=True, slots=True)
class FixRule:
    """
    Attributes:
        name:    Stable identifier, useful in logs and tests.
        trigger: Predicate over the lowercased diagnostic message.
        build:   Returns ``(title, patch)`` or ``None`` if the fix does not apply.
    """
    name: str
    trigger: Callable[[str], bool]
    build: Callable[[Sequence[str], Diagnostic], Optional[tuple[str, TextPatch]]]


def _anchor(lines: Sequence[str], diagnostic: Diagnostic) -> Optional[str]:
    line_no = diagnostic.line
    if line_no >= len(lines):
        return None
    return lines[line_no]


# ------------------------------------------------------------------
# Insert missing ':' between field name and type
# ------------------------------------------------------------------

def _wants_separator(message: str) -> bool:
    return "expected `:`" in message or 'expected ":"' in message or "missing colon" in message


def build_insert_separator(
    lines: Sequence[str], diagnostic: Diagnostic,
) -> Optional[tuple[str, TextPatch]]:
    text = _anchor(lines, diagnostic)
    if text is None:
        return None
    match = _TWO_TOKENS_RE.search(text)
    if not match:
        return None
    column = match.end(1)
    patch = TextPatch(Range.point(diagnostic.line, column), FIELD_SEPARATOR)
    return "Add colon after field name", patch


# ------------------------------------------------------------------
# Insert missing ';' at the end of the line
# ------------------------------------------------------------------

def _wants_terminator(message: str) -> bool:
    return "expected `;`" in message or 'expected ";"' in message or "semicolon" in message


def build_insert_terminator(
    lines: Sequence[str], diagnostic: Diagnostic,
) -> Optional[tuple[str, TextPatch]]:
    text = _anchor(lines, diagnostic)
    if text is None or not text.strip():
        return None
    column = len(text.rstrip())
    patch = TextPatch(Range.point(diagnostic.line, column), TERMINATOR)
    return "Add semicolon at end of line", patch


# ------------------------------------------------------------------
# Correct type casing (pubkey → PublicKey)
# ------------------------------------------------------------------

def _wants_casing(message: str) -> bool:
    return "unknown type" in message or "pubkey" in message


def build_correct_casing(
    lines: Sequence[str], diagnostic: Diagnostic,
) -> Optional[tuple[str, TextPatch]]:
    text = _anchor(lines, diagnostic)
    if text is None:
        return None
    for wrong, correct in TYPE_CASING:
        pattern = re.compile(rf"\b{re.escape(wrong)}\b", re.IGNORECASE)
        if not any(m.group(0) != correct for m in pattern.finditer(text)):
            continue
        new_text = pattern.sub(correct, text)
        patch = TextPatch(Range.on_line(diagnostic.line, 0, len(text)), new_text)
        return f"Change '{wrong}' to '{correct}'", patch
    return None


# ------------------------------------------------------------------
# Insert a required attribute above the struct declaration
# ------------------------------------------------------------------

def _wants_attribute(message: str) -> bool:
    return "attribute" in message and any(name in message for name in REQUIRED_ATTRIBUTES)


def required_attribute_name(message: str) -> str:
    lowered = message.lower()
    for name in REQUIRED_ATTRIBUTES:
        if name in lowered:
            return name
    return DEFAULT_REQUIRED_ATTRIBUTE


def _already_annotated(lines: Sequence[str], struct_line: int, attribute: str) -> bool:
    i = struct_line - 1
    while i >= 0 and lines[i].strip().startswith(ATTRIBUTE_MARKER):
        if lines[i].strip() == attribute:
            return True
        i -= 1
    return False


def build_insert_attribute(
    lines: Sequence[str], diagnostic: Diagnostic,
) -> Optional[tuple[str, TextPatch]]:
    start = diagnostic.line
    stop = min(start + STRUCT_LOOKAHEAD, len(lines))
    struct_line = next((i for i in range(start, stop) if mentions_struct(lines[i])), None)
    if struct_line is None:
        return None

    attribute = f"{ATTRIBUTE_MARKER}{required_attribute_name(diagnostic.message)}]"
    if _already_annotated(lines, struct_line, attribute):
        return None

    indentation = _LEADING_WS_RE.match(lines[struct_line]).group(0)
    patch = TextPatch(Range.point(struct_line, 0), f"{indentation}{attribute}\n")
    return f"Add {attribute} attribute", patch


# Priority order; every triggered rule contributes its fix.
BUILTIN_RULES: tuple[FixRule, ...] = (
    FixRule("insert-separator", _wants_separator, build_insert_separator),
    FixRule("insert-terminator", _wants_terminator, build_insert_terminator),
    FixRule("correct-casing", _wants_casing, build_correct_casing),
    FixRule("insert-attribute", _wants_attribute, build_insert_attribute),
)
