"""
Completion catalogue for schema files.

Suggestions depend only on the text before the cursor:

    inside an unterminated '#['   → attributes
    right after a ':'             → types
    at the start of a line        → keywords, then attributes
    anywhere else                 → types, keywords, attributes
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from formatting.classifier import ATTRIBUTE_MARKER, FIELD_SEPARATOR


class CompletionKind(Enum):
    KEYWORD = "keyword"
    TYPE = "type"
    ATTRIBUTE = "attribute"


@dataclass(frozen=True, slots=True)
class CompletionItem:
    label: str
    kind: CompletionKind
    detail: str = ""
    documentation: str = ""
    insert_text: str = ""

    def __post_init__(self):
        if not self.insert_text:
            object.__setattr__(self, "insert_text", self.label)


def _integer_types() -> list[CompletionItem]:
    items = []
    for prefix, word in (("u", "Unsigned"), ("i", "Signed")):
        for bits in (8, 16, 32, 64, 128):
            name = f"{prefix}{bits}"
            items.append(CompletionItem(
                name, CompletionKind.TYPE,
                detail=f"{word} {bits}-bit integer",
                documentation=f"Primitive {word.lower()} integer type ({name})",
            ))
    return items


TYPES: tuple[CompletionItem, ...] = (
    *_integer_types(),
    CompletionItem("bool", CompletionKind.TYPE, "Boolean type", "Boolean value (true/false)"),
    CompletionItem("String", CompletionKind.TYPE, "String type", "UTF-8 encoded string"),
    CompletionItem("PublicKey", CompletionKind.TYPE, "Solana public key",
                   "Solana account public key (32 bytes)"),
    CompletionItem("Signature", CompletionKind.TYPE, "Solana signature",
                   "Cryptographic signature (64 bytes)"),
    CompletionItem("Vec", CompletionKind.TYPE, "Vector type",
                   "Dynamic array: `Vec<T>`, e.g. `Vec<PublicKey>`", insert_text="Vec<>"),
    CompletionItem("Option", CompletionKind.TYPE, "Optional type",
                   "Optional value: `Option<T>`, e.g. `Option<u64>`", insert_text="Option<>"),
)

KEYWORDS: tuple[CompletionItem, ...] = (
    CompletionItem("struct", CompletionKind.KEYWORD, "Define a struct", "Define a data structure"),
    CompletionItem("enum", CompletionKind.KEYWORD, "Define an enum", "Define an enumeration"),
    CompletionItem("pub", CompletionKind.KEYWORD, "Public visibility", "Make item public"),
)

ATTRIBUTES: tuple[CompletionItem, ...] = (
    CompletionItem("#[solana]", CompletionKind.ATTRIBUTE, "Solana attribute",
                   "Mark type for Solana-specific code generation"),
    CompletionItem("#[account]", CompletionKind.ATTRIBUTE, "Anchor account attribute",
                   "Mark struct as Anchor account"),
    CompletionItem("#[derive]", CompletionKind.ATTRIBUTE, "Derive traits",
                   "Derive common traits, e.g. `#[derive(Debug, Clone)]`",
                   insert_text="#[derive()]"),
)


def in_attribute(line_prefix: str) -> bool:
    return ATTRIBUTE_MARKER in line_prefix and "]" not in line_prefix


def after_separator(line_prefix: str) -> bool:
    return line_prefix.strip().endswith(FIELD_SEPARATOR)


def at_line_start(line_prefix: str) -> bool:
    return not line_prefix.strip()


def complete(line_prefix: str) -> list[CompletionItem]:
    """Return completions for the text between line start and cursor."""
    if in_attribute(line_prefix):
        return list(ATTRIBUTES)
    if after_separator(line_prefix):
        return list(TYPES)
    if at_line_start(line_prefix):
        return [*KEYWORDS, *ATTRIBUTES]
    return [*TYPES, *KEYWORDS, *ATTRIBUTES]
