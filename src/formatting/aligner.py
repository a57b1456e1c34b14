"""
Struct field aligner — column-aligns the ':' of a batch of field lines.

A batch is whatever the formatter collected between entering and
leaving one struct body, so sibling structs are aligned independently.

Each field line is split at its *first* separator::

    name   : rest
    ^^^^---^ padded to the longest name in the batch

Lines in the batch that are not fields (blank lines, attributes,
comments, fields missing their separator) keep their position and are
re-indented without padding; blank lines stay empty.
"""
from __future__ import annotations

from typing import Optional, Sequence

from formatting.classifier import ATTRIBUTE_MARKER, FIELD_SEPARATOR


def split_field(text: str) -> Optional[tuple[str, str]]:
    """
    Split a field line into ``(name, rest)``.

    Returns ``None`` for lines that do not look like ``name: type``.
    Stray single separators before the type are dropped, so ``a:: u8``
    becomes ``("a", "u8")``.  A path separator is kept intact:
    ``x: ::std::Foo`` gives ``("x", "::std::Foo")``.
    """
    trimmed = text.strip()
    if trimmed.startswith(ATTRIBUTE_MARKER):
        return None
    idx = trimmed.find(FIELD_SEPARATOR)
    if idx <= 0:
        return None
    name = trimmed[:idx].strip()
    rest = trimmed[idx + 1:].strip()
    while rest.startswith(FIELD_SEPARATOR) and not rest.startswith(FIELD_SEPARATOR * 2):
        rest = rest[1:].strip()
    return name, rest


def align_fields(
    field_lines: Sequence[str],
    indent_level: int,
    indent_size: int,
    align: bool = True,
) -> list[str]:
    """
    Format a batch of struct-body lines at *indent_level*.

    With *align* off, every line is only re-indented.
    """
    indent = " " * (max(indent_level, 0) * indent_size)
    parsed = [split_field(line) if align else None for line in field_lines]
    max_name = max((len(p[0]) for p in parsed if p is not None), default=0)

    out: list[str] = []
    for raw, fields in zip(field_lines, parsed):
        trimmed = raw.strip()
        if not trimmed:
            out.append("")
        elif fields is None:
            out.append(indent + trimmed)
        else:
            name, rest = fields
            padding = " " * (max_name - len(name))
            out.append(f"{indent}{name}{padding}{FIELD_SEPARATOR} {rest}".rstrip())
    return out
