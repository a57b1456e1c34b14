"""
Document I/O — read a schema file into a SchemaDocument, write it back,
and apply the edits the core proposes.

Load flow:
    file → text (UTF-8) → SchemaDocument.from_text (remembers CRLF)

Edit flow:
    formatter → whole-document text → replace_all(document, text)
    quick fix → TextPatch           → apply_patch(document, patch)

Save flow:
    document.text → file
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from core.document import SchemaDocument
from core.text_patch import TextPatch

logger = logging.getLogger(__name__)

SCHEMA_SUFFIX = ".lumos"


def is_schema_file(path: str | Path) -> bool:
    return Path(path).suffix == SCHEMA_SUFFIX


def read_schema(file_path: str | Path) -> SchemaDocument:
    """Read a schema file.  Raises ``FileNotFoundError`` if it is missing."""
    path = Path(file_path)
    with path.open(encoding="utf-8", newline="") as f:
        text = f.read()
    logger.debug("Read %s (%d chars)", path, len(text))
    return SchemaDocument.from_text(text, file_path=str(path))


def write_schema(
    document: SchemaDocument,
    file_path: str | Path | None = None,
) -> Path:
    """Write *document* to *file_path* (or its own path).  Returns the target."""
    target_str = str(file_path) if file_path else document.file_path
    if not target_str:
        raise ValueError("No file path specified and document has no path.")
    target = Path(target_str)
    # newline="" keeps the document's own line endings
    with target.open("w", encoding="utf-8", newline="") as f:
        f.write(document.text)
    logger.info("Wrote %s (%d lines)", target, len(document))
    return target


def apply_patch(document: SchemaDocument, patch: TextPatch) -> SchemaDocument:
    """Apply a single quick-fix patch, returning the new document."""
    return document.apply(patch)


def replace_all(document: SchemaDocument, text: Optional[str]) -> SchemaDocument:
    """Apply a whole-document replacement (formatter output)."""
    if text is None:
        return document
    return document.replace_all(text)
