"""
API routes for the schema editor backend.
"""
from __future__ import annotations

from typing import Any, Literal, Optional

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, ValidationError

from core import FormatOptions
from formatting import format_text
from infrastructure import LumosSettings
from services.schema_service import SchemaService


router = APIRouter(prefix="/api")

# Singleton service, created in main.py and attached here
_service: Optional[SchemaService] = None


def init_service(svc: SchemaService) -> None:
    global _service
    _service = svc


def svc() -> SchemaService:
    if _service is None:
        raise RuntimeError("SchemaService not initialized")
    return _service


# ------------------------------------------------------------------
# Request / response models
# ------------------------------------------------------------------

class OpenRequest(BaseModel):
    doc_id: str
    text: str
    file_path: Optional[str] = None


class UpdateRequest(BaseModel):
    text: str


class FormatOptionsModel(BaseModel):
    indent_size: Literal[2, 4] = 4
    sort_attributes: bool = True
    align_fields: bool = True

    def to_options(self) -> FormatOptions:
        return FormatOptions(self.indent_size, self.sort_attributes, self.align_fields)


class FormatRequest(BaseModel):
    options: Optional[FormatOptionsModel] = None


class FormatTextRequest(BaseModel):
    text: str
    options: Optional[FormatOptionsModel] = None


class ValidateRequest(BaseModel):
    error_text: Optional[str] = None


class CompleteRequest(BaseModel):
    line_prefix: str = ""


class SettingsRequest(BaseModel):
    config: dict[str, Any]


# ------------------------------------------------------------------
# Documents
# ------------------------------------------------------------------

@router.post("/documents/open")
def open_document(req: OpenRequest):
    """Start tracking a document's text."""
    return svc().open(req.doc_id, req.text, req.file_path)


@router.get("/documents")
def list_documents():
    """List all open documents."""
    return svc().list_documents()


@router.put("/documents/{doc_id}")
def update_document(doc_id: str, req: UpdateRequest):
    """Replace a document's text after an editor change."""
    try:
        return svc().update(doc_id, req.text)
    except KeyError:
        raise HTTPException(404, f"Document not found: {doc_id}")


@router.delete("/documents/{doc_id}")
def close_document(doc_id: str):
    """Stop tracking a document."""
    svc().close(doc_id)
    return {"doc_id": doc_id, "closed": True}


# ------------------------------------------------------------------
# Formatting
# ------------------------------------------------------------------

@router.post("/documents/{doc_id}/format")
def format_document(doc_id: str, req: FormatRequest):
    """Return the whole-document replacement text."""
    options = req.options.to_options() if req.options else None
    try:
        return svc().format(doc_id, options)
    except KeyError:
        raise HTTPException(404, f"Document not found: {doc_id}")


@router.post("/format")
def format_snippet(req: FormatTextRequest):
    """Format text that is not tracked as a document."""
    options = req.options.to_options() if req.options else svc().settings.format.to_options()
    return {"text": format_text(req.text, options)}


# ------------------------------------------------------------------
# Diagnostics & quick fixes
# ------------------------------------------------------------------

@router.post("/documents/{doc_id}/validate")
def validate_document(doc_id: str, req: ValidateRequest):
    """Run a validation pass (or parse supplied error text)."""
    try:
        return svc().validate(doc_id, req.error_text)
    except KeyError:
        raise HTTPException(404, f"Document not found: {doc_id}")


@router.get("/documents/{doc_id}/diagnostics")
def get_diagnostics(doc_id: str):
    """Current authoritative diagnostics for a document."""
    try:
        return svc().get_diagnostics(doc_id)
    except KeyError:
        raise HTTPException(404, f"Document not found: {doc_id}")


@router.get("/documents/{doc_id}/diagnostics/{index}/fixes")
def get_fixes(doc_id: str, index: int):
    """Quick fixes offered for one diagnostic."""
    try:
        return svc().get_fixes(doc_id, index)
    except (KeyError, IndexError):
        raise HTTPException(404, "Document or diagnostic not found")


@router.post("/documents/{doc_id}/diagnostics/{index}/fixes/{fix_index}/apply")
def apply_fix(doc_id: str, index: int, fix_index: int):
    """Apply one quick fix to the tracked document."""
    try:
        return svc().apply_fix(doc_id, index, fix_index)
    except (KeyError, IndexError):
        raise HTTPException(404, "Document, diagnostic or fix not found")


# ------------------------------------------------------------------
# Completion & settings
# ------------------------------------------------------------------

@router.post("/complete")
def complete(req: CompleteRequest):
    """Completion items for the text before the cursor."""
    return svc().complete(req.line_prefix)


@router.put("/settings")
def update_settings(req: SettingsRequest):
    """Replace the editor settings (dotted keys, e.g. ``format.indentSize``)."""
    try:
        settings = LumosSettings.from_editor_config(req.config)
    except ValidationError as e:
        raise HTTPException(422, str(e))
    svc().configure(settings)
    return settings.model_dump()
