"""
SchemaService — the bridge between the API layer and the schema tooling.

Manages:
- Open documents (keyed by a doc_id string) and their version counter
- One DiagnosticSession per document
- Format / validate / quick-fix / completion requests

The service never applies a formatting result on its own: the editor
receives the replacement text, applies it, and sends the new text back
through ``update``.  Quick fixes are the exception, because the editor
asks for a specific fix to be applied by index.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from completion import complete
from core import (
    Diagnostic,
    FormatOptions,
    IValidatorRunner,
    QuickFix,
    SchemaDocument,
    TextPatch,
    ValidatorError,
)
from core.position import Range
from diagnostics import diagnose
from formatting import format_text
from infrastructure import LumosSettings, apply_patch
from quickfix import propose_fixes
from services.diagnostic_session import DiagnosticSession

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class OpenDocument:
    document: SchemaDocument
    session: DiagnosticSession
    version: int = 1
    fixes: dict[int, list[QuickFix]] = field(default_factory=dict)


class SchemaService:
    """
    Facade that the API layer calls. One instance per application.
    """

    def __init__(
        self,
        settings: Optional[LumosSettings] = None,
        runner: Optional[IValidatorRunner] = None,
    ):
        self.settings: LumosSettings = settings or LumosSettings()
        self._owns_runner = runner is None
        self._runner: IValidatorRunner = runner or self.settings.validator.to_runner()
        self._documents: dict[str, OpenDocument] = {}

    def configure(self, settings: LumosSettings) -> None:
        """Swap in new editor settings; an injected runner is kept."""
        self.settings = settings
        if self._owns_runner:
            self._runner = settings.validator.to_runner()
        logger.info("Settings updated (indent=%d, validation=%s)",
                    settings.format.indent_size, settings.validation.enabled)

    # ------------------------------------------------------------------
    # Document lifecycle
    # ------------------------------------------------------------------

    def open(self, doc_id: str, text: str, file_path: Optional[str] = None) -> dict:
        document = SchemaDocument.from_text(text, file_path=file_path)
        self._documents[doc_id] = OpenDocument(document, DiagnosticSession(doc_id))
        logger.info("Opened document %s (%d lines, path=%s)", doc_id, len(document), file_path)
        return self._document_summary(doc_id)

    def update(self, doc_id: str, text: str) -> dict:
        """Replace the document text after an edit made in the editor."""
        entry = self._documents[doc_id]
        entry.document = entry.document.replace_all(text)
        entry.version += 1
        entry.fixes.clear()
        logger.debug("Updated document %s to version %d", doc_id, entry.version)
        return self._document_summary(doc_id)

    def close(self, doc_id: str) -> None:
        entry = self._documents.pop(doc_id, None)
        if entry is not None:
            entry.session.clear()
        logger.info("Closed document %s", doc_id)

    def list_documents(self) -> list[dict]:
        return [self._document_summary(did) for did in self._documents]

    def get_document(self, doc_id: str) -> SchemaDocument:
        return self._documents[doc_id].document

    def get_text(self, doc_id: str) -> str:
        return self._documents[doc_id].document.text

    # ------------------------------------------------------------------
    # Formatting
    # ------------------------------------------------------------------

    def format(self, doc_id: str, options: Optional[FormatOptions] = None) -> dict:
        """Return the whole-document replacement for *doc_id* (not applied)."""
        document = self._documents[doc_id].document
        opts = options or self.settings.format.to_options()
        source = "\n".join(document.lines)
        formatted = format_text(source, opts)
        changed = formatted != source
        if document.eol != "\n":
            formatted = formatted.replace("\n", document.eol)
        return {
            "doc_id": doc_id,
            "range": range_to_json(document.full_range()),
            "text": formatted,
            "changed": changed,
        }

    # ------------------------------------------------------------------
    # Validation / diagnostics
    # ------------------------------------------------------------------

    def validate(self, doc_id: str, error_text: Optional[str] = None) -> list[dict]:
        """
        Run one validation pass and publish its diagnostics.

        With *error_text* the external validator is skipped and the text
        is treated as its output.  Untitled documents (no file path) and a
        validator that cannot be started leave an empty set; disabled
        validation publishes nothing new.
        """
        entry = self._documents[doc_id]

        if error_text is None:
            if not self.settings.validation.enabled:
                logger.debug("Validation disabled; skipping %s", doc_id)
                return self.get_diagnostics(doc_id)
            path = entry.document.file_path
            if not path:
                logger.debug("Skipping validation of untitled document %s", doc_id)
                entry.session.clear()
                entry.fixes.clear()
                return []
            generation = entry.session.begin()
            try:
                error_text = self._runner.run(path)
            except ValidatorError as exc:
                logger.warning("Validation of %s skipped: %s", doc_id, exc)
                entry.session.publish(generation, ())
                entry.fixes.clear()
                return self.get_diagnostics(doc_id)
        else:
            generation = entry.session.begin()

        diagnostics = diagnose(error_text, entry.document.lines)
        if entry.session.publish(generation, diagnostics):
            entry.fixes.clear()
            logger.info("Published %d diagnostic(s) for %s", len(diagnostics), doc_id)
        return self.get_diagnostics(doc_id)

    def get_diagnostics(self, doc_id: str) -> list[dict]:
        session = self._documents[doc_id].session
        return [diagnostic_to_json(i, d) for i, d in enumerate(session.diagnostics)]

    # ------------------------------------------------------------------
    # Quick fixes
    # ------------------------------------------------------------------

    def get_fixes(self, doc_id: str, index: int) -> list[dict]:
        """Quick fixes for the diagnostic at *index*.  Raises IndexError."""
        return [quick_fix_to_json(i, f) for i, f in enumerate(self._fixes_for(doc_id, index))]

    def apply_fix(self, doc_id: str, index: int, fix_index: int) -> dict:
        """
        Apply one quick fix to the stored document.

        Diagnostics are cleared afterwards: fixes are not safe to apply
        twice, so the caller must re-validate before asking again.
        """
        entry = self._documents[doc_id]
        fixes = self._fixes_for(doc_id, index)
        if fix_index < 0:
            raise IndexError(f"Fix index must be non-negative, got {fix_index}")
        fix = fixes[fix_index]
        entry.document = apply_patch(entry.document, fix.patch)
        entry.version += 1
        entry.fixes.clear()
        entry.session.clear()
        logger.info("Applied fix %r to %s (version %d)", fix.title, doc_id, entry.version)
        return {
            **self._document_summary(doc_id),
            "applied": quick_fix_to_json(fix_index, fix),
            "text": entry.document.text,
        }

    def _fixes_for(self, doc_id: str, index: int) -> list[QuickFix]:
        entry = self._documents[doc_id]
        if index < 0:
            raise IndexError(f"Diagnostic index must be non-negative, got {index}")
        if index not in entry.fixes:
            diagnostic = entry.session.diagnostics[index]
            entry.fixes[index] = propose_fixes(diagnostic, entry.document.lines)
        return entry.fixes[index]

    # ------------------------------------------------------------------
    # Completion
    # ------------------------------------------------------------------

    def complete(self, line_prefix: str) -> list[dict]:
        return [
            {
                "label": item.label,
                "kind": item.kind.value,
                "detail": item.detail,
                "documentation": item.documentation,
                "insert_text": item.insert_text,
            }
            for item in complete(line_prefix)
        ]

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------

    def _document_summary(self, doc_id: str) -> dict:
        entry = self._documents[doc_id]
        return {
            "doc_id": doc_id,
            "file_path": entry.document.file_path,
            "version": entry.version,
            "total_lines": len(entry.document),
            "diagnostics": len(entry.session.diagnostics),
        }


def range_to_json(rng: Range) -> dict:
    return {
        "start": {"line": rng.start.line, "column": rng.start.column},
        "end": {"line": rng.end.line, "column": rng.end.column},
    }


def diagnostic_to_json(index: int, diagnostic: Diagnostic) -> dict:
    return {
        "index": index,
        "range": range_to_json(diagnostic.range),
        "message": diagnostic.message,
        "severity": diagnostic.severity.value,
        "source": diagnostic.source,
    }


def patch_to_json(patch: TextPatch) -> dict:
    return {"range": range_to_json(patch.range), "new_text": patch.new_text}


def quick_fix_to_json(index: int, fix: QuickFix) -> dict:
    return {
        "index": index,
        "title": fix.title,
        "is_preferred": fix.is_preferred,
        "patch": patch_to_json(fix.patch),
    }
