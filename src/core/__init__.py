from core.line_kind import LineKind
from core.position import Position, Range
from core.format_options import FormatOptions
from core.diagnostic import Diagnostic, Severity, DIAGNOSTIC_SOURCE
from core.text_patch import TextPatch, QuickFix
from core.document import SchemaDocument
from core.errors import LumosError, ValidatorError, ValidatorUnavailableError
from core.interfaces import IValidatorRunner

__all__ = [
    "LineKind",
    "Position",
    "Range",
    "FormatOptions",
    "Diagnostic",
    "Severity",
    "DIAGNOSTIC_SOURCE",
    "TextPatch",
    "QuickFix",
    "SchemaDocument",
    "LumosError",
    "ValidatorError",
    "ValidatorUnavailableError",
    "IValidatorRunner",
]
