from formatting.classifier import classify
from formatting.attributes import sort_attributes
from formatting.aligner import align_fields, split_field
from formatting.formatter import FormatterState, SchemaFormatter, format_text

__all__ = [
    "classify",
    "sort_attributes",
    "align_fields",
    "split_field",
    "FormatterState",
    "SchemaFormatter",
    "format_text",
]
