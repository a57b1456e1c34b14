from infrastructure.document_io import read_schema, write_schema, apply_patch, replace_all
from infrastructure.validator_runner import ValidatorRunner
from infrastructure.settings import LumosSettings, FormatSettings, ValidationSettings, ValidatorSettings

__all__ = [
    "read_schema",
    "write_schema",
    "apply_patch",
    "replace_all",
    "ValidatorRunner",
    "LumosSettings",
    "FormatSettings",
    "ValidationSettings",
    "ValidatorSettings",
]
