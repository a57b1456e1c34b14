"""
Editor settings — validated with pydantic and turned into core options.

The editor sends its configuration as a flat mapping using the add-on's
setting names::

    {"format.indentSize": 2, "format.sortAttributes": false,
     "validation.enabled": true, "validator.path": "/opt/bin/lumos"}

Unknown keys are ignored so newer editors can talk to older backends.
"""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Literal, Mapping

from pydantic import BaseModel, Field

from core.format_options import FormatOptions
from infrastructure.validator_runner import DEFAULT_COMMAND, DEFAULT_TIMEOUT, ValidatorRunner

logger = logging.getLogger(__name__)


class FormatSettings(BaseModel):
    indent_size: Literal[2, 4] = Field(4, alias="indentSize")
    sort_attributes: bool = Field(True, alias="sortAttributes")
    align_fields: bool = Field(True, alias="alignFields")

    model_config = {"populate_by_name": True}

    def to_options(self) -> FormatOptions:
        return FormatOptions(
            indent_size=self.indent_size,
            sort_attributes=self.sort_attributes,
            align_fields=self.align_fields,
        )


class ValidationSettings(BaseModel):
    """
    ``enabled`` gates ``SchemaService.validate``.  ``debounce_ms`` is not
    used by the backend; it is echoed back by ``PUT /api/settings`` so the
    editor client can delay validate requests while the user types.
    """
    enabled: bool = True
    debounce_ms: int = Field(500, alias="debounceMs", ge=0)

    model_config = {"populate_by_name": True}


class ValidatorSettings(BaseModel):
    path: str = DEFAULT_COMMAND
    timeout: float = Field(DEFAULT_TIMEOUT, gt=0)

    def to_runner(self) -> ValidatorRunner:
        return ValidatorRunner(command=self.path, timeout=self.timeout)


class LumosSettings(BaseModel):
    format: FormatSettings = Field(default_factory=FormatSettings)
    validation: ValidationSettings = Field(default_factory=ValidationSettings)
    validator: ValidatorSettings = Field(default_factory=ValidatorSettings)

    @classmethod
    def from_editor_config(cls, config: Mapping[str, Any]) -> LumosSettings:
        """
        Build settings from dotted editor keys (``format.indentSize``).

        A leading ``lumos.`` section prefix is accepted and stripped.
        Raises ``pydantic.ValidationError`` on invalid values.
        """
        sections: dict[str, dict[str, Any]] = {name: {} for name in cls.model_fields}
        for key, value in config.items():
            if key.startswith("lumos."):
                key = key[len("lumos."):]
            section, _, name = key.partition(".")
            if section not in sections or not name:
                logger.debug("Ignoring unknown setting %r", key)
                continue
            sections[section][name] = value
        return cls.model_validate(sections)

    @classmethod
    def load(cls, file_path: str | Path) -> LumosSettings:
        """Load dotted editor keys from a JSON file."""
        path = Path(file_path)
        data = json.loads(path.read_text(encoding="utf-8"))
        if not isinstance(data, dict):
            raise ValueError(f"Settings file {path} must contain a JSON object")
        logger.info("Loaded settings from %s", path)
        return cls.from_editor_config(data)
