from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class FormatOptions:
    """
    Knobs for one formatting run.

    Built from editor settings by ``infrastructure.settings``; the
    formatter itself never reads configuration.
    """
    indent_size: int = 4
    sort_attributes: bool = True
    align_fields: bool = True

    def __post_init__(self):
        if self.indent_size <= 0:
            raise ValueError(f"indent_size must be positive, got {self.indent_size}")

    def indent(self, level: int) -> str:
        return " " * (max(level, 0) * self.indent_size)
