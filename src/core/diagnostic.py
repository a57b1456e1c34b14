"""
Diagnostic — one located problem reported against a schema document.

Diagnostics are created fresh for every validation pass; a newer pass
replaces the previous set wholesale (see ``services.diagnostic_session``).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from core.position import Range

DIAGNOSTIC_SOURCE = "LUMOS"


class Severity(Enum):
    ERROR = "error"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """
    Attributes:
        range:    Heuristic location of the problem (see ``diagnostics.locator``).
        message:  Error text extracted from the validator output, verbatim.
        severity: Always ``ERROR`` for validator-reported problems.
        source:   Producer tag; quick fixes only act on ``"LUMOS"`` diagnostics.
    """
    range: Range
    message: str
    severity: Severity = Severity.ERROR
    source: str = DIAGNOSTIC_SOURCE

    @property
    def line(self) -> int:
        """The anchor line quick fixes operate on."""
        return self.range.start.line
