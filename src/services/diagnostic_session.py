"""
DiagnosticSession — the single authoritative diagnostic set for one document.

Validation passes may overlap (a slow validator run is still going when
the user types again).  Each pass takes a generation number from
``begin()``; ``publish()`` only accepts results from the newest
generation and replaces the previous set wholesale.  Readers therefore
never see a merge of two passes or a stale pass overwriting a newer one.
"""
from __future__ import annotations

import logging
from threading import RLock
from typing import Iterable

from core.diagnostic import Diagnostic

logger = logging.getLogger(__name__)


class DiagnosticSession:

    __slots__ = ("doc_id", "_generation", "_diagnostics", "_lock")

    def __init__(self, doc_id: str):
        self.doc_id = doc_id
        self._generation = 0
        self._diagnostics: tuple[Diagnostic, ...] = ()
        self._lock = RLock()

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return self._diagnostics

    def begin(self) -> int:
        """Start a new pass; any pass started earlier becomes stale."""
        with self._lock:
            self._generation += 1
            return self._generation

    def publish(self, generation: int, diagnostics: Iterable[Diagnostic]) -> bool:
        """Replace the diagnostic set if *generation* is still current."""
        with self._lock:
            if generation != self._generation:
                logger.warning(
                    "Dropping stale diagnostics for %s (generation %d, current %d)",
                    self.doc_id, generation, self._generation,
                )
                return False
            self._diagnostics = tuple(diagnostics)
            return True

    def clear(self) -> None:
        """Forget all diagnostics and invalidate any pass in flight."""
        with self._lock:
            self._generation += 1
            self._diagnostics = ()
