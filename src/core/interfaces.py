"""
Core interfaces for collaborators the schema tooling depends on.

- IValidatorRunner: protocol for running the external schema validator
"""
from __future__ import annotations

from typing import Optional, Protocol


class IValidatorRunner(Protocol):
    """
    Protocol for the external validator.
    The service depends on this protocol, not on the subprocess runner.
    """

    def run(self, file_path: str) -> Optional[str]:
        """
        Validate the file at *file_path*.

        Returns ``None`` on success, otherwise the raw error output.
        """
        ...
