"""
Base error hierarchy for the schema tooling.

The formatter, locator and quick-fix engine never raise; these errors
belong to the collaborators around them (the external validator).
"""
from __future__ import annotations


class LumosError(Exception):
    """Base class for all schema tooling errors."""


class ValidatorError(LumosError):
    """Raised when the external validator could not be run at all."""


class ValidatorUnavailableError(ValidatorError):
    """Raised when the validator executable cannot be found."""
