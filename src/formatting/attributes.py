"""
Attribute sorter — normalises the order of an attribute run.

Only a contiguous run of attribute lines is ever sorted; the formatter
decides where a run ends (the next non-attribute line).
"""
from __future__ import annotations

from typing import Sequence


def sort_attributes(attributes: Sequence[str], enabled: bool = True) -> list[str]:
    """Return trimmed attribute lines, sorted by plain string comparison when *enabled*."""
    trimmed = [attr.strip() for attr in attributes]
    if enabled:
        trimmed.sort()
    return trimmed
