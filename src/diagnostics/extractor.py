"""
Error message extractor — pulls one representative message out of the
validator's free-form error output.

The validator reports failures like::

    Error: Failed to parse schema: wallet.lumos
    Caused by:
        Schema parsing error: expected `:`

The most specific text wins: the line after ``Caused by:`` (minus an
optional ``Schema parsing error:`` prefix), else the text after the
first ``Error:`` marker.  Anything else yields no message.
"""
from __future__ import annotations

import re
from typing import Optional

_CAUSED_BY_RE = re.compile(
    r"Caused by:\s*(?:Schema parsing error:\s*)?(.+)",
    re.IGNORECASE,
)
_ERROR_RE = re.compile(r"error:\s*(.+)", re.IGNORECASE)


def extract_message(error_output: Optional[str]) -> Optional[str]:
    """Return the most specific error message in *error_output*, or ``None``."""
    if not error_output:
        return None
    for pattern in (_CAUSED_BY_RE, _ERROR_RE):
        match = pattern.search(error_output)
        if match:
            message = match.group(1).strip()
            if message:
                return message
    return None
