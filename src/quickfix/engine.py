"""
Quick-fix engine — turns one diagnostic into zero or more titled patches.

Every rule whose trigger matches contributes a fix, in rule priority
order; the first fix returned is marked preferred.  The locator, by
contrast, stops at its first matching heuristic.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence

from core.diagnostic import DIAGNOSTIC_SOURCE, Diagnostic
from core.text_patch import QuickFix
from quickfix.rules import BUILTIN_RULES, FixRule

logger = logging.getLogger(__name__)


def propose_fixes(
    diagnostic: Diagnostic,
    lines: Sequence[str],
    rules: Optional[Sequence[FixRule]] = None,
) -> list[QuickFix]:
    """Return the quick fixes applicable to *diagnostic*.  Never raises."""
    if diagnostic.source != DIAGNOSTIC_SOURCE:
        return []

    message = diagnostic.message.lower()
    fixes: list[QuickFix] = []
    for rule in rules if rules is not None else BUILTIN_RULES:
        if not rule.trigger(message):
            continue
        built = rule.build(lines, diagnostic)
        if built is None:
            logger.debug("Rule %s matched but produced no fix for line %d",
                         rule.name, diagnostic.line)
            continue
        title, patch = built
        fixes.append(QuickFix(
            title=title,
            patch=patch,
            diagnostic=diagnostic,
            is_preferred=not fixes,
        ))
    return fixes
