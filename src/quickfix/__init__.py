from quickfix.rules import FixRule, BUILTIN_RULES, TYPE_CASING
from quickfix.engine import propose_fixes

__all__ = [
    "FixRule",
    "BUILTIN_RULES",
    "TYPE_CASING",
    "propose_fixes",
]
