from diagnostics.extractor import extract_message
from diagnostics.locator import diagnose, locate, default_range

__all__ = [
    "extract_message",
    "diagnose",
    "locate",
    "default_range",
]
