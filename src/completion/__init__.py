from completion.catalog import CompletionItem, CompletionKind, complete

__all__ = [
    "CompletionItem",
    "CompletionKind",
    "complete",
]
