"""Concrete step implementations."""

from initializer.strategies.finalize import (
    CompletionNotice,
    DocTrimmer,
    SelfDeleter,
)
from initializer.strategies.placeholders import (
    ContentSubstituter,
    PathRenamer,
    PromptCollector,
)

__all__ = [
    "PromptCollector",
    "ContentSubstituter",
    "PathRenamer",
    "DocTrimmer",
    "CompletionNotice",
    "SelfDeleter",
]
