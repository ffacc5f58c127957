"""Finalization steps run after the placeholders are resolved."""

from initializer.strategies.finalize.cleanup import SelfDeleter
from initializer.strategies.finalize.notice import CompletionNotice
from initializer.strategies.finalize.readme import DocTrimmer, trim_section

__all__ = [
    "DocTrimmer",
    "trim_section",
    "CompletionNotice",
    "SelfDeleter",
]
