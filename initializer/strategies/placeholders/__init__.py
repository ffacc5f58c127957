"""Placeholder strategies.

Implements prompting for placeholder values and rewriting them in file
contents and in file and directory names.
"""

from initializer.strategies.placeholders.models import (
    Placeholder,
    Replacement,
    ReplacementMapping,
    default_suggestion,
)
from initializer.strategies.placeholders.prompts import PromptCollector
from initializer.strategies.placeholders.renaming import PathRenamer
from initializer.strategies.placeholders.substitution import ContentSubstituter, substitute

__all__ = [
    "Placeholder",
    "Replacement",
    "ReplacementMapping",
    "default_suggestion",
    "PromptCollector",
    "ContentSubstituter",
    "PathRenamer",
    "substitute",
]
