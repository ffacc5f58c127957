"""Abstract base classes and errors for initialization steps."""

from initializer.interfaces.step import (
    BaseStep,
    ContentSubstitutionError,
    DocTrimError,
    InitializationError,
    PathRenameError,
    SelfDeletionError,
)

__all__ = [
    "BaseStep",
    "InitializationError",
    "ContentSubstitutionError",
    "PathRenameError",
    "DocTrimError",
    "SelfDeletionError",
]
