"""Pipeline step interfaces.

Defines the abstract base class shared by every initialization step and
the exceptions a step may raise to abort the run.
"""

from abc import ABC, abstractmethod
from typing import Any


class BaseStep(ABC):
    """Abstract base class for initialization steps.

    Steps run strictly in sequence. Each one receives the resolved
    replacement mapping and either completes all of its work or raises
    an InitializationError, which stops the whole run.
    """

    #: Short human-readable label used in progress output and logs.
    name: str = "step"

    @abstractmethod
    def run(self, mapping: Any) -> None:
        """Execute the step.

        Args:
            mapping: The ReplacementMapping gathered by the prompt collector.

        Raises:
            InitializationError: If the step cannot complete.
        """


class InitializationError(Exception):
    """Base exception for failures that abort the initialization run."""

    pass


class ContentSubstitutionError(InitializationError):
    """Exception raised when a file's contents cannot be rewritten."""

    pass


class PathRenameError(InitializationError):
    """Exception raised when a file or directory cannot be renamed."""

    pass


class DocTrimError(InitializationError):
    """Exception raised when the documentation file cannot be rewritten."""

    pass


class SelfDeletionError(InitializationError):
    """Exception raised when the launcher script cannot be deleted."""

    pass
