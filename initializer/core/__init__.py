"""Core configuration, traversal and pipeline components."""

from initializer.core.config import Settings, get_settings
from initializer.core.factory import StepFactory
from initializer.core.pipeline import Initializer
from initializer.core.tree import ProjectTree

__all__ = [
    "Settings",
    "get_settings",
    "StepFactory",
    "Initializer",
    "ProjectTree",
]
