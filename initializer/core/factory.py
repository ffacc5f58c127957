"""Step Factory for pipeline assembly.

Builds the prompt collector and the ordered initialization steps from
settings, so the pipeline itself never reads configuration.
"""

import logging
from collections.abc import Callable
from pathlib import Path

from rich.console import Console

from initializer.core.config import Settings, get_settings
from initializer.core.tree import ProjectTree
from initializer.interfaces.step import BaseStep
from initializer.strategies.finalize import CompletionNotice, DocTrimmer, SelfDeleter
from initializer.strategies.placeholders import ContentSubstituter, PathRenamer, PromptCollector

logger = logging.getLogger(__name__)


class StepFactory:
    """Factory for creating the initializer's components from configuration.

    Example:
        ```python
        factory = StepFactory(get_settings(), console, script_path)

        collector = factory.get_prompt_collector()
        steps = factory.get_steps()
        ```
    """

    def __init__(
        self,
        settings: Settings | None = None,
        console: Console | None = None,
        script_path: Path | None = None,
    ) -> None:
        """Initialize the factory.

        Args:
            settings: Initializer settings. If None, uses global settings.
            console: Console for user-facing output.
            script_path: Invocation path of the launcher. Overridden by
                ``settings.script_path`` when that is set.
        """
        self._settings = settings or get_settings()
        self._console = console or Console(highlight=False, emoji=False)
        self._script_path = self._settings.script_path or script_path
        self._tree_cache: ProjectTree | None = None

    def get_tree(self) -> ProjectTree:
        """Get the project tree shared by substitution and renaming."""
        if self._tree_cache is None:
            self._tree_cache = ProjectTree(
                root=self._settings.project_root,
                script_path=self._script_path,
                vcs_dir=self._settings.vcs_dir,
                excluded_suffixes=self._settings.excluded_suffixes,
            )
            logger.info(f"Project root: {self._tree_cache.root}")
        return self._tree_cache

    def get_prompt_collector(
        self, input_func: Callable[[str], str] | None = None
    ) -> PromptCollector:
        return PromptCollector(
            placeholders=self._settings.placeholders,
            console=self._console,
            input_func=input_func,
        )

    def get_steps(self) -> list[BaseStep]:
        """Build the steps that run after prompting, in execution order.

        Raises:
            ValueError: If no launcher script path is known.
        """
        if self._script_path is None:
            raise ValueError("script_path is required to build the self-deletion step")

        tree = self.get_tree()
        return [
            ContentSubstituter(tree, self._console),
            PathRenamer(tree, self._console),
            DocTrimmer(
                tree.root,
                self._console,
                readme_file=self._settings.readme_file,
                separator=self._settings.readme_separator,
            ),
            CompletionNotice(self._console),
            SelfDeleter(self._script_path, self._console),
        ]
