"""Initialization pipeline.

Runs the prompt collector and then every step in order, stopping at the
first failure. Work already done by earlier steps is not rolled back.
"""

from rich.console import Console

from initializer.core.logging_config import get_logger
from initializer.interfaces.step import BaseStep, InitializationError
from initializer.strategies.placeholders import PromptCollector, ReplacementMapping

logger = get_logger(__name__)


class Initializer:
    """Linear, fail-fast initialization run."""

    def __init__(
        self,
        collector: PromptCollector,
        steps: list[BaseStep],
        console: Console | None = None,
    ) -> None:
        self._collector = collector
        self._steps = list(steps)
        self._console = console or Console(highlight=False, emoji=False)

    def run(self) -> ReplacementMapping:
        """Collect the replacement mapping and execute every step.

        Returns:
            The mapping the steps were run with.

        Raises:
            InitializationError: From the first step that fails.
        """
        mapping = self._collector.collect()
        logger.info("mapping_resolved", placeholders=len(mapping))

        self._console.print()
        self._console.print("[cyan]--- Starting Initialization ---[/cyan]")

        for step in self._steps:
            log = logger.bind(step=step.name)
            log.info("step_started")
            try:
                step.run(mapping)
            except InitializationError as e:
                log.error("step_failed", error=str(e))
                raise
            log.info("step_finished")

        return mapping
