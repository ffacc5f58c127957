"""Interactive prompt collector.

Asks the user for a value for every configured placeholder and builds the
replacement mapping the rest of the run works from.
"""

import logging
from collections.abc import Callable

from rich.console import Console
from rich.markup import escape

from initializer.strategies.placeholders.models import Placeholder, ReplacementMapping

logger = logging.getLogger(__name__)


class PromptCollector:
    """Collects one replacement value per placeholder from the user.

    Pressing Enter (or reaching end of input) accepts the suggested
    default. Anything else is taken literally, with no trimming or
    validation.
    """

    def __init__(
        self,
        placeholders: list[str],
        console: Console,
        input_func: Callable[[str], str] | None = None,
    ) -> None:
        """Initialize the collector.

        Args:
            placeholders: Placeholder tokens in declaration order.
            console: Console used to render the prompts.
            input_func: Reads one line given the prompt markup. Defaults to
                ``console.input``.
        """
        self._placeholders = [Placeholder(token=token) for token in placeholders]
        self._console = console
        self._input = input_func or console.input

    def collect(self) -> ReplacementMapping:
        """Prompt for every placeholder.

        Returns:
            The resolved mapping, in declaration order.
        """
        pairs: list[tuple[str, str]] = []
        for placeholder in self._placeholders:
            default = placeholder.default_suggestion
            prompt = (
                f"Enter value for [yellow]{escape(placeholder.token)}[/yellow] "
                f"{escape(f'[{default}]')}: "
            )
            user_value = self._read(prompt)
            value = user_value if user_value else default
            logger.info(f"Resolved {placeholder.token!r} -> {value!r}")
            pairs.append((placeholder.token, value))

        return ReplacementMapping.from_pairs(pairs)

    def _read(self, prompt: str) -> str:
        try:
            return self._input(prompt)
        except EOFError:
            self._console.print()
            return ""
