"""README trimming strategy.

Removes the template-usage section at the top of the project README.
"""

import logging
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from initializer.interfaces.step import BaseStep, DocTrimError
from initializer.strategies.placeholders.models import ReplacementMapping

logger = logging.getLogger(__name__)


def trim_section(text: str, separator: str = "---") -> str:
    """Drop every line up to and including the first separator line.

    Lines after the separator are kept verbatim. Without a separator line
    nothing is kept.
    """
    lines = text.splitlines(keepends=True)
    for idx, line in enumerate(lines):
        if line.rstrip("\r\n") == separator:
            return "".join(lines[idx + 1:])
    return ""


class DocTrimmer(BaseStep):
    """Removes the "Using this Template" section from the README.

    A missing README is not an error: a warning is shown and the run goes on.
    """

    name = "readme trimming"

    def __init__(
        self,
        root: Path,
        console: Console,
        readme_file: str = "README.md",
        separator: str = "---",
    ) -> None:
        self._path = Path(root) / readme_file
        self._console = console
        self._separator = separator

    def run(self, mapping: ReplacementMapping) -> None:
        self._console.print(f"3. Updating {escape(self._path.name)}...")

        if not self._path.is_file():
            logger.warning(f"{self._path} not found, skipping section removal")
            self._console.print(
                f"[yellow]WARN: {escape(self._path.name)} not found. Skipping section removal.[/yellow]"
            )
            return

        try:
            text = self._path.read_bytes().decode("utf-8")
            self._path.write_bytes(trim_section(text, self._separator).encode("utf-8"))
        except (OSError, UnicodeError) as e:
            logger.error(f"README trimming failed for {self._path}: {e}", exc_info=True)
            raise DocTrimError(f"Could not update {self._path}: {e}") from e

        self._console.print(f"{escape(self._path.name)} section removed.")
