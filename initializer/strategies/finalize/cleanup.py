"""Launcher self-deletion.

Removes the script that started the run. Always the last step.
"""

import logging
from pathlib import Path

from rich.console import Console

from initializer.interfaces.step import BaseStep, SelfDeletionError
from initializer.strategies.placeholders.models import ReplacementMapping

logger = logging.getLogger(__name__)


class SelfDeleter(BaseStep):
    """Deletes the launcher script identified by its invocation path.

    On platforms that lock a running script the deletion fails and is
    reported like any other fatal error.
    """

    name = "self-deletion"

    def __init__(self, script_path: Path, console: Console) -> None:
        self._script_path = Path(script_path)
        self._console = console

    def run(self, mapping: ReplacementMapping) -> None:
        """Delete the launcher script.

        Raises:
            SelfDeletionError: If the script cannot be removed.
        """
        self._console.print("Deleting this initialization script.")
        try:
            self._script_path.unlink()
        except OSError as e:
            logger.error(f"Could not delete {self._script_path}: {e}", exc_info=True)
            raise SelfDeletionError(f"Could not delete {self._script_path}: {e}") from e

        logger.info(f"Deleted launcher script: {self._script_path}")
        self._console.print("All done. Happy coding!")
