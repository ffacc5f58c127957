"""Path renaming strategy.

Renames files and directories whose names contain placeholder tokens.
"""

import logging
import os
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from initializer.core.tree import ProjectTree
from initializer.interfaces.step import BaseStep, PathRenameError
from initializer.strategies.placeholders.models import ReplacementMapping

logger = logging.getLogger(__name__)


class PathRenamer(BaseStep):
    """Renames paths one placeholder at a time, deepest paths first.

    Each placeholder gets its own walk of the tree, so a later pass sees the
    names produced by earlier ones (``:app_:author`` becomes
    ``My-App_:author`` and then ``My-App_Jane-Doe``). Only the item's own
    name is rewritten; its ancestors are handled by their own entries, which
    come later in the deepest-first order.

    Renames never overwrite: if the destination already exists the source is
    left in place.
    """

    name = "path renaming"

    def __init__(self, tree: ProjectTree, console: Console) -> None:
        self._tree = tree
        self._console = console

    def run(self, mapping: ReplacementMapping) -> None:
        """Rename every matching path for each placeholder in order.

        Raises:
            PathRenameError: If the tree cannot be listed, a destination is
                invalid or a rename fails.
        """
        self._console.print("2. Renaming files and directories...")

        for placeholder, value in mapping.items():
            if not value:
                logger.info(f"Empty value for {placeholder!r}, skipping rename pass")
                continue
            renamed = self.rename_pass(placeholder, value)
            logger.info(f"Rename pass for {placeholder!r}: {renamed} paths renamed")

        self._console.print("File and directory renaming complete.")

    def rename_pass(self, placeholder: str, value: str) -> int:
        """Run one full rename pass for a single placeholder.

        Returns:
            Number of paths actually renamed.
        """
        try:
            candidates = self._tree.paths_containing(placeholder)
        except OSError as e:
            logger.error(f"Could not list project tree: {e}", exc_info=True)
            raise PathRenameError(f"Could not list {e.filename or self._tree.root}: {e}") from e

        renamed = 0
        for old_path in candidates:
            new_path = self._destination(old_path, placeholder, value)
            if new_path is None:
                continue
            try:
                os.rename(old_path, new_path)
            except OSError as e:
                logger.error(f"Rename failed: {old_path} -> {new_path}: {e}", exc_info=True)
                raise PathRenameError(f"Could not rename {old_path} to {new_path}: {e}") from e

            self._console.print(
                f"   RENAMING: {escape(self._display(old_path))} -> {escape(self._display(new_path))}"
            )
            renamed += 1
        return renamed

    def _destination(self, old_path: Path, placeholder: str, value: str) -> Path | None:
        # Moved along with an ancestor, or already renamed
        if not os.path.lexists(old_path):
            return None

        new_name = old_path.name.replace(placeholder, value)
        if new_name == old_path.name:
            return None
        if os.sep in new_name or (os.altsep and os.altsep in new_name) or new_name in (".", ".."):
            raise PathRenameError(
                f"Invalid destination name {new_name!r} for {old_path}"
            )

        new_path = old_path.with_name(new_name)
        if os.path.lexists(new_path):
            logger.info(f"Destination exists, leaving {old_path} in place")
            return None
        return new_path

    def _display(self, path: Path) -> str:
        return f"./{path.relative_to(self._tree.root).as_posix()}"
