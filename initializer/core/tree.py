"""Project tree traversal.

Walks the project directory while honouring the exclusion rules shared by
content substitution and path renaming.
"""

import logging
import os
from collections.abc import Iterator
from pathlib import Path

logger = logging.getLogger(__name__)


def _raise(error: OSError) -> None:
    raise error


class ProjectTree:
    """A project directory with its exclusion rules.

    The version-control directory is pruned wherever it appears and the
    launcher script is never yielded. Symbolic links are not followed.
    """

    def __init__(
        self,
        root: Path,
        script_path: Path | None = None,
        vcs_dir: str = ".git",
        excluded_suffixes: list[str] | None = None,
    ) -> None:
        """Initialize the tree.

        Args:
            root: Project root directory.
            script_path: Launcher script to leave untouched, if any.
            vcs_dir: Directory name pruned at any depth.
            excluded_suffixes: File name endings skipped by ``iter_files``.
        """
        self.root = Path(root).resolve()
        self._vcs_dir = vcs_dir
        self._excluded_suffixes = tuple(excluded_suffixes or ())
        self._script: Path | None = None
        if script_path is not None:
            script = Path(script_path).resolve()
            if script.is_relative_to(self.root):
                self._script = script

    def is_script(self, path: Path) -> bool:
        return self._script is not None and path == self._script

    def has_excluded_suffix(self, path: Path) -> bool:
        return path.name.endswith(self._excluded_suffixes)

    def _walk(self) -> Iterator[tuple[Path, list[str], list[str]]]:
        """Walk the tree, pruning VCS metadata.

        Raises:
            OSError: If a directory cannot be listed.
        """
        for dir_path, dir_names, file_names in os.walk(self.root, onerror=_raise):
            dir_names[:] = sorted(d for d in dir_names if d != self._vcs_dir)
            # Submodules and worktrees carry a .git file instead of a directory
            yield Path(dir_path), dir_names, sorted(f for f in file_names if f != self._vcs_dir)

    def iter_files(self) -> Iterator[Path]:
        """Yield every regular file eligible for content substitution."""
        for dir_path, _, file_names in self._walk():
            for file_name in file_names:
                path = dir_path / file_name
                if path.is_symlink() or not path.is_file():
                    continue
                if self.is_script(path) or self.has_excluded_suffix(path):
                    logger.debug(f"Skipping excluded file: {path}")
                    continue
                yield path

    def paths_containing(self, text: str) -> list[Path]:
        """Find files and directories whose root-relative path contains ``text``.

        Returns:
            Matching paths, deepest first, so children come before parents.
        """
        matches: list[Path] = []
        for dir_path, dir_names, file_names in self._walk():
            for name in dir_names + file_names:
                path = dir_path / name
                if self.is_script(path):
                    continue
                if text in path.relative_to(self.root).as_posix():
                    matches.append(path)

        matches.sort(key=lambda p: len(p.parts), reverse=True)
        return matches
