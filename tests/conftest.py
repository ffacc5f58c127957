"""Shared pytest fixtures."""

import errno
import io
import logging
import os
from pathlib import Path

import pytest
from rich.console import Console

from initializer.core import config
from initializer.core.tree import ProjectTree
from initializer.strategies.placeholders import ReplacementMapping


@pytest.fixture
def output() -> io.StringIO:
    """Buffer capturing everything printed to the console."""
    return io.StringIO()


@pytest.fixture
def console(output: io.StringIO) -> Console:
    """A plain, wide console writing into the output buffer."""
    return Console(file=output, highlight=False, emoji=False, color_system=None, width=200)


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """An empty project root."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def tree(project: Path) -> ProjectTree:
    """A project tree using the default exclusion rules."""
    return ProjectTree(
        project,
        script_path=project / "init_project.py",
        excluded_suffixes=config.DEFAULT_EXCLUDED_SUFFIXES,
    )


@pytest.fixture
def mapping() -> ReplacementMapping:
    """The mapping from the documented end-to-end example."""
    return ReplacementMapping.from_pairs(
        [(":application_title", "My App"), (":author_name", "Jane Doe")]
    )


@pytest.fixture(autouse=True)
def reset_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    """Drop the cached settings singleton around every test."""
    monkeypatch.setattr(config, "_settings", None)


@pytest.fixture
def restore_logging():
    """Put the root logger back the way it was after setup_logging ran."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def unlistable(monkeypatch: pytest.MonkeyPatch):
    """Make directory listing fail for the directories passed to the returned callable."""
    real_scandir = os.scandir
    blocked: set[str] = set()

    def scandir(path="."):
        if os.fspath(path) in blocked:
            raise PermissionError(errno.EACCES, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", scandir)
    return lambda path: blocked.add(os.fspath(path))
