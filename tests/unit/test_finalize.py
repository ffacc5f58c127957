"""Unit tests for the finalization steps."""

import errno
from pathlib import Path

import pytest
from rich.console import Console

from initializer.interfaces.step import DocTrimError, SelfDeletionError
from initializer.strategies.finalize import CompletionNotice, DocTrimmer, SelfDeleter, trim_section
from initializer.strategies.placeholders import ReplacementMapping


# =============================================================================
# README Trimming Tests
# =============================================================================


class TestTrimSection:
    """Test suite for trim_section."""

    def test_keeps_lines_after_separator(self):
        assert trim_section("A\nB\n---\nC\nD\n") == "C\nD\n"

    def test_no_separator_discards_everything(self):
        assert trim_section("A\nB\nC\n") == ""

    def test_only_first_separator_consumed(self):
        """Test that later horizontal rules survive."""
        assert trim_section("intro\n---\n# Title\n---\nfooter\n") == "# Title\n---\nfooter\n"

    def test_separator_must_be_exact(self):
        assert trim_section("----\n --- \nkeep?\n") == ""

    def test_crlf_separator(self):
        assert trim_section("A\r\n---\r\nC\r\n") == "C\r\n"

    def test_separator_on_last_line(self):
        assert trim_section("A\n---") == ""


class TestDocTrimmer:
    """Test suite for DocTrimmer."""

    def test_rewrites_readme(self, project: Path, console: Console, mapping):
        readme = project / "README.md"
        readme.write_text("A\nB\n---\nC\nD\n")

        DocTrimmer(project, console).run(mapping)

        assert readme.read_text().splitlines() == ["C", "D"]

    def test_readme_without_separator_becomes_empty(self, project: Path, console: Console, mapping):
        readme = project / "README.md"
        readme.write_text("A\nB\n")

        DocTrimmer(project, console).run(mapping)

        assert readme.read_text() == ""

    def test_missing_readme_warns(self, project: Path, console: Console, output, mapping):
        """Test that a missing README is skipped with a warning, not an error."""
        DocTrimmer(project, console).run(mapping)

        assert not (project / "README.md").exists()
        assert "WARN: README.md not found. Skipping section removal." in output.getvalue()

    def test_custom_file_and_separator(self, project: Path, console: Console, mapping):
        doc = project / "INTRO.rst"
        doc.write_text("setup\n====\nbody\n")

        DocTrimmer(project, console, readme_file="INTRO.rst", separator="====").run(mapping)

        assert doc.read_text() == "body\n"


    def test_write_failure_raises(self, project: Path, console: Console, mapping, monkeypatch):
        readme = project / "README.md"
        readme.write_text("A\n---\nC\n")

        def refuse(self, data):
            raise PermissionError(errno.EACCES, "Permission denied", str(self))

        monkeypatch.setattr(Path, "write_bytes", refuse)

        with pytest.raises(DocTrimError):
            DocTrimmer(project, console).run(mapping)

        assert readme.read_text() == "A\n---\nC\n"

    def test_read_failure_raises(self, project: Path, console: Console, mapping, monkeypatch):
        (project / "README.md").write_text("A\n---\nC\n")

        def refuse(self):
            raise OSError(errno.EIO, "I/O error", str(self))

        monkeypatch.setattr(Path, "read_bytes", refuse)

        with pytest.raises(DocTrimError):
            DocTrimmer(project, console).run(mapping)


# =============================================================================
# Completion Notice Tests
# =============================================================================


class TestCompletionNotice:
    """Test suite for CompletionNotice."""

    def test_prints_instructions(self, console: Console, output, project: Path):
        CompletionNotice(console).run(ReplacementMapping())

        text = output.getvalue()
        assert "--- Initialization Complete! ---" in text
        assert "!!! ACTION REQUIRED !!!" in text
        assert "CLOUDFLARE_API_TOKEN" in text
        assert "CLOUDFLARE_ACCOUNT_ID" in text
        assert "Settings > Secrets and variables > Actions" in text
        assert list(project.iterdir()) == []


# =============================================================================
# Self-Deletion Tests
# =============================================================================


class TestSelfDeleter:
    """Test suite for SelfDeleter."""

    def test_deletes_script(self, project: Path, console: Console, output, mapping):
        script = project / "init_project.py"
        script.write_text("print('hi')")

        SelfDeleter(script, console).run(mapping)

        assert not script.exists()
        assert "All done. Happy coding!" in output.getvalue()

    def test_missing_script_raises(self, project: Path, console: Console, output, mapping):
        with pytest.raises(SelfDeletionError):
            SelfDeleter(project / "gone.py", console).run(mapping)

        assert "Happy coding" not in output.getvalue()
