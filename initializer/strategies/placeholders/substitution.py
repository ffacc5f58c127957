"""Content substitution strategy.

Replaces placeholder tokens with their resolved values inside every text
file of the project tree.
"""

import logging
import re

from rich.console import Console

from initializer.core.tree import ProjectTree
from initializer.interfaces.step import BaseStep, ContentSubstitutionError
from initializer.strategies.placeholders.models import ReplacementMapping

logger = logging.getLogger(__name__)


def build_pattern(mapping: ReplacementMapping) -> re.Pattern[str] | None:
    """Compile all placeholders into a single literal alternation.

    Longer tokens come first so that a token which is a prefix of another
    never shadows it.

    Returns:
        The compiled pattern, or None when the mapping is empty.
    """
    tokens = sorted((placeholder for placeholder, _ in mapping.items()), key=len, reverse=True)
    if not tokens:
        return None
    return re.compile("|".join(re.escape(token) for token in tokens))


def substitute(text: str, mapping: ReplacementMapping) -> str:
    """Replace every placeholder occurrence in ``text`` in a single pass.

    Values are inserted verbatim: backslashes and ampersands are never
    treated as escapes or back-references, and inserted text is never
    matched again.
    """
    pattern = build_pattern(mapping)
    if pattern is None:
        return text
    values = dict(mapping.items())
    return pattern.sub(lambda match: values[match.group(0)], text)


class ContentSubstituter(BaseStep):
    """Rewrites placeholder tokens in the contents of every eligible file.

    Files are decoded as UTF-8 and written back byte-for-byte apart from the
    replaced tokens. Files without any placeholder are left untouched.
    """

    name = "content substitution"

    def __init__(self, tree: ProjectTree, console: Console, encoding: str = "utf-8") -> None:
        self._tree = tree
        self._console = console
        self._encoding = encoding

    def run(self, mapping: ReplacementMapping) -> None:
        """Substitute placeholders in all files.

        Raises:
            ContentSubstitutionError: On the first file that cannot be read,
                decoded or written.
        """
        self._console.print("1. Replacing placeholder text in file contents...")

        try:
            files = list(self._tree.iter_files())
        except OSError as e:
            logger.error(f"Could not list project tree: {e}", exc_info=True)
            raise ContentSubstitutionError(f"Could not list {e.filename or self._tree.root}: {e}") from e

        updated = 0
        for path in files:
            try:
                original = path.read_bytes().decode(self._encoding)
                content = substitute(original, mapping)
                if content != original:
                    path.write_bytes(content.encode(self._encoding))
                    updated += 1
                    logger.debug(f"Updated contents: {path}")
            except (OSError, UnicodeError) as e:
                logger.error(f"Content substitution failed for {path}: {e}", exc_info=True)
                raise ContentSubstitutionError(f"Could not rewrite {path}: {e}") from e

        logger.info(f"Content substitution complete: {updated} files updated")
        self._console.print("File content replacement complete.")
