"""Placeholder domain models.

Pydantic models for the placeholder tokens and the replacement mapping
that the prompt collector builds once and every later step reads.
"""

from pydantic import BaseModel, ConfigDict, Field, model_validator

PLACEHOLDER_MARKER = ":"
WORD_SEPARATOR = "_"


def default_suggestion(token: str) -> str:
    """Derive a human-readable default from a placeholder token.

    Strips one leading marker, turns separators into spaces and capitalizes
    the first letter of each word, leaving the rest of the word as is.

    >>> default_suggestion(":application_title")
    'Application Title'
    """
    if token.startswith(PLACEHOLDER_MARKER):
        token = token[len(PLACEHOLDER_MARKER):]
    words = token.replace(WORD_SEPARATOR, " ").split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


class Placeholder(BaseModel):
    """A static token marking where project-specific text belongs."""

    model_config = ConfigDict(frozen=True)

    token: str = Field(min_length=1, description="Exact text searched for in files and paths")

    @property
    def default_suggestion(self) -> str:
        return default_suggestion(self.token)


class Replacement(BaseModel):
    """A single resolved placeholder value."""

    model_config = ConfigDict(frozen=True)

    placeholder: str = Field(min_length=1, description="The placeholder token")
    value: str = Field(description="Literal text the token is replaced with")


class ReplacementMapping(BaseModel):
    """Ordered, read-only placeholder to value associations.

    Order is declaration order of the placeholders and is significant for
    path renaming, which runs one pass per placeholder.
    """

    model_config = ConfigDict(frozen=True)

    replacements: tuple[Replacement, ...] = ()

    @model_validator(mode="after")
    def check_unique(self) -> "ReplacementMapping":
        seen: set[str] = set()
        for replacement in self.replacements:
            if replacement.placeholder in seen:
                raise ValueError(f"duplicate placeholder: {replacement.placeholder}")
            seen.add(replacement.placeholder)
        return self

    @classmethod
    def from_pairs(cls, pairs: list[tuple[str, str]]) -> "ReplacementMapping":
        return cls(
            replacements=tuple(
                Replacement(placeholder=placeholder, value=value)
                for placeholder, value in pairs
            )
        )

    def items(self) -> list[tuple[str, str]]:
        """Return (placeholder, value) pairs in declaration order."""
        return [(r.placeholder, r.value) for r in self.replacements]

    def __len__(self) -> int:
        return len(self.replacements)
