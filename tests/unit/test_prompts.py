"""Unit tests for the prompt collector."""

from rich.console import Console

from initializer.strategies.placeholders import PromptCollector


def scripted(*answers: str):
    """Build an input function returning the given answers, then EOF."""
    remaining = list(answers)
    prompts: list[str] = []

    def read(prompt: str) -> str:
        prompts.append(prompt)
        if not remaining:
            raise EOFError
        return remaining.pop(0)

    read.prompts = prompts
    return read


class TestPromptCollector:
    """Test suite for PromptCollector."""

    def test_empty_input_uses_default(self, console: Console):
        """Test that pressing Enter accepts the suggested default."""
        collector = PromptCollector([":application_title"], console, scripted(""))

        mapping = collector.collect()

        assert mapping.items() == [(":application_title", "Application Title")]

    def test_user_value_taken_literally(self, console: Console):
        """Test that typed values are kept verbatim, whitespace included."""
        collector = PromptCollector(
            [":application_title", ":author_name"],
            console,
            scripted("  My App ", r"Jane \1 & Co/|"),
        )

        mapping = collector.collect()

        assert mapping.items() == [
            (":application_title", "  My App "),
            (":author_name", r"Jane \1 & Co/|"),
        ]

    def test_end_of_input_uses_default(self, console: Console):
        """Test that EOF resolves to the default instead of failing."""
        collector = PromptCollector([":application_title", ":author_name"], console, scripted("X"))

        mapping = collector.collect()

        assert mapping.items() == [(":application_title", "X"), (":author_name", "Author Name")]

    def test_prompts_in_declaration_order(self, console: Console):
        read = scripted("", "")
        collector = PromptCollector([":author_name", ":application_title"], console, read)

        collector.collect()

        assert len(read.prompts) == 2
        assert ":author_name" in read.prompts[0]
        assert "Author Name" in read.prompts[0]
        assert ":application_title" in read.prompts[1]

    def test_default_shown_in_brackets(self, console: Console, output):
        """Test that the rendered prompt shows the default in brackets."""
        read = scripted("")
        collector = PromptCollector([":author_name"], console, read)
        collector.collect()

        console.print(read.prompts[0])

        assert "Enter value for :author_name [Author Name]:" in output.getvalue()

    def test_no_placeholders(self, console: Console):
        collector = PromptCollector([], console, scripted())

        assert len(collector.collect()) == 0
