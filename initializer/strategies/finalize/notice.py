"""Completion notice.

Prints the manual follow-up steps needed to wire the new project up to its
deployment target.
"""

from rich.console import Console
from rich.rule import Rule

from initializer.interfaces.step import BaseStep
from initializer.strategies.placeholders.models import ReplacementMapping

ACTION_REQUIRED_LINES = [
    "To enable deployments, you must configure your GitHub repository:",
    "",
    "1. [cyan]Create Cloudflare Pages Project:[/cyan]",
    "   - Go to your Cloudflare dashboard and create a new Pages project.",
    "   - Connect it to this GitHub repository.",
    "",
    "2. [cyan]Set GitHub Repository Secrets:[/cyan]",
    "   - In this repo, go to: [green]Settings > Secrets and variables > Actions[/green]",
    "   - Click [green]New repository secret[/green] and add the following:",
    "",
    "   - [green]CLOUDFLARE_API_TOKEN[/green]",
    "     (Create a token in Cloudflare with 'Edit Cloudflare Pages' permissions)",
    "",
    "   - [green]CLOUDFLARE_ACCOUNT_ID[/green]",
    "     (Find this on your main Cloudflare dashboard page)",
]


class CompletionNotice(BaseStep):
    """Prints the external setup instructions. Always runs, touches nothing."""

    name = "completion notice"

    def __init__(self, console: Console) -> None:
        self._console = console

    def run(self, mapping: ReplacementMapping) -> None:
        self._console.print()
        self._console.print("[green]--- Initialization Complete! ---[/green]")
        self._console.print()
        self._console.print("[yellow]!!! ACTION REQUIRED !!![/yellow]")
        self._console.print(Rule(style="dim"))
        for line in ACTION_REQUIRED_LINES:
            self._console.print(line)
        self._console.print(Rule(style="dim"))
        self._console.print()
