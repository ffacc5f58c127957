"""Command-line entry point.

Typer command that wires settings, logging and the step factory together
and maps failures to a non-zero exit status.
"""

import sys
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from initializer.core.config import get_settings
from initializer.core.factory import StepFactory
from initializer.core.logging_config import setup_logging
from initializer.core.pipeline import Initializer
from initializer.interfaces.step import InitializationError

console = Console(highlight=False, emoji=False)

app = typer.Typer(
    name="project-initializer",
    help="Replace template placeholders and prepare a new project.",
    add_completion=False,
)


def _print_banner() -> None:
    console.print("[cyan]--- React Project Initializer ---[/cyan]")
    console.print("This script will configure your new project.")
    console.print(r"Press \[Enter] to accept a default value (if shown) or type your own.")
    console.print()


@app.command()
def init() -> None:
    """Prompt for placeholder values and initialize the project in place."""
    try:
        settings = get_settings()
    except ValidationError as e:
        console.print(f"[red]Invalid configuration:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    setup_logging(settings)

    factory = StepFactory(settings, console, script_path=Path(sys.argv[0]))
    initializer = Initializer(factory.get_prompt_collector(), factory.get_steps(), console)

    _print_banner()
    try:
        initializer.run()
    except InitializationError as e:
        console.print(f"[red]ERROR:[/red] {escape(str(e))}")
        raise typer.Exit(1)
