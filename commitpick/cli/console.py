"""Console output formatting and user interaction."""

import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.prompt import Confirm, Prompt
from rich.status import Status

from ..core.selector import REGENERATE
from ..services.ai_service import CommitCandidate

console = Console()
err_console = Console(stderr=True)

REGENERATE_LABEL = "Get more commit messages..."


def setup_logging(debug: bool = False) -> None:
    """Configure root logging; debug output only when requested."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def spinner(message: str) -> Status:
    """Return a spinner to show while waiting on the API."""
    return console.status(f"[cyan]{message}[/cyan]")


def print_candidates(candidates: Sequence[CommitCandidate]) -> None:
    """Print numbered candidates followed by the regenerate option."""
    console.print("\n[bold yellow]Select a commit message:[/bold yellow]")
    for index, candidate in enumerate(candidates, start=1):
        console.print(f"  [cyan]{index})[/cyan] {escape(candidate.display_text)}")
    console.print(f"  [cyan]{len(candidates) + 1})[/cyan] [blue]{REGENERATE_LABEL}[/blue]")


def select_candidate(candidates: Sequence[CommitCandidate]) -> CommitCandidate | object:
    """Ask the user to pick a candidate; returns REGENERATE for the extra option."""
    print_candidates(candidates)
    choices = [str(i) for i in range(1, len(candidates) + 2)]
    answer = int(Prompt.ask("Choice", choices=choices, show_choices=False))
    if answer == len(candidates) + 1:
        return REGENERATE
    return candidates[answer - 1]


def confirm_action(prompt: str, default: bool = True) -> bool:
    """Ask user to confirm an action."""
    return Confirm.ask(f"\n[bold yellow]{escape(prompt)}[/bold yellow]", default=default)


def print_selected(message: str) -> None:
    """Print the chosen commit message."""
    console.print(f"[green]Selected commit message:[/green] {escape(message)}")


def print_git_output(output: str) -> None:
    """Print raw output from git."""
    console.print(escape(output), highlight=False)


def print_debug_response(response: Any) -> None:
    """Dump a raw API response to stderr."""
    err_console.print("[red]Debug information:[/red]")
    try:
        err_console.print(escape(json.dumps(response, indent=2)), highlight=False)
    except (TypeError, ValueError):
        err_console.print(escape(repr(response)), highlight=False)


def print_success(message: str) -> None:
    """Print success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print error message."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
