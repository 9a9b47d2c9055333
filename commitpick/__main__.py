#!/usr/bin/env python3
"""Entry point for running commitpick as a module."""

import sys
from typing import NoReturn

import click

from .cli import console
from .cli.cli_handler import CommitPicker
from .config.settings import Config, ConfigError


def handle_error(error: BaseException) -> NoReturn:
    """Handle errors in a consistent way."""
    if isinstance(error, KeyboardInterrupt):
        console.print_error("\nOperation cancelled by user.")
    elif isinstance(error, ConfigError):
        console.print_error(str(error))
    else:
        console.print_error(f"An error occurred: {str(error)}")
    sys.exit(1)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "-d",
    "--dir",
    "directory",
    help="Directory where to perform the diff (default: current directory)",
)
@click.option("--debug", is_flag=True, help="Dump raw API responses and enable debug logging")
@click.option("-m", "--model", help="OpenAI model to use (overrides MODEL_VERSION)")
@click.option(
    "-n",
    "--count",
    type=int,
    help="Number of commit messages to suggest (overrides NUM_COMMIT_MESSAGES)",
)
def main(directory: str | None, debug: bool, model: str | None, count: int | None) -> None:
    """Suggest commit messages for uncommitted changes and commit the one you pick."""
    try:
        config = Config.from_env(directory=directory, model=model, count=count, debug=debug)
        picker = CommitPicker(config)
        picker.run()
    except (KeyboardInterrupt, Exception) as e:
        handle_error(e)


if __name__ == "__main__":
    main()
