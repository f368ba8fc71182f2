"""Main CLI entry point for Quarto DevContainer."""

import click

from .commands.devcontainer import devcontainer


@click.group()
def cli():
    """Quarto DevContainer - Development containers for Quarto projects"""
    pass


@cli.group()
def use():
    """Add tooling to the current project"""
    pass


# Register commands
use.add_command(devcontainer)


if __name__ == '__main__':
    cli()
