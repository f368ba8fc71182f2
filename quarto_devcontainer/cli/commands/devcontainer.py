"""Use a Dev Container for a Quarto project."""

import sys
from pathlib import Path

import click

from quarto_devcontainer.cli.helpers import (
    format_context_table,
    format_devcontainer_table,
    get_project_context,
)
from quarto_devcontainer.cli.prompts import Prompter, get_prompter
from quarto_devcontainer.core.context_resolver import ContainerContextResolver
from quarto_devcontainer.core.devcontainer_builder import DevContainerBuilder
from quarto_devcontainer.models.container import ContainerContext, DEFAULT_CONTAINER_DEFAULTS
from quarto_devcontainer.models.devcontainer import DevContainer
from quarto_devcontainer.services.exceptions import ConfigurationError
from quarto_devcontainer.utils.devcontainer_writer import DevContainerWriter


@click.command()
@click.option(
    '--prompt/--no-prompt',
    default=True,
    help='Prompt to confirm actions (--no-prompt accepts every default)'
)
def devcontainer(prompt: bool) -> None:
    """Use a Dev Container for this project.

    Scans the project, infers the editor, tools and dependency files it
    needs, and writes .devcontainer/devcontainer.json.

    Examples:
        quarto-devcontainer use devcontainer
        quarto-devcontainer use devcontainer --no-prompt
    """
    prompter = get_prompter(prompt)
    defaults = DEFAULT_CONTAINER_DEFAULTS

    project = get_project_context()
    resolver = ContainerContextResolver(defaults)
    ctx = resolver.resolve(project, defaults.quarto_channel)

    ctx.title = confirm_title(prompter, ctx.title or defaults.default_title)

    if not confirm_context(prompter, ctx):
        return

    try:
        document = DevContainerBuilder(defaults).build(ctx)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if not confirm_changes(prompter, document):
        return

    writer = DevContainerWriter(project.dir)
    if writer.exists() and not confirm_overwrite(prompter, writer.path.relative_to(project.dir)):
        return

    writer.write(document)
    click.echo("\nDevelopment container successfully created.")


def confirm_title(prompter: Prompter, title: str) -> str:
    """Ask for the container name."""
    return prompter.input("Container name:", default=title)


def confirm_context(prompter: Prompter, ctx: ContainerContext) -> bool:
    """Show the inferred options and ask to continue."""
    click.echo(
        "\nThe following options will be used for your project container:\n\n"
        f"{format_context_table(ctx)}\n"
    )
    return prompter.confirm("Would you like to continue", default=True)


def confirm_changes(prompter: Prompter, document: DevContainer) -> bool:
    """Show the container that will be written and ask to continue."""
    click.echo(
        "\nA development container with the following options will be created:\n\n"
        f"{format_devcontainer_table(document)}\n"
    )
    return prompter.confirm("Would you like to continue", default=True)


def confirm_overwrite(prompter: Prompter, path: Path) -> bool:
    """Ask before replacing an existing devcontainer."""
    click.echo(f"\nA development container at {path} already exists.")
    return prompter.confirm("Do you want to overwrite it?", default=False)
