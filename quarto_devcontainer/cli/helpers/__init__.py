"""CLI Helper Functions for Quarto DevContainer.

The helpers provide:
- Project scanning with consistent error handling
- Table formatting for container summaries
"""

import sys
from pathlib import Path
from typing import Any, List, Optional

import click
from rich.console import Console
from tabulate import tabulate

from quarto_devcontainer.models.container import ContainerContext
from quarto_devcontainer.models.devcontainer import DevContainer
from quarto_devcontainer.models.project import ProjectContext
from quarto_devcontainer.services.exceptions import ProjectError
from quarto_devcontainer.services.project_service import ProjectService

INDENT = "  "


def get_project_context(path: Optional[Path] = None) -> ProjectContext:
    """Scan the Quarto project enclosing path (default: the working directory).

    Note:
        Exits with an error message if no project is found or its
        configuration cannot be read.
    """
    console = Console(stderr=True)
    try:
        with console.status("Scanning project"):
            return ProjectService(path or Path.cwd()).scan()
    except ProjectError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)


def format_rows(rows: List[List[Any]]) -> str:
    """Format label/value rows as an indented, borderless table."""
    return tabulate([[INDENT, *row] for row in rows], tablefmt="plain")


def format_context_table(ctx: ContainerContext) -> str:
    """Summarize the options that will shape the container."""
    rows: List[List[Any]] = []
    if ctx.title:
        rows.append(["Name:", ctx.title])
    rows.append(["Quarto:", ctx.quarto.value])
    rows.append(["Tools:", ",".join(tool.value for tool in ctx.tools)])
    rows.append(["Engines:", ",".join(ctx.engines)])
    rows.append(["IDE:", ctx.code_environment.value])
    if ctx.environments:
        rows.append(["Environment:", ",".join(ctx.environments)])
    return format_rows(rows)


def format_devcontainer_table(devcontainer: DevContainer) -> str:
    """Summarize a devcontainer document before it is written."""
    rows: List[List[Any]] = [
        ["Name:", devcontainer.name],
        ["Docker Image:", devcontainer.image],
    ]
    if devcontainer.postCreateCommand:
        rows.append(["Dependencies:", devcontainer.postCreateCommand])
    if devcontainer.forwardPorts:
        rows.append(["Ports:", ",".join(str(port) for port in devcontainer.forwardPorts)])
    return format_rows(rows)


__all__ = [
    'get_project_context',
    'format_rows',
    'format_context_table',
    'format_devcontainer_table',
]
