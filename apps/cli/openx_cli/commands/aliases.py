"""Alias management commands."""

import typer
from openx_core.actions import AliasActions
from openx_core.errors import ConfigError
from openx_core.services.config_manager import ConfigManager
from rich.table import Table

from openx_cli.output import console, exit_with, failure


def add_alias(config_manager: ConfigManager, alias: str, app: str) -> None:
    exit_with(AliasActions(config_manager).add(alias, app))


def remove_alias(config_manager: ConfigManager, alias: str) -> None:
    exit_with(AliasActions(config_manager).remove(alias))


def list_aliases(config_manager: ConfigManager) -> None:
    """Print configured aliases as a table."""
    try:
        aliases = AliasActions(config_manager).list()
    except ConfigError as e:
        failure(str(e))
        raise typer.Exit(code=1)

    if not aliases:
        console.print("[yellow]No aliases configured[/yellow]")
        return

    table = Table(title="Aliases")
    table.add_column("Alias", style="cyan")
    table.add_column("App", style="magenta")
    for alias, app in sorted(aliases.items()):
        table.add_row(alias, app)
    console.print(table)
