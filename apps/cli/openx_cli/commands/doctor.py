"""Doctor command."""

import json as json_lib

import typer
from openx_core.actions import DoctorActions
from openx_core.errors import OpenxError
from openx_core.models.doctor import AppState, DoctorReport
from openx_core.services.config_manager import ConfigManager
from rich.table import Table

from openx_cli.output import console, failure

_STATUS_STYLE = {
    AppState.AVAILABLE: "[green]✓ available[/green]",
    AppState.MISSING: "[red]✗ missing[/red]",
    AppState.NO_PATH: "[dim]- no path[/dim]",
}


def doctor(config_manager: ConfigManager, json: bool = False) -> None:
    """Check the health of every configured application."""
    actions = DoctorActions(config_manager=config_manager)
    try:
        report = actions.build_report()
    except OpenxError as e:
        failure(f"Doctor check failed: {e}")
        raise typer.Exit(code=1)

    if json:
        print(json_lib.dumps(report.to_dict(), indent=2))
        return

    _print_report(report)


def _print_report(report: DoctorReport) -> None:
    console.print(f"[bold]Platform:[/bold] {report.platform}")
    console.print(f"[bold]Config:[/bold] {report.config_path}")

    table = Table(title="Applications")
    table.add_column("App", style="cyan")
    table.add_column("Status")
    table.add_column("Running")
    table.add_column("Launch path", style="magenta")
    table.add_column("Kill pattern", style="dim")

    for status in report.apps:
        table.add_row(
            status.name,
            _STATUS_STYLE[status.status],
            "✓ Yes" if status.running else "✗ No",
            status.launch_path,
            status.kill_pattern,
        )
    console.print(table)

    if report.aliases:
        aliases = Table(title="Aliases")
        aliases.add_column("Alias", style="cyan")
        aliases.add_column("App", style="magenta")
        for alias, app in sorted(report.aliases.items()):
            aliases.add_row(alias, app)
        console.print(aliases)

    summary = report.summary
    console.print(
        f"{summary.total} apps: [green]{summary.available} available[/green], "
        f"[red]{summary.missing} missing[/red], {summary.running} running"
    )
