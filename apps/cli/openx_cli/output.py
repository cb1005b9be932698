"""Shared console output for CLI commands."""

import typer
from openx_core.models.actions import ActionResult
from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)


def success(message: str) -> None:
    console.print(f"[green]✓[/green] {escape(message)}")


def failure(message: str) -> None:
    console.print(f"[red]✗[/red] {escape(message)}")


def print_result(result: ActionResult) -> None:
    """Print an action result, including per-target lines for batches."""
    results = (result.data or {}).get("results") or []
    if len(results) > 1:
        for entry in results:
            if entry["success"]:
                success(entry["message"])
            else:
                failure(f"{entry['name']}: {entry['message']}")

    if result.success:
        success(result.message)
    else:
        failure(result.message)


def exit_with(result: ActionResult) -> None:
    """Print a result and exit non-zero when it failed."""
    print_result(result)
    if not result.success:
        raise typer.Exit(code=1)
