import typer
from openx_core import __version__
from openx_core.errors import ConfigError
from openx_core.platforms import get_platform
from openx_core.services.config_manager import ConfigManager, load_env
from openx_logging import configure

from openx_cli import commands
from openx_cli.output import err_console, failure

app = typer.Typer(
    help="openx - developer environment control tool",
    add_completion=False,
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"openx {__version__}")
        raise typer.Exit()


@app.command(
    context_settings={
        # Everything after the first positional belongs to the launched app
        "allow_extra_args": True,
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
    epilog=(
        "Examples: openx code myproject/ | openx --kill chrome firefox | "
        "openx --doctor --json"
    ),
)
def openx(
    ctx: typer.Context,
    targets: list[str] | None = typer.Argument(
        None, help="Alias or path followed by its arguments (or names for --kill)"
    ),
    kill: bool = typer.Option(False, "--kill", help="Kill the specified application(s)"),
    doctor: bool = typer.Option(
        False, "--doctor", help="Check health status of configured applications"
    ),
    json: bool = typer.Option(False, "--json", help="Output in JSON format (for --doctor)"),
    add_alias: bool = typer.Option(False, "--add-alias", help="Add an alias: ALIAS APP"),
    remove_alias: bool = typer.Option(False, "--remove-alias", help="Remove an alias: ALIAS"),
    list_aliases: bool = typer.Option(False, "--list-aliases", help="List configured aliases"),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr"),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True,
        help="Show the version and exit",
    ),
):
    """Launch, close and check developer applications by alias."""
    if verbose:
        configure(level="DEBUG", console=True)

    args = [*(targets or []), *ctx.args]

    modes = [kill, doctor, add_alias, remove_alias, list_aliases]
    if sum(modes) > 1:
        failure("--kill, --doctor, --add-alias, --remove-alias and --list-aliases are exclusive")
        raise typer.Exit(code=1)

    config_manager = ConfigManager()
    try:
        if config_manager.ensure_config(get_platform().name):
            err_console.print(
                f"[yellow]Created starter config at {config_manager.config_path}[/yellow]"
            )
    except ConfigError as e:
        failure(f"Error setting up config: {e}")
        raise typer.Exit(code=1)

    if doctor:
        commands.doctor(config_manager, json=json)
        return

    if list_aliases:
        commands.list_aliases(config_manager)
        return

    if add_alias:
        if len(args) != 2:
            failure("usage: openx --add-alias ALIAS APP")
            raise typer.Exit(code=1)
        commands.add_alias(config_manager, args[0], args[1])
        return

    if remove_alias:
        if len(args) != 1:
            failure("usage: openx --remove-alias ALIAS")
            raise typer.Exit(code=1)
        commands.remove_alias(config_manager, args[0])
        return

    if not args:
        typer.echo(ctx.get_help())
        raise typer.Exit(code=1)

    if kill:
        commands.kill(config_manager, args)
        return

    commands.launch(config_manager, args[0], args[1:])


def main():
    load_env()
    app()


if __name__ == "__main__":
    main()
