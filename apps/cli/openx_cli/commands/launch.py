"""Launch command."""

from openx_core.actions import LaunchActions
from openx_core.services.config_manager import ConfigManager

from openx_cli.output import exit_with


def launch(config_manager: ConfigManager, token: str, args: list[str]) -> None:
    """Launch an alias, application name, path, file or URL.

    Everything after the first token is forwarded to the application.
    """
    actions = LaunchActions(config_manager=config_manager)
    exit_with(actions.launch(token, args))
