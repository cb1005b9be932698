"""Kill command."""

from openx_core.actions import CloseActions
from openx_core.services.config_manager import ConfigManager

from openx_cli.output import exit_with


def kill(config_manager: ConfigManager, names: list[str]) -> None:
    """Terminate every process of each named application."""
    actions = CloseActions(config_manager=config_manager)
    if len(names) == 1:
        exit_with(actions.close(names[0]))
    else:
        exit_with(actions.close_many(names))
