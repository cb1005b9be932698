from openx_cli.commands.aliases import add_alias, list_aliases, remove_alias
from openx_cli.commands.doctor import doctor
from openx_cli.commands.kill import kill
from openx_cli.commands.launch import launch

__all__ = [
    "add_alias",
    "doctor",
    "kill",
    "launch",
    "list_aliases",
    "remove_alias",
]
