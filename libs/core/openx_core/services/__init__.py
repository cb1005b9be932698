from openx_core.services.config_manager import ConfigManager, default_config_path, load_env
from openx_core.services.templates import STARTER_TEMPLATES, get_starter_template

__all__ = [
    "ConfigManager",
    "STARTER_TEMPLATES",
    "default_config_path",
    "get_starter_template",
    "load_env",
]
