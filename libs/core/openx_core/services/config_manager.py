import os
from pathlib import Path

import yaml
from dotenv import find_dotenv, load_dotenv

from openx_core.errors import ConfigError, ConfigNotFoundError
from openx_core.models.config import OpenxConfig
from openx_core.services.templates import get_starter_template
from openx_logging import get_logger

CONFIG_FILENAME = "config.yaml"


def load_env() -> bool:
    """Load a .env file from the working directory or its parents.

    Variables already set in the environment take precedence.
    """
    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        return load_dotenv(dotenv_path)
    return False


def default_config_path() -> Path:
    """Config location: OPENX_CONFIG_PATH, else XDG config home, else ~/.openx."""
    override = os.getenv("OPENX_CONFIG_PATH")
    if override:
        return Path(override).expanduser()

    xdg_config = os.getenv("XDG_CONFIG_HOME")
    if xdg_config:
        return Path(xdg_config) / "openx" / CONFIG_FILENAME

    return Path.home() / ".openx" / CONFIG_FILENAME


class ConfigManager:
    """Loads and saves the openx YAML configuration document."""

    def __init__(self, config_path: Path | None = None):
        self.config_path = Path(config_path) if config_path else default_config_path()
        self._config: OpenxConfig | None = None
        self.logger = get_logger("config")

    @property
    def config(self) -> OpenxConfig:
        """Configuration loaded on first access.

        Raises:
            ConfigNotFoundError: If the file does not exist
            ConfigError: If the file cannot be read or parsed
        """
        if self._config is None:
            self._config = self.load()
        return self._config

    def exists(self) -> bool:
        return self.config_path.is_file()

    def load(self) -> OpenxConfig:
        """Read and parse the configuration file.

        Returns:
            Parsed configuration

        Raises:
            ConfigNotFoundError: If the file does not exist
            ConfigError: If the file cannot be read or parsed
        """
        try:
            with open(self.config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except FileNotFoundError as e:
            raise ConfigNotFoundError(self.config_path) from e
        except OSError as e:
            raise ConfigError(f"failed to read config file: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"failed to parse config file: {e}") from e

        try:
            config = OpenxConfig.from_dict(data)
        except ConfigError as e:
            raise ConfigError(f"failed to parse config file: {e}") from e

        self.logger.debug(
            "Loaded config",
            path=str(self.config_path),
            apps=len(config.apps),
            aliases=len(config.aliases),
        )
        self._config = config
        return config

    def save(self, config: OpenxConfig) -> None:
        """Write the whole configuration back to disk.

        Raises:
            ConfigError: If the file cannot be written
        """
        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.config_path, "w", encoding="utf-8") as f:
                yaml.safe_dump(
                    config.to_dict(),
                    f,
                    default_flow_style=False,
                    sort_keys=False,
                    allow_unicode=True,
                )
        except OSError as e:
            raise ConfigError(f"failed to write config file: {e}") from e

        self.logger.info("Saved config", path=str(self.config_path))
        self._config = config

    def ensure_config(self, platform_name: str) -> bool:
        """Create the starter configuration if no config file exists yet.

        Args:
            platform_name: OS identifier selecting the starter template

        Returns:
            True if a starter config was written
        """
        if self.exists():
            return False

        try:
            self.config_path.parent.mkdir(parents=True, exist_ok=True)
            self.config_path.write_text(get_starter_template(platform_name), encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"failed to write config file: {e}") from e

        self.logger.info("Created starter config", path=str(self.config_path), platform=platform_name)
        return True
