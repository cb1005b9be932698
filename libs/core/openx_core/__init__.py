"""openx core package"""

from openx_core.actions import (
    AliasActions,
    CloseActions,
    DoctorActions,
    LaunchActions,
)
from openx_core.api import OpenX, __version__
from openx_core.errors import (
    AliasTargetError,
    ConfigError,
    ConfigNotFoundError,
    NoKillPatternsError,
    NoLaunchPathError,
    OpenxError,
    ResolutionError,
    UnknownAppError,
)
from openx_core.resolver import SYNONYMS, AliasResolver
from openx_core.services import ConfigManager

__all__ = [
    # Facade
    "OpenX",
    "__version__",
    # Actions
    "AliasActions",
    "CloseActions",
    "DoctorActions",
    "LaunchActions",
    # Resolution
    "AliasResolver",
    "SYNONYMS",
    # Config
    "ConfigManager",
    # Errors
    "AliasTargetError",
    "ConfigError",
    "ConfigNotFoundError",
    "NoKillPatternsError",
    "NoLaunchPathError",
    "OpenxError",
    "ResolutionError",
    "UnknownAppError",
]
