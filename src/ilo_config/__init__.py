"""ilo-config - Strongly-typed configs stored as JSON files on disk."""

__version__ = "0.1.0"

from ilo_config.config import Config
from ilo_config.errors import (
    ConfigError,
    ConfigFileLoadError,
    ConfigFileParseError,
    ConfigFileSerializeError,
    ConfigFileWriteError,
    ConfigRootCreateError,
    ConfigRootLoadError,
    EnvironmentLoadError,
    NoHomeError,
)

__all__ = [
    "Config",
    "ConfigError",
    "ConfigFileLoadError",
    "ConfigFileParseError",
    "ConfigFileSerializeError",
    "ConfigFileWriteError",
    "ConfigRootCreateError",
    "ConfigRootLoadError",
    "EnvironmentLoadError",
    "NoHomeError",
]
