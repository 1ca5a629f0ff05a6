"""Exceptions raised while loading and saving configs."""

from __future__ import annotations

from pathlib import Path


class ConfigError(Exception):
    """Base exception for config load/save errors."""

    pass


class NoHomeError(ConfigError):
    """Neither $ILO_CONFIG_HOME nor the user home directory is available."""

    def __init__(self) -> None:
        super().__init__(
            "$ILO_CONFIG_HOME is not set and user home directory could not be determined"
        )


class _PathError(ConfigError):
    message = "{path}: {cause}"

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(self.message.format(path=path, cause=cause))


class ConfigRootLoadError(_PathError):
    """The config root directory could not be checked for existence."""

    message = "Config root dir {path} could not be loaded: {cause}"


class ConfigRootCreateError(_PathError):
    """The config root directory is missing and could not be created."""

    message = "Config root dir does not exist at {path} and could not be created: {cause}"


class ConfigFileLoadError(_PathError):
    """The config file exists but could not be opened for reading."""

    message = "Config path exists at {path} but config could not be loaded: {cause}"


class ConfigFileParseError(_PathError):
    """The config file is not valid JSON for the config data type."""

    message = "Config path exists at {path} but JSON could not be parsed: {cause}"


class ConfigFileWriteError(_PathError):
    """The config file could not be opened for writing."""

    message = "Config path location {path} could not be opened for writing: {cause}"


class ConfigFileSerializeError(ConfigError):
    """The in-memory config data could not be serialized to JSON."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__(f"There was an error serializing config to disk: {cause}")


class EnvironmentLoadError(RuntimeError):
    """The process environment could not be read.

    Not a ConfigError: nothing else in the library can work without the
    environment, so callers are not expected to recover from it.
    """

    pass
