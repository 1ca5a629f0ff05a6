"""Generic, strongly-typed config data stored as JSON on disk.

Configs are saved in $ILO_CONFIG_HOME, or ~/.config/ilo/ if that is not set,
one ``<key>.json`` file per config. Files are created with user-only
permissions (0600) in case they contain sensitive data.

File and directory creation is lazy: loading a key that has never been saved
gives the default value and touches nothing on disk.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any, Generic, TypeVar, get_origin

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from ilo_config.errors import (
    ConfigFileLoadError,
    ConfigFileParseError,
    ConfigFileSerializeError,
    ConfigFileWriteError,
    ConfigRootCreateError,
    ConfigRootLoadError,
)
from ilo_config.paths import resolve_path, resolve_root

logger = logging.getLogger(__name__)

T = TypeVar("T")

CONFIG_FILE_MODE = 0o600
JSON_INDENT = 2
_WRITE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC | getattr(os, "O_BINARY", 0)


class Config(Generic[T]):
    """An app's chunk of config data, bound to the key it is stored under.

    Create one with :meth:`load`, change :attr:`data` as needed, then call
    :meth:`save`. Nothing is written until ``save`` is called.
    """

    def __init__(
        self,
        key: str,
        data: T,
        data_type: type[T] | Any,
        adapter: TypeAdapter[T] | None = None,
    ) -> None:
        self._key = key
        self._data = data
        self._data_type = data_type
        self._adapter: TypeAdapter[T] = adapter or TypeAdapter(data_type)

    @classmethod
    def load(
        cls,
        key: str,
        data_type: type[T] | Any,
        default_factory: Callable[[], T] | None = None,
    ) -> Config[T]:
        """Load a config by key.

        Args:
            key: Config file key, e.g. ``jira`` for <root>/jira.json.
            data_type: Type of the config data. Anything pydantic can validate
                works: a BaseModel, a dataclass, ``list[tuple[str, bool]]``...
            default_factory: Builds the value used when no file exists.
                Defaults to calling ``data_type()``.

        Raises:
            NoHomeError: If no config root can be determined.
            ConfigFileLoadError: If the file exists but cannot be read.
            ConfigFileParseError: If the file is not valid JSON for data_type.
        """
        adapter: TypeAdapter[T] = TypeAdapter(data_type)
        config_path = resolve_path(key)

        try:
            is_file = config_path.is_file()
        except OSError as e:
            raise ConfigFileLoadError(config_path, e) from e

        if is_file:
            try:
                raw = config_path.read_bytes()
            except OSError as e:
                raise ConfigFileLoadError(config_path, e) from e
            try:
                data = adapter.validate_json(raw)
            except ValidationError as e:
                raise ConfigFileParseError(config_path, e) from e
        else:
            logger.debug("No config file at %s, using default", config_path)
            data = default_factory() if default_factory is not None else _default(data_type)

        return cls(key, data, data_type, adapter)

    def save(self) -> None:
        """Flush the config data to disk, overwriting the previous contents.

        The file is truncated and rewritten in place, not swapped in atomically.

        Raises:
            NoHomeError: If no config root can be determined.
            ConfigRootLoadError: If the root dir cannot be checked.
            ConfigRootCreateError: If the root dir is missing and cannot be created.
            ConfigFileWriteError: If the file cannot be opened for writing.
            ConfigFileSerializeError: If the data cannot be serialized to JSON, or
                no longer matches the config data type.
        """
        config_root = resolve_root()
        try:
            root_exists = config_root.exists()
        except OSError as e:
            raise ConfigRootLoadError(config_root, e) from e
        if not root_exists:
            try:
                config_root.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise ConfigRootCreateError(config_root, e) from e

        config_path = resolve_path(self._key)
        try:
            exists = config_path.exists()
        except OSError as e:
            raise ConfigFileWriteError(config_path, e) from e

        try:
            payload = self._adapter.dump_json(self._data, indent=JSON_INDENT, warnings="error")
        except PydanticSerializationError as e:
            raise ConfigFileSerializeError(e) from e

        # Permissions only apply to a newly created file, an existing file keeps its mode
        mode = 0o666 if exists else CONFIG_FILE_MODE
        try:
            fd = os.open(config_path, _WRITE_FLAGS, mode)
        except OSError as e:
            raise ConfigFileWriteError(config_path, e) from e

        try:
            with os.fdopen(fd, "wb") as f:
                f.write(payload)
        except OSError as e:
            raise ConfigFileWriteError(config_path, e) from e

        if not exists:
            logger.debug("Created config file %s with mode %o", config_path, CONFIG_FILE_MODE)
        logger.debug("Saved config %s", config_path)

    @property
    def key(self) -> str:
        """Key this config is stored under."""
        return self._key

    @property
    def path(self) -> Path:
        """Current file path for this config's key."""
        return resolve_path(self._key)

    @property
    def data(self) -> T:
        """The config data. Mutations are kept in memory until :meth:`save`."""
        return self._data

    @data.setter
    def data(self, value: T) -> None:
        self._data = value

    def __repr__(self) -> str:
        return f"Config[{_type_name(self._data_type)}](key={self._key!r}, data={self._data!r})"


def _default(data_type: Any) -> Any:
    """Build the default value for a config data type."""
    return (get_origin(data_type) or data_type)()


def _type_name(data_type: Any) -> str:
    if isinstance(data_type, type) and get_origin(data_type) is None:
        return data_type.__qualname__
    return repr(data_type)
