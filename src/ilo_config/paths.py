"""Config root and per-key file path resolution."""

from __future__ import annotations

import logging
from pathlib import Path

from ilo_config.environment import load_env
from ilo_config.errors import NoHomeError

logger = logging.getLogger(__name__)


def _home_dir() -> Path | None:
    try:
        home = Path.home()
    except (RuntimeError, KeyError):
        return None
    # Older interpreters hand back "~" unexpanded instead of raising
    if str(home) == "~":
        return None
    return home


def resolve_root() -> Path:
    """Return the directory all config files live in.

    Returns:
        $ILO_CONFIG_HOME if set, otherwise ~/.config/ilo

    Raises:
        NoHomeError: If $ILO_CONFIG_HOME is unset and there is no home directory.
    """
    environment = load_env()
    if environment.ilo_config_home:
        root = Path(environment.ilo_config_home)
    else:
        home = _home_dir()
        if home is None:
            raise NoHomeError()
        root = home / ".config" / "ilo"

    logger.debug("Resolved config root %s", root)
    return root


def resolve_path(key: str) -> Path:
    """Return the JSON file path for a config key, e.g. ``jira`` -> <root>/jira.json.

    The key is used verbatim and is expected to be a single safe path segment.
    """
    return resolve_root() / f"{key}.json"
