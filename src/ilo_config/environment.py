"""Bootstrap environment for locating the rest of the configs.

Set ``ILO_CONFIG_HOME`` to customize where configs are stored. If it is not
set (or empty), configs live in ``~/.config/ilo/``.
"""

from __future__ import annotations

import os

from pydantic import BaseModel, ValidationError

from ilo_config.errors import EnvironmentLoadError

ENV_VAR = "ILO_CONFIG_HOME"


class IloConfigEnvironment(BaseModel):
    """Environment variables relevant to ilo-config."""

    ilo_config_home: str | None = None


def load_env() -> IloConfigEnvironment:
    """Read the environment.

    This is read fresh on every call so that changes to the environment
    between loads and saves are honored.

    Raises:
        EnvironmentLoadError: If the environment cannot be read.
    """
    try:
        return IloConfigEnvironment(ilo_config_home=os.environ.get(ENV_VAR) or None)
    except ValidationError as e:
        raise EnvironmentLoadError(
            "Failed to load configuration from environment variables"
        ) from e
