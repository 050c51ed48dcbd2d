"""Configuration helpers for loading environment variables.

This module ensures that variables defined in a project-level ``.env`` file
are loaded before attempting to access them. Consumers should rely on the
``get_env`` helper instead of using :func:`os.getenv` directly so that the
configuration is loaded in a single, well-defined place.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from graphgml.export.parameters import ExportParameters

PARAMETERS_ENV_KEY = "GRAPHGML_PARAMETERS"


@lru_cache(maxsize=1)
def _load_environment() -> None:
    """Load environment variables from the project's ``.env`` file.

    Falls back to the default discovery of :func:`load_dotenv` when the
    repository root has no ``.env``. Subsequent calls are cached so the file
    is only read once per process.
    """

    project_root = Path(__file__).resolve().parents[1]
    env_path = project_root / ".env"

    if env_path.exists():
        load_dotenv(env_path, override=False)
    else:
        load_dotenv(override=False)


def get_env(key: str, default: Optional[str] = None) -> Optional[str]:
    """Return the value for ``key`` from the environment.

    Parameters
    ----------
    key:
        The name of the environment variable to look up.
    default:
        The value to return when ``key`` is not present.
    """

    _load_environment()
    return os.environ.get(key, default)


def parameters_from_env() -> ExportParameters:
    """Build :class:`ExportParameters` from the comma separated ``GRAPHGML_PARAMETERS``.

    Unknown flag names raise :class:`ValueError`.
    """

    parameters = ExportParameters()
    raw = get_env(PARAMETERS_ENV_KEY, "") or ""
    for name in raw.split(","):
        if name.strip():
            parameters.set(name, True)
    return parameters


__all__ = ["PARAMETERS_ENV_KEY", "get_env", "parameters_from_env"]
