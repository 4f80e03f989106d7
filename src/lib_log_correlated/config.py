"""Optional ``.env`` loading for CLI and host start-up.

Purpose
-------
Let operators keep ``LOG_CORRELATED_*`` settings in a ``.env`` file next to
the project instead of exporting them by hand.

Contents
--------
* :data:`DOTENV_ENV_VAR` – toggle variable consulted when no CLI flag is given.
* :func:`should_use_dotenv` – flag/env precedence rule.
* :func:`enable_dotenv` – load the nearest ``.env`` once per process.
"""

from __future__ import annotations

from pathlib import Path

from dotenv import find_dotenv, load_dotenv

DOTENV_ENV_VAR = "LOG_CORRELATED_USE_DOTENV"

_TRUTHY = {"1", "true", "yes", "on"}
_LOADED_PATH: Path | None = None


def should_use_dotenv(*, explicit: bool | None, env_value: str | None) -> bool:
    """Return whether ``.env`` loading is requested.

    An explicit CLI choice wins; otherwise the environment toggle decides.

    Examples
    --------
    >>> should_use_dotenv(explicit=False, env_value="1")
    False
    >>> should_use_dotenv(explicit=None, env_value="yes")
    True
    >>> should_use_dotenv(explicit=None, env_value=None)
    False
    """

    if explicit is not None:
        return explicit
    if env_value is None:
        return False
    return env_value.strip().lower() in _TRUTHY


def enable_dotenv() -> Path | None:
    """Load the nearest ``.env`` (searching upward from the CWD) without overriding existing variables.

    Returns
    -------
    Path | None
        Resolved path of the loaded file, or ``None`` when none was found.
    """

    global _LOADED_PATH
    if _LOADED_PATH is not None:
        return _LOADED_PATH
    found = find_dotenv(usecwd=True)
    if not found:
        return None
    candidate = Path(found).resolve()
    load_dotenv(candidate, override=False)
    _LOADED_PATH = candidate
    return candidate


def _reset_dotenv_state_for_testing() -> None:
    global _LOADED_PATH
    _LOADED_PATH = None


__all__ = ["DOTENV_ENV_VAR", "enable_dotenv", "should_use_dotenv"]
