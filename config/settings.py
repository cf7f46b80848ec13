"""Runtime settings read from the environment and an optional ``.env`` file."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import dotenv_values

ENV_PREFIX = "DYNAMIC_BUTTON_"

# Project-root .env, next to the packages.
DEFAULT_ENV_FILE = Path(__file__).resolve().parent.parent / ".env"

_TRUTHY = ("1", "true", "yes", "on")
_FALSY = ("0", "false", "no", "off")


@dataclass(frozen=True)
class Settings:
    """Logging settings for the dynamic button package."""

    log_level: str = "INFO"
    log_json: bool = True


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUTHY:
        return True
    if value in _FALSY:
        return False
    raise ValueError(f"{name} must be a boolean, got {raw!r}")


def load_settings(env_file: str | Path | None = None) -> Settings:
    """Build ``Settings`` from ``.env`` values overridden by the process environment.

    Reads ``DYNAMIC_BUTTON_LOG_LEVEL`` and ``DYNAMIC_BUTTON_LOG_JSON``.
    The ``.env`` file is optional; the process environment is not modified.

    Raises:
        ValueError: If a value cannot be parsed.
    """
    path = Path(env_file) if env_file is not None else DEFAULT_ENV_FILE
    values: dict[str, str | None] = {}
    if path.is_file():
        values.update(dotenv_values(path))
    values.update(
        {key: val for key, val in os.environ.items() if key.startswith(ENV_PREFIX)}
    )

    defaults = Settings()
    level = (values.get(f"{ENV_PREFIX}LOG_LEVEL") or defaults.log_level).upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        raise ValueError(f"{ENV_PREFIX}LOG_LEVEL must be a logging level, got {level!r}")

    raw_json = values.get(f"{ENV_PREFIX}LOG_JSON")
    log_json = (
        defaults.log_json
        if raw_json is None or raw_json == ""
        else _parse_bool(f"{ENV_PREFIX}LOG_JSON", raw_json)
    )

    return Settings(log_level=level, log_json=log_json)
