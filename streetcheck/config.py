"""Global configuration: constants, defaults, environment settings."""

from __future__ import annotations

import logging
import os
from typing import Any, Mapping

logger = logging.getLogger(__name__)

# Decimal places for every width rendered into a message
MESSAGE_PRECISION = 2

# Tokens accepted as "true" for yes/no fields (compared trimmed, lower-cased)
TRUTHY_TOKENS = frozenset({"ja", "yes", "true", "on", "1"})

# Fallback comfort floors for cycle facilities when no cycle standard is selected
FALLBACK_CYCLE_MARKED_FLOOR_M = 1.8
FALLBACK_CYCLE_SEPARATED_FLOOR_M = 2.0


# All known configuration keys with defaults
_CONFIG_KEYS: dict[str, dict[str, Any]] = {
    "STREETCHECK_ENV": {"default": "development", "description": "Environment profile"},
    "STREETCHECK_LOG_LEVEL": {"default": "INFO", "description": "Logging level"},
}

_PROFILES: dict[str, dict[str, str]] = {
    "development": {
        "STREETCHECK_ENV": "development",
        "STREETCHECK_LOG_LEVEL": "DEBUG",
    },
    "production": {
        "STREETCHECK_ENV": "production",
        "STREETCHECK_LOG_LEVEL": "WARNING",
    },
    "testing": {
        "STREETCHECK_ENV": "testing",
        "STREETCHECK_LOG_LEVEL": "DEBUG",
    },
}


def load_config(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Load merged config: defaults -> profile -> environment variables.

    Parameters
    ----------
    environ:
        Mapping to read variables from.  Defaults to ``os.environ``.

    Returns a flat dict of configuration values.
    """
    env = os.environ if environ is None else environ
    config: dict[str, str] = {}

    for key, info in _CONFIG_KEYS.items():
        config[key] = str(info["default"])

    env_name = env.get("STREETCHECK_ENV", config["STREETCHECK_ENV"])
    profile = _PROFILES.get(env_name)
    if profile is None:
        logger.debug("Unknown profile %r; using defaults", env_name)
    else:
        config.update(profile)

    # Environment variables override all
    for key in _CONFIG_KEYS:
        env_val = env.get(key)
        if env_val is not None:
            config[key] = env_val

    return config


def resolve_log_level(config: Mapping[str, str]) -> int:
    """Return the numeric logging level named in *config*, INFO if unknown.

    The package never configures logging itself; applications pass this to
    their own ``logging`` setup.
    """
    name = str(config.get("STREETCHECK_LOG_LEVEL", "INFO")).strip().upper()
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    logger.debug("Unknown log level %r; falling back to INFO", name)
    return logging.INFO
