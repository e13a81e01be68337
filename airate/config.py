"""Configuration loading: defaults, then an optional JSON file, then env vars."""
import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger('airate.config')

DEFAULT_CONFIG: Dict[str, Any] = {
    'log_level': 'WARNING',
    'storage_backend': 'memory',
    'database_url': 'sqlite://',
    'seed_demo_data': False,
    'points_per_review': 50,
    'points_per_media': 20,
    'points_per_helpful_vote': 5,
    'rewards_claimed': 9845,
}

# env var -> config key
ENV_OVERRIDES = {
    'AIRATE_LOG_LEVEL': 'log_level',
    'AIRATE_STORAGE_BACKEND': 'storage_backend',
    'DATABASE_URL': 'database_url',
    'AIRATE_SEED_DEMO_DATA': 'seed_demo_data',
}

# Keys that must hold a non-negative int
INT_KEYS = ('points_per_review', 'points_per_media', 'points_per_helpful_vote',
            'rewards_claimed')

_TRUTHY = {'1', 'true', 'yes', 'on'}


def _coerce(key: str, value: str) -> Any:
    default = DEFAULT_CONFIG.get(key)
    if isinstance(default, bool):
        return value.strip().lower() in _TRUTHY
    return value


def load_config(config_path: Optional[str] = None) -> Dict[str, Any]:
    """Load configuration from a JSON file with environment variable support.

    Environment variables take precedence over config file values:
    - AIRATE_LOG_LEVEL overrides log_level
    - AIRATE_STORAGE_BACKEND overrides storage_backend
    - DATABASE_URL overrides database_url
    - AIRATE_SEED_DEMO_DATA overrides seed_demo_data

    A missing file is not an error; a corrupt one is logged and ignored.
    Point rules and the claimed-rewards figure go through
    :func:`validate_config`.
    """
    config = dict(DEFAULT_CONFIG)

    if config_path and os.path.exists(config_path):
        try:
            with open(config_path, 'r') as f:
                file_config = json.load(f)
            if isinstance(file_config, dict):
                config.update(file_config)
            else:
                logger.warning("Ignoring %s: top-level value is not an object", config_path)
        except (json.JSONDecodeError, IOError) as exc:
            logger.warning("Could not load %s: %s", config_path, exc)

    for env_name, key in ENV_OVERRIDES.items():
        value = os.getenv(env_name)
        if value:
            config[key] = _coerce(key, value)

    return validate_config(config)


def _as_count(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        number = value
    elif isinstance(value, str):
        try:
            number = int(value.strip())
        except ValueError:
            return None
    else:
        return None
    return number if number >= 0 else None


def validate_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Normalise the integer settings in *config* in place and return it.

    Numeric strings such as ``"50"`` are converted.  Anything else that is
    not a non-negative int (floats, bools, negative numbers, ``"lots"``) is
    logged and replaced with its default.
    """
    for key in INT_KEYS:
        if key not in config:
            continue
        number = _as_count(config[key])
        if number is None:
            logger.warning("Invalid %s %r, using default %s",
                           key, config[key], DEFAULT_CONFIG[key])
            number = DEFAULT_CONFIG[key]
        config[key] = number
    return config
