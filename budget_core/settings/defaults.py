"""Configuration loader for budget policy settings."""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from typing import Any, Dict

from ..config import CONFIG_DIR

logger = logging.getLogger(__name__)


def load_config(config_name: str) -> Dict[str, Any]:
    """Load a configuration file by name.

    Args:
        config_name: Name of the config file (without .json extension)

    Returns:
        Dictionary containing the configuration

    Raises:
        FileNotFoundError: If the configuration file doesn't exist
        json.JSONDecodeError: If the configuration file is invalid JSON

    Example:
        >>> config = load_config('policy')
        >>> config['status_thresholds']['near']
        0.85
    """
    config_path = CONFIG_DIR / f"{config_name}.json"

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    logger.debug("Loading configuration from %s", config_path)
    with open(config_path, 'r', encoding='utf-8') as f:
        return json.load(f)


@lru_cache(maxsize=1)
def get_policy_config() -> Dict[str, Any]:
    """Get the budget policy configuration.

    Returns:
        Policy dictionary with status/pace/grade thresholds, editor
        tolerances, display settings and budget defaults
    """
    return load_config('policy')


def reload_policy() -> Dict[str, Any]:
    """Drop the cached policy and read it again from disk."""
    get_policy_config.cache_clear()
    return get_policy_config()


def get_config_value(config_name: str, *keys: str, default: Any = None) -> Any:
    """Get a nested configuration value by key path.

    Args:
        config_name: Name of the config file
        *keys: Path to the nested value (e.g., 'editor', 'quantization_step')
        default: Default value if key path doesn't exist

    Returns:
        The configuration value at the specified path, or default if not found

    Example:
        >>> get_config_value('policy', 'editor', 'quantization_step')
        5.0
    """
    try:
        config = get_policy_config() if config_name == 'policy' else load_config(config_name)
        value = config
        for key in keys:
            value = value[key]
        return value
    except (KeyError, TypeError, FileNotFoundError):
        return default
