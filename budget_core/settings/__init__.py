"""Policy configuration files and loaders.

Thresholds, tolerances and display settings are stored in JSON files so
they can be tuned without code changes.
"""

from .defaults import load_config, get_policy_config, get_config_value, reload_policy

__all__ = ['load_config', 'get_policy_config', 'get_config_value', 'reload_policy']
