"""Configuration management for the budget core.

This module centralizes path configuration and environment variable
overrides. Policy constants (thresholds, tolerances, quantization step)
live in JSON under ``settings/`` and are loaded via
:mod:`budget_core.settings`.
"""

from __future__ import annotations

import os
from pathlib import Path

# Base project root - assumes this file is in budget_core/
_PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# Data directories
DATA_DIR = Path(os.getenv("BUDGET_CORE_DATA_DIR", _PROJECT_ROOT / "data"))
BUDGETS_DIR = DATA_DIR / "budgets"

# Policy configuration directory
CONFIG_DIR = Path(
    os.getenv("BUDGET_CORE_CONFIG_DIR", Path(__file__).parent / "settings")
).resolve()


def ensure_data_directories() -> None:
    """Create all required data directories if they don't exist."""
    for directory in [DATA_DIR, BUDGETS_DIR]:
        directory.mkdir(parents=True, exist_ok=True)
