"""Budget storage and file I/O operations.

This module persists ``UserBudget`` records as JSON files, one per budget,
so an edit session's save callback has somewhere concrete to write to.
"""

from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Dict, List, Optional

from .config import BUDGETS_DIR, ensure_data_directories
from .models import CategoryAllocation, UserBudget

logger = logging.getLogger(__name__)


def budget_slug(name: str) -> str:
    """File stem for a budget name: lowercase words joined by hyphens.

    Example:
        >>> budget_slug("My Budget 2024!")
        'my-budget-2024'
    """
    slug = re.sub(r'[^a-z0-9]+', '-', (name or '').lower()).strip('-')
    return slug or 'budget'


class BudgetStorage:
    """Handles budget file storage operations."""

    def __init__(self, budgets_dir: Optional[Path] = None):
        """Initialize budget storage.

        Args:
            budgets_dir: Optional custom directory for budget files.
                        Defaults to BUDGETS_DIR from config.
        """
        if budgets_dir is None:
            ensure_data_directories()
        self.budgets_dir = Path(budgets_dir or BUDGETS_DIR)
        self.budgets_dir.mkdir(parents=True, exist_ok=True)

    def get_path(self, name: str) -> Path:
        return self.budgets_dir / f"{budget_slug(name)}.json"

    def load_all(self) -> Dict[str, UserBudget]:
        """Load all saved budgets from disk.

        Returns:
            Dictionary mapping file stems to budgets

        Note:
            Files that are unreadable or not JSON objects are skipped with a
            logged warning.
        """
        budgets: Dict[str, UserBudget] = {}

        if not self.budgets_dir.exists():
            return budgets

        for budget_file in sorted(self.budgets_dir.glob('*.json')):
            try:
                with budget_file.open('r', encoding='utf-8') as f:
                    data = json.load(f)
            except (json.JSONDecodeError, OSError) as e:
                logger.warning("Could not load budget '%s': %s", budget_file.stem, e)
                continue

            if not isinstance(data, dict):
                logger.warning("Skipping budget '%s': not a JSON object", budget_file.stem)
                continue

            budgets[budget_file.stem] = UserBudget.from_dict(data)

        return budgets

    def load(self, name: str) -> Optional[UserBudget]:
        return self.load_all().get(budget_slug(name))

    def save(self, name: str, budget: UserBudget) -> Path:
        """Save a budget to disk.

        Args:
            name: Budget name
            budget: Budget to write

        Returns:
            Path of the written file

        Raises:
            ValueError: If budget name is empty
            OSError: If file cannot be written
        """
        if not name or not name.strip():
            raise ValueError("Budget name cannot be empty")

        payload = budget.to_dict()
        payload['updated_at'] = datetime.now(timezone.utc).isoformat()

        target = self.get_path(name)
        target.parent.mkdir(parents=True, exist_ok=True)

        try:
            with target.open('w', encoding='utf-8') as handle:
                json.dump(payload, handle, indent=2, sort_keys=True, ensure_ascii=False)
        except OSError as e:
            raise OSError(f"Failed to save budget to {target}: {e}") from e

        logger.info("Saved budget '%s' to %s", name, target)
        return target

    def save_allocations(self, name: str, allocations: List[CategoryAllocation]) -> Path:
        """Replace a stored budget's allocations, keeping its other fields.

        Intended as the ``on_save`` callback of an edit session.

        Raises:
            KeyError: If no budget with that name is stored
        """
        budget = self.load(name)
        if budget is None:
            raise KeyError(name)
        budget.category_allocations = list(allocations)
        return self.save(name, budget)
