"""Budget records exchanged with the rest of the application.

These dataclasses mirror the backend contract: allocations, the user's
monthly budget and archived history months. Serialization uses the
snake_case keys of that contract. Parsing is lenient, so malformed entries
are skipped rather than raised.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional

logger = logging.getLogger(__name__)

MONTH_NAMES = [
    'January', 'February', 'March', 'April', 'May', 'June',
    'July', 'August', 'September', 'October', 'November', 'December',
]

DEFAULT_ALERT_THRESHOLDS = [0.5, 0.75, 0.9]


def _to_float(value: Any, default: Optional[float] = 0.0) -> Optional[float]:
    if value is None or isinstance(value, bool):
        return default
    try:
        return float(value)
    except (TypeError, ValueError):
        return default


@dataclass
class CategoryAllocation:
    """One category's share of a monthly budget."""
    category: str
    amount: float
    is_locked: bool = False  # True once the user set this amount by hand

    def __post_init__(self) -> None:
        self.amount = max(0.0, float(self.amount))

    def to_dict(self) -> Dict[str, Any]:
        return {
            'category': self.category,
            'amount': self.amount,
            'is_locked': self.is_locked,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Optional['CategoryAllocation']:
        if not isinstance(data, dict):
            return None
        category = data.get('category')
        amount = _to_float(data.get('amount'), default=None)
        if not category or amount is None:
            return None
        return cls(category=str(category), amount=amount, is_locked=bool(data.get('is_locked', False)))


def allocations_from_records(records: Optional[Iterable[Any]]) -> List[CategoryAllocation]:
    """Convert raw allocation records into ``CategoryAllocation`` objects.

    Records that are not dicts, have no category, or carry a non-numeric
    amount are skipped. When a category appears more than once the first
    occurrence wins.

    Example:
        >>> allocations_from_records([{'category': 'Bakery', 'amount': 70}])
        [CategoryAllocation(category='Bakery', amount=70.0, is_locked=False)]
    """
    allocations: List[CategoryAllocation] = []
    seen = set()
    for record in records or []:
        allocation = CategoryAllocation.from_dict(record)
        if allocation is None:
            logger.warning("Skipping malformed allocation record: %r", record)
            continue
        if allocation.category in seen:
            logger.warning("Skipping duplicate allocation for %s", allocation.category)
            continue
        seen.add(allocation.category)
        allocations.append(allocation)
    return allocations


def allocations_to_records(allocations: Iterable[CategoryAllocation]) -> List[Dict[str, Any]]:
    return [allocation.to_dict() for allocation in allocations]


@dataclass
class UserBudget:
    """The user's monthly budget with optional per-category allocations."""
    id: str
    user_id: str
    monthly_amount: float
    category_allocations: Optional[List[CategoryAllocation]] = None
    notifications_enabled: bool = True
    alert_thresholds: List[float] = field(default_factory=lambda: list(DEFAULT_ALERT_THRESHOLDS))
    is_smart_budget: bool = True  # Rolls over to the next month automatically
    created_at: str = ''
    updated_at: str = ''

    def to_dict(self) -> Dict[str, Any]:
        allocations = (
            allocations_to_records(self.category_allocations)
            if self.category_allocations is not None
            else None
        )
        return {
            'id': self.id,
            'user_id': self.user_id,
            'monthly_amount': self.monthly_amount,
            'category_allocations': allocations,
            'notifications_enabled': self.notifications_enabled,
            'alert_thresholds': list(self.alert_thresholds),
            'is_smart_budget': self.is_smart_budget,
            'created_at': self.created_at,
            'updated_at': self.updated_at,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'UserBudget':
        raw_allocations = data.get('category_allocations')
        thresholds = data.get('alert_thresholds')
        if not isinstance(thresholds, list):
            thresholds = list(DEFAULT_ALERT_THRESHOLDS)
        return cls(
            id=str(data.get('id', '')),
            user_id=str(data.get('user_id', '')),
            monthly_amount=max(0.0, _to_float(data.get('monthly_amount'))),
            category_allocations=(
                allocations_from_records(raw_allocations)
                if isinstance(raw_allocations, list)
                else None
            ),
            notifications_enabled=bool(data.get('notifications_enabled', True)),
            alert_thresholds=[float(t) for t in thresholds if _to_float(t, None) is not None],
            is_smart_budget=bool(data.get('is_smart_budget', True)),
            created_at=str(data.get('created_at') or ''),
            updated_at=str(data.get('updated_at') or ''),
        )


@dataclass
class BudgetHistory:
    """A past month's budget as archived by the backend."""
    id: str
    user_id: str
    monthly_amount: float
    month: str  # "YYYY-MM"
    category_allocations: Optional[List[CategoryAllocation]] = None
    was_smart_budget: bool = False
    was_deleted: bool = False
    created_at: str = ''

    @property
    def display_month(self) -> str:
        """Render ``month`` as e.g. "January 2026", or return it unchanged."""
        parts = self.month.split('-')
        if len(parts) != 2:
            return self.month
        year, month = parts
        try:
            month_num = int(month)
        except ValueError:
            return self.month
        if not 1 <= month_num <= 12:
            return self.month
        return f"{MONTH_NAMES[month_num - 1]} {year}"

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BudgetHistory':
        raw_allocations = data.get('category_allocations')
        return cls(
            id=str(data.get('id', '')),
            user_id=str(data.get('user_id', '')),
            monthly_amount=max(0.0, _to_float(data.get('monthly_amount'))),
            month=str(data.get('month', '')),
            category_allocations=(
                allocations_from_records(raw_allocations)
                if isinstance(raw_allocations, list)
                else None
            ),
            was_smart_budget=bool(data.get('was_smart_budget', False)),
            was_deleted=bool(data.get('was_deleted', False)),
            created_at=str(data.get('created_at') or ''),
        )


def history_from_response(payload: Dict[str, Any]) -> List[BudgetHistory]:
    entries = payload.get('budget_history') if isinstance(payload, dict) else None
    if not isinstance(entries, list):
        return []
    return [BudgetHistory.from_dict(entry) for entry in entries if isinstance(entry, dict)]
