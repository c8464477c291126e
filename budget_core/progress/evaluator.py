"""Spend-versus-budget classification.

Everything here is a pure function of (budget, spend, elapsed days). Nothing
raises: zero or negative denominators evaluate to 0 instead.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from ..models import UserBudget, _to_float
from ..registry import normalize_category_name
from ..settings import get_config_value


class StatusTier(str, Enum):
    """Category-level budget status used for colours and labels."""
    UNDER = 'under'
    NEAR = 'near'
    OVER = 'over'

    @property
    def color(self) -> str:
        return _TIER_COLORS[self]


_TIER_COLORS = {
    StatusTier.UNDER: '#4cbf73',
    StatusTier.NEAR: '#ffbf4d',
    StatusTier.OVER: '#ff6666',
}


class PaceStatus(str, Enum):
    """Whole-budget pace compared to linear day-of-month spending."""
    WELL_UNDER_BUDGET = 'wellUnderBudget'
    UNDER_BUDGET = 'underBudget'
    ON_TRACK = 'onTrack'
    SLIGHTLY_OVER = 'slightlyOver'
    OVER_BUDGET = 'overBudget'

    @property
    def display_text(self) -> str:
        return _PACE_TEXT[self]


_PACE_TEXT = {
    PaceStatus.WELL_UNDER_BUDGET: 'Great pace!',
    PaceStatus.UNDER_BUDGET: 'Under budget',
    PaceStatus.ON_TRACK: 'On track',
    PaceStatus.SLIGHTLY_OVER: 'Slightly over',
    PaceStatus.OVER_BUDGET: 'Over budget',
}


def spend_ratio(spend: float, budget: float) -> float:
    """Return ``spend / budget``, or 0 when the budget is not positive.

    Example:
        >>> spend_ratio(85, 100)
        0.85
        >>> spend_ratio(50, 0)
        0.0
    """
    if budget <= 0:
        return 0.0
    return spend / budget


def is_over_budget(spend: float, budget: float) -> bool:
    return spend > budget


def status_tier(ratio: float, over: Optional[bool] = None) -> StatusTier:
    """Classify a spend ratio into under / near / over.

    Args:
        ratio: Spend ratio (spend divided by budget)
        over: Optional explicit over-budget flag; when True the tier is OVER
              regardless of the ratio (covers a zero budget with spending)

    Returns:
        StatusTier for the ratio
    """
    near = get_config_value('policy', 'status_thresholds', 'near', default=0.85)
    over_threshold = get_config_value('policy', 'status_thresholds', 'over', default=1.0)
    if over or ratio >= over_threshold:
        return StatusTier.OVER
    if ratio >= near:
        return StatusTier.NEAR
    return StatusTier.UNDER


def pace_status(ratio: float, expected_ratio: float) -> PaceStatus:
    """Classify spending pace from the gap between actual and expected ratio."""
    thresholds = get_config_value('policy', 'pace_thresholds', default={}) or {}
    variance = ratio - expected_ratio
    if variance < thresholds.get('well_under', -0.10):
        return PaceStatus.WELL_UNDER_BUDGET
    if variance < thresholds.get('under', -0.02):
        return PaceStatus.UNDER_BUDGET
    if variance < thresholds.get('on_track', 0.05):
        return PaceStatus.ON_TRACK
    if variance < thresholds.get('slightly_over', 0.15):
        return PaceStatus.SLIGHTLY_OVER
    return PaceStatus.OVER_BUDGET


def displayed_percent(ratio: float, cap: Optional[int] = None) -> int:
    """Percentage label for a ratio, rounded half away from zero.

    The label is not clamped to 100; pass ``cap`` to bound it (e.g. 999).
    An infinite ratio reads as ``cap`` (0 when uncapped) and NaN as 0.
    """
    if not math.isfinite(ratio):
        if ratio > 0 and cap is not None:
            return cap
        return 0
    scaled = ratio * 100
    percent = int(math.floor(abs(scaled) + 0.5))
    if scaled < 0:
        percent = -percent
    if cap is not None:
        percent = min(percent, cap)
    return percent


def fill_ratio(ratio: float) -> float:
    """Progress bar fill, clamped to [0, 1]."""
    return min(1.0, max(0.0, ratio))


@dataclass
class CategoryBudgetProgress:
    category: str
    budget_amount: float
    current_spend: float
    is_locked: bool = False

    @property
    def spend_ratio(self) -> float:
        return spend_ratio(self.current_spend, self.budget_amount)

    @property
    def is_over_budget(self) -> bool:
        return is_over_budget(self.current_spend, self.budget_amount)

    @property
    def remaining_amount(self) -> float:
        return max(0.0, self.budget_amount - self.current_spend)

    @property
    def over_amount(self) -> float:
        return max(0.0, self.current_spend - self.budget_amount)

    @property
    def status(self) -> StatusTier:
        return status_tier(self.spend_ratio, over=self.is_over_budget)

    @property
    def is_warning(self) -> bool:
        return self.status is StatusTier.NEAR

    @property
    def displayed_percent(self) -> int:
        return displayed_percent(self.spend_ratio)

    @property
    def fill_ratio(self) -> float:
        return fill_ratio(self.spend_ratio)


@dataclass
class BudgetProgress:
    """Month-to-date progress of the whole budget."""
    budget: UserBudget
    current_spend: float
    days_elapsed: int
    days_in_month: int
    category_progress: List[CategoryBudgetProgress] = field(default_factory=list)

    @property
    def remaining_budget(self) -> float:
        return max(0.0, self.budget.monthly_amount - self.current_spend)

    @property
    def spend_ratio(self) -> float:
        return spend_ratio(self.current_spend, self.budget.monthly_amount)

    @property
    def expected_spend_ratio(self) -> float:
        if self.days_in_month <= 0:
            return 0.0
        return self.days_elapsed / self.days_in_month

    @property
    def is_over_budget(self) -> bool:
        return is_over_budget(self.current_spend, self.budget.monthly_amount)

    @property
    def days_remaining(self) -> int:
        return max(0, self.days_in_month - self.days_elapsed)

    @property
    def daily_budget_remaining(self) -> float:
        if self.days_remaining <= 0:
            return 0.0
        return self.remaining_budget / self.days_remaining

    @property
    def projected_end_of_month(self) -> float:
        if self.days_elapsed <= 0:
            return self.current_spend
        daily_rate = self.current_spend / self.days_elapsed
        return daily_rate * self.days_in_month

    @property
    def projected_over_under(self) -> float:
        return self.projected_end_of_month - self.budget.monthly_amount

    @property
    def pace_status(self) -> PaceStatus:
        return pace_status(self.spend_ratio, self.expected_spend_ratio)

    @property
    def over_budget_categories(self) -> List[CategoryBudgetProgress]:
        return [c for c in self.category_progress if c.is_over_budget or c.displayed_percent >= 100]

    @property
    def warning_categories(self) -> List[CategoryBudgetProgress]:
        return [c for c in self.category_progress if c.is_warning]

    @property
    def on_track_categories(self) -> List[CategoryBudgetProgress]:
        return [
            c for c in self.category_progress
            if not c.is_over_budget and not c.is_warning and c.displayed_percent < 100
        ]


def category_progress_from_dict(data: Dict[str, Any]) -> CategoryBudgetProgress:
    """Build category progress from either backend payload generation.

    Newer payloads carry ``name/limit_amount/spent_amount``; older ones
    ``category/budget_amount/current_spend``. Newer fields win when both
    are present.
    """
    name = data.get('name') or data.get('category') or 'Unknown'
    budget = _to_float(data.get('limit_amount'), None)
    if budget is None:
        budget = _to_float(data.get('budget_amount'))
    spent = _to_float(data.get('spent_amount'), None)
    if spent is None:
        spent = _to_float(data.get('current_spend'))
    return CategoryBudgetProgress(
        category=normalize_category_name(str(name)),
        budget_amount=budget,
        current_spend=spent,
        is_locked=bool(data.get('is_locked', False)),
    )


def budget_progress_from_dict(data: Dict[str, Any]) -> BudgetProgress:
    """Build ``BudgetProgress`` from a progress response payload."""
    records = data.get('category_progress') or []
    return BudgetProgress(
        budget=UserBudget.from_dict(data.get('budget') or {}),
        current_spend=_to_float(data.get('current_spend')),
        days_elapsed=int(_to_float(data.get('days_elapsed'))),
        days_in_month=int(_to_float(data.get('days_in_month'))),
        category_progress=[
            category_progress_from_dict(record)
            for record in records
            if isinstance(record, dict)
        ],
    )
