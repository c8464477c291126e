"""Month grading for budget history."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from ..formatting import format_currency
from ..models import BudgetHistory
from ..settings import get_config_value
from .evaluator import spend_ratio

_DEFAULT_GRADES: List[Tuple[str, float]] = [('A', 0.85), ('B', 0.95), ('C', 1.05), ('D', 1.15)]


def _grade_table() -> Sequence[Sequence]:
    return get_config_value('policy', 'grade_thresholds', default=_DEFAULT_GRADES) or _DEFAULT_GRADES


def grade_for_ratio(ratio: float) -> str:
    """Letter grade for a month's spend ratio.

    Example:
        >>> grade_for_ratio(0.9)
        'B'
        >>> grade_for_ratio(1.3)
        'F'
    """
    for letter, upper in _grade_table():
        if ratio < upper:
            return letter
    return 'F'


@dataclass
class LastMonthSummary:
    month: str
    total_spent: float
    budget_amount: float

    @property
    def ratio(self) -> float:
        return spend_ratio(self.total_spent, self.budget_amount)

    @property
    def grade(self) -> str:
        return grade_for_ratio(self.ratio)

    @property
    def was_under_budget(self) -> bool:
        return self.total_spent <= self.budget_amount

    @property
    def difference(self) -> float:
        return abs(self.budget_amount - self.total_spent)

    @property
    def status_text(self) -> str:
        direction = 'under' if self.was_under_budget else 'over'
        return f"{format_currency(self.difference)} {direction} budget"

    @classmethod
    def from_history(cls, history: BudgetHistory, total_spent: float) -> 'LastMonthSummary':
        return cls(
            month=history.display_month,
            total_spent=total_spent,
            budget_amount=history.monthly_amount,
        )
