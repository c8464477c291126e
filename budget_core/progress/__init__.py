"""Budget progress evaluation.

This package provides:
- Spend ratio, over-budget and status tier classification
- Pace status against linear day-of-month spending
- Letter grades for past months
- pandas snapshots of progress, allocations and history
"""

from .evaluator import (
    BudgetProgress,
    CategoryBudgetProgress,
    PaceStatus,
    StatusTier,
    budget_progress_from_dict,
    category_progress_from_dict,
    displayed_percent,
    fill_ratio,
    is_over_budget,
    pace_status,
    spend_ratio,
    status_tier,
)
from .grading import LastMonthSummary, grade_for_ratio
from .snapshot import (
    allocation_dataframe,
    category_progress_dataframe,
    history_dataframe,
    overall_percent_used,
)

__all__ = [
    # Evaluator
    'BudgetProgress',
    'CategoryBudgetProgress',
    'PaceStatus',
    'StatusTier',
    'budget_progress_from_dict',
    'category_progress_from_dict',
    'displayed_percent',
    'fill_ratio',
    'is_over_budget',
    'pace_status',
    'spend_ratio',
    'status_tier',
    # Grading
    'LastMonthSummary',
    'grade_for_ratio',
    # Snapshots
    'allocation_dataframe',
    'category_progress_dataframe',
    'history_dataframe',
    'overall_percent_used',
]
