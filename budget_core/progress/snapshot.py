"""Tabular snapshots of budget state.

These helpers turn progress, an edit session or budget history into pandas
DataFrames suitable for reporting or charting.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Iterable, Optional

import pandas as pd

from ..models import BudgetHistory
from ..settings import get_config_value
from .evaluator import BudgetProgress, displayed_percent, spend_ratio
from .grading import grade_for_ratio

if TYPE_CHECKING:
    from ..allocation.editor import AllocationEditor

PROGRESS_COLUMNS = ['Category', 'Budget', 'Spent', 'Remaining', 'Over', 'Percent Used', 'Status']
ALLOCATION_COLUMNS = ['Category', 'Amount', 'Original', 'Locked', 'Edited', 'Share %']
HISTORY_COLUMNS = ['Month', 'Budget', 'Spent', 'Difference', 'Grade']


def category_progress_dataframe(progress: BudgetProgress) -> pd.DataFrame:
    """Create a per-category performance table.

    Args:
        progress: Budget progress with category breakdown

    Returns:
        DataFrame with columns: Category, Budget, Spent, Remaining, Over,
        Percent Used, Status. Rows are sorted by spend, highest first.
    """
    rows = [
        {
            'Category': item.category,
            'Budget': item.budget_amount,
            'Spent': item.current_spend,
            'Remaining': item.remaining_amount,
            'Over': item.over_amount,
            'Percent Used': item.displayed_percent,
            'Status': item.status.value,
        }
        for item in progress.category_progress
    ]
    if not rows:
        return pd.DataFrame(columns=PROGRESS_COLUMNS)

    df = pd.DataFrame(rows, columns=PROGRESS_COLUMNS)
    return df.sort_values('Spent', ascending=False, kind='stable').reset_index(drop=True)


def allocation_dataframe(editor: 'AllocationEditor') -> pd.DataFrame:
    """Create a table of the editor's allocations in display order."""
    if not editor.allocations:
        return pd.DataFrame(columns=ALLOCATION_COLUMNS)

    df = pd.DataFrame({
        'Category': [a.category for a in editor.allocations],
        'Amount': [a.amount for a in editor.allocations],
        'Original': [a.original_amount for a in editor.allocations],
        'Locked': [a.is_locked for a in editor.allocations],
        'Edited': [a.is_edited for a in editor.allocations],
    })
    df['Share %'] = (df['Amount'] / editor.target * 100) if editor.target > 0 else 0.0
    return df


def history_dataframe(
    history: Iterable[BudgetHistory],
    spend_by_month: Dict[str, float]
) -> pd.DataFrame:
    """Summarise past months against their budgets.

    Args:
        history: Archived budgets; deleted months are skipped
        spend_by_month: Total spend keyed by "YYYY-MM"

    Returns:
        DataFrame with columns: Month, Budget, Spent, Difference, Grade,
        newest month first. Difference is budget minus spend.
    """
    rows = []
    for entry in history:
        if entry.was_deleted:
            continue
        spent = float(spend_by_month.get(entry.month, 0.0))
        rows.append({
            'Month': entry.month,
            'Budget': entry.monthly_amount,
            'Spent': spent,
            'Difference': entry.monthly_amount - spent,
            'Grade': grade_for_ratio(spend_ratio(spent, entry.monthly_amount)),
        })

    if not rows:
        return pd.DataFrame(columns=HISTORY_COLUMNS)

    df = pd.DataFrame(rows, columns=HISTORY_COLUMNS)
    return df.sort_values('Month', ascending=False).reset_index(drop=True)


def overall_percent_used(progress: BudgetProgress, cap: Optional[int] = None) -> int:
    """Whole-budget percentage label, bounded by ``cap`` (configured default 999)."""
    if cap is None:
        cap = get_config_value('policy', 'display', 'percent_cap', default=999)
    return displayed_percent(progress.spend_ratio, cap=cap)
