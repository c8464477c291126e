from budget_core.formatting import balance_text, compact_status_text, format_currency, percent_label, status_text
from budget_core.models import BudgetHistory
from budget_core.progress import LastMonthSummary, grade_for_ratio


def test_format_currency_whole_units_by_default():
    assert format_currency(1234.56) == '€1,235'
    assert format_currency(1234.56, symbol='$', decimals=2) == '$1,234.56'
    assert format_currency(-40) == '-€40'


def test_status_texts():
    assert status_text(20, 0, False) == '€20 left'
    assert status_text(0, 15, True) == '+€15 over'
    assert compact_status_text(0, 15, True) == '+€15'
    assert compact_status_text(20, 0, False) == '€20'


def test_balance_text():
    assert balance_text(0.4) == 'Budgets balanced'
    assert balance_text(25) == '€25 over budget'
    assert balance_text(-40) == '€40 under budget'


def test_percent_label():
    assert percent_label(101) == '101% used'


def test_grade_boundaries():
    assert grade_for_ratio(0.5) == 'A'
    assert grade_for_ratio(0.85) == 'B'
    assert grade_for_ratio(1.0) == 'C'
    assert grade_for_ratio(1.1) == 'D'
    assert grade_for_ratio(1.15) == 'F'


def test_last_month_summary_from_history():
    history = BudgetHistory('h', 'u', 800, month='2026-01')
    summary = LastMonthSummary.from_history(history, total_spent=720)

    assert summary.month == 'January 2026'
    assert summary.grade == 'B'
    assert summary.was_under_budget
    assert summary.difference == 80
    assert summary.status_text == '€80 under budget'


def test_last_month_summary_over_budget():
    summary = LastMonthSummary('March 2026', total_spent=1000, budget_amount=800)
    assert not summary.was_under_budget
    assert summary.grade == 'F'
    assert summary.status_text == '€200 over budget'
