import pytest

from budget_core.models import UserBudget
from budget_core.progress import (
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


def _budget(amount=1000):
    return UserBudget(id='b1', user_id='u1', monthly_amount=amount)


def test_spend_ratio_guards_zero_budget():
    assert spend_ratio(0, 100) == 0
    assert spend_ratio(50, 0) == 0
    assert spend_ratio(50, -10) == 0
    assert spend_ratio(50, 200) == pytest.approx(0.25)


def test_is_over_budget_is_strict():
    assert not is_over_budget(100, 100)
    assert is_over_budget(100.01, 100)


def test_status_tier_boundaries():
    assert status_tier(0.84) is StatusTier.UNDER
    assert status_tier(0.85) is StatusTier.NEAR
    assert status_tier(0.99) is StatusTier.NEAR
    assert status_tier(1.0) is StatusTier.OVER
    assert status_tier(0.0, over=True) is StatusTier.OVER


def test_category_at_85_percent_is_near():
    progress = CategoryBudgetProgress('Bakery', budget_amount=100, current_spend=85)

    assert progress.spend_ratio == pytest.approx(0.85)
    assert progress.status is StatusTier.NEAR
    assert progress.is_warning
    assert not progress.is_over_budget
    assert progress.remaining_amount == 15
    assert progress.over_amount == 0


def test_category_over_budget():
    progress = CategoryBudgetProgress('Bakery', budget_amount=100, current_spend=101)

    assert progress.is_over_budget
    assert progress.over_amount == pytest.approx(1)
    assert progress.remaining_amount == 0
    assert progress.displayed_percent == 101
    assert progress.fill_ratio == 1.0
    assert progress.status is StatusTier.OVER


def test_zero_budget_with_spend_is_over():
    progress = CategoryBudgetProgress('Frozen', budget_amount=0, current_spend=10)
    assert progress.spend_ratio == 0
    assert progress.is_over_budget
    assert progress.status is StatusTier.OVER


def test_displayed_percent_rounding_and_cap():
    assert displayed_percent(0.125) == 13
    assert displayed_percent(0.994) == 99
    assert displayed_percent(12.5) == 1250
    assert displayed_percent(12.5, cap=999) == 999


def test_displayed_percent_handles_non_finite_ratios():
    assert displayed_percent(float('inf'), cap=999) == 999
    assert displayed_percent(float('inf')) == 0
    assert displayed_percent(float('-inf'), cap=999) == 0
    assert displayed_percent(float('nan')) == 0
    assert CategoryBudgetProgress('Snacks', 100, float('nan')).displayed_percent == 0


def test_fill_ratio_is_clamped():
    assert fill_ratio(-0.2) == 0
    assert fill_ratio(0.4) == 0.4
    assert fill_ratio(3.0) == 1.0


@pytest.mark.parametrize(
    'ratio, expected_ratio, status',
    [
        (0.30, 0.50, PaceStatus.WELL_UNDER_BUDGET),
        (0.45, 0.50, PaceStatus.UNDER_BUDGET),
        (0.50, 0.50, PaceStatus.ON_TRACK),
        (0.60, 0.50, PaceStatus.SLIGHTLY_OVER),
        (0.70, 0.50, PaceStatus.OVER_BUDGET),
        # band edges: lower bounds are inclusive
        (0.40, 0.50, PaceStatus.UNDER_BUDGET),
        (0.00, 0.10, PaceStatus.UNDER_BUDGET),
        (0.00, 0.02, PaceStatus.ON_TRACK),
        (0.05, 0.00, PaceStatus.SLIGHTLY_OVER),
        (0.15, 0.00, PaceStatus.OVER_BUDGET),
    ],
)
def test_pace_status_table(ratio, expected_ratio, status):
    assert pace_status(ratio, expected_ratio) is status


def test_pace_status_display_text():
    assert PaceStatus.WELL_UNDER_BUDGET.display_text == 'Great pace!'
    assert PaceStatus.ON_TRACK.display_text == 'On track'


def test_budget_progress_pacing_metrics():
    progress = BudgetProgress(budget=_budget(1000), current_spend=400, days_elapsed=10, days_in_month=30)

    assert progress.spend_ratio == pytest.approx(0.4)
    assert progress.expected_spend_ratio == pytest.approx(1 / 3)
    assert progress.remaining_budget == 600
    assert progress.days_remaining == 20
    assert progress.daily_budget_remaining == pytest.approx(30)
    assert progress.projected_end_of_month == pytest.approx(1200)
    assert progress.projected_over_under == pytest.approx(200)
    assert progress.pace_status is PaceStatus.SLIGHTLY_OVER
    assert not progress.is_over_budget


def test_budget_progress_guards():
    progress = BudgetProgress(budget=_budget(0), current_spend=50, days_elapsed=0, days_in_month=0)

    assert progress.spend_ratio == 0
    assert progress.expected_spend_ratio == 0
    assert progress.daily_budget_remaining == 0
    assert progress.projected_end_of_month == 50


def test_category_partitions():
    progress = BudgetProgress(
        budget=_budget(),
        current_spend=0,
        days_elapsed=1,
        days_in_month=30,
        category_progress=[
            CategoryBudgetProgress('Over', 100, 120),
            CategoryBudgetProgress('AlmostFull', 100, 99.6),
            CategoryBudgetProgress('Near', 100, 90),
            CategoryBudgetProgress('Fine', 100, 10),
        ],
    )

    assert [c.category for c in progress.over_budget_categories] == ['Over', 'AlmostFull']
    assert [c.category for c in progress.warning_categories] == ['AlmostFull', 'Near']
    assert [c.category for c in progress.on_track_categories] == ['Fine']


def test_category_progress_prefers_new_fields():
    record = {
        'category': 'OLD',
        'budget_amount': 1,
        'current_spend': 2,
        'name': 'MEAT_FISH',
        'limit_amount': 200,
        'spent_amount': 50,
        'is_locked': True,
    }
    progress = category_progress_from_dict(record)

    assert progress.category == 'Meat Fish'
    assert progress.budget_amount == 200
    assert progress.current_spend == 50
    assert progress.is_locked


def test_category_progress_falls_back_to_legacy_fields():
    progress = category_progress_from_dict({'category': 'Bakery', 'budget_amount': 80, 'current_spend': 20})
    assert progress.category == 'Bakery'
    assert progress.budget_amount == 80
    assert progress.current_spend == 20


def test_budget_progress_from_response_payload():
    payload = {
        'budget': {'id': 'b', 'user_id': 'u', 'monthly_amount': 850},
        'current_spend': 425,
        'days_elapsed': 15,
        'days_in_month': 30,
        'category_progress': [
            {'name': 'Bakery', 'limit_amount': 70, 'spent_amount': 30},
            'garbage',
        ],
    }
    progress = budget_progress_from_dict(payload)

    assert progress.budget.monthly_amount == 850
    assert progress.spend_ratio == pytest.approx(0.5)
    assert progress.pace_status is PaceStatus.ON_TRACK
    assert len(progress.category_progress) == 1
