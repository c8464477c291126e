import pytest

from budget_core.allocation import EditableAllocation, auto_balance, redistribute, scale_to_target
from budget_core.models import CategoryAllocation


def test_redistribute_reports_skipped_pass():
    rows = [EditableAllocation('A', 900, 200, is_locked=True), EditableAllocation('B', 150, 150)]
    assert redistribute(rows, 850) is False
    assert rows[1].amount == 150


def test_redistribute_sums_to_remaining():
    rows = [
        EditableAllocation('A', 100, 200, is_locked=True),
        EditableAllocation('B', 0, 150),
        EditableAllocation('C', 0, 500),
        EditableAllocation('D', 0, 33.3),
    ]
    assert redistribute(rows, 1000) is True
    assert sum(r.amount for r in rows[1:]) == pytest.approx(900)
    assert rows[0].amount == 100


def test_scale_to_target_keeps_proportions():
    scaled = scale_to_target([CategoryAllocation('A', 50), CategoryAllocation('B', 150)], 400)
    assert [a.amount for a in scaled] == [100, 300]
    assert not any(a.is_locked for a in scaled)


def test_scale_to_target_empty_when_no_total():
    assert scale_to_target([CategoryAllocation('A', 0)], 400) == []
    assert scale_to_target([], 400) == []


def test_auto_balance_uses_current_amounts_around_locks():
    balanced = auto_balance(
        [
            CategoryAllocation('A', 300, is_locked=True),
            CategoryAllocation('B', 100),
            CategoryAllocation('C', 300),
        ],
        total_budget=700,
    )
    assert balanced[0].amount == 300
    assert balanced[0].is_locked
    assert balanced[1].amount == pytest.approx(100)
    assert balanced[2].amount == pytest.approx(300)


def test_auto_balance_splits_equally_when_unlocked_are_empty():
    balanced = auto_balance(
        [CategoryAllocation('A', 0), CategoryAllocation('B', 0)],
        total_budget=100,
    )
    assert [a.amount for a in balanced] == [50, 50]


def test_auto_balance_never_goes_negative():
    balanced = auto_balance(
        [CategoryAllocation('A', 500, is_locked=True), CategoryAllocation('B', 50)],
        total_budget=100,
    )
    assert balanced[1].amount == 0
