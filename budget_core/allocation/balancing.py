"""Allocation balancing and scaling utilities.

This module provides the proportional redistribution pass used by the
category editor, plus helpers for scaling suggested allocations to a target
total and auto-balancing a list of allocations around locked entries.
"""

from __future__ import annotations

import logging
from typing import List, Protocol, Sequence

from ..models import CategoryAllocation

logger = logging.getLogger(__name__)


class _Redistributable(Protocol):
    amount: float
    original_amount: float
    is_locked: bool


def redistribute(allocations: Sequence[_Redistributable], target: float) -> bool:
    """Spread what the locked entries leave of ``target`` over the free ones.

    Each free entry receives a share proportional to its *original* amount.
    Locked entries are never touched. Nothing changes when there are no free
    entries, when the locked entries already use up the target, or when the
    free entries have no original amount to weigh by.

    Args:
        allocations: Editable allocations, mutated in place
        target: Target total for the whole set

    Returns:
        True if the free entries were recomputed, False if the pass was skipped

    With a target of 850, A locked at 400 and B/C free with originals
    150/500, B becomes 450 * 150/650 and C becomes 450 * 500/650.
    """
    locked_total = sum(a.amount for a in allocations if a.is_locked)
    remaining = target - locked_total
    free = [a for a in allocations if not a.is_locked]

    if not free or remaining <= 0:
        logger.debug(
            "Skipping redistribution: %d free, remaining %.2f", len(free), remaining
        )
        return False

    free_original_total = sum(a.original_amount for a in free)
    if free_original_total <= 0:
        logger.debug("Skipping redistribution: free categories have no original amount")
        return False

    for allocation in free:
        proportion = allocation.original_amount / free_original_total
        allocation.amount = max(0.0, remaining * proportion)

    logger.debug(
        "Redistributed %.2f across %d free categories", remaining, len(free)
    )
    return True


def scale_to_target(
    allocations: Sequence[CategoryAllocation],
    target: float
) -> List[CategoryAllocation]:
    """Scale suggested allocations so they sum to ``target``.

    Args:
        allocations: Suggested allocations
        target: Desired total

    Returns:
        New unlocked allocations, or an empty list when the suggestions sum to 0

    Example:
        >>> scale_to_target([CategoryAllocation('Bakery', 50), CategoryAllocation('Frozen', 150)], 100)
        [CategoryAllocation(category='Bakery', amount=25.0, is_locked=False), CategoryAllocation(category='Frozen', amount=75.0, is_locked=False)]
    """
    original_total = sum(a.amount for a in allocations)
    if original_total <= 0:
        return []

    factor = target / original_total
    return [
        CategoryAllocation(category=a.category, amount=a.amount * factor, is_locked=False)
        for a in allocations
    ]


def auto_balance(
    allocations: Sequence[CategoryAllocation],
    total_budget: float
) -> List[CategoryAllocation]:
    """Fit unlocked allocations into whatever the locked ones leave over.

    Unlike the editor's redistribution, shares follow the *current* amounts of
    the unlocked entries, and fall back to an equal split when those sum to 0.

    Args:
        allocations: Current allocations
        total_budget: Monthly total to balance against

    Returns:
        New list in the same order; locked entries are returned unchanged
    """
    if not allocations:
        return []

    locked_total = sum(a.amount for a in allocations if a.is_locked)
    remaining = max(0.0, total_budget - locked_total)
    unlocked = [a for a in allocations if not a.is_locked]
    unlocked_total = sum(a.amount for a in unlocked)

    balanced: List[CategoryAllocation] = []
    for allocation in allocations:
        if allocation.is_locked:
            balanced.append(allocation)
            continue
        proportion = (
            allocation.amount / unlocked_total
            if unlocked_total > 0
            else 1 / len(unlocked)
        )
        balanced.append(
            CategoryAllocation(category=allocation.category, amount=remaining * proportion)
        )
    return balanced
