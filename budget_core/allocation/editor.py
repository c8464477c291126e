"""Category budget edit session.

An ``AllocationEditor`` is created when the user opens the category editor,
mutated by each edit, and discarded on save or cancel. In proportional mode,
editing a category locks it and the remaining target is spread over the
unlocked categories by their original shares. In independent mode every
category is a standalone target and edits never touch the other rows.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, List, Optional

from ..models import CategoryAllocation, UserBudget
from ..registry import CategoryRegistry
from ..settings import get_config_value
from .balancing import redistribute
from .quantization import QuantizationPolicy

logger = logging.getLogger(__name__)


class RedistributionMode(str, Enum):
    PROPORTIONAL_TO_TARGET = 'proportional'
    INDEPENDENT = 'independent'


class BalanceStatus(str, Enum):
    BALANCED = 'balanced'
    OVER = 'over'
    UNDER = 'under'


@dataclass
class EditableAllocation:
    """Session-local wrapper that remembers the pre-edit amount."""
    category: str
    amount: float
    original_amount: float
    is_locked: bool = False
    tolerance: float = 0.5
    track_locks: bool = True  # False in independent mode

    @property
    def is_edited(self) -> bool:
        changed = abs(self.amount - self.original_amount) > self.tolerance
        if self.track_locks:
            return changed or self.is_locked
        return changed

    def to_allocation(self) -> CategoryAllocation:
        return CategoryAllocation(
            category=self.category,
            amount=self.amount,
            is_locked=self.is_locked,
        )


class AllocationEditor:
    """Mutable list of category allocations edited against a target total."""

    def __init__(
        self,
        target: float,
        allocations: Iterable[CategoryAllocation],
        mode: RedistributionMode = RedistributionMode.PROPORTIONAL_TO_TARGET,
        registry: Optional[CategoryRegistry] = None,
        quantizer: Optional[QuantizationPolicy] = None,
    ):
        """Seed the session.

        Args:
            target: Monthly target total
            allocations: Persisted allocations; each becomes unlocked with its
                         amount as the original
            mode: Redistribution policy for the whole session
            registry: Optional registry; its budgetable categories missing
                      from ``allocations`` are added with amount 0
            quantizer: Step policy used by increment/decrement
        """
        self.target = max(0.0, float(target))
        self.mode = RedistributionMode(mode)
        self.quantizer = quantizer or QuantizationPolicy.from_config()
        self.edit_tolerance = float(get_config_value('policy', 'editor', 'edit_tolerance', default=0.5))
        self.balance_tolerance = float(get_config_value('policy', 'editor', 'balance_tolerance', default=0.5))

        track_locks = self.mode is RedistributionMode.PROPORTIONAL_TO_TARGET
        self.allocations: List[EditableAllocation] = []
        seen = set()
        for allocation in allocations:
            if allocation.category in seen:
                continue
            seen.add(allocation.category)
            self.allocations.append(
                EditableAllocation(
                    category=allocation.category,
                    amount=allocation.amount,
                    original_amount=allocation.amount,
                    tolerance=self.edit_tolerance,
                    track_locks=track_locks,
                )
            )

        if registry is not None:
            self._add_registry_categories(registry, seen, track_locks)

        logger.debug(
            "Opened %s editor: target %.2f, %d categories",
            self.mode.value, self.target, len(self.allocations),
        )

    @classmethod
    def from_budget(
        cls,
        budget: UserBudget,
        mode: RedistributionMode = RedistributionMode.PROPORTIONAL_TO_TARGET,
        registry: Optional[CategoryRegistry] = None,
        quantizer: Optional[QuantizationPolicy] = None,
    ) -> 'AllocationEditor':
        return cls(
            target=budget.monthly_amount,
            allocations=budget.category_allocations or [],
            mode=mode,
            registry=registry,
            quantizer=quantizer,
        )

    def _add_registry_categories(self, registry: CategoryRegistry, seen: set, track_locks: bool) -> None:
        order = registry.all_sub_categories
        for category in order:
            if category not in seen:
                seen.add(category)
                self.allocations.append(
                    EditableAllocation(
                        category=category,
                        amount=0.0,
                        original_amount=0.0,
                        tolerance=self.edit_tolerance,
                        track_locks=track_locks,
                    )
                )

        # Budgeted categories first (largest first), then zero rows in registry order
        positions = {category: i for i, category in enumerate(order)}
        self.allocations.sort(
            key=lambda a: (
                (0, -a.original_amount)
                if a.original_amount > 0
                else (1, positions.get(a.category, len(positions)))
            )
        )

    # ------------------------------------------------------------------
    # Edits
    # ------------------------------------------------------------------

    @property
    def is_proportional(self) -> bool:
        return self.mode is RedistributionMode.PROPORTIONAL_TO_TARGET

    def edit_category(self, index: int, new_amount: float) -> None:
        """Set one category's amount.

        In proportional mode the category is locked and the free categories
        are recomputed from what remains of the target.
        """
        allocation = self.allocations[index]
        allocation.amount = max(0.0, float(new_amount))
        if self.is_proportional:
            allocation.is_locked = True
            redistribute(self.allocations, self.target)

    def reset_category(self, index: int) -> None:
        """Restore one category to its original amount and unlock it."""
        allocation = self.allocations[index]
        allocation.amount = allocation.original_amount
        allocation.is_locked = False
        if self.is_proportional:
            redistribute(self.allocations, self.target)

    def reset_all(self) -> None:
        for allocation in self.allocations:
            allocation.amount = allocation.original_amount
            allocation.is_locked = False

    def remove_category(self, index: int) -> None:
        """Zero a category; in proportional mode it stays locked at 0."""
        allocation = self.allocations[index]
        allocation.amount = 0.0
        if self.is_proportional:
            allocation.is_locked = True
            redistribute(self.allocations, self.target)

    def increment(self, index: int) -> None:
        current = self.allocations[index].amount
        self.edit_category(index, self.quantizer.increment(current, upper=self.target))

    def decrement(self, index: int) -> None:
        current = self.allocations[index].amount
        self.edit_category(index, self.quantizer.decrement(current))

    def index_of(self, category: str) -> int:
        for i, allocation in enumerate(self.allocations):
            if allocation.category == category:
                return i
        raise KeyError(category)

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def total(self) -> float:
        return sum(a.amount for a in self.allocations)

    @property
    def difference(self) -> float:
        """Current total minus the target (positive means over)."""
        return self.total - self.target

    @property
    def balance_status(self) -> BalanceStatus:
        difference = self.difference
        if abs(difference) < self.balance_tolerance:
            return BalanceStatus.BALANCED
        return BalanceStatus.OVER if difference > 0 else BalanceStatus.UNDER

    @property
    def has_edits(self) -> bool:
        return any(a.is_edited for a in self.allocations)

    @property
    def budgeted_indices(self) -> List[int]:
        return [
            i for i, a in enumerate(self.allocations)
            if a.amount > 0 or a.original_amount > 0
        ]

    @property
    def unbudgeted_indices(self) -> List[int]:
        return [
            i for i, a in enumerate(self.allocations)
            if a.amount <= 0 and a.original_amount <= 0
        ]

    def percentage_of_target(self, index: int) -> float:
        if self.target <= 0:
            return 0.0
        return self.allocations[index].amount / self.target * 100

    def slider_max(self, index: int) -> float:
        """Upper bound for a category's slider."""
        editor_config = get_config_value('policy', 'editor', default={}) or {}
        floor = editor_config.get('slider_floor', 50.0)
        multiplier = editor_config.get('slider_original_multiplier', 3.0)
        fraction = editor_config.get('slider_target_fraction', 0.25)

        original = self.allocations[index].original_amount
        base = original * multiplier if original > 0 else self.target * fraction
        return max(floor, min(self.target, base))

    # ------------------------------------------------------------------
    # Save
    # ------------------------------------------------------------------

    def save(
        self,
        on_save: Optional[Callable[[List[CategoryAllocation]], None]] = None
    ) -> List[CategoryAllocation]:
        """Emit the final allocations, dropping zero-amount categories.

        Args:
            on_save: Optional callback receiving the emitted list

        Returns:
            Ordered list of allocations with amount > 0
        """
        result = [a.to_allocation() for a in self.allocations if a.amount > 0]
        logger.info(
            "Saving %d category allocations (total %.2f, target %.2f)",
            len(result), sum(a.amount for a in result), self.target,
        )
        if on_save is not None:
            on_save(result)
        return result
