"""Top-level package for the budget core.

The primary modules are:

* ``allocation`` – the category budget editor and its redistribution rules
* ``progress`` – spend-versus-budget classification, grading and snapshots
* ``registry`` – category display metadata lookup
* ``visualization`` – Plotly figures built from the above
"""

from . import allocation  # noqa: F401  # re-exported for convenience
from . import progress  # noqa: F401  # re-exported for convenience
from .models import BudgetHistory, CategoryAllocation, UserBudget

__all__ = ["allocation", "progress", "BudgetHistory", "CategoryAllocation", "UserBudget"]
