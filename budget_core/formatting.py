"""Formatting utilities for currency and budget status labels."""

from __future__ import annotations

from typing import Optional, Union

from .settings import get_config_value


def _symbol(symbol: Optional[str]) -> str:
    if symbol is not None:
        return symbol
    return get_config_value('policy', 'display', 'currency_symbol', default='€')


def format_currency(
    amount: Union[float, int],
    symbol: Optional[str] = None,
    decimals: int = 0
) -> str:
    """Format a currency amount, rounded to whole units by default.

    Args:
        amount: The amount to format
        symbol: Currency symbol; defaults to the configured one
        decimals: Number of decimals to show

    Returns:
        Formatted currency string (e.g., "€1,235")

    Example:
        >>> format_currency(1234.56)
        '€1,235'
        >>> format_currency(1234.56, symbol='$', decimals=2)
        '$1,234.56'
    """
    formatted = f"{abs(amount):,.{decimals}f}"
    sign = '-' if amount < 0 and float(formatted.replace(',', '')) != 0 else ''
    return f"{sign}{_symbol(symbol)}{formatted}"


def status_text(remaining: float, over: float, is_over_budget: bool, symbol: Optional[str] = None) -> str:
    """Row label such as "€20 left" or "+€15 over"."""
    if is_over_budget:
        return f"+{format_currency(over, symbol)} over"
    return f"{format_currency(remaining, symbol)} left"


def compact_status_text(remaining: float, over: float, is_over_budget: bool, symbol: Optional[str] = None) -> str:
    if is_over_budget:
        return f"+{format_currency(over, symbol)}"
    return format_currency(remaining, symbol)


def balance_text(difference: float, tolerance: float = 0.5, symbol: Optional[str] = None) -> str:
    """Describe how far the allocations are from the target total.

    Example:
        >>> balance_text(0.2)
        'Budgets balanced'
        >>> balance_text(-40)
        '€40 under budget'
    """
    if abs(difference) < tolerance:
        return 'Budgets balanced'
    direction = 'over budget' if difference > 0 else 'under budget'
    return f"{format_currency(abs(difference), symbol)} {direction}"


def percent_label(percent: int, suffix: str = 'used') -> str:
    return f"{percent}% {suffix}".strip()
