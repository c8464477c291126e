"""Input-boundary helpers for amounts typed or dragged by the user.

Snapping to a currency step and filtering typed text happen here, before
values reach the editor, so the redistribution arithmetic stays exact.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional

from ..settings import get_config_value


@dataclass(frozen=True)
class QuantizationPolicy:
    """Round amounts to the nearest ``step`` (slider snapping)."""
    step: float = 5.0

    @classmethod
    def from_config(cls) -> 'QuantizationPolicy':
        return cls(step=float(get_config_value('policy', 'editor', 'quantization_step', default=5.0)))

    def snap(self, value: float) -> float:
        """Snap ``value`` to the nearest step, rounding halves up.

        Example:
            >>> QuantizationPolicy(5).snap(12.5)
            15.0
            >>> QuantizationPolicy(5).snap(-3)
            0.0
        """
        value = max(0.0, value)
        if self.step <= 0:
            return value
        return math.floor(value / self.step + 0.5) * self.step

    def increment(self, value: float, upper: Optional[float] = None) -> float:
        stepped = value + self.step
        return min(upper, stepped) if upper is not None else stepped

    def decrement(self, value: float) -> float:
        return max(0.0, value - self.step)


def sanitize_amount_text(text: Optional[str]) -> str:
    """Keep only digits and at most one decimal separator, normalized to a dot.

    When both ``.`` and ``,`` appear, the last separator is the decimal
    point and the others are grouping. A separator repeated on its own, or a
    single comma followed by exactly three digits, is grouping too.

    Example:
        >>> sanitize_amount_text('€1,250.75abc')
        '1250.75'
        >>> sanitize_amount_text('1,250')
        '1250'
        >>> sanitize_amount_text('12,5')
        '12.5'
    """
    if not text:
        return ''
    filtered = ''.join(
        char for char in text
        if (char.isdigit() and char.isascii()) or char in {'.', ','}
    )
    separators = [i for i, char in enumerate(filtered) if char in {'.', ','}]
    if not separators:
        return filtered

    if len({filtered[i] for i in separators}) > 1:
        decimal_at = separators[-1]
    elif len(separators) > 1:
        decimal_at = None
    elif filtered[separators[0]] == ',' and len(filtered) - separators[0] - 1 == 3:
        decimal_at = None
    else:
        decimal_at = separators[0]

    kept = []
    for i, char in enumerate(filtered):
        if i == decimal_at:
            kept.append('.')
        elif char.isdigit():
            kept.append(char)
    return ''.join(kept)


def parse_amount(text: Optional[str]) -> float:
    """Parse user-typed text into a non-negative amount; never raises."""
    cleaned = sanitize_amount_text(text)
    if cleaned in ('', '.'):
        return 0.0
    if cleaned.startswith('.'):
        cleaned = '0' + cleaned
    return float(cleaned)
