"""Category allocation editing and balancing.

This package provides:
- The category budget edit session with its two redistribution modes
- Proportional redistribution, scaling and auto-balancing helpers
- Input quantization and amount text parsing
"""

from .balancing import (
    auto_balance,
    redistribute,
    scale_to_target,
)
from .editor import (
    AllocationEditor,
    BalanceStatus,
    EditableAllocation,
    RedistributionMode,
)
from .quantization import (
    QuantizationPolicy,
    parse_amount,
    sanitize_amount_text,
)

__all__ = [
    # Editor
    'AllocationEditor',
    'BalanceStatus',
    'EditableAllocation',
    'RedistributionMode',
    # Balancing
    'auto_balance',
    'redistribute',
    'scale_to_target',
    # Quantization
    'QuantizationPolicy',
    'parse_amount',
    'sanitize_amount_text',
]
