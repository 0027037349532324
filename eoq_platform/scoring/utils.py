"""
Decimal Utilities
eoq_platform/scoring/utils.py

Provides precision-safe decimal math for scoring calculations.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional


def to_decimal(value: float, places: Optional[int] = None) -> Decimal:
    """Convert float to Decimal via its shortest repr, optionally quantized."""
    result = Decimal(str(value))
    if places is None:
        return result
    return result.quantize(Decimal(10) ** -places, rounding=ROUND_HALF_UP)


def clamp(
    value: Decimal,
    min_val: Decimal = Decimal("0"),
    max_val: Decimal = Decimal("1"),
) -> Decimal:
    """Clamp value to range [min_val, max_val]."""
    return max(min_val, min(max_val, value))


def weighted_sum(values: List[Decimal], weights: List[Decimal]) -> Decimal:
    """
    Calculate an unnormalized weighted sum.

    Formula: Σ(value_i × weight_i)

    Weights are used as given; they are not required to sum to 1.
    """
    if len(values) != len(weights):
        raise ValueError("values and weights must have same length")

    return sum((v * w for v, w in zip(values, weights)), Decimal("0"))
