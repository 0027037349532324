"""
scoring/ — EOQ Scoring Engine

Modules:
    utils.py              - Decimal utilities
    recommendations.py    - Ordered improvement rules over component scores
    eoq_calculator.py     - Existence Optimization Quotient calculator
"""

from eoq_platform.scoring.eoq_calculator import (
    DEFAULT_WEIGHTS,
    EOQCalculator,
    EOQComponentScores,
    EOQResult,
    EOQWeights,
    MemeComparison,
    calculate_eoq,
    compare_memes,
)
from eoq_platform.scoring.recommendations import (
    RECOMMENDATION_RULES,
    RecommendationRule,
    generate_recommendations,
)

__all__ = [
    "DEFAULT_WEIGHTS",
    "EOQCalculator",
    "EOQComponentScores",
    "EOQResult",
    "EOQWeights",
    "MemeComparison",
    "calculate_eoq",
    "compare_memes",
    "RECOMMENDATION_RULES",
    "RecommendationRule",
    "generate_recommendations",
]
