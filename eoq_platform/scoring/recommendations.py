"""
scoring/recommendations.py

Rule-based improvement advice for an EOQ breakdown.

Rules are evaluated in table order against the five component scores (never
the weighted total). Every rule whose condition holds contributes its message,
so low and high certainty can both be flagged across different records, and a
single record can collect several messages.
"""

from __future__ import annotations

from decimal import Decimal
from typing import TYPE_CHECKING, Callable, List, NamedTuple

if TYPE_CHECKING:
    from eoq_platform.scoring.eoq_calculator import EOQComponentScores


class RecommendationRule(NamedTuple):
    component: str                      # attribute of EOQComponentScores
    applies: Callable[[Decimal], bool]
    message: str


RECOMMENDATION_RULES: List[RecommendationRule] = [
    RecommendationRule(
        "empathy",
        lambda score: score < Decimal("0.6"),
        "increase empathetic consideration",
    ),
    RecommendationRule(
        "certainty",
        lambda score: score < Decimal("0.3"),
        "reduce nullness via evidence gathering",
    ),
    RecommendationRule(
        "certainty",
        lambda score: score > Decimal("0.9"),
        "maintain epistemic humility",
    ),
    RecommendationRule(
        "boundary_permeability",
        lambda score: score < Decimal("0.5"),
        "create more inclusive boundaries",
    ),
    RecommendationRule(
        "refinement_velocity",
        lambda score: score < Decimal("0.4"),
        "increase adaptability",
    ),
    RecommendationRule(
        "cultural_compatibility",
        lambda score: score < Decimal("0.5"),
        "test cross-cultural applicability",
    ),
]


def generate_recommendations(
    components: EOQComponentScores,
    rules: List[RecommendationRule] = RECOMMENDATION_RULES,
) -> List[str]:
    """Return the message of every rule that holds, in rule order."""
    return [
        rule.message
        for rule in rules
        if rule.applies(getattr(components, rule.component))
    ]
