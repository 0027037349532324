"""
scoring/eoq_calculator.py

Computes the Existence Optimization Quotient (EOQ) of a meme.

Formula:
    EOQ = w_e × Empathy + w_c × Certainty + w_b × Boundary
        + w_r × RefinementVelocity + w_k × CulturalCompatibility

Default weights (sum = 1.0, not enforced here):
    empathy      0.40
    certainty    0.25
    boundary     0.20
    refinement   0.10
    cultural     0.05

Result clamped to [0, 1] regardless of the weights supplied. Component scores
are reported unclamped.
"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Dict, List, Optional, Sequence, Tuple

import structlog

from eoq_platform.models.enumerations import BoundaryKind
from eoq_platform.models.meme import EmpathyTensor, Meme
from eoq_platform.scoring.recommendations import generate_recommendations
from eoq_platform.scoring.utils import clamp, to_decimal, weighted_sum

logger = structlog.get_logger(__name__)

# Internal weighting of the four empathy dimensions
_EMPATHY_WEIGHTS: Dict[str, Decimal] = {
    "golden":   Decimal("0.30"),  # reciprocity is foundational
    "silver":   Decimal("0.25"),  # non-harm is critical
    "platinum": Decimal("0.25"),  # other-focus shows maturity
    "love":     Decimal("0.20"),  # unconditional care is ideal but harder
}

# Used only when the boundary carries no scalar value
_BOUNDARY_FALLBACK: Dict[BoundaryKind, Decimal] = {
    BoundaryKind.RIGID:     Decimal("0.2"),
    BoundaryKind.PERMEABLE: Decimal("0.7"),
    BoundaryKind.FLUID:     Decimal("0.9"),
}

INCLUSIVE_BONUS = Decimal("0.10")
NEUTRAL_VELOCITY = Decimal("0.5")
VELOCITY_WINDOW = timedelta(days=30)
VELOCITY_SATURATION = Decimal("5")


@dataclass(frozen=True)
class EOQWeights:
    """Weight vector for the five EOQ components."""
    empathy: Decimal = Decimal("0.40")
    certainty: Decimal = Decimal("0.25")
    boundary: Decimal = Decimal("0.20")
    refinement: Decimal = Decimal("0.10")
    cultural: Decimal = Decimal("0.05")

    def __post_init__(self):
        for name in ("empathy", "certainty", "boundary", "refinement", "cultural"):
            value = to_decimal(getattr(self, name))
            if not value.is_finite():
                raise ValueError(f"EOQ weight '{name}' must be finite, got {value}")

    @classmethod
    def from_floats(
        cls,
        empathy: float,
        certainty: float,
        boundary: float,
        refinement: float,
        cultural: float,
    ) -> "EOQWeights":
        return cls(
            empathy=to_decimal(empathy),
            certainty=to_decimal(certainty),
            boundary=to_decimal(boundary),
            refinement=to_decimal(refinement),
            cultural=to_decimal(cultural),
        )

    def as_list(self) -> List[Decimal]:
        return [
            to_decimal(self.empathy),
            to_decimal(self.certainty),
            to_decimal(self.boundary),
            to_decimal(self.refinement),
            to_decimal(self.cultural),
        ]

    @property
    def total(self) -> Decimal:
        return sum(self.as_list(), Decimal("0"))


DEFAULT_WEIGHTS = EOQWeights()


@dataclass(frozen=True)
class EOQComponentScores:
    """Per-component scores before weighting."""
    empathy: Decimal
    certainty: Decimal
    boundary_permeability: Decimal
    refinement_velocity: Decimal
    cultural_compatibility: Decimal

    def as_list(self) -> List[Decimal]:
        return [
            self.empathy,
            self.certainty,
            self.boundary_permeability,
            self.refinement_velocity,
            self.cultural_compatibility,
        ]


@dataclass(frozen=True)
class EOQResult:
    """Output of EOQCalculator.calculate()."""
    total_score: Decimal                  # [0, 1] quantized to 0.0001
    component_scores: EOQComponentScores
    recommended_improvements: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class MemeComparison:
    """Output of EOQCalculator.compare()."""
    winner: Meme
    winner_result: EOQResult
    advantages: List[str]
    eoq_difference: Decimal
    result_a: EOQResult
    result_b: EOQResult


class EOQCalculator:
    """Calculate the EOQ of a meme and compare memes by it."""

    def calculate(
        self,
        meme: Meme,
        weights: EOQWeights = DEFAULT_WEIGHTS,
        now: Optional[datetime] = None,
    ) -> EOQResult:
        """
        Calculate EOQ for a meme.

        Args:
            meme: The belief record to score.
            weights: Component weights. Used as given, even if they do not
                     sum to 1 or are negative; the total is clamped instead.
            now: Reference time for refinement velocity (default: current UTC).

        Returns:
            EOQResult with total_score, component_scores and recommendations.

        Examples:
            >>> calc = EOQCalculator()
            >>> # null_ratio=0, all empathy 1.0, scalar 1.0, cultural 0.9, no history
            >>> calc.calculate(meme).total_score
            Decimal('0.9150')
        """
        components = EOQComponentScores(
            empathy=self.empathy_component(meme.empathy_scores),
            certainty=self.certainty_component(meme.null_ratio),
            boundary_permeability=self.boundary_permeability(meme),
            refinement_velocity=self.refinement_velocity(meme, now),
            cultural_compatibility=self.cultural_compatibility(meme.cultural_strength),
        )

        raw_total = weighted_sum(components.as_list(), weights.as_list())
        total = clamp(raw_total).quantize(Decimal("0.0001"))

        recommendations = generate_recommendations(components)

        logger.info(
            "eoq_calculated",
            meme_id=meme.id,
            empathy=float(components.empathy),
            certainty=float(components.certainty),
            boundary_permeability=float(components.boundary_permeability),
            refinement_velocity=float(components.refinement_velocity),
            cultural_compatibility=float(components.cultural_compatibility),
            raw_total=float(raw_total),
            total_score=float(total),
            recommendations=len(recommendations),
        )

        return EOQResult(
            total_score=total,
            component_scores=components,
            recommended_improvements=recommendations,
        )

    # ------------------------------------------------------------------
    # Components
    # ------------------------------------------------------------------

    @staticmethod
    def empathy_component(empathy: EmpathyTensor) -> Decimal:
        return sum(
            (to_decimal(getattr(empathy, dim)) * w for dim, w in _EMPATHY_WEIGHTS.items()),
            Decimal("0"),
        )

    @staticmethod
    def certainty_component(null_ratio: float) -> Decimal:
        return Decimal("1") - to_decimal(null_ratio)

    @staticmethod
    def boundary_permeability(meme: Meme) -> Decimal:
        boundary = meme.boundary_definition
        if boundary.scalar_value is not None:
            base = to_decimal(boundary.scalar_value)
        else:
            base = _BOUNDARY_FALLBACK.get(boundary.kind, Decimal("0.5"))

        if len(boundary.inclusion_criteria) > len(boundary.exclusion_criteria):
            base += INCLUSIVE_BONUS

        return min(Decimal("1"), base)

    @staticmethod
    def refinement_velocity(meme: Meme, now: Optional[datetime] = None) -> Decimal:
        if not meme.refinement_history:
            return NEUTRAL_VELOCITY

        now = now or datetime.now(timezone.utc)
        if now.tzinfo is None:
            now = now.replace(tzinfo=timezone.utc)

        recent = sum(
            1 for event in meme.refinement_history
            if now - event.timestamp < VELOCITY_WINDOW
        )
        return min(Decimal("1"), Decimal(recent) / VELOCITY_SATURATION)

    @staticmethod
    def cultural_compatibility(cultural_strength: float) -> Decimal:
        # Deep cultural embedding is a liability: entrenched beliefs resist revision.
        strength = to_decimal(cultural_strength)
        if strength > Decimal("0.8"):
            return Decimal("0.3")
        if strength > Decimal("0.5"):
            return Decimal("0.7")
        return Decimal("0.9")

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def compare(self, meme_a: Meme, meme_b: Meme) -> MemeComparison:
        """
        Compare two memes by EOQ (default weights).

        meme_a wins only with a strictly higher total; ties go to meme_b.
        """
        result_a = self.calculate(meme_a)
        result_b = self.calculate(meme_b)

        if result_a.total_score > result_b.total_score:
            winner, winner_result = meme_a, result_a
        else:
            winner, winner_result = meme_b, result_b

        scores = winner_result.component_scores
        if scores.empathy > Decimal("0.8"):
            advantages = ["Higher empathy optimization"]
        elif scores.boundary_permeability > Decimal("0.8"):
            advantages = ["More inclusive boundaries"]
        else:
            advantages = ["Better overall balance"]

        difference = abs(result_a.total_score - result_b.total_score)

        logger.info(
            "memes_compared",
            meme_a=meme_a.id,
            meme_b=meme_b.id,
            winner=winner.id,
            eoq_difference=float(difference),
        )

        return MemeComparison(
            winner=winner,
            winner_result=winner_result,
            advantages=advantages,
            eoq_difference=difference,
            result_a=result_a,
            result_b=result_b,
        )

    def rank(
        self,
        memes: Sequence[Meme],
        weights: EOQWeights = DEFAULT_WEIGHTS,
    ) -> List[Tuple[Meme, EOQResult]]:
        """Memes paired with their EOQ, best first; equal totals keep input order."""
        scored = [(meme, self.calculate(meme, weights)) for meme in memes]
        return sorted(scored, key=lambda pair: pair[1].total_score, reverse=True)

    def score_meme(self, meme: Meme, weights: EOQWeights = DEFAULT_WEIGHTS) -> Meme:
        """Return a copy of the meme with eoq_score and last_analyzed refreshed."""
        result = self.calculate(meme, weights)
        return meme.model_copy(
            update={
                "eoq_score": float(result.total_score),
                "last_analyzed": datetime.now(timezone.utc),
            }
        )


def calculate_eoq(meme: Meme, weights: EOQWeights = DEFAULT_WEIGHTS) -> EOQResult:
    return EOQCalculator().calculate(meme, weights)


def compare_memes(meme_a: Meme, meme_b: Meme) -> MemeComparison:
    return EOQCalculator().compare(meme_a, meme_b)
