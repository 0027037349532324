# tests/test_eoq_calculator.py

"""
EOQ Calculator Tests - component scores, weighting, comparison and ranking
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from eoq_platform.models.enumerations import BoundaryKind
from eoq_platform.models.meme import BoundaryDefinition, EmpathyTensor, Meme, MemeEvolution
from eoq_platform.scoring.eoq_calculator import (
    DEFAULT_WEIGHTS,
    EOQCalculator,
    EOQWeights,
    calculate_eoq,
    compare_memes,
)
from eoq_platform.scoring.utils import clamp, to_decimal, weighted_sum


@pytest.fixture
def calculator():
    return EOQCalculator()


def _meme_with_boundary(boundary: BoundaryDefinition) -> Meme:
    return Meme(name="Boundary Probe", boundary_definition=boundary)


# COMPOSITE SCORE


class TestEOQTotal:
    """Tests for the weighted total."""

    def test_ideal_meme_scores_0915(self, calculator, ideal_meme, fixed_now):
        result = calculator.calculate(ideal_meme, now=fixed_now)
        assert result.total_score == Decimal("0.915")

    def test_ideal_meme_components(self, calculator, ideal_meme, fixed_now):
        scores = calculator.calculate(ideal_meme, now=fixed_now).component_scores
        assert scores.empathy == Decimal("1")
        assert scores.certainty == Decimal("1")
        assert scores.boundary_permeability == Decimal("1")
        assert scores.refinement_velocity == Decimal("0.5")
        assert scores.cultural_compatibility == Decimal("0.3")

    def test_total_is_quantized(self, calculator, weak_meme):
        total = calculator.calculate(weak_meme).total_score
        assert total == total.quantize(Decimal("0.0001"))

    def test_default_weights_sum_to_one(self):
        assert DEFAULT_WEIGHTS.total == Decimal("1.00")

    def test_oversized_weights_clamp_to_one(self, calculator, ideal_meme):
        weights = EOQWeights.from_floats(10, 10, 10, 10, 10)
        assert calculator.calculate(ideal_meme, weights).total_score == Decimal("1")

    def test_negative_weights_clamp_to_zero(self, calculator, ideal_meme):
        weights = EOQWeights.from_floats(-1, -1, -1, -1, -1)
        assert calculator.calculate(ideal_meme, weights).total_score == Decimal("0")

    def test_weights_not_normalized(self, calculator, ideal_meme, fixed_now):
        """Only certainty weighted: total equals the certainty component."""
        weights = EOQWeights.from_floats(0, 0.5, 0, 0, 0)
        result = calculator.calculate(ideal_meme, weights, now=fixed_now)
        assert result.total_score == Decimal("0.5")

    def test_deterministic(self, calculator, evolving_meme, fixed_now):
        first = calculator.calculate(evolving_meme, now=fixed_now)
        second = calculator.calculate(evolving_meme, now=fixed_now)
        assert first == second

    def test_module_function_matches_class(self, ideal_meme):
        assert calculate_eoq(ideal_meme).total_score == Decimal("0.915")


class TestNonFiniteWeights:
    """Weight vectors must be finite; finite extremes still clamp."""

    @pytest.mark.parametrize("bad", [float("inf"), float("-inf"), float("nan")])
    def test_from_floats_rejects_non_finite(self, bad):
        with pytest.raises(ValueError, match="must be finite"):
            EOQWeights.from_floats(bad, 0.25, 0.2, 0.1, 0.05)

    def test_decimal_infinity_rejected(self):
        with pytest.raises(ValueError):
            EOQWeights(cultural=Decimal("Infinity"))

    def test_decimal_nan_rejected(self):
        with pytest.raises(ValueError):
            EOQWeights(empathy=Decimal("NaN"))

    def test_huge_weight_on_zero_component_stays_in_range(self, calculator):
        """Zero empathy times a huge weight contributes nothing; total clamps."""
        meme = Meme(name="No Empathy", empathy_scores=EmpathyTensor())
        weights = EOQWeights.from_floats(1e300, 0.25, 0.2, 0.1, 0.05)
        total = calculator.calculate(meme, weights).total_score
        assert Decimal("0") <= total <= Decimal("1")

    def test_huge_negative_weight_clamps_to_zero(self, calculator, ideal_meme):
        weights = EOQWeights.from_floats(-1e300, 0.25, 0.2, 0.1, 0.05)
        assert calculator.calculate(ideal_meme, weights).total_score == Decimal("0")


# COMPONENTS


class TestEmpathyComponent:

    def test_weighted_dimensions(self):
        tensor = EmpathyTensor(golden=1.0, silver=0.0, platinum=0.0, love=0.0)
        assert EOQCalculator.empathy_component(tensor) == Decimal("0.30")

    def test_weak_meme_empathy(self, weak_meme):
        assert EOQCalculator.empathy_component(weak_meme.empathy_scores) == Decimal("0.18")

    def test_zero_tensor(self):
        assert EOQCalculator.empathy_component(EmpathyTensor()) == Decimal("0")


class TestCertaintyComponent:

    @pytest.mark.parametrize("null_ratio, expected", [
        (0.0, "1"), (0.25, "0.75"), (1.0, "0"),
    ])
    def test_inverse_of_nullness(self, null_ratio, expected):
        assert EOQCalculator.certainty_component(null_ratio) == Decimal(expected)


class TestBoundaryPermeability:

    def test_inclusive_bonus_is_exactly_ten_points(self):
        meme = _meme_with_boundary(BoundaryDefinition(
            scalar_value=0.5,
            inclusion_criteria=["a", "b"],
            exclusion_criteria=["c"],
        ))
        assert EOQCalculator.boundary_permeability(meme) == Decimal("0.6")

    def test_no_bonus_when_criteria_balanced(self):
        meme = _meme_with_boundary(BoundaryDefinition(
            scalar_value=0.5,
            inclusion_criteria=["a"],
            exclusion_criteria=["b"],
        ))
        assert EOQCalculator.boundary_permeability(meme) == Decimal("0.5")

    def test_bonus_capped_at_one(self):
        meme = _meme_with_boundary(BoundaryDefinition(
            scalar_value=0.95,
            inclusion_criteria=["a"],
        ))
        assert EOQCalculator.boundary_permeability(meme) == Decimal("1")

    @pytest.mark.parametrize("kind, expected", [
        (BoundaryKind.RIGID, "0.2"),
        (BoundaryKind.PERMEABLE, "0.7"),
        (BoundaryKind.FLUID, "0.9"),
    ])
    def test_fallback_by_kind(self, kind, expected):
        meme = _meme_with_boundary(BoundaryDefinition(kind=kind))
        assert EOQCalculator.boundary_permeability(meme) == Decimal(expected)

    def test_scalar_wins_over_kind(self):
        meme = _meme_with_boundary(BoundaryDefinition(kind=BoundaryKind.RIGID, scalar_value=0.8))
        assert EOQCalculator.boundary_permeability(meme) == Decimal("0.8")


class TestRefinementVelocity:

    def test_no_history_is_neutral(self, ideal_meme):
        assert EOQCalculator.refinement_velocity(ideal_meme) == Decimal("0.5")

    def test_counts_only_recent_refinements(self, evolving_meme, fixed_now):
        assert EOQCalculator.refinement_velocity(evolving_meme, fixed_now) == Decimal("0.6")

    def test_saturates_at_five(self, fixed_now):
        history = [MemeEvolution(timestamp=fixed_now - timedelta(hours=i)) for i in range(8)]
        meme = Meme(name="Busy", refinement_history=history)
        assert EOQCalculator.refinement_velocity(meme, fixed_now) == Decimal("1")

    def test_old_history_only_scores_zero(self, fixed_now):
        meme = Meme(
            name="Stale",
            refinement_history=[MemeEvolution(timestamp=fixed_now - timedelta(days=60))],
        )
        assert EOQCalculator.refinement_velocity(meme, fixed_now) == Decimal("0")

    def test_naive_now_treated_as_utc(self, evolving_meme, fixed_now):
        naive = fixed_now.replace(tzinfo=None)
        assert EOQCalculator.refinement_velocity(evolving_meme, naive) == Decimal("0.6")


class TestCulturalCompatibility:

    @pytest.mark.parametrize("strength, expected", [
        (0.0, "0.9"),
        (0.5, "0.9"),
        (0.51, "0.7"),
        (0.8, "0.7"),
        (0.81, "0.3"),
        (1.0, "0.3"),
    ])
    def test_step_function(self, strength, expected):
        assert EOQCalculator.cultural_compatibility(strength) == Decimal(expected)


# RECOMMENDATIONS (via calculate)


class TestCalculatedRecommendations:

    def test_weak_meme(self, calculator, weak_meme):
        assert calculator.calculate(weak_meme).recommended_improvements == [
            "increase empathetic consideration",
            "create more inclusive boundaries",
        ]

    def test_ideal_meme(self, calculator, ideal_meme):
        assert calculator.calculate(ideal_meme).recommended_improvements == [
            "maintain epistemic humility",
            "test cross-cultural applicability",
        ]


# COMPARISON AND RANKING


class TestCompare:

    def test_higher_total_wins(self, calculator, ideal_meme, weak_meme):
        comparison = calculator.compare(weak_meme, ideal_meme)
        assert comparison.winner.id == "ideal"
        assert comparison.advantages == ["Higher empathy optimization"]

    def test_tie_goes_to_second(self, calculator, ideal_meme):
        twin = ideal_meme.model_copy(update={"id": "twin"})
        comparison = calculator.compare(ideal_meme, twin)
        assert comparison.winner.id == "twin"
        assert comparison.eoq_difference == Decimal("0")

    def test_difference_is_absolute(self, ideal_meme, weak_meme):
        forward = compare_memes(ideal_meme, weak_meme)
        backward = compare_memes(weak_meme, ideal_meme)
        assert forward.eoq_difference == backward.eoq_difference > 0

    def test_boundary_advantage(self, calculator):
        open_meme = Meme(
            id="open",
            name="Open",
            null_ratio=0.2,
            empathy_scores=EmpathyTensor(golden=0.5, silver=0.5, platinum=0.5, love=0.5),
            boundary_definition=BoundaryDefinition(scalar_value=0.9),
        )
        closed_meme = open_meme.model_copy(update={
            "id": "closed",
            "boundary_definition": BoundaryDefinition(scalar_value=0.1),
        })
        comparison = calculator.compare(open_meme, closed_meme)
        assert comparison.winner.id == "open"
        assert comparison.advantages == ["More inclusive boundaries"]

    def test_balance_advantage(self, calculator, weak_meme):
        weaker = weak_meme.model_copy(update={"id": "weaker", "null_ratio": 0.9})
        comparison = calculator.compare(weaker, weak_meme)
        assert comparison.winner.id == "weak"
        assert comparison.advantages == ["Better overall balance"]


class TestRank:

    def test_foundational_order(self, calculator, foundational_memes):
        ranked = calculator.rank(list(foundational_memes.values()))
        assert [meme.id for meme, _ in ranked] == [
            "existence-optimization",
            "regenerative-contribution",
            "god-divine-authority",
            "money-value-measure",
        ]

    def test_equal_totals_keep_input_order(self, calculator, ideal_meme):
        twin = ideal_meme.model_copy(update={"id": "twin"})
        ranked = calculator.rank([ideal_meme, twin])
        assert [meme.id for meme, _ in ranked] == ["ideal", "twin"]

    def test_score_meme_returns_copy(self, calculator, ideal_meme):
        scored = calculator.score_meme(ideal_meme)
        assert scored.eoq_score == pytest.approx(0.915)
        assert ideal_meme.eoq_score == 0.0


# DECIMAL UTILITIES


class TestScoringUtils:

    def test_to_decimal_uses_shortest_repr(self):
        assert to_decimal(0.1) == Decimal("0.1")

    def test_to_decimal_places(self):
        assert to_decimal(0.12345, places=2) == Decimal("0.12")

    def test_clamp(self):
        assert clamp(Decimal("1.5")) == Decimal("1")
        assert clamp(Decimal("-0.5")) == Decimal("0")

    def test_weighted_sum_length_mismatch(self):
        with pytest.raises(ValueError):
            weighted_sum([Decimal("1")], [Decimal("1"), Decimal("2")])
