# tests/test_property_based.py
"""
Property-Based Tests

Hypothesis tests with max_examples=500, covering:
  - EOQCalculator bounds and determinism
  - NNLogicEngine refinement monotonicity
  - Meme model clamping
  - Simulated analyzer ranges
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from eoq_platform.config import AnalyzerConfig
from eoq_platform.models.enumerations import BoundaryKind
from eoq_platform.models.meme import BoundaryDefinition, EmpathyTensor, Meme
from eoq_platform.models.nn_logic import EvidenceContext
from eoq_platform.nn_logic.engine import NNLogicEngine
from eoq_platform.scoring.eoq_calculator import EOQCalculator, EOQWeights
from eoq_platform.services.meme_analyzer import MemeAnalyzer

NOW = datetime(2025, 6, 1, tzinfo=timezone.utc)

# ---------------------------------------------------------------------------
# Shared strategies
# ---------------------------------------------------------------------------

unit_st = st.floats(min_value=0.0, max_value=1.0, allow_nan=False, allow_infinity=False)
wide_st = st.floats(min_value=-10.0, max_value=10.0, allow_nan=False, allow_infinity=False)
weight_st = st.floats(min_value=-100.0, max_value=100.0, allow_nan=False, allow_infinity=False)


@st.composite
def meme_st(draw):
    """Draw a meme from raw, possibly out-of-range inputs (models clamp them)."""
    return Meme(
        name="Generated",
        null_ratio=draw(wide_st),
        empathy_scores=EmpathyTensor(
            golden=draw(wide_st),
            silver=draw(wide_st),
            platinum=draw(wide_st),
            love=draw(wide_st),
        ),
        boundary_definition=BoundaryDefinition(
            kind=draw(st.sampled_from(list(BoundaryKind))),
            scalar_value=draw(st.none() | wide_st),
            inclusion_criteria=draw(st.lists(st.text(max_size=5), max_size=4)),
            exclusion_criteria=draw(st.lists(st.text(max_size=5), max_size=4)),
        ),
        cultural_strength=draw(wide_st),
    )


@st.composite
def weights_st(draw):
    return EOQWeights.from_floats(
        empathy=draw(weight_st),
        certainty=draw(weight_st),
        boundary=draw(weight_st),
        refinement=draw(weight_st),
        cultural=draw(weight_st),
    )


# ---------------------------------------------------------------------------
# EOQ properties
# ---------------------------------------------------------------------------

class TestEOQProperties:

    @given(meme=meme_st(), weights=weights_st())
    @settings(max_examples=500)
    def test_total_always_in_unit_interval(self, meme, weights):
        total = EOQCalculator().calculate(meme, weights, now=NOW).total_score
        assert Decimal("0") <= total <= Decimal("1")

    @given(
        meme=meme_st(),
        values=st.lists(st.floats(allow_nan=False, allow_infinity=False), min_size=5, max_size=5),
    )
    @settings(max_examples=500)
    def test_total_in_unit_interval_for_extreme_finite_weights(self, meme, values):
        weights = EOQWeights.from_floats(*values)
        total = EOQCalculator().calculate(meme, weights, now=NOW).total_score
        assert Decimal("0") <= total <= Decimal("1")

    @given(
        position=st.integers(min_value=0, max_value=4),
        bad=st.sampled_from([float("inf"), float("-inf"), float("nan")]),
    )
    def test_non_finite_weight_always_refused(self, position, bad):
        values = [0.40, 0.25, 0.20, 0.10, 0.05]
        values[position] = bad
        with pytest.raises(ValueError):
            EOQWeights.from_floats(*values)

    @given(meme=meme_st())
    @settings(max_examples=500)
    def test_deterministic(self, meme):
        calculator = EOQCalculator()
        assert calculator.calculate(meme, now=NOW) == calculator.calculate(meme, now=NOW)

    @given(meme=meme_st())
    @settings(max_examples=500)
    def test_components_in_unit_interval(self, meme):
        scores = EOQCalculator().calculate(meme, now=NOW).component_scores
        for score in scores.as_list():
            assert Decimal("0") <= score <= Decimal("1")

    @given(meme=meme_st())
    @settings(max_examples=500)
    def test_default_weights_match_explicit_sum(self, meme):
        result = EOQCalculator().calculate(meme, now=NOW)
        scores = result.component_scores
        expected = (
            Decimal("0.40") * scores.empathy
            + Decimal("0.25") * scores.certainty
            + Decimal("0.20") * scores.boundary_permeability
            + Decimal("0.10") * scores.refinement_velocity
            + Decimal("0.05") * scores.cultural_compatibility
        )
        assert abs(result.total_score - expected) <= Decimal("0.00005")


# ---------------------------------------------------------------------------
# Refinement properties
# ---------------------------------------------------------------------------

class TestRefinementProperties:

    @given(nullness=unit_st, gain=unit_st)
    @settings(max_examples=500)
    def test_nullness_never_increases(self, nullness, gain):
        state = NNLogicEngine.create_state(nullness=nullness)
        refined = NNLogicEngine.refine(state, EvidenceContext(id="c", information_gain=gain))
        assert refined.nullness <= state.nullness
        assert refined.nullness >= 0.0

    @given(nullness=st.floats(min_value=0.001, max_value=1.0), gain=st.floats(min_value=0.001, max_value=1.0))
    @settings(max_examples=500)
    def test_positive_gain_strictly_decreases(self, nullness, gain):
        state = NNLogicEngine.create_state(nullness=nullness)
        refined = NNLogicEngine.refine(state, EvidenceContext(id="c", information_gain=gain))
        assert refined.nullness < state.nullness

    @given(gains=st.lists(unit_st, min_size=1, max_size=10))
    @settings(max_examples=500)
    def test_history_length_matches_refinements(self, gains):
        state = NNLogicEngine.create_state()
        for index, gain in enumerate(gains):
            state = NNLogicEngine.refine(
                state, EvidenceContext(id=f"c{index}", information_gain=gain)
            )
        assert len(state.metadata.refinement_history) == len(gains)
        reductions = sum(r.nullness_reduction for r in state.metadata.refinement_history)
        assert abs((1.0 - reductions) - state.nullness) < 1e-9

    @given(
        universe=st.lists(st.integers(0, 50), min_size=1, max_size=20),
        negations=st.lists(st.integers(0, 50), max_size=20),
    )
    @settings(max_examples=500)
    def test_negation_nullness_is_remaining_fraction(self, universe, negations):
        state = NNLogicEngine.define_by_negation(universe, negations, "N")
        assert all(item not in negations for item in state.value)
        assert state.nullness == len(state.value) / len(universe)


# ---------------------------------------------------------------------------
# Model and analyzer properties
# ---------------------------------------------------------------------------

class TestModelProperties:

    @given(value=wide_st)
    @settings(max_examples=500)
    def test_empathy_dimensions_clamped(self, value):
        tensor = EmpathyTensor(golden=value, silver=value, platinum=value, love=value)
        assert all(0.0 <= v <= 1.0 for v in tensor.values())

    @given(seed=st.integers(min_value=0, max_value=2**32), text=st.text(min_size=1, max_size=200))
    @settings(max_examples=200)
    def test_analyzer_ranges(self, seed, text):
        assume(text.strip())
        meme = MemeAnalyzer(AnalyzerConfig(seed=seed)).analyze_text(text)
        assert 0.0 <= meme.null_ratio < 0.5
        assert 0.1 <= meme.cultural_strength < 0.4
        assert 0.6 <= meme.empathy_scores.golden <= 1.0
        assert 0.4 <= meme.empathy_scores.love <= 1.0
        assert 0.6 <= meme.boundary_definition.scalar_value <= 1.0
        assert len(meme.name) <= 50
