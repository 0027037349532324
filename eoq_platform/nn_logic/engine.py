"""
nn_logic/engine.py

Null/Not-Null logic engine: creation and monotonic refinement of partially
defined values.

Refinement rule:
    reduction   = min(nullness, information_gain)
    nullness'   = nullness − reduction          (never increases, floor 0)
    value'      = value if value is set else context.new_value   (first write wins)
    factors'    = factors ∪ {context.id: context}                (last write wins)

Every operation returns a new state; inputs are never modified.
"""

from datetime import datetime, timezone
from typing import Any, List, Optional, Sequence, TypeVar

import structlog

from eoq_platform.core.exceptions import ContextKindError, EmptyUniverseError
from eoq_platform.models.enumerations import BoundaryKind, TimeHorizon
from eoq_platform.models.meme import BoundaryDefinition
from eoq_platform.models.nn_logic import (
    Context,
    NullNotNullState,
    Refinement,
    SituatedContext,
    StateMetadata,
)
from eoq_platform.nn_logic.golden_loop import GoldenLoopResult, apply_golden_loop

logger = structlog.get_logger(__name__)

T = TypeVar("T")


class NNLogicEngine:
    """Pure operations over N/NN states."""

    BASE_EMPATHY: float = 0.5
    GENERATIONAL_MULTIPLIER: float = 1.2
    NEGATION_BOUNDARY_SCALAR: float = 0.2

    @staticmethod
    def create_state(
        value: Optional[T] = None,
        nullness: float = 1.0,
        **metadata_overrides: Any,
    ) -> NullNotNullState[T]:
        """
        Create a new N/NN state.

        Args:
            value: Seed value, or None when nothing is known yet.
            nullness: Initial nullness, clamped to [0, 1].
            **metadata_overrides: StateMetadata fields replacing the defaults
                (empty history, now, no contextual factors, zero empathy
                tensor, fully fluid boundary).
        """
        metadata = StateMetadata(**metadata_overrides)
        return NullNotNullState(value=value, nullness=nullness, metadata=metadata)

    @staticmethod
    def refine(state: NullNotNullState[T], context: Context) -> NullNotNullState[T]:
        """Narrow a state's uncertainty with one context; nullness can only decrease."""
        reduction = min(state.nullness, context.information_gain)
        new_nullness = state.nullness - reduction
        now = datetime.now(timezone.utc)

        refinement = Refinement(
            timestamp=now,
            context_id=context.id,
            nullness_reduction=reduction,
            information_gain=f"Context: {context.id}, Gain: {context.information_gain}",
        )

        metadata = state.metadata.model_copy(
            update={
                "last_modified": now,
                "refinement_history": [*state.metadata.refinement_history, refinement],
                "contextual_factors": {
                    **state.metadata.contextual_factors,
                    context.id: context,
                },
            }
        )

        logger.debug(
            "state_refined",
            context_id=context.id,
            context_kind=context.kind,
            nullness_before=state.nullness,
            nullness_after=new_nullness,
            value_adopted=state.value is None and context.new_value is not None,
        )

        return state.model_copy(
            update={
                "value": state.value if state.value is not None else context.new_value,
                "nullness": new_nullness,
                "metadata": metadata,
            }
        )

    @classmethod
    def define_by_negation(
        cls,
        universe: Sequence[T],
        negations: Sequence[T],
        label: str,
    ) -> NullNotNullState[List[T]]:
        """
        Define a concept by what it excludes (the "X-shaped hole").

        nullness = |universe − negations| / |universe|: the more that remains,
        the less the concept is pinned down.

        Raises:
            EmptyUniverseError: If universe is empty.
        """
        if not universe:
            raise EmptyUniverseError(label)

        remaining = [item for item in universe if item not in negations]
        nullness = len(remaining) / len(universe)

        boundary = BoundaryDefinition(
            kind=BoundaryKind.RIGID,
            description=f"{label} defined by excluding: {', '.join(str(n) for n in negations)}",
            inclusion_criteria=[str(item) for item in remaining],
            exclusion_criteria=[str(item) for item in negations],
            scalar_value=cls.NEGATION_BOUNDARY_SCALAR,
        )

        logger.debug(
            "defined_by_negation",
            label=label,
            universe_size=len(universe),
            remaining=len(remaining),
            nullness=nullness,
        )

        return cls.create_state(remaining, nullness, boundary_definition=boundary)

    @classmethod
    def calculate_empathy(
        cls,
        source_id: str,
        target_id: str,
        action: str,
        context: Context,
    ) -> float:
        """
        Placeholder empathy model between two agents.

            empathy = min(1, 0.5 × individualism_index × (1.2 if generational else 1.0))

        source_id, target_id and action do not enter the score.

        Raises:
            ContextKindError: If context carries no cultural/temporal factors.
        """
        if not isinstance(context, SituatedContext):
            raise ContextKindError("calculate_empathy", context.kind)

        horizon_multiplier = (
            cls.GENERATIONAL_MULTIPLIER
            if context.temporal_factors.time_horizon == TimeHorizon.GENERATIONAL
            else 1.0
        )
        empathy = cls.BASE_EMPATHY * context.cultural_factors.individualism_index * horizon_multiplier
        return min(1.0, empathy)

    @staticmethod
    def apply_golden_loop(subject) -> GoldenLoopResult:
        return apply_golden_loop(subject)


def create_state(value: Optional[T] = None, nullness: float = 1.0, **metadata_overrides: Any) -> NullNotNullState[T]:
    return NNLogicEngine.create_state(value, nullness, **metadata_overrides)


def refine(state: NullNotNullState[T], context: Context) -> NullNotNullState[T]:
    return NNLogicEngine.refine(state, context)


def define_by_negation(universe: Sequence[T], negations: Sequence[T], label: str) -> NullNotNullState[List[T]]:
    return NNLogicEngine.define_by_negation(universe, negations, label)


def calculate_empathy(source_id: str, target_id: str, action: str, context: Context) -> float:
    return NNLogicEngine.calculate_empathy(source_id, target_id, action, context)
