"""
nn_logic/ — Refinement Engine

Modules:
    engine.py       - N/NN state creation, refinement, negation, empathy
    golden_loop.py  - Golden Loop validity rubric
"""

from eoq_platform.nn_logic.engine import (
    NNLogicEngine,
    calculate_empathy,
    create_state,
    define_by_negation,
    refine,
)
from eoq_platform.nn_logic.golden_loop import (
    GOLDEN_LOOP_RULES,
    GoldenLoopResult,
    GoldenLoopRule,
    apply_golden_loop,
    as_concept,
)

__all__ = [
    "NNLogicEngine",
    "calculate_empathy",
    "create_state",
    "define_by_negation",
    "refine",
    "GOLDEN_LOOP_RULES",
    "GoldenLoopResult",
    "GoldenLoopRule",
    "apply_golden_loop",
    "as_concept",
]
