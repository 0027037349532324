"""
nn_logic/golden_loop.py

The Golden Loop: a fixed rubric of validity checks over a concept's nullness
and empathy tensor.

Checks, in order:
    1. Existence          nullness > 0.9            -> insufficiently defined
    2. Epistemic humility nullness < 0.1            -> overconfidence detected
    3. Ordered patterns   no tensor, or every
                          dimension < 0.1           -> no empathetic ordering detected
    4. Golden Rule        golden < 0.5              -> fails golden-rule reciprocity test

A concept is valid iff no check fires. Nihilism acknowledgment and the
loop-back step are framing only and carry no predicate.
"""

from dataclasses import dataclass, field
from typing import Callable, List, NamedTuple, Union

import structlog

from eoq_platform.models.meme import Meme
from eoq_platform.models.nn_logic import GoldenLoopConcept, NullNotNullState

logger = structlog.get_logger(__name__)


class GoldenLoopRule(NamedTuple):
    applies: Callable[[GoldenLoopConcept], bool]
    message: str


def _no_empathetic_ordering(concept: GoldenLoopConcept) -> bool:
    scores = concept.empathy_scores
    return scores is None or all(v < 0.1 for v in scores.values())


def _fails_reciprocity(concept: GoldenLoopConcept) -> bool:
    return concept.empathy_scores is not None and concept.empathy_scores.golden < 0.5


GOLDEN_LOOP_RULES: List[GoldenLoopRule] = [
    GoldenLoopRule(lambda c: c.nullness > 0.9, "insufficiently defined"),
    GoldenLoopRule(lambda c: c.nullness < 0.1, "overconfidence detected"),
    GoldenLoopRule(_no_empathetic_ordering, "no empathetic ordering detected"),
    GoldenLoopRule(_fails_reciprocity, "fails golden-rule reciprocity test"),
]


@dataclass(frozen=True)
class GoldenLoopResult:
    """Output of apply_golden_loop()."""
    valid: bool
    issues: List[str] = field(default_factory=list)


def as_concept(subject: Union[GoldenLoopConcept, Meme, NullNotNullState]) -> GoldenLoopConcept:
    """Project a meme or N/NN state onto the fields the Golden Loop inspects."""
    if isinstance(subject, GoldenLoopConcept):
        return subject
    if isinstance(subject, Meme):
        return GoldenLoopConcept(
            nullness=subject.null_ratio,
            empathy_scores=subject.empathy_scores,
        )
    if isinstance(subject, NullNotNullState):
        return GoldenLoopConcept(
            nullness=subject.nullness,
            empathy_scores=subject.metadata.empathy_tensor,
        )
    raise TypeError(f"Cannot run the Golden Loop over {type(subject).__name__}")


def apply_golden_loop(
    subject: Union[GoldenLoopConcept, Meme, NullNotNullState],
    rules: List[GoldenLoopRule] = GOLDEN_LOOP_RULES,
) -> GoldenLoopResult:
    concept = as_concept(subject)
    issues = [rule.message for rule in rules if rule.applies(concept)]

    logger.debug(
        "golden_loop_applied",
        nullness=concept.nullness,
        has_empathy=concept.empathy_scores is not None,
        issues=issues,
    )

    return GoldenLoopResult(valid=not issues, issues=issues)
