"""
Foundational Memes - EOQ Meme Platform
eoq_platform/data/foundational_memes.py

Reference memes the session store is seeded with: two current, problematic
beliefs and two proposed, optimized ones.
"""

from datetime import datetime, timezone
from typing import Dict, List

from eoq_platform.models.enumerations import (
    BoundaryKind,
    InfluenceType,
    MemeCategory,
    MemeSource,
)
from eoq_platform.models.meme import (
    BoundaryDefinition,
    EmpathyTensor,
    Meme,
    MemeInfluence,
    Vector3D,
)

_SEEDED_AT = datetime(2024, 1, 1, tzinfo=timezone.utc)


FOUNDATIONAL_MEMES: List[Meme] = [
    # ---- Current, problematic ----
    Meme(
        id="god-divine-authority",
        name="God/Divine Authority",
        description="Supreme being or cosmic order that provides meaning and moral authority",
        category=MemeCategory.CURRENT_PROBLEMATIC,
        null_ratio=0.85,
        empathy_scores=EmpathyTensor(golden=0.6, silver=0.4, platinum=0.7, love=0.8),
        boundary_type="Rigid I/Not-I (believers/heretics)",
        boundary_definition=BoundaryDefinition(
            kind=BoundaryKind.RIGID,
            description="Divides world into believers vs non-believers",
            inclusion_criteria=["believers", "faithful", "chosen"],
            exclusion_criteria=["atheists", "heretics", "infidels", "pagans"],
            scalar_value=0.2,
        ),
        eoq_score=0.52,
        cultural_strength=0.9,
        negations=["atheism", "materialism", "human-authority", "meaninglessness"],
        influences=[
            MemeInfluence(
                target_concept_id="morality",
                target_concept_name="Moral Decision Making",
                influence_strength=0.9,
                influence_type=InfluenceType.TRANSFORMATIVE,
                pathways=["divine-command-theory", "sacred-texts", "religious-authority"],
                empathy_impact=0.3,  # can justify harm to the out-group
            ),
            MemeInfluence(
                target_concept_id="meaning",
                target_concept_name="Life Purpose",
                influence_strength=0.8,
                influence_type=InfluenceType.POSITIVE,
                pathways=["divine-plan", "afterlife-purpose", "service-to-god"],
                empathy_impact=0.7,
            ),
        ],
        position=Vector3D(x=-2, y=0, z=0),
        color="#8B5CF6",
        size=1.2,
        created_at=_SEEDED_AT,
        source=MemeSource.MANUAL_ENTRY,
    ),
    Meme(
        id="money-value-measure",
        name="Money as Value Measure",
        description="Human worth and societal contribution measured primarily through monetary accumulation",
        category=MemeCategory.CURRENT_PROBLEMATIC,
        null_ratio=0.3,
        empathy_scores=EmpathyTensor(golden=0.2, silver=0.3, platinum=0.1, love=0.1),
        boundary_type="Hierarchical I/Not-I (wealthy/poor)",
        boundary_definition=BoundaryDefinition(
            kind=BoundaryKind.RIGID,
            description="Creates economic class divisions",
            inclusion_criteria=["wealthy", "successful", "valuable"],
            exclusion_criteria=["poor", "unsuccessful", "worthless"],
            scalar_value=0.1,
        ),
        eoq_score=0.18,
        cultural_strength=0.95,
        negations=["gift-economy", "time-banking", "mutual-aid", "intrinsic-worth"],
        influences=[
            MemeInfluence(
                target_concept_id="self-worth",
                target_concept_name="Personal Value",
                influence_strength=0.95,
                influence_type=InfluenceType.DISTORTIVE,
                pathways=["salary-status", "net-worth", "consumption-display"],
                empathy_impact=-0.4,
            ),
            MemeInfluence(
                target_concept_id="resource-allocation",
                target_concept_name="Resource Distribution",
                influence_strength=0.9,
                influence_type=InfluenceType.NEGATIVE,
                pathways=["market-mechanisms", "profit-maximization", "scarcity-pricing"],
                empathy_impact=-0.6,
            ),
        ],
        position=Vector3D(x=2, y=-2, z=0),
        color="#EF4444",
        size=1.5,
        created_at=_SEEDED_AT,
        source=MemeSource.MANUAL_ENTRY,
    ),
    # ---- Proposed, optimized ----
    Meme(
        id="existence-optimization",
        name="Existence Optimization",
        description="The purpose of consciousness is to optimize existence patterns for collective flourishing",
        category=MemeCategory.PROPOSED_OPTIMIZED,
        null_ratio=0.2,
        empathy_scores=EmpathyTensor(golden=0.95, silver=0.9, platinum=0.85, love=0.9),
        boundary_type="Inclusive I/Not-I (conscious beings/unconscious patterns)",
        boundary_definition=BoundaryDefinition(
            kind=BoundaryKind.FLUID,
            description="Includes all conscious beings, works with unconscious patterns",
            inclusion_criteria=["conscious-beings", "sentient-life", "aware-systems"],
            exclusion_criteria=["unconscious-destruction", "pattern-chaos"],
            scalar_value=0.9,
        ),
        eoq_score=0.91,
        cultural_strength=0.1,
        negations=["pure-selfishness", "nihilistic-destruction", "zero-sum-thinking", "extraction-mindset"],
        influences=[
            MemeInfluence(
                target_concept_id="decision-making",
                target_concept_name="Choice Architecture",
                influence_strength=0.9,
                influence_type=InfluenceType.TRANSFORMATIVE,
                pathways=["collective-benefit-calculation", "long-term-thinking", "empathy-optimization"],
                empathy_impact=0.9,
            ),
            MemeInfluence(
                target_concept_id="technology-development",
                target_concept_name="Innovation Direction",
                influence_strength=0.8,
                influence_type=InfluenceType.POSITIVE,
                pathways=["regenerative-tech", "consciousness-enhancement", "cooperative-tools"],
                empathy_impact=0.85,
            ),
        ],
        position=Vector3D(x=-2, y=2, z=2),
        color="#10B981",
        size=1.3,
        created_at=_SEEDED_AT,
        source=MemeSource.MANUAL_ENTRY,
    ),
    Meme(
        id="regenerative-contribution",
        name="Regenerative Contribution",
        description="Value measured by net positive impact on existence rather than extraction or accumulation",
        category=MemeCategory.PROPOSED_OPTIMIZED,
        null_ratio=0.25,
        empathy_scores=EmpathyTensor(golden=0.9, silver=0.85, platinum=0.9, love=0.95),
        boundary_type="Dynamic I/Not-I (contributors/extractors, context-dependent)",
        boundary_definition=BoundaryDefinition(
            kind=BoundaryKind.FLUID,
            description="Boundaries shift based on impact patterns, not fixed identity",
            inclusion_criteria=["net-positive-impact", "regenerative-patterns", "life-supporting"],
            exclusion_criteria=["extraction-only", "destructive-patterns", "life-diminishing"],
            scalar_value=0.85,
        ),
        eoq_score=0.92,
        cultural_strength=0.08,
        negations=["extractive-capitalism", "hoarding-behavior", "zero-sum-competition", "disposable-thinking"],
        influences=[
            MemeInfluence(
                target_concept_id="economic-systems",
                target_concept_name="Value Exchange",
                influence_strength=0.95,
                influence_type=InfluenceType.TRANSFORMATIVE,
                pathways=["contribution-metrics", "regenerative-economics", "gift-culture-elements"],
                empathy_impact=0.9,
            ),
            MemeInfluence(
                target_concept_id="personal-fulfillment",
                target_concept_name="Life Satisfaction",
                influence_strength=0.8,
                influence_type=InfluenceType.POSITIVE,
                pathways=["meaning-through-contribution", "interconnection-awareness", "legacy-building"],
                empathy_impact=0.85,
            ),
        ],
        position=Vector3D(x=2, y=2, z=2),
        color="#059669",
        size=1.4,
        created_at=_SEEDED_AT,
        source=MemeSource.MANUAL_ENTRY,
    ),
]


# Concepts the memes influence, with their own nullness
CONCEPT_NODES: List[Dict[str, object]] = [
    {"id": "morality", "name": "Moral Decision Making",
     "description": "Framework for determining right and wrong actions",
     "nullness": 0.4, "position": Vector3D(x=-1, y=1, z=0)},
    {"id": "self-worth", "name": "Personal Value",
     "description": "How individuals assess their own worth",
     "nullness": 0.6, "position": Vector3D(x=1, y=-1, z=0)},
    {"id": "resource-allocation", "name": "Resource Distribution",
     "description": "How societies distribute available resources",
     "nullness": 0.3, "position": Vector3D(x=0, y=-2, z=1)},
    {"id": "decision-making", "name": "Choice Architecture",
     "description": "How decisions are structured and made",
     "nullness": 0.35, "position": Vector3D(x=-1, y=1, z=1)},
    {"id": "technology-development", "name": "Innovation Direction",
     "description": "What kinds of technology get developed and why",
     "nullness": 0.5, "position": Vector3D(x=0, y=0, z=2)},
]
