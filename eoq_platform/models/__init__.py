"""
Models Package - EOQ Meme Platform
eoq_platform/models/__init__.py

Pydantic models for memes, N/NN states, their contexts and analysis I/O.
"""

from eoq_platform.models.analysis import (
    AnalysisRequest,
    AnalysisResult,
    CollectedData,
    DataCollectionQuery,
)
from eoq_platform.models.enumerations import (
    AnalysisDepth,
    BoundaryKind,
    CommunicationStyle,
    DataSourceType,
    InfluenceType,
    LLMProvider,
    MemeCategory,
    MemeSource,
    TimeHorizon,
)
from eoq_platform.models.meme import (
    BoundaryDefinition,
    EmpathyTensor,
    Meme,
    MemeCreate,
    MemeEvolution,
    MemeInfluence,
    MemeUpdate,
    Vector3D,
)
from eoq_platform.models.nn_logic import (
    Context,
    CulturalContext,
    EvidenceContext,
    GoldenLoopConcept,
    NullNotNullState,
    Refinement,
    SituatedContext,
    StateMetadata,
    TemporalContext,
)

__all__ = [
    # Analysis
    "AnalysisRequest",
    "AnalysisResult",
    "CollectedData",
    "DataCollectionQuery",
    # Enumerations
    "AnalysisDepth",
    "BoundaryKind",
    "CommunicationStyle",
    "DataSourceType",
    "InfluenceType",
    "LLMProvider",
    "MemeCategory",
    "MemeSource",
    "TimeHorizon",
    # Memes
    "BoundaryDefinition",
    "EmpathyTensor",
    "Meme",
    "MemeCreate",
    "MemeEvolution",
    "MemeInfluence",
    "MemeUpdate",
    "Vector3D",
    # N/NN logic
    "Context",
    "CulturalContext",
    "EvidenceContext",
    "GoldenLoopConcept",
    "NullNotNullState",
    "Refinement",
    "SituatedContext",
    "StateMetadata",
    "TemporalContext",
]
