"""
N/NN Logic Models - EOQ Meme Platform
eoq_platform/models/nn_logic.py

Partially-defined values ("N/NN states") and the evidence contexts that
refine them. Contexts are a tagged union discriminated by ``kind``.
"""

from datetime import datetime
from typing import Annotated, Any, Dict, Generic, List, Literal, Optional, TypeVar, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from eoq_platform.models.enumerations import BoundaryKind, CommunicationStyle, TimeHorizon
from eoq_platform.models.meme import (
    BoundaryDefinition,
    EmpathyTensor,
    clamp_unit,
    ensure_utc,
    utc_now,
)

T = TypeVar("T")


class CulturalContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    region: str = "global"
    value_system: str = ""
    communication_style: CommunicationStyle = CommunicationStyle.DIRECT
    individualism_index: float = Field(default=0.5, ge=0.0, le=1.0)
    hierarchy_tolerance: float = Field(default=0.5, ge=0.0, le=1.0)

    @field_validator("individualism_index", "hierarchy_tolerance", mode="before")
    @classmethod
    def clamp_index(cls, value: Any) -> Any:
        return clamp_unit(value)


class TemporalContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    time_horizon: TimeHorizon = TimeHorizon.MEDIUM
    urgency: float = Field(default=0.5, ge=0.0, le=1.0)
    change_rate: float = Field(default=0.0, ge=0.0, description="How fast the context evolves")

    @field_validator("urgency", mode="before")
    @classmethod
    def clamp_urgency(cls, value: Any) -> Any:
        return clamp_unit(value)

    @field_validator("change_rate", mode="before")
    @classmethod
    def clamp_change_rate(cls, value: Any) -> Any:
        return clamp_unit(value, 0.0, float("inf"))


class ContextBase(BaseModel):
    """A discrete unit of evidence applied to narrow a state's uncertainty."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1, max_length=255)
    information_gain: float = Field(
        default=0.0,
        ge=0.0,
        description="Magnitude of nullness this evidence can remove"
    )
    new_value: Optional[Any] = None
    description: str = ""

    @field_validator("information_gain", mode="before")
    @classmethod
    def non_negative_gain(cls, value: Any) -> Any:
        return clamp_unit(value, 0.0, float("inf"))


class EvidenceContext(ContextBase):
    """Plain evidence without situational factors."""

    kind: Literal["evidence"] = "evidence"


class SituatedContext(ContextBase):
    """Evidence observed within a cultural and temporal setting."""

    kind: Literal["situated"] = "situated"
    cultural_factors: CulturalContext = Field(default_factory=CulturalContext)
    temporal_factors: TemporalContext = Field(default_factory=TemporalContext)
    environmental_factors: Dict[str, str] = Field(default_factory=dict)


Context = Annotated[Union[EvidenceContext, SituatedContext], Field(discriminator="kind")]


class Refinement(BaseModel):
    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(default_factory=utc_now)
    context_id: str
    nullness_reduction: float = Field(ge=0.0, le=1.0)
    information_gain: str

    @field_validator("timestamp", mode="after")
    @classmethod
    def timestamp_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


def default_boundary() -> BoundaryDefinition:
    return BoundaryDefinition(
        kind=BoundaryKind.FLUID,
        description="Undefined boundary",
        inclusion_criteria=[],
        exclusion_criteria=[],
        scalar_value=1.0,
    )


class StateMetadata(BaseModel):
    model_config = ConfigDict(frozen=True)

    refinement_history: List[Refinement] = Field(default_factory=list)
    last_modified: datetime = Field(default_factory=utc_now)
    contextual_factors: Dict[str, Context] = Field(default_factory=dict)
    empathy_tensor: EmpathyTensor = Field(default_factory=EmpathyTensor)
    boundary_definition: BoundaryDefinition = Field(default_factory=default_boundary)

    @field_validator("last_modified", mode="after")
    @classmethod
    def last_modified_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class NullNotNullState(BaseModel, Generic[T]):
    """
    A partially-defined value.

    nullness 1.0 means completely undefined, 0.0 fully determined. New states
    are produced by NNLogicEngine; an existing state is never changed in place.
    """

    model_config = ConfigDict(frozen=True)

    value: Optional[T] = None
    nullness: float = Field(default=1.0, ge=0.0, le=1.0)
    metadata: StateMetadata = Field(default_factory=StateMetadata)

    @field_validator("nullness", mode="before")
    @classmethod
    def clamp_nullness(cls, value: Any) -> Any:
        return clamp_unit(value)


class GoldenLoopConcept(BaseModel):
    """Anything that can be put through the Golden Loop."""

    model_config = ConfigDict(frozen=True)

    nullness: float = Field(ge=0.0, le=1.0)
    empathy_scores: Optional[EmpathyTensor] = None

    @field_validator("nullness", mode="before")
    @classmethod
    def clamp_nullness(cls, value: Any) -> Any:
        return clamp_unit(value)
