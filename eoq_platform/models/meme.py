"""
Meme Models - EOQ Meme Platform
eoq_platform/models/meme.py

Pydantic models for belief units ("memes") and their building blocks.
Bounded numeric fields are clamped into range on construction; out-of-range
input is never rejected.
"""

from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from eoq_platform.models.enumerations import (
    BoundaryKind,
    InfluenceType,
    MemeCategory,
    MemeSource,
)


def clamp_unit(value: Any, low: float = 0.0, high: float = 1.0) -> Any:
    """Clamp a numeric value into [low, high]; non-numbers are left to pydantic."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return value
    return max(low, min(high, float(value)))


def ensure_utc(value: Any) -> Any:
    """Treat naive datetimes as UTC so age comparisons never mix naive and aware."""
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class EmpathyTensor(BaseModel):
    """
    Four orthogonal ethical dimensions, each in [0, 1].

    golden   - reciprocity (do unto others)
    silver   - non-harm (do no harm)
    platinum - other-centered (do what others need)
    love     - unconditional care
    """

    model_config = ConfigDict(frozen=True)

    golden: float = Field(default=0.0, ge=0.0, le=1.0)
    silver: float = Field(default=0.0, ge=0.0, le=1.0)
    platinum: float = Field(default=0.0, ge=0.0, le=1.0)
    love: float = Field(default=0.0, ge=0.0, le=1.0)

    @field_validator("golden", "silver", "platinum", "love", mode="before")
    @classmethod
    def clamp_dimension(cls, value: Any) -> Any:
        return clamp_unit(value)

    def values(self) -> List[float]:
        return [self.golden, self.silver, self.platinum, self.love]


class BoundaryDefinition(BaseModel):
    """
    How a concept separates included from excluded instances.

    scalar_value runs from 0 (fully rigid) to 1 (fully fluid). When it is
    absent, scoring falls back to a per-kind default.
    """

    model_config = ConfigDict(frozen=True)

    kind: BoundaryKind = Field(
        default=BoundaryKind.FLUID,
        description="Boundary type (rigid, permeable, fluid)"
    )

    description: str = Field(
        default="",
        max_length=1000,
        description="Free-text description of the boundary"
    )

    inclusion_criteria: List[str] = Field(default_factory=list)

    exclusion_criteria: List[str] = Field(default_factory=list)

    scalar_value: Optional[float] = Field(
        default=None,
        ge=0.0,
        le=1.0,
        description="0 = completely rigid, 1 = completely fluid"
    )

    @field_validator("scalar_value", mode="before")
    @classmethod
    def clamp_scalar(cls, value: Any) -> Any:
        return clamp_unit(value)


class MemeEvolution(BaseModel):
    """A past refinement event of a meme. Only its timestamp feeds scoring."""

    model_config = ConfigDict(frozen=True)

    timestamp: datetime = Field(default_factory=utc_now)
    change_trigger: str = ""
    improvement_vector: List[str] = Field(default_factory=list)
    previous_version: Dict[str, Any] = Field(default_factory=dict)

    @field_validator("timestamp", mode="after")
    @classmethod
    def timestamp_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)


class MemeInfluence(BaseModel):
    model_config = ConfigDict(frozen=True)

    target_concept_id: str
    target_concept_name: str = ""
    influence_strength: float = Field(default=0.0, ge=0.0, le=1.0)
    influence_type: InfluenceType = InfluenceType.POSITIVE
    pathways: List[str] = Field(default_factory=list)
    empathy_impact: float = Field(
        default=0.0,
        ge=-1.0,
        le=1.0,
        description="Effect on collective wellbeing; negative values are harmful"
    )

    @field_validator("influence_strength", mode="before")
    @classmethod
    def clamp_strength(cls, value: Any) -> Any:
        return clamp_unit(value)

    @field_validator("empathy_impact", mode="before")
    @classmethod
    def clamp_impact(cls, value: Any) -> Any:
        return clamp_unit(value, -1.0, 1.0)


class Vector3D(BaseModel):
    model_config = ConfigDict(frozen=True)

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


class MemeBase(BaseModel):
    """
    Base Pydantic model for a meme (belief record).
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(
        ...,
        min_length=1,
        max_length=255,
        description="Meme name"
    )

    description: str = Field(
        default="",
        max_length=5000,
        description="What the belief asserts"
    )

    category: MemeCategory = Field(
        default=MemeCategory.CURRENT_PROBLEMATIC,
        description="current, proposed, discovered or evolved"
    )

    null_ratio: float = Field(
        default=0.5,
        ge=0.0,
        le=1.0,
        description="Degree of undefinedness; 0 = fully determined"
    )

    empathy_scores: EmpathyTensor = Field(default_factory=EmpathyTensor)

    boundary_type: str = Field(
        default="",
        max_length=255,
        description="Free-text label of the I/Not-I boundary"
    )

    boundary_definition: BoundaryDefinition = Field(default_factory=BoundaryDefinition)

    eoq_score: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="Last computed EOQ total, for display only"
    )

    cultural_strength: float = Field(
        default=0.0,
        ge=0.0,
        le=1.0,
        description="How deeply embedded the belief is in current culture"
    )

    negations: List[str] = Field(default_factory=list)
    influences: List[MemeInfluence] = Field(default_factory=list)
    refinement_history: List[MemeEvolution] = Field(default_factory=list)

    position: Vector3D = Field(default_factory=Vector3D)
    color: str = Field(default="#3B82F6", max_length=32)
    size: float = Field(default=1.0, ge=0.0)

    source: MemeSource = Field(default=MemeSource.MANUAL_ENTRY)

    @field_validator("null_ratio", "eoq_score", "cultural_strength", mode="before")
    @classmethod
    def clamp_ratio(cls, value: Any) -> Any:
        return clamp_unit(value)

    @field_validator("size", mode="before")
    @classmethod
    def non_negative_size(cls, value: Any) -> Any:
        return clamp_unit(value, 0.0, float("inf"))


class MemeCreate(MemeBase):
    """
    Model for creating a new meme. The id is generated when omitted.
    """

    id: Optional[str] = Field(default=None, min_length=1, max_length=255)


class MemeUpdate(MemeBase):
    """
    Model for replacing an existing meme's content.
    """
    pass


class Meme(MemeBase):
    """
    A belief record as held in the session and fed to the scoring engine.
    """

    id: str = Field(
        default_factory=lambda: f"meme-{uuid4().hex[:12]}",
        min_length=1,
        max_length=255,
        description="Opaque identifier"
    )

    created_at: datetime = Field(default_factory=utc_now)

    last_analyzed: datetime = Field(default_factory=utc_now)

    @field_validator("created_at", "last_analyzed", mode="after")
    @classmethod
    def timestamps_utc(cls, value: datetime) -> datetime:
        return ensure_utc(value)
