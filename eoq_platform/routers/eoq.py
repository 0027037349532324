"""
EOQ Scoring Router - EOQ Meme Platform
eoq_platform/routers/eoq.py

Endpoints:
  GET  /api/v1/eoq/weights    — Default component weights from settings
  POST /api/v1/eoq/calculate  — Score one meme, optionally with custom weights
  POST /api/v1/eoq/compare    — Compare two memes by EOQ
"""

from typing import Dict, List, Optional

from fastapi import APIRouter, Depends
from pydantic import BaseModel, ConfigDict

from eoq_platform.config import Settings, get_settings
from eoq_platform.models.meme import Meme, MemeCreate
from eoq_platform.scoring.eoq_calculator import EOQCalculator, EOQResult, EOQWeights

router = APIRouter(prefix="/api/v1/eoq", tags=["EOQ Scoring"])

calculator = EOQCalculator()


# =====================================================================
# Request / Response Models
# =====================================================================

class WeightsInput(BaseModel):
    """Custom weight vector. Values are not bounded and need not sum to 1, but must be finite."""
    model_config = ConfigDict(allow_inf_nan=False)

    empathy: float = 0.40
    certainty: float = 0.25
    boundary: float = 0.20
    refinement: float = 0.10
    cultural: float = 0.05

    def to_weights(self) -> EOQWeights:
        return EOQWeights.from_floats(
            empathy=self.empathy,
            certainty=self.certainty,
            boundary=self.boundary,
            refinement=self.refinement,
            cultural=self.cultural,
        )


class EOQCalculateRequest(BaseModel):
    meme: MemeCreate
    weights: Optional[WeightsInput] = None


class EOQCompareRequest(BaseModel):
    meme_a: MemeCreate
    meme_b: MemeCreate


class WeightsResponse(BaseModel):
    weights: Dict[str, float]
    total: float
    is_valid: bool


class ComponentScoresResponse(BaseModel):
    empathy: float
    certainty: float
    boundary_permeability: float
    refinement_velocity: float
    cultural_compatibility: float


class EOQResponse(BaseModel):
    meme_id: str
    meme_name: str
    total_score: float
    component_scores: ComponentScoresResponse
    recommended_improvements: List[str]


class CompareResponse(BaseModel):
    winner_id: str
    winner_name: str
    advantages: List[str]
    eoq_difference: float
    meme_a: EOQResponse
    meme_b: EOQResponse


# =====================================================================
# Helpers
# =====================================================================

def to_meme(payload: MemeCreate) -> Meme:
    return Meme(**payload.model_dump(exclude_none=True))


def to_eoq_response(meme: Meme, result: EOQResult) -> EOQResponse:
    scores = result.component_scores
    return EOQResponse(
        meme_id=meme.id,
        meme_name=meme.name,
        total_score=float(result.total_score),
        component_scores=ComponentScoresResponse(
            empathy=float(scores.empathy),
            certainty=float(scores.certainty),
            boundary_permeability=float(scores.boundary_permeability),
            refinement_velocity=float(scores.refinement_velocity),
            cultural_compatibility=float(scores.cultural_compatibility),
        ),
        recommended_improvements=result.recommended_improvements,
    )


# =====================================================================
# Endpoints
# =====================================================================

@router.get(
    "/weights",
    response_model=WeightsResponse,
    summary="Get default EOQ weights",
)
async def get_weights(settings: Settings = Depends(get_settings)):
    weights = settings.eoq_weights
    total = float(weights.total)
    return WeightsResponse(
        weights={
            "empathy": float(weights.empathy),
            "certainty": float(weights.certainty),
            "boundary": float(weights.boundary),
            "refinement": float(weights.refinement),
            "cultural": float(weights.cultural),
        },
        total=total,
        is_valid=abs(total - 1.0) <= 0.001,
    )


@router.post(
    "/calculate",
    response_model=EOQResponse,
    summary="Calculate EOQ for a meme",
    description="Scores the meme with the given weights, or the configured defaults.",
)
async def calculate(
    request: EOQCalculateRequest,
    settings: Settings = Depends(get_settings),
):
    meme = to_meme(request.meme)
    weights = request.weights.to_weights() if request.weights else settings.eoq_weights
    return to_eoq_response(meme, calculator.calculate(meme, weights))


@router.post(
    "/compare",
    response_model=CompareResponse,
    summary="Compare two memes by EOQ",
    description="meme_a wins only with a strictly higher total; ties go to meme_b.",
)
async def compare(request: EOQCompareRequest):
    meme_a = to_meme(request.meme_a)
    meme_b = to_meme(request.meme_b)
    comparison = calculator.compare(meme_a, meme_b)
    return CompareResponse(
        winner_id=comparison.winner.id,
        winner_name=comparison.winner.name,
        advantages=comparison.advantages,
        eoq_difference=float(comparison.eoq_difference),
        meme_a=to_eoq_response(meme_a, comparison.result_a),
        meme_b=to_eoq_response(meme_b, comparison.result_b),
    )
