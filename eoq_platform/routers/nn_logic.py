"""
N/NN Logic Router - EOQ Meme Platform
eoq_platform/routers/nn_logic.py

Endpoints:
  POST /api/v1/nn-logic/state        — Create a new N/NN state
  POST /api/v1/nn-logic/refine       — Refine a state with one context
  POST /api/v1/nn-logic/negation     — Define a concept by what it excludes
  POST /api/v1/nn-logic/empathy      — Empathy estimate under a situated context
  POST /api/v1/nn-logic/golden-loop  — Golden Loop validity check
"""

from typing import Any, List, Optional

from fastapi import APIRouter
from pydantic import BaseModel, Field

from eoq_platform.core.exceptions import ContextKindError, EmptyUniverseError
from eoq_platform.models.meme import BoundaryDefinition, EmpathyTensor
from eoq_platform.models.nn_logic import Context, GoldenLoopConcept, NullNotNullState
from eoq_platform.nn_logic.engine import NNLogicEngine
from eoq_platform.routers.errors import raise_bad_request

router = APIRouter(prefix="/api/v1/nn-logic", tags=["N/NN Logic"])


# =====================================================================
# Request / Response Models
# =====================================================================

class CreateStateRequest(BaseModel):
    value: Optional[Any] = None
    nullness: float = 1.0
    empathy_tensor: Optional[EmpathyTensor] = None
    boundary_definition: Optional[BoundaryDefinition] = None


class RefineRequest(BaseModel):
    state: NullNotNullState[Any]
    context: Context


class NegationRequest(BaseModel):
    universe: List[Any]
    negations: List[Any] = Field(default_factory=list)
    label: str = Field(..., min_length=1, max_length=255)


class EmpathyRequest(BaseModel):
    source_id: str
    target_id: str
    action: str
    context: Context


class EmpathyResponse(BaseModel):
    source_id: str
    target_id: str
    action: str
    empathy: float


class GoldenLoopResponse(BaseModel):
    valid: bool
    issues: List[str]


# =====================================================================
# Endpoints
# =====================================================================

@router.post(
    "/state",
    response_model=NullNotNullState[Any],
    summary="Create an N/NN state",
)
async def create_state(request: CreateStateRequest):
    overrides = request.model_dump(
        include={"empathy_tensor", "boundary_definition"},
        exclude_none=True,
    )
    return NNLogicEngine.create_state(request.value, request.nullness, **overrides)


@router.post(
    "/refine",
    response_model=NullNotNullState[Any],
    summary="Refine a state",
    description="Nullness decreases by min(nullness, information_gain); it never increases.",
)
async def refine(request: RefineRequest):
    return NNLogicEngine.refine(request.state, request.context)


@router.post(
    "/negation",
    response_model=NullNotNullState[Any],
    summary="Define a concept by negation",
    responses={400: {"description": "Empty universe"}},
)
async def define_by_negation(request: NegationRequest):
    try:
        return NNLogicEngine.define_by_negation(
            request.universe, request.negations, request.label
        )
    except EmptyUniverseError as e:
        raise_bad_request("EMPTY_UNIVERSE", str(e))


@router.post(
    "/empathy",
    response_model=EmpathyResponse,
    summary="Estimate empathy between two agents",
    responses={400: {"description": "Context carries no cultural/temporal factors"}},
)
async def calculate_empathy(request: EmpathyRequest):
    try:
        empathy = NNLogicEngine.calculate_empathy(
            request.source_id, request.target_id, request.action, request.context
        )
    except ContextKindError as e:
        raise_bad_request("CONTEXT_KIND_UNSUPPORTED", str(e))
    return EmpathyResponse(
        source_id=request.source_id,
        target_id=request.target_id,
        action=request.action,
        empathy=empathy,
    )


@router.post(
    "/golden-loop",
    response_model=GoldenLoopResponse,
    summary="Apply the Golden Loop",
)
async def golden_loop(concept: GoldenLoopConcept):
    result = NNLogicEngine.apply_golden_loop(concept)
    return GoldenLoopResponse(valid=result.valid, issues=result.issues)
