"""
Meme Router - EOQ Meme Platform
eoq_platform/routers/memes.py

Handles meme CRUD operations against the in-memory session store.

Endpoints:
  GET    /api/v1/memes                   — List memes (optional category filter)
  POST   /api/v1/memes                   — Create and score a meme
  GET    /api/v1/memes/ranking           — All memes ranked by EOQ
  GET    /api/v1/memes/{id}              — Get one meme
  PUT    /api/v1/memes/{id}              — Replace a meme's content
  DELETE /api/v1/memes/{id}              — Remove a meme
  GET    /api/v1/memes/{id}/eoq          — EOQ breakdown (refreshes the stored score)
  GET    /api/v1/memes/{id}/golden-loop  — Golden Loop over a stored meme
  GET    /api/v1/concepts                — Concepts the foundational memes influence
"""

from functools import partial
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from pydantic import BaseModel

from eoq_platform.config import Settings, get_settings
from eoq_platform.core.dependencies import get_meme_store
from eoq_platform.core.exceptions import DuplicateMemeException, MemeNotFoundException
from eoq_platform.data.foundational_memes import CONCEPT_NODES
from eoq_platform.models.enumerations import MemeCategory
from eoq_platform.models.meme import Meme, MemeCreate, MemeUpdate, Vector3D
from eoq_platform.nn_logic.golden_loop import apply_golden_loop
from eoq_platform.routers.eoq import EOQResponse, calculator, to_eoq_response
from eoq_platform.routers.errors import raise_duplicate_meme, raise_meme_not_found
from eoq_platform.routers.nn_logic import GoldenLoopResponse
from eoq_platform.services.meme_store import MemeStore

router = APIRouter(prefix="/api/v1", tags=["Memes"])


#  Schemas


class MemeListResponse(BaseModel):
    items: List[Meme]
    total: int


class RankingEntry(BaseModel):
    rank: int
    meme_id: str
    name: str
    category: MemeCategory
    total_score: float


class RankingResponse(BaseModel):
    items: List[RankingEntry]
    total: int


class ConceptNode(BaseModel):
    id: str
    name: str
    description: str
    nullness: float
    position: Vector3D


#  Helpers


def _get_or_404(store: MemeStore, meme_id: str) -> Meme:
    try:
        return store.get(meme_id)
    except MemeNotFoundException:
        raise_meme_not_found(meme_id)


#  Endpoints


@router.get(
    "/memes",
    response_model=MemeListResponse,
    summary="List memes",
)
async def list_memes(
    category: Optional[MemeCategory] = Query(None, description="Filter by category"),
    store: MemeStore = Depends(get_meme_store),
):
    items = store.list()
    if category is not None:
        items = [meme for meme in items if meme.category == category]
    return MemeListResponse(items=items, total=len(items))


@router.post(
    "/memes",
    response_model=Meme,
    status_code=status.HTTP_201_CREATED,
    summary="Create a meme",
    description="Stores the meme with its EOQ computed from the configured weights.",
    responses={409: {"description": "A meme with this id already exists"}},
)
async def create_meme(
    payload: MemeCreate,
    store: MemeStore = Depends(get_meme_store),
    settings: Settings = Depends(get_settings),
):
    try:
        return store.create(
            payload, transform=partial(calculator.score_meme, weights=settings.eoq_weights)
        )
    except DuplicateMemeException:
        raise_duplicate_meme(payload.id)


@router.get(
    "/memes/ranking",
    response_model=RankingResponse,
    summary="Rank memes by EOQ",
)
async def rank_memes(
    store: MemeStore = Depends(get_meme_store),
    settings: Settings = Depends(get_settings),
):
    ranked = calculator.rank(store.list(), settings.eoq_weights)
    items = [
        RankingEntry(
            rank=position,
            meme_id=meme.id,
            name=meme.name,
            category=meme.category,
            total_score=float(result.total_score),
        )
        for position, (meme, result) in enumerate(ranked, start=1)
    ]
    return RankingResponse(items=items, total=len(items))


@router.get(
    "/memes/{meme_id}",
    response_model=Meme,
    summary="Get a meme",
    responses={404: {"description": "Meme not found"}},
)
async def get_meme(meme_id: str, store: MemeStore = Depends(get_meme_store)):
    return _get_or_404(store, meme_id)


@router.put(
    "/memes/{meme_id}",
    response_model=Meme,
    summary="Replace a meme's content",
    responses={404: {"description": "Meme not found"}},
)
async def update_meme(
    meme_id: str,
    payload: MemeUpdate,
    store: MemeStore = Depends(get_meme_store),
    settings: Settings = Depends(get_settings),
):
    try:
        return store.update(
            meme_id, payload, transform=partial(calculator.score_meme, weights=settings.eoq_weights)
        )
    except MemeNotFoundException:
        raise_meme_not_found(meme_id)


@router.delete(
    "/memes/{meme_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a meme",
    responses={404: {"description": "Meme not found"}},
)
async def delete_meme(meme_id: str, store: MemeStore = Depends(get_meme_store)):
    try:
        store.delete(meme_id)
    except MemeNotFoundException:
        raise_meme_not_found(meme_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get(
    "/memes/{meme_id}/eoq",
    response_model=EOQResponse,
    summary="EOQ breakdown of a stored meme",
    responses={404: {"description": "Meme not found"}},
)
async def get_meme_eoq(
    meme_id: str,
    store: MemeStore = Depends(get_meme_store),
    settings: Settings = Depends(get_settings),
):
    meme = _get_or_404(store, meme_id)
    result = calculator.calculate(meme, settings.eoq_weights)
    store.replace(meme.model_copy(update={"eoq_score": float(result.total_score)}))
    return to_eoq_response(meme, result)


@router.get(
    "/memes/{meme_id}/golden-loop",
    response_model=GoldenLoopResponse,
    summary="Golden Loop over a stored meme",
    responses={404: {"description": "Meme not found"}},
)
async def get_meme_golden_loop(meme_id: str, store: MemeStore = Depends(get_meme_store)):
    result = apply_golden_loop(_get_or_404(store, meme_id))
    return GoldenLoopResponse(valid=result.valid, issues=result.issues)


@router.get(
    "/concepts",
    response_model=List[ConceptNode],
    summary="List concept nodes",
)
async def list_concepts():
    return [ConceptNode(**node) for node in CONCEPT_NODES]
