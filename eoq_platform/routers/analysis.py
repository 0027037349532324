"""
Analysis Router - EOQ Meme Platform
eoq_platform/routers/analysis.py

Simulated analysis of free text and optimization of stored memes.

Endpoints:
  POST /api/v1/analysis/text            — Analyze text (optionally with external context)
  POST /api/v1/analysis/quick           — Direct extraction without prompt or context
  POST /api/v1/analysis/optimize/{id}   — Propose an optimized variant of a stored meme
  POST /api/v1/analysis/collect         — Collect external data for keywords
"""

import time
from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from eoq_platform.config import Settings, get_settings
from eoq_platform.core.dependencies import get_analyzer, get_data_collector, get_meme_store
from eoq_platform.core.exceptions import DuplicateMemeException, MemeNotFoundException
from eoq_platform.models.analysis import AnalysisRequest, CollectedData, DataCollectionQuery
from eoq_platform.models.meme import Meme
from eoq_platform.routers.eoq import EOQResponse, calculator, to_eoq_response
from eoq_platform.routers.errors import raise_duplicate_meme, raise_meme_not_found
from eoq_platform.services.data_collector import ExternalDataCollector
from eoq_platform.services.meme_analyzer import MemeAnalyzer
from eoq_platform.services.meme_store import MemeStore

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/api/v1/analysis", tags=["Analysis"])


# =====================================================================
# Request / Response Models
# =====================================================================

class QuickAnalysisRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=20000)


class AnalysisResponse(BaseModel):
    meme: Meme
    eoq: EOQResponse
    confidence: float
    reasoning: str
    sources: List[str]
    model: Optional[str] = None
    optimized: Optional[Meme] = None
    duration_seconds: float


class OptimizationResponse(BaseModel):
    original_id: str
    optimized: Meme
    eoq_before: float
    eoq_after: float
    improvement: float


class CollectResponse(BaseModel):
    keywords: List[str]
    total: int
    items: List[CollectedData]


# =====================================================================
# Helpers
# =====================================================================

def _store_scored(store: MemeStore, meme: Meme, settings: Settings) -> Meme:
    scored = calculator.score_meme(meme, settings.eoq_weights)
    try:
        return store.add(scored)
    except DuplicateMemeException:
        raise_duplicate_meme(meme.id)


# =====================================================================
# Endpoints
# =====================================================================

@router.post(
    "/text",
    response_model=AnalysisResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Analyze text into a meme",
    description=(
        "Extracts a meme from the text, scores it and stores it in the session. "
        "Depths other than 'basic' draw on simulated external sources."
    ),
)
async def analyze_text(
    request: AnalysisRequest,
    store: MemeStore = Depends(get_meme_store),
    analyzer: MemeAnalyzer = Depends(get_analyzer),
    collector: ExternalDataCollector = Depends(get_data_collector),
    settings: Settings = Depends(get_settings),
):
    start = time.time()
    result = analyzer.analyze_with_context(request.text, request.depth, collector)
    meme = _store_scored(store, result.meme, settings)

    optimized = None
    if request.include_optimization:
        optimized = _store_scored(store, analyzer.optimize_meme(meme), settings)

    return AnalysisResponse(
        meme=meme,
        eoq=to_eoq_response(meme, calculator.calculate(meme, settings.eoq_weights)),
        confidence=result.confidence,
        reasoning=result.reasoning,
        sources=result.sources,
        model=result.model,
        optimized=optimized,
        duration_seconds=round(time.time() - start, 3),
    )


@router.post(
    "/quick",
    response_model=AnalysisResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Quick extraction of a meme from text",
)
async def quick_analysis(
    request: QuickAnalysisRequest,
    store: MemeStore = Depends(get_meme_store),
    analyzer: MemeAnalyzer = Depends(get_analyzer),
    settings: Settings = Depends(get_settings),
):
    start = time.time()
    meme = _store_scored(store, analyzer.analyze_text(request.text), settings)
    return AnalysisResponse(
        meme=meme,
        eoq=to_eoq_response(meme, calculator.calculate(meme, settings.eoq_weights)),
        confidence=1.0,
        reasoning="Direct extraction without external context",
        sources=[],
        model=None,
        duration_seconds=round(time.time() - start, 3),
    )


@router.post(
    "/optimize/{meme_id}",
    response_model=OptimizationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Optimize a stored meme",
    responses={
        404: {"description": "Meme not found"},
        409: {"description": "Optimized variant already stored"},
    },
)
async def optimize_meme(
    meme_id: str,
    store: MemeStore = Depends(get_meme_store),
    analyzer: MemeAnalyzer = Depends(get_analyzer),
    settings: Settings = Depends(get_settings),
):
    try:
        original = store.get(meme_id)
    except MemeNotFoundException:
        raise_meme_not_found(meme_id)

    before = calculator.calculate(original, settings.eoq_weights).total_score
    optimized = _store_scored(store, analyzer.optimize_meme(original), settings)
    after = calculator.calculate(optimized, settings.eoq_weights).total_score

    logger.info(
        "meme_optimized",
        meme_id=meme_id,
        optimized_id=optimized.id,
        eoq_before=float(before),
        eoq_after=float(after),
    )

    return OptimizationResponse(
        original_id=meme_id,
        optimized=optimized,
        eoq_before=float(before),
        eoq_after=float(after),
        improvement=float(after - before),
    )


@router.post(
    "/collect",
    response_model=CollectResponse,
    summary="Collect external data",
    description="Simulated collection from the enabled sources, filtered by minimum relevance.",
)
async def collect_data(
    query: DataCollectionQuery,
    collector: ExternalDataCollector = Depends(get_data_collector),
    settings: Settings = Depends(get_settings),
):
    limited = query.model_copy(
        update={"max_results": min(query.max_results, settings.DATA_MAX_RESULTS)}
    )
    items = collector.filter_and_rank(collector.collect(limited), settings.DATA_MIN_RELEVANCE)
    return CollectResponse(keywords=query.keywords, total=len(items), items=items)
