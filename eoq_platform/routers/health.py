"""
Health Check Router - EOQ Meme Platform
eoq_platform/routers/health.py

Returns health status of the in-process components.
"""
from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from eoq_platform.config import Settings, get_settings
from eoq_platform.core.dependencies import get_meme_store
from eoq_platform.services.meme_store import MemeStore

router = APIRouter(tags=["Health"])


#  Schemas


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    environment: str
    dependencies: Dict[str, str]


#  Main Health Check Route


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Report service version and the state of the session store and analyzer.",
)
async def health_check(
    settings: Settings = Depends(get_settings),
    store: MemeStore = Depends(get_meme_store),
):
    """Check health of the in-process components."""
    enabled = ", ".join(settings.DATA_SOURCES_ENABLED) or "none"
    dependencies = {
        "meme_store": f"healthy ({len(store.list())} memes)",
        "analyzer": f"healthy (provider: {settings.LLM_PROVIDER.value})",
        "data_sources": f"healthy (enabled: {enabled})",
    }

    return HealthResponse(
        status="healthy",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        environment=settings.APP_ENV,
        dependencies=dependencies,
    )
