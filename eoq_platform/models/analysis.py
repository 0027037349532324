"""
Analysis Models - EOQ Meme Platform
eoq_platform/models/analysis.py

Inputs and outputs of the simulated analysis layer.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from eoq_platform.models.enumerations import AnalysisDepth, DataSourceType
from eoq_platform.models.meme import Meme


class DataCollectionQuery(BaseModel):
    keywords: List[str] = Field(..., min_length=1, description="Search terms")
    max_results: int = Field(default=50, ge=1, le=500)
    start: Optional[datetime] = None
    end: Optional[datetime] = None


class CollectedData(BaseModel):
    """One item of external content handed to the analyzer as plain text."""

    source: str
    type: DataSourceType
    content: str
    url: Optional[str] = None
    author: Optional[str] = None
    timestamp: Optional[datetime] = None
    engagement: Optional[int] = None
    relevance_score: float = Field(default=0.0, ge=0.0, le=1.0)


class AnalysisRequest(BaseModel):
    text: str = Field(..., min_length=1, max_length=20000)
    depth: AnalysisDepth = AnalysisDepth.BASIC
    include_optimization: bool = False


class AnalysisResult(BaseModel):
    meme: Meme
    confidence: float = Field(ge=0.0, le=1.0)
    reasoning: str
    sources: List[str] = Field(default_factory=list)
    model: Optional[str] = None
