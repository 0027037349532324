# tests/conftest.py

"""
Pytest Fixtures - Shared test configurations and data for engines, models and APIs

SEED DATA ID REFERENCE (session store):
- god-divine-authority, money-value-measure       (current)
- existence-optimization, regenerative-contribution (proposed)
"""

import random
from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from eoq_platform.config import AnalyzerConfig, KNOWN_DATA_SOURCES
from eoq_platform.core.dependencies import get_meme_store
from eoq_platform.data.foundational_memes import FOUNDATIONAL_MEMES
from eoq_platform.main import app
from eoq_platform.models.enumerations import BoundaryKind, TimeHorizon
from eoq_platform.models.meme import (
    BoundaryDefinition,
    EmpathyTensor,
    Meme,
    MemeEvolution,
)
from eoq_platform.models.nn_logic import (
    CulturalContext,
    EvidenceContext,
    SituatedContext,
    TemporalContext,
)
from eoq_platform.services.data_collector import ExternalDataCollector
from eoq_platform.services.meme_analyzer import MemeAnalyzer


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fresh_store():
    """Reset the session store to the foundational memes before and after a test."""
    store = get_meme_store()
    store.reset(FOUNDATIONAL_MEMES)
    yield store
    store.reset(FOUNDATIONAL_MEMES)


# =============================================================================
# TIME FIXTURES
# =============================================================================

@pytest.fixture
def fixed_now():
    """Reference time for refinement velocity."""
    return datetime(2025, 6, 1, 12, 0, tzinfo=timezone.utc)


# =============================================================================
# MEME FIXTURES
# =============================================================================

@pytest.fixture
def ideal_meme():
    """Fully defined, fully empathetic, fully fluid, culturally entrenched (EOQ 0.915)."""
    return Meme(
        id="ideal",
        name="Ideal Meme",
        null_ratio=0.0,
        empathy_scores=EmpathyTensor(golden=1.0, silver=1.0, platinum=1.0, love=1.0),
        boundary_definition=BoundaryDefinition(kind=BoundaryKind.FLUID, scalar_value=1.0),
        cultural_strength=0.9,
    )


@pytest.fixture
def weak_meme():
    """Low empathy, rigid boundary: triggers several recommendations."""
    return Meme(
        id="weak",
        name="Weak Meme",
        null_ratio=0.5,
        empathy_scores=EmpathyTensor(golden=0.2, silver=0.3, platinum=0.1, love=0.1),
        boundary_definition=BoundaryDefinition(
            kind=BoundaryKind.RIGID,
            inclusion_criteria=["members"],
            exclusion_criteria=["outsiders", "heretics"],
            scalar_value=0.1,
        ),
        cultural_strength=0.3,
    )


@pytest.fixture
def evolving_meme(fixed_now):
    """Three refinements inside the 30-day window, two outside it."""
    history = [
        MemeEvolution(timestamp=fixed_now - timedelta(days=days))
        for days in (1, 10, 29, 31, 90)
    ]
    return Meme(
        id="evolving",
        name="Evolving Meme",
        null_ratio=0.4,
        empathy_scores=EmpathyTensor(golden=0.7, silver=0.7, platinum=0.7, love=0.7),
        cultural_strength=0.4,
        refinement_history=history,
    )


@pytest.fixture
def foundational_memes():
    return {meme.id: meme for meme in FOUNDATIONAL_MEMES}


# =============================================================================
# CONTEXT FIXTURES
# =============================================================================

@pytest.fixture
def evidence_context():
    return EvidenceContext(id="ctx-evidence", information_gain=0.3, new_value="observed")


@pytest.fixture
def situated_context():
    return SituatedContext(
        id="ctx-situated",
        information_gain=0.2,
        cultural_factors=CulturalContext(region="nordic", individualism_index=0.8),
        temporal_factors=TemporalContext(time_horizon=TimeHorizon.MEDIUM),
    )


@pytest.fixture
def generational_context():
    return SituatedContext(
        id="ctx-generational",
        information_gain=0.1,
        cultural_factors=CulturalContext(individualism_index=0.8),
        temporal_factors=TemporalContext(time_horizon=TimeHorizon.GENERATIONAL),
    )


# =============================================================================
# SERVICE FIXTURES
# =============================================================================

@pytest.fixture
def seeded_analyzer():
    return MemeAnalyzer(AnalyzerConfig(seed=42))


@pytest.fixture
def all_sources():
    return [source.model_copy(update={"enabled": True}) for source in KNOWN_DATA_SOURCES]


@pytest.fixture
def seeded_collector(all_sources, fixed_now):
    return ExternalDataCollector(all_sources, rng=random.Random(7), now=fixed_now)
