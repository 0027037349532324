"""
Dependencies - EOQ Meme Platform
eoq_platform/core/dependencies.py

FastAPI dependency injection for the session store and analysis services.
"""

import random
from functools import lru_cache

from fastapi import Depends

from eoq_platform.config import Settings, get_settings
from eoq_platform.data.foundational_memes import FOUNDATIONAL_MEMES
from eoq_platform.services.data_collector import ExternalDataCollector
from eoq_platform.services.meme_analyzer import MemeAnalyzer
from eoq_platform.services.meme_store import MemeStore


@lru_cache()
def get_meme_store() -> MemeStore:
    """Get cached MemeStore instance seeded with the foundational memes."""
    return MemeStore(seed=FOUNDATIONAL_MEMES)


def get_analyzer(settings: Settings = Depends(get_settings)) -> MemeAnalyzer:
    """Get a MemeAnalyzer built from the analyzer settings."""
    return MemeAnalyzer(settings.analyzer_config)


def get_data_collector(settings: Settings = Depends(get_settings)) -> ExternalDataCollector:
    """Get an ExternalDataCollector over the configured sources."""
    return ExternalDataCollector(
        settings.data_sources,
        rng=random.Random(settings.ANALYZER_SEED),
    )
