"""
Core Package - EOQ Meme Platform
eoq_platform/core/__init__.py

Core infrastructure: dependencies, exceptions, logging.

Only the exceptions are re-exported; import dependencies and logging from
their own modules.
"""

from eoq_platform.core.exceptions import (
    AnalysisParseError,
    ContextKindError,
    DuplicateMemeException,
    EmptyUniverseError,
    EngineException,
    MemeNotFoundException,
    MemeStoreException,
)

__all__ = [
    "AnalysisParseError",
    "ContextKindError",
    "DuplicateMemeException",
    "EmptyUniverseError",
    "EngineException",
    "MemeNotFoundException",
    "MemeStoreException",
]
