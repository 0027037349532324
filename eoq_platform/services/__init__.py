"""
Services module for the EOQ Meme Platform.
"""

from eoq_platform.services.data_collector import ExternalDataCollector
from eoq_platform.services.meme_analyzer import MemeAnalyzer
from eoq_platform.services.meme_store import MemeStore

__all__ = [
    "ExternalDataCollector",
    "MemeAnalyzer",
    "MemeStore",
]
