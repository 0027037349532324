"""
External Data Collector - EOQ Meme Platform
eoq_platform/services/data_collector.py

Collects context for meme analysis from the enabled external sources.

No network calls are made: every enabled source yields simulated items from a
seeded random generator, so a collector built with a fixed seed is
deterministic.
"""

import random
import re
from datetime import datetime, timedelta, timezone
from functools import cmp_to_key
from typing import List, Optional, Sequence

import structlog

from eoq_platform.config import DataSource
from eoq_platform.models.analysis import CollectedData, DataCollectionQuery
from eoq_platform.models.enumerations import DataSourceType

logger = structlog.get_logger(__name__)

# Relevance differences within this band are ordered by recency instead
RELEVANCE_TIE_BAND = 0.1
SIMULATED_WINDOW = timedelta(days=30)

# Source types whose simulated relevance is scored from content; the rest get
# a random relevance in [0.5, 1.0)
_CONTENT_SCORED_TYPES = {DataSourceType.ACADEMIC, DataSourceType.NEWS}


class ExternalDataCollector:
    """Gather simulated external content for a keyword query."""

    def __init__(
        self,
        sources: Sequence[DataSource],
        rng: Optional[random.Random] = None,
        now: Optional[datetime] = None,
    ):
        self.sources = list(sources)
        self.rng = rng or random.Random()
        self.now = now

    @property
    def enabled_sources(self) -> List[DataSource]:
        return [source for source in self.sources if source.enabled]

    def collect(self, query: DataCollectionQuery) -> List[CollectedData]:
        """
        Collect from every enabled source.

        Returns:
            Items sorted by relevance (highest first), at most query.max_results.
        """
        items: List[CollectedData] = []
        for source in self.enabled_sources:
            collected = self._simulate(source, query)
            logger.info("data_collected", source=source.name, items=len(collected))
            items.extend(collected)

        items.sort(key=lambda item: item.relevance_score, reverse=True)
        return items[: query.max_results]

    def _simulate(self, source: DataSource, query: DataCollectionQuery) -> List[CollectedData]:
        keywords = query.keywords
        first = keywords[0]
        contents = [
            f"Discussion about {first} and its impact on society. Many people are questioning "
            f"traditional approaches and looking for more inclusive alternatives.",
            f"Recent trends show growing interest in {' and '.join(keywords)}. This represents "
            f"a shift in how we think about fundamental concepts.",
            f"Analysis of {first} reveals complex patterns of belief and behavior that influence "
            f"decision-making at multiple levels.",
            f"Community perspectives on {', '.join(keywords)} highlight the need for more nuanced "
            f"understanding of these concepts.",
            f"Research suggests that {first} plays a crucial role in shaping social dynamics and "
            f"individual choices.",
        ]
        now = self.now or datetime.now(timezone.utc)
        slug = re.sub(r"[^a-z0-9]+", "-", source.name.lower()).strip("-")

        items = []
        for index, content in enumerate(contents):
            if source.type in _CONTENT_SCORED_TYPES:
                relevance = self.calculate_relevance(content, keywords)
            else:
                relevance = 0.5 + self.rng.random() * 0.5
            items.append(
                CollectedData(
                    source=source.name,
                    type=source.type,
                    content=content,
                    url=f"https://example.com/{slug}/{index}",
                    author=f"User{index + 1}",
                    timestamp=now - self.rng.random() * SIMULATED_WINDOW,
                    engagement=self.rng.randrange(1000),
                    relevance_score=relevance,
                )
            )
        return items

    @staticmethod
    def calculate_relevance(text: str, keywords: Sequence[str]) -> float:
        """
        Keyword-match relevance in [0, 1].

            score = Σ_k matches(k) / |keywords|,   relevance = min(1, score / 3)
        """
        if not keywords:
            return 0.0

        lower_text = text.lower()
        score = 0.0
        for keyword in keywords:
            matches = len(re.findall(re.escape(keyword.lower()), lower_text))
            score += matches * (1 / len(keywords))

        return min(1.0, score / 3)

    @staticmethod
    def filter_and_rank(
        items: Sequence[CollectedData],
        min_relevance: float = 0.3,
    ) -> List[CollectedData]:
        """Drop low-relevance items; order by relevance, then recency for near ties."""

        def compare(a: CollectedData, b: CollectedData) -> int:
            relevance_diff = b.relevance_score - a.relevance_score
            if abs(relevance_diff) > RELEVANCE_TIE_BAND:
                return 1 if relevance_diff > 0 else -1
            a_time = a.timestamp.timestamp() if a.timestamp else 0.0
            b_time = b.timestamp.timestamp() if b.timestamp else 0.0
            if a_time == b_time:
                return 0
            return 1 if b_time > a_time else -1

        kept = [item for item in items if item.relevance_score >= min_relevance]
        return sorted(kept, key=cmp_to_key(compare))
