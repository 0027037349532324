"""
Meme Analyzer - EOQ Meme Platform
eoq_platform/services/meme_analyzer.py

Turns free text into a meme and proposes optimized variants.

There is no language model behind this service. The configured provider is
recorded, but responses always come from the simulated generator, which draws
from a seeded random.Random so a fixed seed reproduces the same output.
Whatever produced the response text, it is fully resolved before parsing and
the scoring engine only ever sees the finished Meme.
"""

import json
import random
import re
from collections import Counter
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional, Sequence
from uuid import uuid4

import structlog

from eoq_platform.config import AnalyzerConfig
from eoq_platform.core.exceptions import AnalysisParseError
from eoq_platform.models.analysis import AnalysisResult, CollectedData, DataCollectionQuery
from eoq_platform.models.enumerations import (
    AnalysisDepth,
    BoundaryKind,
    LLMProvider,
    MemeCategory,
    MemeSource,
)
from eoq_platform.models.meme import (
    BoundaryDefinition,
    EmpathyTensor,
    Meme,
    Vector3D,
    clamp_unit,
)
from eoq_platform.services.data_collector import ExternalDataCollector

logger = structlog.get_logger(__name__)

PALETTE = ["#3B82F6", "#10B981", "#8B5CF6", "#F59E0B", "#EC4899", "#06B6D4"]
OPTIMIZED_COLOR = "#10B981"
FALLBACK_COLOR = "#6B7280"

DEFAULT_INCLUSION = ["positive-impact", "conscious-awareness", "empathetic-response"]
DEFAULT_EXCLUSION = ["harm", "exploitation", "zero-sum-thinking"]
DEFAULT_NEGATIONS = ["zero-sum thinking", "exploitation", "short-term focus", "self-centeredness"]

CONTEXT_MIN_RELEVANCE = 0.4
CONTEXT_MAX_RESULTS = 20
MAX_KEYWORDS = 5

STOP_WORDS = frozenset({
    "this", "that", "with", "have", "will", "from", "they", "been", "were", "said",
    "each", "which", "their", "time", "would", "there", "could", "other", "more",
    "very", "what", "know", "just", "first", "into", "over", "think", "also", "your",
    "work", "life", "only", "can", "still", "should", "after", "being", "now", "made",
    "before", "here", "through", "when", "where", "much", "some", "these", "many",
    "then", "them", "well",
})

_TEXT_PATTERN = re.compile(r"\*\*Text to analyze:\*\*\s*([\s\S]*?)(?:\n\*\*|$)")
_JSON_PATTERN = re.compile(r"\{[\s\S]*\}")


def _unit(value: Any, default: float) -> float:
    """Read a [0, 1] number from untrusted JSON, falling back when absent or not numeric."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    return clamp_unit(value)


def _title_from(text: str, fallback: str) -> str:
    return text.split(".")[0].strip()[:50] or fallback


class MemeAnalyzer:
    """Simulated meme extraction and optimization."""

    def __init__(self, config: AnalyzerConfig, rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng or random.Random(config.seed)

    # ------------------------------------------------------------------
    # Direct analysis
    # ------------------------------------------------------------------

    def analyze_text(self, text: str) -> Meme:
        """Extract a meme from text with randomized but range-bounded scores."""
        rng = self.rng

        if rng.random() > 0.7:
            kind = BoundaryKind.RIGID
        elif rng.random() > 0.5:
            kind = BoundaryKind.PERMEABLE
        else:
            kind = BoundaryKind.FLUID

        boundary = BoundaryDefinition(
            kind=kind,
            description="Boundary extracted from text analysis",
            inclusion_criteria=list(DEFAULT_INCLUSION),
            exclusion_criteria=list(DEFAULT_EXCLUSION),
            scalar_value=0.6 + rng.random() * 0.4,
        )

        meme = Meme(
            id=f"meme-{uuid4().hex[:12]}",
            name=_title_from(text, "Analyzed Concept"),
            description=text[:200],
            category=MemeCategory.LLM_DISCOVERED,
            null_ratio=rng.random() * 0.5,
            empathy_scores=EmpathyTensor(
                golden=0.6 + rng.random() * 0.4,
                silver=0.6 + rng.random() * 0.4,
                platinum=0.5 + rng.random() * 0.5,
                love=0.4 + rng.random() * 0.6,
            ),
            boundary_type=f"{kind.value} I/Not-I boundary",
            boundary_definition=boundary,
            cultural_strength=0.1 + rng.random() * 0.3,
            negations=list(DEFAULT_NEGATIONS),
            position=Vector3D(
                x=rng.random() * 4 - 2,
                y=rng.random() * 4 - 2,
                z=rng.random() * 4 - 2,
            ),
            color=rng.choice(PALETTE),
            size=0.8 + rng.random() * 0.7,
            source=MemeSource.SOCIAL_MEDIA_ANALYSIS,
        )

        logger.info("text_analyzed", meme_id=meme.id, boundary=kind.value)
        return meme

    @staticmethod
    def optimize_meme(meme: Meme) -> Meme:
        """
        Propose an optimized variant: less nullness, more empathy, more fluid
        boundaries and less cultural entrenchment.
        """
        scores = meme.empathy_scores
        boundary = meme.boundary_definition
        now = datetime.now(timezone.utc)

        return Meme(
            **meme.model_dump(
                exclude={
                    "id", "name", "description", "category", "null_ratio",
                    "empathy_scores", "boundary_definition", "cultural_strength",
                    "color", "created_at", "last_analyzed", "source",
                }
            ),
            id=f"optimized-{meme.id}",
            name=f"Optimized: {meme.name}"[:255],
            description=f"An optimized version of the original meme: {meme.description}"[:5000],
            category=MemeCategory.PROPOSED_OPTIMIZED,
            null_ratio=max(0.1, meme.null_ratio - 0.2),
            empathy_scores=EmpathyTensor(
                golden=min(1.0, scores.golden + 0.2),
                silver=min(1.0, scores.silver + 0.1),
                platinum=min(1.0, scores.platinum + 0.15),
                love=min(1.0, scores.love + 0.25),
            ),
            boundary_definition=boundary.model_copy(
                update={
                    "kind": BoundaryKind.FLUID,
                    "scalar_value": min(1.0, (boundary.scalar_value or 0.0) + 0.3),
                    "description": "Optimized boundary with increased fluidity and inclusivity",
                }
            ),
            cultural_strength=max(0.1, meme.cultural_strength - 0.3),
            color=OPTIMIZED_COLOR,
            created_at=now,
            last_analyzed=now,
            source=MemeSource.GENETIC_ALGORITHM,
        )

    # ------------------------------------------------------------------
    # Context-backed analysis
    # ------------------------------------------------------------------

    def analyze_with_context(
        self,
        text: str,
        depth: AnalysisDepth = AnalysisDepth.BASIC,
        collector: Optional[ExternalDataCollector] = None,
    ) -> AnalysisResult:
        """
        Analyze text, drawing on external context unless depth is basic.
        """
        external: List[CollectedData] = []
        if depth != AnalysisDepth.BASIC and collector is not None:
            external = self.collect_relevant_data(text, collector)

        prompt = self.build_prompt(text, external)

        if self.config.provider != LLMProvider.SIMULATED:
            logger.warning(
                "llm_provider_unavailable",
                provider=self.config.provider.value,
                model=self.config.model,
            )
        response = self.simulate_response(prompt)

        result = self.parse_response(response, external)
        logger.info(
            "analysis_completed",
            meme_id=result.meme.id,
            depth=depth.value,
            sources=len(result.sources),
            confidence=result.confidence,
        )
        return result

    def collect_relevant_data(
        self,
        text: str,
        collector: ExternalDataCollector,
    ) -> List[CollectedData]:
        keywords = self.extract_keywords(text)
        if not keywords:
            return []
        query = DataCollectionQuery(keywords=keywords, max_results=CONTEXT_MAX_RESULTS)
        return collector.filter_and_rank(collector.collect(query), CONTEXT_MIN_RELEVANCE)

    @staticmethod
    def extract_keywords(text: str, limit: int = MAX_KEYWORDS) -> List[str]:
        """Most frequent words longer than three letters, stop words removed."""
        words = re.sub(r"[^\w\s]", " ", text.lower()).split()
        counts = Counter(
            word for word in words
            if len(word) > 3 and word not in STOP_WORDS
        )
        return [word for word, _ in counts.most_common(limit)]

    @staticmethod
    def build_prompt(text: str, external_data: Sequence[CollectedData] = ()) -> str:
        prompt = (
            "You are an expert in analyzing foundational beliefs (memes) using Null/Not-Null "
            "Logic principles.\n\n"
            "Analyze the following text and extract a foundational belief or meme, then "
            "evaluate it according to these criteria:\n\n"
            "1. **Nullness Ratio** (0-1): How undefined or uncertain is this belief? "
            "(1 = completely undefined, 0 = perfectly defined)\n"
            "2. **Empathy Scores** (0-1 each): Golden (reciprocity), Silver (non-harm), "
            "Platinum (other-centered), Love (unconditional care)\n"
            "3. **Boundary Type**: How does this belief define in-groups vs out-groups?\n"
            "4. **Cultural Strength** (0-1): How deeply embedded is this in current culture?\n\n"
            f"**Text to analyze:**\n{text}\n"
        )

        if external_data:
            context = "\n".join(
                f"Source: {item.source} ({item.type.value})\nContent: {item.content[:200]}...\n"
                for item in external_data[:5]
            )
            prompt += (
                "\n**Additional Context from External Sources:**\n"
                f"{context}\n"
                "Use this external context to inform your analysis, particularly regarding "
                "cultural prevalence and current discourse around this topic.\n"
            )

        prompt += (
            "\n**Response format:** JSON with keys name, description, nullRatio, "
            "empathyScores {golden, silver, platinum, love}, boundaryType, culturalStrength, "
            "negations, reasoning, confidence.\n"
        )
        return prompt

    def simulate_response(self, prompt: str) -> str:
        """Stand-in for a model completion: JSON built from the prompt's text."""
        match = _TEXT_PATTERN.search(prompt)
        text = match.group(1).strip() if match else "unknown concept"
        rng = self.rng

        return json.dumps({
            "name": _title_from(text, "unknown concept"),
            "description": f"Analysis of the concept: {text[:200]}",
            "nullRatio": 0.2 + rng.random() * 0.4,
            "empathyScores": {
                "golden": 0.6 + rng.random() * 0.4,
                "silver": 0.6 + rng.random() * 0.4,
                "platinum": 0.5 + rng.random() * 0.5,
                "love": 0.4 + rng.random() * 0.6,
            },
            "boundaryType": "Fluid I/Not-I boundary with adaptive characteristics",
            "culturalStrength": 0.1 + rng.random() * 0.3,
            "negations": ["zero-sum thinking", "exploitation", "short-term focus"],
            "reasoning": (
                "This analysis is based on N/NN Logic principles, evaluating the concept "
                "for empathy optimization and boundary permeability."
            ),
            "confidence": 0.7 + rng.random() * 0.2,
        })

    def parse_response(
        self,
        response: str,
        external_data: Sequence[CollectedData] = (),
    ) -> AnalysisResult:
        """
        Build an AnalysisResult from response text.

        Unparseable responses produce the fallback result (confidence 0.1)
        rather than an error.
        """
        try:
            parsed = self._load_json(response)
        except AnalysisParseError as e:
            logger.warning("analysis_parse_failed", error=e.message)
            return self._fallback_result()

        empathy = parsed.get("empathyScores")
        if not isinstance(empathy, dict):
            empathy = {}

        negations = parsed.get("negations")
        if not isinstance(negations, list):
            negations = None
        boundary_label = str(parsed.get("boundaryType") or "")

        meme = Meme(
            id=f"enhanced-{uuid4().hex[:12]}",
            name=str(parsed.get("name") or "Analyzed Concept")[:255],
            description=str(parsed.get("description") or "No description provided")[:5000],
            category=MemeCategory.LLM_DISCOVERED,
            null_ratio=_unit(parsed.get("nullRatio"), 0.5),
            empathy_scores=EmpathyTensor(
                golden=_unit(empathy.get("golden"), 0.5),
                silver=_unit(empathy.get("silver"), 0.5),
                platinum=_unit(empathy.get("platinum"), 0.5),
                love=_unit(empathy.get("love"), 0.5),
            ),
            boundary_type=(boundary_label or "Undefined boundary")[:255],
            boundary_definition=BoundaryDefinition(
                kind=BoundaryKind.FLUID,
                description=(boundary_label or "Boundary extracted from LLM analysis")[:1000],
                inclusion_criteria=["positive-impact", "conscious-awareness"],
                exclusion_criteria=[str(n) for n in negations] if negations else ["harm", "exploitation"],
                scalar_value=0.7,
            ),
            cultural_strength=_unit(parsed.get("culturalStrength"), 0.2),
            negations=[str(n) for n in negations] if negations else [],
            position=Vector3D(
                x=self.rng.random() * 4 - 2,
                y=self.rng.random() * 4 - 2,
                z=self.rng.random() * 4 - 2,
            ),
            color="#3B82F6",
            source=MemeSource.SOCIAL_MEDIA_ANALYSIS,
        )

        return AnalysisResult(
            meme=meme,
            confidence=_unit(parsed.get("confidence"), 0.7),
            reasoning=str(parsed.get("reasoning") or "Analysis completed using N/NN Logic principles"),
            sources=[item.source for item in external_data],
            model=self.config.model,
        )

    @staticmethod
    def _load_json(response: str) -> Dict[str, Any]:
        match = _JSON_PATTERN.search(response)
        candidate = match.group(0) if match else response
        try:
            parsed = json.loads(candidate)
        except json.JSONDecodeError as e:
            raise AnalysisParseError(f"Invalid JSON in analysis response: {e.msg}") from e
        if not isinstance(parsed, dict):
            raise AnalysisParseError("Analysis response is not a JSON object")
        return parsed

    def _fallback_result(self) -> AnalysisResult:
        meme = Meme(
            id=f"fallback-{uuid4().hex[:12]}",
            name="Analysis Failed",
            description="Could not parse LLM response",
            category=MemeCategory.LLM_DISCOVERED,
            null_ratio=0.8,
            empathy_scores=EmpathyTensor(golden=0.5, silver=0.5, platinum=0.5, love=0.5),
            boundary_type="Unknown",
            boundary_definition=BoundaryDefinition(
                kind=BoundaryKind.FLUID,
                description="Unknown boundary",
                scalar_value=0.5,
            ),
            eoq_score=0.5,
            cultural_strength=0.5,
            color=FALLBACK_COLOR,
            source=MemeSource.MANUAL_ENTRY,
        )
        return AnalysisResult(
            meme=meme,
            confidence=0.1,
            reasoning="Failed to parse LLM response",
            sources=[],
            model=self.config.model,
        )
