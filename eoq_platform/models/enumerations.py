from enum import Enum

class BoundaryKind(str, Enum):
    RIGID = "rigid"          # "Us vs Them" boundaries
    PERMEABLE = "permeable"  # Flexible but defined
    FLUID = "fluid"          # Adaptive boundaries

class MemeCategory(str, Enum):
    CURRENT_PROBLEMATIC = "current"
    PROPOSED_OPTIMIZED = "proposed"
    LLM_DISCOVERED = "discovered"
    GENETICALLY_EVOLVED = "evolved"

class MemeSource(str, Enum):
    MANUAL_ENTRY = "manual"
    SOCIAL_MEDIA_ANALYSIS = "social_media"
    LITERATURE_ANALYSIS = "literature"
    CULTURAL_OBSERVATION = "cultural"
    GENETIC_ALGORITHM = "evolved"

class InfluenceType(str, Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"
    DISTORTIVE = "distortive"
    TRANSFORMATIVE = "transformative"

class TimeHorizon(str, Enum):
    IMMEDIATE = "immediate"
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    GENERATIONAL = "generational"

class CommunicationStyle(str, Enum):
    DIRECT = "direct"
    INDIRECT = "indirect"

class DataSourceType(str, Enum):
    SOCIAL_MEDIA = "social_media"
    NEWS = "news"
    ACADEMIC = "academic"
    FORUM = "forum"

class LLMProvider(str, Enum):
    OPENAI = "openai"
    ANTHROPIC = "anthropic"
    LOCAL = "local"
    SIMULATED = "simulated"

class AnalysisDepth(str, Enum):
    BASIC = "basic"
    COMPREHENSIVE = "comprehensive"
    RESEARCH_BACKED = "research-backed"
