"""Application configuration with comprehensive validation."""
from typing import Optional, Literal, List
from functools import lru_cache
from pydantic import BaseModel, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from eoq_platform.models.enumerations import DataSourceType, LLMProvider
from eoq_platform.scoring.eoq_calculator import EOQWeights


# =============================================================================
# EXTERNAL DATA SOURCES
# =============================================================================
# Known sources for the simulated collector. Only sources listed in
# DATA_SOURCES_ENABLED produce data; none of them is contacted over the network.
# =============================================================================

class DataSource(BaseModel):
    """An external content source known to the collector."""

    name: str
    type: DataSourceType
    base_url: str
    enabled: bool = False


KNOWN_DATA_SOURCES: List[DataSource] = [
    DataSource(
        name="Reddit",
        type=DataSourceType.SOCIAL_MEDIA,
        base_url="https://www.reddit.com/api/v1",
    ),
    DataSource(
        name="Twitter/X",
        type=DataSourceType.SOCIAL_MEDIA,
        base_url="https://api.twitter.com/2",
    ),
    DataSource(
        name="News API",
        type=DataSourceType.NEWS,
        base_url="https://newsapi.org/v2",
    ),
    DataSource(
        name="ArXiv",
        type=DataSourceType.ACADEMIC,
        base_url="https://export.arxiv.org/api",
    ),
]


class AnalyzerConfig(BaseModel):
    """Explicit analyzer configuration handed to the analysis layer."""

    provider: LLMProvider = LLMProvider.SIMULATED
    model: str = "gpt-4"
    max_tokens: int = Field(default=2000, ge=1)
    temperature: float = Field(default=0.7, ge=0.0, le=2.0)
    seed: Optional[int] = None


class Settings(BaseSettings):
    """Application settings with production-grade validation."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    APP_NAME: str = "EOQ Meme Platform"
    APP_VERSION: str = "1.0.0"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = False
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    LOG_FORMAT: Literal["json", "console"] = "json"

    # API
    API_V1_PREFIX: str = "/api/v1"

    # EOQ Weights (engine defaults; callers may still pass their own vector)
    W_EMPATHY: float = Field(default=0.40, ge=0.0, le=1.0)
    W_CERTAINTY: float = Field(default=0.25, ge=0.0, le=1.0)
    W_BOUNDARY: float = Field(default=0.20, ge=0.0, le=1.0)
    W_REFINEMENT: float = Field(default=0.10, ge=0.0, le=1.0)
    W_CULTURAL: float = Field(default=0.05, ge=0.0, le=1.0)

    # Analyzer (simulated LLM)
    LLM_PROVIDER: LLMProvider = LLMProvider.SIMULATED
    LLM_MODEL: str = "gpt-4"
    LLM_MAX_TOKENS: int = Field(default=2000, ge=1, le=32000)
    LLM_TEMPERATURE: float = Field(default=0.7, ge=0.0, le=2.0)
    ANALYZER_SEED: Optional[int] = None

    # External data collection (simulated)
    DATA_SOURCES_ENABLED: List[str] = Field(default=["ArXiv"])
    DATA_MAX_RESULTS: int = Field(default=50, ge=1, le=500)
    DATA_MIN_RELEVANCE: float = Field(default=0.3, ge=0.0, le=1.0)

    @field_validator("DATA_SOURCES_ENABLED")
    @classmethod
    def validate_data_sources(cls, v: List[str]) -> List[str]:
        known = {source.name for source in KNOWN_DATA_SOURCES}
        unknown = [name for name in v if name not in known]
        if unknown:
            raise ValueError(f"Unknown data sources: {unknown}")
        return v

    @model_validator(mode="after")
    def validate_eoq_weights(self):
        """Validate EOQ weights sum to 1.0."""
        total = sum(self.eoq_weight_values)
        if abs(total - 1.0) > 0.001:
            raise ValueError(f"EOQ weights must sum to 1.0, got {total}")
        return self

    @model_validator(mode="after")
    def validate_production_settings(self):
        """Ensure production does not run with debug output."""
        if self.APP_ENV == "production" and self.DEBUG:
            raise ValueError("DEBUG must be False in production")
        return self

    @property
    def eoq_weight_values(self) -> List[float]:
        """Get EOQ weights as list."""
        return [
            self.W_EMPATHY, self.W_CERTAINTY, self.W_BOUNDARY,
            self.W_REFINEMENT, self.W_CULTURAL,
        ]

    @property
    def eoq_weights(self) -> EOQWeights:
        return EOQWeights.from_floats(
            empathy=self.W_EMPATHY,
            certainty=self.W_CERTAINTY,
            boundary=self.W_BOUNDARY,
            refinement=self.W_REFINEMENT,
            cultural=self.W_CULTURAL,
        )

    @property
    def analyzer_config(self) -> AnalyzerConfig:
        return AnalyzerConfig(
            provider=self.LLM_PROVIDER,
            model=self.LLM_MODEL,
            max_tokens=self.LLM_MAX_TOKENS,
            temperature=self.LLM_TEMPERATURE,
            seed=self.ANALYZER_SEED,
        )

    @property
    def data_sources(self) -> List[DataSource]:
        """Known sources with the enabled flag applied from DATA_SOURCES_ENABLED."""
        enabled = set(self.DATA_SOURCES_ENABLED)
        return [
            source.model_copy(update={"enabled": source.name in enabled})
            for source in KNOWN_DATA_SOURCES
        ]


@lru_cache
def get_settings() -> Settings:
    return Settings()
