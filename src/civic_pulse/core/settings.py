"""Application settings and configuration.

This module defines all configuration options for the Civic Pulse application.
Settings are loaded from environment variables with sensible defaults.
"""

import math

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

WEIGHT_SUM_TOLERANCE = 1e-6


class ScoringConfig(BaseModel):
    """Immutable scoring constants shared by the similarity and voting services.

    Attributes:
        title_weight: Weight of the title Jaccard signal.
        description_weight: Weight of the description Jaccard signal.
        category_weight: Weight of the exact category match signal.
        location_weight: Weight of the proximity signal.
        dedupe_radius_km: Radius within which two reports may share a location.
        duplicate_threshold: Minimum top score for a draft to count as a duplicate.
        inclusion_floor: Scores at or below this are dropped from results.
        voting_similarity_threshold: Score an own report must exceed to grant a vote.
        voting_radius_km: Radius within which any actor may vote.
    """

    model_config = ConfigDict(frozen=True)

    title_weight: float = Field(default=0.4, ge=0.0, le=1.0)
    description_weight: float = Field(default=0.3, ge=0.0, le=1.0)
    category_weight: float = Field(default=0.15, ge=0.0, le=1.0)
    location_weight: float = Field(default=0.15, ge=0.0, le=1.0)

    dedupe_radius_km: float = Field(default=0.5, gt=0.0)
    duplicate_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    inclusion_floor: float = Field(default=0.3, ge=0.0, le=1.0)
    voting_similarity_threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    voting_radius_km: float = Field(default=5.0, gt=0.0)

    # Signals only explain themselves above these raw (pre-weight) scores.
    title_reason_threshold: float = Field(default=0.6, ge=0.0, le=1.0)
    description_reason_threshold: float = Field(default=0.5, ge=0.0, le=1.0)

    max_similar_issues: int = Field(default=5, ge=1)
    min_title_length: int = Field(default=10, ge=0)
    min_description_length: int = Field(default=20, ge=0)

    @model_validator(mode="after")
    def _check_weights(self) -> "ScoringConfig":
        total = (
            self.title_weight
            + self.description_weight
            + self.category_weight
            + self.location_weight
        )
        if not math.isclose(total, 1.0, abs_tol=WEIGHT_SUM_TOLERANCE):
            raise ValueError(f"Scoring weights must sum to 1.0, got {total:.6f}")
        return self


_SCORING_DEFAULTS = ScoringConfig()


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    Scoring fields take their defaults from ``ScoringConfig``.
    """

    # Application metadata
    app_name: str = Field(default="Civic Pulse", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Database configuration
    database_url: str = Field(default="sqlite:///./civic_pulse.db", alias="DATABASE_URL")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")

    # Duplicate detection weights (must sum to 1.0)
    title_weight: float = Field(
        default=_SCORING_DEFAULTS.title_weight,
        alias="DUPLICATE_TITLE_WEIGHT",
    )
    description_weight: float = Field(
        default=_SCORING_DEFAULTS.description_weight,
        alias="DUPLICATE_DESCRIPTION_WEIGHT",
    )
    category_weight: float = Field(
        default=_SCORING_DEFAULTS.category_weight,
        alias="DUPLICATE_CATEGORY_WEIGHT",
    )
    location_weight: float = Field(
        default=_SCORING_DEFAULTS.location_weight,
        alias="DUPLICATE_LOCATION_WEIGHT",
    )

    # Duplicate detection thresholds
    dedupe_radius_km: float = Field(
        default=_SCORING_DEFAULTS.dedupe_radius_km,
        alias="DEDUPE_RADIUS_KM",
    )
    duplicate_threshold: float = Field(
        default=_SCORING_DEFAULTS.duplicate_threshold,
        alias="DUPLICATE_THRESHOLD",
    )
    inclusion_floor: float = Field(
        default=_SCORING_DEFAULTS.inclusion_floor,
        alias="DUPLICATE_INCLUSION_FLOOR",
    )
    title_reason_threshold: float = Field(
        default=_SCORING_DEFAULTS.title_reason_threshold,
        alias="TITLE_REASON_THRESHOLD",
    )
    description_reason_threshold: float = Field(
        default=_SCORING_DEFAULTS.description_reason_threshold,
        alias="DESCRIPTION_REASON_THRESHOLD",
    )
    max_similar_issues: int = Field(
        default=_SCORING_DEFAULTS.max_similar_issues,
        alias="MAX_SIMILAR_ISSUES",
    )
    min_title_length: int = Field(
        default=_SCORING_DEFAULTS.min_title_length,
        alias="MIN_TITLE_LENGTH",
    )
    min_description_length: int = Field(
        default=_SCORING_DEFAULTS.min_description_length,
        alias="MIN_DESCRIPTION_LENGTH",
    )
    candidate_limit: int | None = Field(default=5000, alias="DUPLICATE_CANDIDATE_LIMIT")

    # Area-restricted voting
    voting_similarity_threshold: float = Field(
        default=_SCORING_DEFAULTS.voting_similarity_threshold,
        alias="VOTING_SIMILARITY_THRESHOLD",
    )
    voting_radius_km: float = Field(
        default=_SCORING_DEFAULTS.voting_radius_km,
        alias="VOTING_RADIUS_KM",
    )
    nearby_default_radius_km: float = Field(default=10.0, alias="NEARBY_DEFAULT_RADIUS_KM")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
    )

    @property
    def scoring(self) -> ScoringConfig:
        """Return the scoring constants as an immutable value.

        Returns:
            ScoringConfig built from the current settings

        Raises:
            pydantic.ValidationError: If the configured weights or thresholds are invalid
        """
        return ScoringConfig(
            **{name: getattr(self, name) for name in ScoringConfig.model_fields}
        )


settings = Settings()
