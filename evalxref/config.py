"""Application configuration."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from evalxref.schemas.checks import ConsistencyPolicy, QueryMatch, TemporalSign


class Settings(BaseSettings):
    """Application settings."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    catalog_path: str = "data/sample_catalog.json"
    drift_tolerance_days: int = 30
    temporal_sign: TemporalSign = TemporalSign.REFERENCE_MINUS_SUBJECT
    query_match: QueryMatch = QueryMatch.NORMALIZED
    fuzzy_threshold: float = 0.9
    log_level: str = "INFO"

    @field_validator("drift_tolerance_days", mode="after")
    @classmethod
    def non_negative_tolerance(cls, v: int) -> int:
        if v < 0:
            raise ValueError("drift_tolerance_days must be >= 0")
        return v

    @field_validator("fuzzy_threshold", mode="after")
    @classmethod
    def threshold_in_range(cls, v: float) -> float:
        if not 0.0 <= v <= 1.0:
            raise ValueError("fuzzy_threshold must be between 0 and 1")
        return v

    @field_validator("temporal_sign", "query_match", "log_level", mode="before")
    @classmethod
    def lowercase_choices(cls, v, info):
        """Accept QUERY_MATCH=Fuzzy style values; log level stays upper-case."""
        if not isinstance(v, str):
            return v
        if info.field_name == "log_level":
            return v.strip().upper()
        return v.strip().lower()

    def consistency_policy(self) -> ConsistencyPolicy:
        """Engine policy built from the configured tolerances."""
        return ConsistencyPolicy(
            tolerance_days=self.drift_tolerance_days,
            sign=self.temporal_sign,
            match=self.query_match,
            fuzzy_threshold=self.fuzzy_threshold,
        )


settings = Settings()
