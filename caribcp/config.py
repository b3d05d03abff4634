"""
CaribCP Configuration.

Pydantic Settings v2, loaded from .env, environment variables.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # ── Risk Scoring ──────────────────────────────────────────────────────
    scoring_scheme: str = Field(
        default="practical", alias="SCORING_SCHEME",
        description="practical | interactive | dynamic",
    )
    apply_location_amplification: bool = Field(
        default=True, alias="APPLY_LOCATION_AMPLIFICATION",
        description="Bump coastal/urban hazards one step up the ordinal scale",
    )
    apply_country_amplification: bool = Field(
        default=False, alias="APPLY_COUNTRY_AMPLIFICATION",
        description="Apply named per-country bumps (e.g. JM hurricane frequency)",
    )

    # ── Strategies ────────────────────────────────────────────────────────
    dedupe_strategies: bool = Field(
        default=False, alias="DEDUPE_STRATEGIES",
        description="Remove repeated strategy ids from recommendation buckets",
    )

    # ── Pre-fill ──────────────────────────────────────────────────────────
    default_locale: str = Field(default="en", alias="DEFAULT_LOCALE")
    review_interval_days: int = Field(default=365, alias="REVIEW_INTERVAL_DAYS")
    locales_dir: str = Field(default="", alias="LOCALES_DIR")

    # ── Operational ────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_format: str = Field(default="console", alias="LOG_FORMAT")


@lru_cache
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()


settings = get_settings()
