"""Application configuration using pydantic-settings."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Evaluator settings with environment variable support."""

    # Environment
    LOG_LEVEL: str = "INFO"

    # Income thresholds
    HIGH_INCOME_THRESHOLD: int = 100_000
    LOW_INCOME_THRESHOLD: int = 20_000

    # Age thresholds
    AUTO_REFERRAL_MAX_AGE: int = 20
    DETAILED_LOOKUP_MIN_AGE: int = 30

    # Frequent flyer validation service
    EXPIRED_LICENSE_KEY: str = "EXPIRED"

    # Fraud lookup
    FRAUD_RISK_LAST_NAME: str = "Smith"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
    )


# Global settings instance
settings = Settings()
