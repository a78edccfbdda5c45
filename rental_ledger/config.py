"""Configuration management using Pydantic Settings"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_prefix="RENTAL_LEDGER_", env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Service
    service_name: str = "rental-ledger"
    log_level: str = "INFO"

    # Batch input
    input_path: str = "data.json"

    # Log a warning when a per-booking ledger amount comes out negative
    warn_on_reversal: bool = True


settings = Settings()
