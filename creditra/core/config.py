"""Application configuration using Pydantic Settings."""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings can be overridden via environment variables
    or a .env file.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    app_name: str = "creditra-backend"
    app_version: str = "0.1.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 3000

    # Database
    database_url: str | None = None
    db_pool_size: int = 5
    db_max_overflow: int = 10
    migrations_dir: str = "migrations"

    # Admin authentication
    admin_api_key: str | None = None

    # Horizon listener
    horizon_listener_enabled: bool = False
    horizon_url: str = "https://horizon-testnet.stellar.org"
    contract_ids: str = ""
    poll_interval_ms: int = 5000
    horizon_start_ledger: str = "latest"

    # Metrics
    metrics_enabled: bool = True

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("poll_interval_ms")
    @classmethod
    def validate_poll_interval(cls, v: int) -> int:
        """Reject non-positive polling intervals."""
        if v <= 0:
            raise ValueError("poll_interval_ms must be positive")
        return v

    @property
    def contract_id_list(self) -> list[str]:
        """Contract ids parsed from the comma-separated CONTRACT_IDS value."""
        return [cid.strip() for cid in self.contract_ids.split(",") if cid.strip()]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
