"""Application settings using Pydantic BaseSettings."""
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Process-level configuration shared by both tool servers."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Logging
    log_level: str = "INFO"
    log_format: str = "console"

    # Service info
    service_version: str = "0.1.0"


# Global settings instance
settings = Settings()
