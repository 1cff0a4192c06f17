"""
Configuration management for kilometraje.
"""

from decimal import Decimal
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class KilometrajeConfig(BaseSettings):
    """Configuration settings for the expense recorder."""

    # Storage
    storage_file: Path = Field(default=Path("data/storage.json"), alias="STORAGE_FILE")

    # Reference data: local JSON path or http(s) URL
    cities_source: str = Field(default="data/cities.json", alias="CITIES_SOURCE")
    http_timeout: float = Field(default=5.0, gt=0, alias="HTTP_TIMEOUT")

    # Allowance
    rate_per_km: Decimal = Field(default=Decimal("0.23"), ge=0, alias="RATE_PER_KM")

    # Application Configuration
    environment: str = Field(default="development", alias="ENVIRONMENT")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="WARNING", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        validate_default=True,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Ensure log level is valid."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {valid_levels}")
        return v.upper()

    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v):
        """Ensure environment is valid."""
        valid_envs = ["development", "testing", "production"]
        if v.lower() not in valid_envs:
            raise ValueError(f"Environment must be one of: {valid_envs}")
        return v.lower()

    @property
    def cities_source_is_url(self) -> bool:
        return self.cities_source.startswith(("http://", "https://"))


def load_config(env_file: Optional[str] = None) -> KilometrajeConfig:
    """Load configuration from environment variables and .env file."""
    if env_file:
        load_dotenv(env_file)
    else:
        load_dotenv()

    return KilometrajeConfig()


# Global configuration instance
_config: Optional[KilometrajeConfig] = None


def get_config() -> KilometrajeConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = load_config()
    return _config


def reload_config(env_file: Optional[str] = None) -> KilometrajeConfig:
    """Reload configuration (useful for testing)."""
    global _config
    _config = load_config(env_file)
    return _config
