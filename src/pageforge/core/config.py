"""Configuration Management."""

from functools import lru_cache
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """Engine settings from environment."""

    model_config = SettingsConfigDict(
        env_prefix="PAGEFORGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",  # Ignore extra environment variables
    )

    # Backend persistence
    backend_url: str = Field(default="http://localhost:8000", description="Backend service URL")
    backend_timeout: float = Field(default=5.0, gt=0.0, description="Backend request timeout")

    # Logging
    log_level: str = Field(default="INFO", description="Log level")
    json_logs: bool = Field(default=False, description="Use JSON log format")

    # Export
    export_name: str = Field(default="Exported Page", description="Default document name")
    component_import_path: str = Field(
        default="@/components/ui", description="Module generated source imports components from"
    )

    # Validation
    max_document_size: int = Field(default=512 * 1024, gt=0, description="Max document size (bytes)")
    max_json_depth: int = Field(default=20, gt=0, description="Max document nesting depth")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator("backend_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        return v.rstrip("/")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
