"""
Configuration management using Pydantic Settings.
All environment variables are loaded and validated here.
"""

from typing import List, Literal, Optional
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # ================================
    # Application Configuration
    # ================================
    APP_NAME: str = "StreamVault"
    APP_ENV: Literal["development", "staging", "production"] = "development"
    DEBUG: bool = True

    # API Configuration
    API_PREFIX: str = "/api"
    ALLOWED_ORIGINS: str = "http://localhost:5000,http://localhost:5173"

    @field_validator("ALLOWED_ORIGINS")
    @classmethod
    def parse_origins(cls, v: str) -> List[str]:
        """Parse comma-separated origins into list."""
        return [origin.strip() for origin in v.split(",") if origin.strip()]

    # ================================
    # Supabase (hosted Postgres over REST)
    # ================================
    SUPABASE_URL: Optional[str] = None
    SUPABASE_ANON_KEY: Optional[str] = None
    SUPABASE_TIMEOUT_SECONDS: float = Field(10.0, gt=0)

    @field_validator("SUPABASE_URL")
    @classmethod
    def strip_trailing_slash(cls, v: Optional[str]) -> Optional[str]:
        """Normalize the project URL so paths can be appended directly."""
        if v is None:
            return v
        return v.strip().rstrip("/") or None

    @property
    def supabase_configured(self) -> bool:
        """Both the project URL and the anon key are present."""
        return bool(self.SUPABASE_URL and self.SUPABASE_ANON_KEY)

    # ================================
    # Advertisement Requests
    # ================================
    AD_BUDGET_MIN: int = 5000
    AD_BUDGET_MAX: int = 100_000_000
    AD_RATE_LIMIT_WINDOW_MINUTES: int = 60  # One request per IP per window

    # ================================
    # Content
    # ================================
    HERO_FEATURE_TAG: str = "Home Hero"

    # ================================
    # Logging Configuration
    # ================================
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"

    @property
    def is_development(self) -> bool:
        """Check if running in development mode."""
        return self.APP_ENV == "development"

    @property
    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self.APP_ENV == "production"


# Global settings instance
settings = Settings()
