"""Configuration management using Pydantic Settings."""

import os
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Generation backend
    openai_api_key: Optional[str] = None
    openai_model: str = "gpt-4o-mini"
    llm_temperature: float = 0.7
    llm_max_tokens: int = 4096

    # App Configuration
    environment: str = "development"
    log_level: str = "INFO"
    cors_origins: List[str] = [
        "http://localhost:3000",
        "http://localhost:9002",
    ]

    # Planning
    fallback_max_days: int = 7

    class Config:
        """Pydantic configuration."""
        env_file = os.path.join(os.path.dirname(__file__), "..", "..", ".env")
        case_sensitive = False
        extra = "ignore"

    @property
    def has_api_key(self) -> bool:
        return bool(self.openai_api_key and self.openai_api_key.strip())


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """FastAPI dependency returning the process settings."""
    return settings
