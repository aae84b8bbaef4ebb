"""Application configuration."""

import os

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    object_confidence_threshold: float = Field(default=0.5, ge=0.0, le=1.0)
    label_confidence_threshold: float = Field(default=0.7, ge=0.0, le=1.0)
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="NUTRITION_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
