"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from pizzeo.services.assistant import DEFAULT_INSTRUCTIONS
from pizzeo.services.recipe_state import DEFAULT_NAMESPACE

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    state_namespace: str = DEFAULT_NAMESPACE
    openai_api_key: str
    openai_model: str = "gpt-5-mini"
    openai_image_model: str = "gpt-image-1"
    assistant_instructions: str = DEFAULT_INSTRUCTIONS
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
