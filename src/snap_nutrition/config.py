"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")

CLASSIFIER_BACKENDS = {"huggingface", "openai"}


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    classifier_backend: str = "huggingface"
    hf_api_token: str | None = None
    hf_model: str = "google/vit-base-patch16-224"
    hf_base_url: str = "https://router.huggingface.co/hf-inference"
    openai_api_key: str | None = None
    openai_model: str = "gpt-5.2"
    openai_store: bool = False
    classify_timeout_seconds: float = 30.0
    timezone: str = "UTC"
    max_upload_bytes: int = 10 * 1024 * 1024
    daily_goal_calories: float = 2000
    daily_goal_protein_g: float = 150
    daily_goal_carbs_g: float = 200
    daily_goal_fats_g: float = 65
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def parse_classifier_backend(raw: str | None) -> str:
    """Normalize the configured classifier backend name."""
    if raw is None:
        return "huggingface"
    cleaned = raw.strip().lower()
    if cleaned in {"", "hf"}:
        return "huggingface"
    if cleaned not in CLASSIFIER_BACKENDS:
        raise ValueError(f"Unknown classifier backend: {raw}")
    return cleaned
