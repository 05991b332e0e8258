"""
Process-wide settings resolved from the environment.
"""
from functools import lru_cache
from typing import List, Optional
from pydantic import AliasChoices, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Checked in order; the first non-empty value wins.
CREDENTIAL_ENV_VARS = ("GEN_AI_KEY", "VITE_GEN_AI_KEY")

DEFAULT_MODEL_NAME = "gemini-flash-latest"


class Settings(BaseSettings):
    """Resolved configuration for the generation service."""
    api_key: Optional[SecretStr] = Field(
        default=None,
        validation_alias=AliasChoices(*CREDENTIAL_ENV_VARS),
    )
    model_name: str = Field(
        default=DEFAULT_MODEL_NAME,
        validation_alias=AliasChoices("GEN_AI_MODEL"),
    )
    cors_allow_origins: str = Field(
        default="*",
        validation_alias=AliasChoices("CORS_ALLOW_ORIGINS"),
    )
    log_level: str = Field(
        default="INFO",
        validation_alias=AliasChoices("LOG_LEVEL"),
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("api_key", mode="before")
    @classmethod
    def _blank_key_is_unset(cls, value):
        if isinstance(value, SecretStr):
            value = value.get_secret_value()
        if value is None or not str(value).strip():
            return None
        return str(value).strip()

    @field_validator("model_name", mode="before")
    @classmethod
    def _default_model(cls, value):
        return (value or "").strip() or DEFAULT_MODEL_NAME

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        return (value or "INFO").strip().upper()

    @property
    def is_configured(self) -> bool:
        return self.api_key is not None

    @property
    def cors_origins(self) -> List[str]:
        origins = [origin.strip() for origin in self.cors_allow_origins.split(",") if origin.strip()]
        return origins or ["*"]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Settings for this process, loaded on first use."""
    return Settings()
