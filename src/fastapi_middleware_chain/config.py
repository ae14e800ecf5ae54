"""Application configuration: process settings and the request-scoped AppConfig."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


@dataclass(frozen=True)
class AppConfig:
    """Configuration injected into every request context."""

    app: str


class Settings(BaseSettings):
    """Settings loaded from environment variables (``CHAIN_*``) or a .env file.

    Every field has a default, so ``Settings()`` reproduces the hardcoded
    startup configuration when nothing is set in the environment.
    """

    model_config = SettingsConfigDict(
        env_prefix="CHAIN_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_NAME: str = "MyGO(Passed from configMiddleware)"

    # --- Transport ---
    HOST: str = "0.0.0.0"
    PORT: int = Field(default=8080, ge=1, le=65535)

    # --- Authentication ---
    # Placeholder shared secret, no rotation
    AUTH_TOKEN: str = Field(default="secretKey", min_length=1)
    AUTH_HEADER: str = "X-Auth-Token"

    # --- Handler ---
    PROCESSING_DELAY: float = Field(default=2.0, ge=0)

    # --- Logging ---
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = False

    DEBUG: bool = False

    def app_config(self) -> AppConfig:
        return AppConfig(app=self.APP_NAME)
