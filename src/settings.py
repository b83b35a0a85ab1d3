# src/settings.py
import os
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="FramerBot")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # model backends
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = Field(default="gpt-4o-mini")
    USE_OLLAMA: bool = Field(default=False)
    OLLAMA_MODEL: str = Field(default="mistral:7b-instruct")
    OLLAMA_HOST: str = Field(default="http://localhost:11434")

    # client side: where the generation backend lives
    SERVICE_URL: str = Field(default="http://localhost:8000")
    REQUEST_TIMEOUT_S: float = Field(default=120.0, gt=0)

    # live analysis + staging
    DEBOUNCE_MS: int = Field(default=500, ge=0)
    LIVE_MIN_CHARS: int = Field(default=3, ge=1)
    MAX_STAGED_FILES: int = Field(default=20, ge=1)
    MAX_CONTEXT_FILES: int = Field(default=3, ge=1)

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME


settings = Settings()
