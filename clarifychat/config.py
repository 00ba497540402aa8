"""
Centralised configuration for the ClarifyChat service and UI.
Reads from environment variables with sensible defaults so the app can start
locally; only the OpenAI key is required to actually answer questions.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Load .env once so all modules relying on Config see environment values
_ENV_PATH = Path(__file__).resolve().parent / ".env"
load_dotenv(_ENV_PATH)
# Also load from working directory if present (no override)
load_dotenv()


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    value = os.getenv(name)
    return value if value is not None and value != "" else default


def _get_float(name: str) -> Optional[float]:
    value = _get_env(name)
    return float(value) if value is not None else None


class Config:
    # OpenAI / model config
    OPENAI_API_KEY: str = _get_env("OPENAI_API_KEY", "")
    OPENAI_MODEL: str = _get_env("OPENAI_MODEL", "gpt-4o")
    OPENAI_MODEL_IS_DEFAULT: bool = _get_env("OPENAI_MODEL") is None
    ANSWER_MODEL: str = _get_env("ANSWER_MODEL", "gpt-3.5-turbo")

    CLASSIFIER_TEMPERATURE: float = float(_get_env("CLASSIFIER_TEMPERATURE", "0.7"))
    CLASSIFIER_MAX_TOKENS: int = int(_get_env("CLASSIFIER_MAX_TOKENS", "500"))
    ANSWER_TEMPERATURE: float = float(_get_env("ANSWER_TEMPERATURE", "0.7"))
    DEFAULT_CATEGORY: str = _get_env("DEFAULT_CATEGORY", "general")

    # HTTP service
    API_HOST: str = _get_env("API_HOST", "0.0.0.0")
    API_PORT: int = int(_get_env("API_PORT", "8000"))
    CORS_ORIGINS: str = _get_env("CORS_ORIGINS", "*")

    # Streamlit UI -> service
    API_BASE_URL: str = _get_env("API_BASE_URL", "http://localhost:8000")
    UI_REQUEST_TIMEOUT: Optional[float] = _get_float("UI_REQUEST_TIMEOUT")

    LOG_LEVEL: str = _get_env("LOG_LEVEL", "INFO").upper()
    DEBUG: bool = _get_env("DEBUG", "false").lower() == "true"

    @classmethod
    def cors_origins(cls) -> list[str]:
        return [origin.strip() for origin in cls.CORS_ORIGINS.split(",") if origin.strip()]
