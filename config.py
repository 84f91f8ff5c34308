import logging
import os
from typing import List, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


class ConfigError(RuntimeError):
    """Raised at startup when required settings are missing."""


class Settings(BaseModel):
    api_url: str
    api_key: str
    timeout: float = 60.0
    cors_origins: List[str] = Field(default_factory=lambda: ["*"])
    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 8080


def _split_origins(raw: Optional[str]) -> List[str]:
    if not raw:
        return ["*"]
    origins = [o.strip() for o in raw.split(",") if o.strip()]
    return origins or ["*"]


def cors_origins_from_env() -> List[str]:
    load_dotenv()
    return _split_origins(os.getenv("CORS_ORIGINS"))


def load_settings() -> Settings:
    load_dotenv()
    api_url = os.getenv("GEMINI_API_URL")
    api_key = os.getenv("GEMINI_API_KEY")
    if not api_url or not api_key:
        raise ConfigError("Gemini API URL or API Key is not properly configured.")

    return Settings(
        api_url=api_url,
        api_key=api_key,
        timeout=float(os.getenv("GEMINI_TIMEOUT", "60")),
        cors_origins=_split_origins(os.getenv("CORS_ORIGINS")),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8080")),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
