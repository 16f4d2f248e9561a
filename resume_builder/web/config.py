# resume_builder/web/config.py

from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Web server configuration"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # App settings
    app_name: str = "Resume Builder ATS API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Scoring
    scoring_preset: str = "standard"
    scoring_config_path: Optional[str] = None

    # Ollama settings
    ollama_host: str = "http://localhost:11434"
    ollama_model: str = "llama3.2:3b"
    ollama_timeout: float = 10.0

    # AI enrichment (off by default; deterministic engine only)
    ai_suggestions_enabled: bool = False
    ai_keywords_enabled: bool = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
