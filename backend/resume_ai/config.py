from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    app_name: str = "Resume AI Extractor"
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    # CORS
    frontend_url: str = "http://localhost:5173"

    # Upstream model provider (missing key is reported on first /analyze call)
    openrouter_api_key: Optional[str] = None
    openrouter_base_url: str = "https://openrouter.ai/api/v1"
    llm_timeout_seconds: float = 60.0
    default_model_key: str = "gpt-3.5-turbo"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


# ── Model Registry ──────────────────────────────────────────────────────────

MODELS = {
    "openrouter": {
        "gpt-3.5-turbo": {
            "model_id": "openrouter/gpt-3.5-turbo",
        },
    },
}
