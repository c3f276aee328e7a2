import os
import logging
from pydantic import BaseModel, Field
from typing import List, Optional
from dotenv import load_dotenv

load_dotenv()

class AISettings(BaseModel):
    groq_api_key: Optional[str] = Field(default=os.getenv("GROQ_API_KEY"))
    model_name: str = Field(default=os.getenv("AI_MODEL_NAME", "llama-3.1-8b-instant"))
    base_url: str = Field(default=os.getenv("AI_BASE_URL", "https://api.groq.com/openai/v1/chat/completions"))
    timeout_seconds: float = float(os.getenv("AI_TIMEOUT_SECONDS", "30"))
    # Transport-level attempts inside the completion client (timeouts, connection errors)
    max_attempts: int = int(os.getenv("AI_MAX_ATTEMPTS", "3"))
    kill_switch: bool = Field(default=os.getenv("AI_KILL_SWITCH", "false").lower() == "true")

class Config(BaseModel):
    app_name: str = "Career Coach AI"
    environment: str = os.getenv("APP_ENV", "development")
    api_prefix: str = "/api"
    version: str = "1.0.0"
    request_id_header: str = "X-Request-ID"

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./career.db")

    # Auth
    secret_key: str = os.getenv("SECRET_KEY", "dev-only-insecure-key-DO-NOT-USE-IN-PROD")
    jwt_algorithm: str = os.getenv("JWT_ALGORITHM", "HS256")
    access_token_expire_minutes: int = 60 * 24  # 24 hours

    # AI Components
    ai: AISettings = AISettings()

    # Insight rows carry a refresh date this far ahead of creation
    insight_refresh_days: int = 7

    cors_origins: List[str] = Field(
        default_factory=lambda: [
            o.strip()
            for o in os.getenv(
                "CORS_ORIGINS",
                "http://localhost:3000,http://127.0.0.1:3000",
            ).split(",")
            if o.strip()
        ]
    )

    # Rate limiting for endpoints that call the completion API
    rate_limit_enabled: bool = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
    ai_rate_limit: str = os.getenv("AI_RATE_LIMIT", "10/minute")

settings = Config()

# --- Startup Validation for Production ---
_logger = logging.getLogger(__name__)
if settings.environment not in ("development", "testing"):
    if "dev-only" in settings.secret_key:
        raise RuntimeError(
            "FATAL: SECRET_KEY must be set for non-development environments. "
            "Set it as an environment variable."
        )
elif "dev-only" in settings.secret_key:
    _logger.warning("Using insecure default SECRET_KEY, only acceptable in development.")
