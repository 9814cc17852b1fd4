from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional

class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")
    APP_NAME: str = "AI Closet API"
    APP_ENV: str = "dev"
    API_PREFIX: str = "/v1"
    CORS_ORIGINS: str = "*"
    LOG_LEVEL: str = "INFO"
    REDIS_URL: str = "redis://localhost:6379/0"
    # Rotation history persistence (best effort)
    HISTORY_PROVIDER: str = "memory"
    HISTORY_DIR: str = ".history"
    HISTORY_KEY_PREFIX: str = "outfit_history_v1:"
    # Fixes shuffle/jitter for reproducible batches; unset in production
    RECS_SEED: Optional[int] = None
    # Attribute prediction
    LLM_PROVIDER: str = "local"
    OPENAI_MODEL: str = "gpt-4o-mini"
    LLM_PREDICT_TIMEOUT_MS: int = 8000
    LLM_MAX_OUTPUT_TOKENS: int = 500

    @property
    def cors_origin_list(self) -> List[str]:
        val = self.CORS_ORIGINS
        if not val: return []
        if val == "*": return ["*"]
        return [v.strip() for v in val.split(",")]

settings = Settings()
