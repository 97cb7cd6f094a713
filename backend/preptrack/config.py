import os
from functools import lru_cache
from typing import Optional

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    motivation_api_key: str = Field("", alias="PREPTRACK_MOTIVATION_API_KEY")
    on_demand_base_url: str = Field("https://api.on-demand.io", alias="PREPTRACK_ON_DEMAND_BASE_URL")
    on_demand_endpoint_id: str = Field("predefined-openai-gpt4o", alias="PREPTRACK_ON_DEMAND_ENDPOINT_ID")
    on_demand_timeout_seconds: float = Field(30.0, gt=0, alias="PREPTRACK_ON_DEMAND_TIMEOUT_SECONDS")
    openai_api_key: Optional[str] = Field(None, alias="OPENAI_API_KEY")
    chat_model: str = Field("gpt-4o-mini", alias="PREPTRACK_CHAT_MODEL")
    motivation_temperature: float = Field(0.6, ge=0.0, le=1.0, alias="PREPTRACK_MOTIVATION_TEMPERATURE")
    motivation_max_tokens: int = Field(50, ge=1, alias="PREPTRACK_MOTIVATION_MAX_TOKENS")

    class Config:
        env_file = os.getenv("ENV_FILE", ".env")
        env_file_encoding = "utf-8"
        case_sensitive = True
        populate_by_name = True


@lru_cache
def get_settings() -> Settings:
    try:
        settings = Settings()  # type: ignore[call-arg]
        if settings.openai_api_key and not os.getenv("OPENAI_API_KEY"):
            os.environ["OPENAI_API_KEY"] = settings.openai_api_key
        return settings
    except ValidationError as exc:
        raise RuntimeError(f"Invalid backend configuration: {exc}") from exc
