# movie_catalog/core/config.py
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    base_url: str = "http://localhost:8081"  # = MOVIES_BASE_URL
    timeout_seconds: float = 10.0  # = MOVIES_TIMEOUT_SECONDS

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MOVIES_",
        extra="ignore",
    )


settings = Settings()
