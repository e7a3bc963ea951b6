# viralcarrot/core/config.py
# Environment loading (.env) for the recipe service

from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB: str = "viralcarrot"
    MONGO_INIT_RETRIES: int = 20

    UNSPLASH_ACCESS_KEY: Optional[str] = None

    APP_ENV: str = "production"  # development | production
    LOG_LEVEL: str = "INFO"

    # cache lifetimes (seconds)
    GENERATE_CACHE_TTL: int = 1800
    EXTERNAL_CACHE_TTL: int = 3600
    PANTRY_CACHE_TTL: int = 1800

    # image search (per-recipe timeout, only the first few indexes)
    IMAGE_SEARCH_TIMEOUT: float = 5.0
    IMAGE_UPGRADE_LIMIT: int = 3

    ORIGINALS_PER_REQUEST: int = 6
    PAGE_SIZE: int = 6
    EXTERNAL_LIMIT: int = 10
    PANTRY_LIMIT: int = 12

    ADMIN_TOKEN: Optional[str] = None

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
    ]

    class Config:
        env_file = ".env"

    @property
    def is_development(self) -> bool:
        return self.APP_ENV.lower() == "development"


settings = Settings()
