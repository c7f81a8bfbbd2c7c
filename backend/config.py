from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "BharatExplore"
    VERSION: str = "1.0.0"

    # development / production
    ENVIRONMENT: str = "development"
    PORT: int = 3000

    # Database (unset -> local SQLite file)
    DATABASE_URL: Optional[str] = None

    # Token
    JWT_SECRET: str = "bharat-explore-secret-key-2026"
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: Optional[int] = None
    BCRYPT_ROUNDS: int = 10

    # API Keys
    OPENAI_API_KEY: Optional[str] = None
    OPENAI_MODEL: str = "gpt-4o-mini"
    HOTEL_TIMEOUT_SECONDS: float = 15.0

    # Front-end build output served in production
    STATIC_DIR: str = "dist"

    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        # only /tmp is writable on the production host
        if self.is_production:
            return "sqlite:////tmp/bharatexplore.db"
        return "sqlite:///bharatexplore.db"


@lru_cache()
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
