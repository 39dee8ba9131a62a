from pydantic_settings import BaseSettings
from typing import List, Union
from pydantic import field_validator


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str = "sqlite:///./rules.db"

    # Application
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: Union[List[str], str] = ["http://localhost:3000"]

    @field_validator("CORS_ORIGINS", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        if isinstance(v, str) and not v.startswith("["):
            # Split by comma or keep as single item
            return [origin.strip() for origin in v.split(",")]
        return v

    # Seeding
    SEED_FIXTURE_MODE: bool = True  # Randomized placeholder counters for demo data
    SLUG_MAX_LENGTH: int = 200

    # Rate limiting (slowapi limit strings, per client IP)
    RATE_LIMIT_DEFAULT: str = "100/minute"
    RATE_LIMIT_VOTE: str = "10/minute"
    RATE_LIMIT_VIEW: str = "30/minute"
    RATE_LIMIT_COPY: str = "20/minute"

    # Vote abuse protection
    VOTE_GUARD_MAX_ENTRIES: int = 10000
    VOTE_GUARD_TTL_SECONDS: int = 60 * 60 * 24

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    class Config:
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignore extra fields in .env


settings = Settings()
