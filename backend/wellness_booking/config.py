"""Application configuration via environment variables."""
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings loaded from .env or environment."""

    DATABASE_URL: str = "sqlite:///./wellness_booking.db"
    CORS_ORIGINS: str = "http://localhost:5173"
    API_PREFIX: str = "/api"
    LOG_LEVEL: str = "INFO"

    # Bearer tokens are minted by the identity provider; we only verify them.
    JWT_SECRET: str = "dev-secret-change-in-production"
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_MINUTES: int = 60 * 24 * 7

    class Config:
        env_file = ".env"


settings = Settings()
