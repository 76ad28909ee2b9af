import logging
from pydantic_settings import BaseSettings

logger = logging.getLogger(__name__)

_DEFAULT_SECRET = "change-me-in-production"


class Settings(BaseSettings):
    APP_ENV: str = "development"
    DATABASE_URL: str = "sqlite:///./data/assetverse.db"
    AUTH_SECRET: str = _DEFAULT_SECRET
    AUTH_ALGORITHM: str = "HS256"
    AUTH_AUDIENCE: str | None = None
    CORS_ORIGINS: list[str] = ["http://localhost:5173"]
    LOG_LEVEL: str = "INFO"
    DEFAULT_PACKAGE_LIMIT: int = 5

    class Config:
        env_file = ".env"


settings = Settings()

if settings.AUTH_SECRET == _DEFAULT_SECRET:
    if settings.APP_ENV == "production":
        raise RuntimeError("AUTH_SECRET must be set in production, check your .env file.")
    else:
        logger.warning("AUTH_SECRET uses the default value, set it in .env before deploying")
