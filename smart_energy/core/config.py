from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """Application settings for the Smart Home Energy core"""

    # Basic settings
    APP_NAME: str = "Smart Home Energy Service"
    VERSION: str = "1.0.0"
    DEBUG: bool = False
    PORT: int = 8000

    # Database settings
    DATABASE_URL: str = "sqlite:///./smart_energy.db"
    DATABASE_ECHO: bool = False

    # Redis settings
    REDIS_URL: str = "redis://redis:6379"
    REDIS_PASSWORD: Optional[str] = None
    REDIS_DB: int = 0

    # Security settings
    ALLOWED_HOSTS: List[str] = ["*"]

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Notification settings
    NOTIFIER_BACKEND: str = "log"  # "log" or "redis"
    ALERT_CHANNEL: str = "energy:alerts"
    ALERT_HISTORY_KEY: str = "energy:alerts:recent"
    ALERT_HISTORY_SIZE: int = 100

    # Energy plan settings
    DEFAULT_DAILY_LIMIT_KWH: float = 10.0  # Used when no current plan exists yet

    class Config:
        env_file = ".env"
        case_sensitive = True


# Create settings instance
settings = Settings()
