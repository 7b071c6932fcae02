from functools import lru_cache
from pathlib import Path
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict

BACKEND_ROOT = Path(__file__).parent.parent.parent

ANDROID_TOP_100_GAMES_URL = "https://interview-marketing-eng-dev.s3.eu-west-1.amazonaws.com/android.top100.json"
IOS_TOP_100_GAMES_URL = "https://interview-marketing-eng-dev.s3.eu-west-1.amazonaws.com/ios.top100.json"


class Settings(BaseSettings):
    # General
    PROJECT_NAME: str = "Games Catalog API"
    API_PREFIX: str = "/api"
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    CORS_ORIGINS: List[str] = ["*"]
    STATIC_DIR: str = str(BACKEND_ROOT / "static")

    # Database
    DATABASE_URL: str = "sqlite:///./games.db"

    # Remote feeds
    ANDROID_FEED_URL: str = ANDROID_TOP_100_GAMES_URL
    IOS_FEED_URL: str = IOS_TOP_100_GAMES_URL
    FEED_TIMEOUT_SECONDS: float = 10.0
    FEED_RETRY_ATTEMPTS: int = 3
    FEED_RETRY_WAIT_SECONDS: float = 1.0

    # Scheduled populate
    POPULATE_SCHEDULE_ENABLED: bool = False
    POPULATE_SCHEDULE_HOUR: int = 1

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = str(BACKEND_ROOT / "logs")
    LOG_TO_FILE: bool = True

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore"
    )


@lru_cache()
def get_settings() -> Settings:
    """
    Load the settings once; environment changes after the first call are ignored.
    """
    return Settings()
