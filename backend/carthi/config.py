from datetime import datetime
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings

class Settings(BaseSettings):
    # Every value has a default so the dashboard boots without a .env file
    TIMEZONE: str = "Asia/Kolkata"
    SEED_DEMO_DATA: bool = True

    # Dashboard defaults
    RECENT_LEADS_LIMIT: int = 5
    LEADERBOARD_SIZE: int = 3

    LOG_LEVEL: str = "INFO"

    HOST: str = "127.0.0.1"
    PORT: int = 8000

    APP_TITLE: str = "CARTHI Lead Dashboard"
    APP_VERSION: str = "0.1.0"

    class Config:
        env_file = ".env"

settings = Settings()


def local_now() -> datetime:
    """Current instant in the configured business timezone."""
    return datetime.now(ZoneInfo(settings.TIMEZONE))
