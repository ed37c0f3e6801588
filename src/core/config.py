from datetime import datetime, timezone
from zoneinfo import ZoneInfo

from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.env_manager import EnvManager


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ASYNC_DATABASE_URL: str = EnvManager.get_env_variable(
        "ASYNC_DATABASE_URL", "sqlite+aiosqlite:///database.db"
    )

    PROJECT_NAME: str = EnvManager.get_env_variable("PROJECT_NAME", "Emoji Feed")
    PROJECT_INFO: str = EnvManager.get_env_variable(
        "PROJECT_INFO", "Post emoji, read the latest posts."
    )
    PROJECT_VERSION: str = EnvManager.get_env_variable("PROJECT_VERSION", "1.0.0")
    TIME_ZONE: str = EnvManager.get_env_variable("TIME_ZONE", "UTC")
    LOG_LEVEL: str = EnvManager.get_env_variable("LOG_LEVEL", "INFO")
    # Comma separated
    CORS_ORIGINS: str = EnvManager.get_env_variable("CORS_ORIGINS", "*")

    IDENTITY_API_URL: str = EnvManager.get_env_variable(
        "IDENTITY_API_URL", "https://api.clerk.com"
    )
    IDENTITY_SECRET_KEY: str = EnvManager.get_env_variable("IDENTITY_SECRET_KEY", "")
    IDENTITY_TIMEOUT: float = float(
        EnvManager.get_env_variable("IDENTITY_TIMEOUT", "10.0")
    )

    def to_local(self, value: datetime) -> datetime:
        """Convert a stored UTC timestamp to the configured time zone.

        SQLite returns naive values; those are UTC.
        """
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.astimezone(ZoneInfo(self.TIME_ZONE))

    def get_cors_origins(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
