from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field
from functools import lru_cache

class Settings(BaseSettings):
    SLACK_BOT_TOKEN: str = Field(..., description="Slack Bot User OAuth Token")
    SLACK_APP_TOKEN: str = Field(..., description="Slack App-Level Token (for Socket Mode)")
    LOG_LEVEL: str = "INFO"

    # Preference storage
    PREFERENCE_BACKEND: str = Field("memory", description="Preference store backend: 'memory' or 'sqlite'")
    DB_PATH: str = Field("./db.sqlite", description="Path to SQLite database")

    # Channel selection
    PRESELECT_PREFIX: str = Field("all-", description="Channel name prefix preselected for new users")
    MAX_CHANNELS: int = Field(10, description="Maximum number of monitored channels")
    MEMBERSHIP_FETCH_LIMIT: int = Field(100, description="Page size for users.conversations")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

@lru_cache()
def get_settings() -> Settings:
    return Settings()
