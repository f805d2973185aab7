"""
Application settings for API Log Relay.

Values are read from environment variables and an optional .env file.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./api_log_relay.db"
    SQL_ECHO: bool = False
    RELAY_TIMEOUT: float = 30.0
    LOG_LEVEL: str = "INFO"
    CORS_ORIGINS: list[str] = ["*"]
    HOST: str = "0.0.0.0"
    PORT: int = 3001

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
