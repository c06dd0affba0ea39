"""Runtime configuration, read from the environment and an optional .env file."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    DATABASE_URL: str = "mongodb://localhost:27017"
    DATABASE_NAME: str = "storefront"
    DATABASE_TIMEOUT_MS: int = 5000                 # server selection timeout

    API_URL: str = "http://localhost:8000/api"      # used by the admin client
    API_TIMEOUT: float = 10.0                       # seconds
    USER_ID: str | None = None                      # identity the CLI acts as

    CORS_ORIGINS: list[str] = Field(default_factory=lambda: ["*"])
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    LOG_LEVEL: str = "INFO"


settings = Settings()
