from typing import Literal

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env", env_prefix="JOBLIST_", extra="ignore"
    )

    # Transfer engine
    engine_url: str = "http://localhost:1337"
    # None blocks until the engine answers
    engine_timeout: float | None = None

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"

    # Mock engine
    mock_host: str = "127.0.0.1"
    mock_port: int = 1337

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, value):
        return value.upper() if isinstance(value, str) else value


settings = Settings()
