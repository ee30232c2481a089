"""Application settings loaded from environment variables."""

from pydantic import field_validator
from pydantic_settings import BaseSettings

DEFAULT_PORT = 3000


class Settings(BaseSettings):
    # API
    port: int = DEFAULT_PORT

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        extra = "ignore"

    @field_validator("port", mode="before")
    @classmethod
    def fallback_port(cls, value):
        """Use the default unless PORT parses as a positive integer."""
        try:
            port = int(value)
        except (TypeError, ValueError):
            return DEFAULT_PORT
        return port if port > 0 else DEFAULT_PORT


settings = Settings()
