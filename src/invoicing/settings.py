"""Application settings loaded from environment variables."""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Base application settings."""

    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    log_level: LogLevel = Field(default="INFO", alias="LOG_LEVEL")
    invoices_path: str = Field(default="examples/invoices.json", alias="INVOICES_PATH")

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, value: object) -> object:
        """Accept level names in any case."""
        return value.upper() if isinstance(value, str) else value
