from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LoggingSettings(BaseSettings):
    log_level: LogLevel = Field(
        default="WARNING", description="Level applied to geoencode loggers"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        env_prefix="GEOENCODE_",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value):
        if isinstance(value, str):
            return value.upper()
        return value


class GeoEncodeSettings(LoggingSettings):
    key_length: int = Field(
        default=6,
        ge=2,
        le=6,
        description="Default number of bytes kept by encode_key (2 to 6)",
    )

    def resolve_key_length(self, key_length: int | None = None) -> int:
        """
        Determine the key length to use.

        Args:
            key_length: Optional override for the key_length setting

        Returns:
            The override if given, otherwise the configured key length
        """
        if key_length is None:
            return self.key_length
        return key_length
