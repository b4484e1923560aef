"""Library settings and configuration.

This module defines the policy knobs of the note primitives. Settings are
loaded from environment variables with defaults that keep the core contract:
any non-empty secret and any unsigned 64-bit value are accepted.
"""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files. None
    of them change the hash functions or the commitment preimage layout.
    """

    # Secret policy
    min_secret_length: int = Field(default=1, ge=1, alias="SPARK_MIN_SECRET_LENGTH")
    # None leaves the secret length unbounded
    max_secret_length: int | None = Field(
        default=None,
        ge=1,
        alias="SPARK_MAX_SECRET_LENGTH",
    )
    generated_secret_length: int = Field(
        default=32,
        ge=1,
        alias="SPARK_GENERATED_SECRET_LENGTH",
    )

    # Value policy (zero is a legal amount unless a caller forbids it)
    allow_zero_value: bool = Field(default=True, alias="SPARK_ALLOW_ZERO_VALUE")

    # Text encoding of secrets and commitments on the JSON wire
    bytes_encoding: Literal["hex", "base64"] = Field(
        default="hex",
        alias="SPARK_BYTES_ENCODING",
    )

    log_level: str = Field(default="INFO", alias="SPARK_LOG_LEVEL")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        populate_by_name=True,
        extra="ignore",
    )

    @property
    def secret_length_bounds(self) -> tuple[int, int | None]:
        """Return the inclusive (min, max) secret length in bytes; max may be None."""
        return self.min_secret_length, self.max_secret_length


settings = Settings()
