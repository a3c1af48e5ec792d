"""Configuration models for kontent-kit.

Configuration is an explicit object handed to the client at construction.
Values can come from keyword arguments, environment variables prefixed with
``KONTENT_`` or a ``.env`` file.
"""

import uuid

from pydantic import BaseModel, Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://manage.kontent.ai/v2"


class RetryConfig(BaseModel):
    """Retry policy applied by the HTTP transport.

    Only idempotent requests are retried; creates and patches are sent once.
    """

    max_attempts: int = Field(default=3, ge=1, le=10, description="Attempts including the first")
    initial_wait: float = Field(default=1.0, ge=0.1, description="Initial backoff in seconds")
    max_wait: float = Field(default=30.0, ge=1.0, description="Backoff ceiling in seconds")
    exponential_base: float = Field(default=2.0, ge=1.0)
    retry_on_status: set[int] = Field(default_factory=lambda: {500, 502, 503, 504})

    model_config = {"frozen": True}


class ManagementConfig(BaseSettings):
    """Connection settings for the Management API.

    Example:
        >>> config = ManagementConfig(
        ...     environment_id="00000000-0000-0000-0000-000000000000",
        ...     api_key="secret",
        ... )
        >>> config.get_base_url()
        'https://manage.kontent.ai/v2'
    """

    model_config = SettingsConfigDict(
        env_prefix="KONTENT_",
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    environment_id: str = Field(description="Environment (project) identifier")
    api_key: SecretStr = Field(description="Management API key")
    base_url: str = Field(default=DEFAULT_BASE_URL)
    timeout: float = Field(default=30.0, gt=0)
    max_connections: int = Field(default=10, ge=1)
    verify_ssl: bool = True
    retry: RetryConfig = Field(default_factory=RetryConfig)

    @field_validator("environment_id")
    @classmethod
    def _validate_environment_id(cls, value: str) -> str:
        try:
            return str(uuid.UUID(value.strip()))
        except ValueError as e:
            raise ValueError(f"environment_id must be a UUID, got '{value}'") from e

    @field_validator("base_url")
    @classmethod
    def _strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")

    def get_base_url(self) -> str:
        return self.base_url

    def get_api_key(self) -> str:
        return self.api_key.get_secret_value()
