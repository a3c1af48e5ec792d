"""Factory helpers for building ManagementConfig instances.

Every entry point wraps pydantic validation failures in ConfigurationError
so callers only deal with the SDK's own exception hierarchy.
"""

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from .exceptions import ConfigurationError
from .models.config import ManagementConfig

logger = logging.getLogger(__name__)


class ConfigFactory:
    """Builds configurations from arguments, dictionaries or the environment."""

    @staticmethod
    def create(**kwargs: Any) -> ManagementConfig:
        """Create a configuration from keyword arguments.

        Environment variables and ``.env`` still fill in anything not given.

        Raises:
            ConfigurationError: If the resulting configuration is invalid
        """
        try:
            return ManagementConfig(**kwargs)
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @staticmethod
    def from_dict(data: dict[str, Any]) -> ManagementConfig:
        """Create a configuration from a plain dictionary."""
        return ConfigFactory.create(**data)

    @staticmethod
    def from_environment_only() -> ManagementConfig:
        """Create a configuration from ``KONTENT_*`` variables, ignoring ``.env`` files."""
        try:
            return ManagementConfig(_env_file=None)  # type: ignore[call-arg]
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e

    @staticmethod
    def from_env_file(path: str | Path, required: bool = True) -> ManagementConfig:
        """Create a configuration from a specific ``.env`` file.

        Args:
            path: Path to the ``.env`` file
            required: Raise if the file is missing instead of falling back
                to environment variables

        Raises:
            ConfigurationError: If the file is required but missing, or the
                configuration is invalid
        """
        env_path = Path(path)
        if not env_path.is_file():
            if required:
                raise ConfigurationError(f".env file not found: {env_path}")
            logger.debug(f".env file {env_path} not found, using environment only")
            return ConfigFactory.from_environment_only()

        try:
            return ManagementConfig(_env_file=env_path)  # type: ignore[call-arg]
        except PydanticValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}") from e


def create_config(**kwargs: Any) -> ManagementConfig:
    """Shortcut for ConfigFactory.create."""
    return ConfigFactory.create(**kwargs)


def load_config(env_file: str | Path | None = None) -> ManagementConfig:
    """Load configuration from an optional ``.env`` file plus the environment."""
    if env_file is None:
        return ConfigFactory.from_environment_only()
    return ConfigFactory.from_env_file(env_file, required=False)
