"""Tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError as PydanticValidationError

from kontent_kit import ConfigFactory, ConfigurationError, create_config, load_config
from kontent_kit.models import ManagementConfig, RetryConfig

ENVIRONMENT_ID = "11111111-2222-3333-4444-555555555555"


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Isolate tests from KONTENT_* variables and any local .env file."""
    for name in (
        "KONTENT_ENVIRONMENT_ID",
        "KONTENT_API_KEY",
        "KONTENT_BASE_URL",
        "KONTENT_TIMEOUT",
        "KONTENT_RETRY__MAX_ATTEMPTS",
    ):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


class TestManagementConfig:
    """Tests for ManagementConfig validation."""

    def test_defaults(self) -> None:
        """Test default values."""
        config = ManagementConfig(environment_id=ENVIRONMENT_ID, api_key="secret-key")

        assert config.get_base_url() == "https://manage.kontent.ai/v2"
        assert config.timeout == 30.0
        assert config.max_connections == 10
        assert config.verify_ssl is True
        assert config.retry == RetryConfig()

    def test_api_key_is_secret(self) -> None:
        """Test that the key does not leak into the repr."""
        config = ManagementConfig(environment_id=ENVIRONMENT_ID, api_key="secret-key")

        assert "secret-key" not in repr(config)
        assert config.get_api_key() == "secret-key"

    def test_trailing_slash_stripped(self) -> None:
        """Test base URL normalisation."""
        config = ManagementConfig(
            environment_id=ENVIRONMENT_ID,
            api_key="secret-key",
            base_url="https://manage.example.com/v2/",
        )

        assert config.get_base_url() == "https://manage.example.com/v2"

    def test_frozen(self) -> None:
        """Test that configuration cannot be changed after construction."""
        config = ManagementConfig(environment_id=ENVIRONMENT_ID, api_key="secret-key")

        with pytest.raises(PydanticValidationError):
            config.timeout = 5.0  # type: ignore[misc]


class TestConfigFactory:
    """Tests for ConfigFactory."""

    def test_create(self) -> None:
        """Test creating from keyword arguments."""
        config = ConfigFactory.create(environment_id=ENVIRONMENT_ID, api_key="secret-key")
        assert config.environment_id == ENVIRONMENT_ID

    def test_create_invalid_environment_id(self) -> None:
        """Test that a non-UUID environment is a ConfigurationError."""
        with pytest.raises(ConfigurationError, match="Invalid configuration"):
            ConfigFactory.create(environment_id="my-project", api_key="secret-key")

    def test_create_missing_api_key(self) -> None:
        """Test that the API key is required."""
        with pytest.raises(ConfigurationError):
            ConfigFactory.create(environment_id=ENVIRONMENT_ID)

    def test_from_dict_with_nested_retry(self) -> None:
        """Test creating from a dictionary with retry settings."""
        config = ConfigFactory.from_dict(
            {
                "environment_id": ENVIRONMENT_ID,
                "api_key": "secret-key",
                "retry": {"max_attempts": 5, "retry_on_status": [503]},
            }
        )

        assert config.retry.max_attempts == 5
        assert config.retry.retry_on_status == {503}

    def test_from_dict_invalid_retry(self) -> None:
        """Test retry bounds."""
        with pytest.raises(ConfigurationError):
            ConfigFactory.from_dict(
                {
                    "environment_id": ENVIRONMENT_ID,
                    "api_key": "secret-key",
                    "retry": {"max_attempts": 0},
                }
            )

    def test_from_environment_only(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test reading KONTENT_* variables."""
        monkeypatch.setenv("KONTENT_ENVIRONMENT_ID", ENVIRONMENT_ID)
        monkeypatch.setenv("KONTENT_API_KEY", "env-key")
        monkeypatch.setenv("KONTENT_TIMEOUT", "12.5")
        monkeypatch.setenv("KONTENT_RETRY__MAX_ATTEMPTS", "4")

        config = ConfigFactory.from_environment_only()

        assert config.get_api_key() == "env-key"
        assert config.timeout == 12.5
        assert config.retry.max_attempts == 4

    def test_from_environment_only_ignores_dotenv(self, tmp_path: Path) -> None:
        """Test that a .env file in the working directory is not read."""
        (tmp_path / ".env").write_text(
            f"KONTENT_ENVIRONMENT_ID={ENVIRONMENT_ID}\nKONTENT_API_KEY=file-key\n"
        )

        with pytest.raises(ConfigurationError):
            ConfigFactory.from_environment_only()

    def test_from_env_file(self, tmp_path: Path) -> None:
        """Test reading a specific .env file."""
        env_file = tmp_path / "kontent.env"
        env_file.write_text(
            f"KONTENT_ENVIRONMENT_ID={ENVIRONMENT_ID}\n"
            "KONTENT_API_KEY=file-key\n"
            "KONTENT_BASE_URL=https://manage.example.com/v2\n"
            "UNRELATED=ignored\n"
        )

        config = ConfigFactory.from_env_file(env_file)

        assert config.get_api_key() == "file-key"
        assert config.get_base_url() == "https://manage.example.com/v2"

    def test_from_env_file_missing_required(self, tmp_path: Path) -> None:
        """Test that a required file must exist."""
        with pytest.raises(ConfigurationError, match=".env file not found"):
            ConfigFactory.from_env_file(tmp_path / "missing.env")

    def test_from_env_file_missing_optional(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test falling back to the environment when the file is optional."""
        monkeypatch.setenv("KONTENT_ENVIRONMENT_ID", ENVIRONMENT_ID)
        monkeypatch.setenv("KONTENT_API_KEY", "env-key")

        config = ConfigFactory.from_env_file(tmp_path / "missing.env", required=False)

        assert config.get_api_key() == "env-key"

    def test_environment_overrides_env_file(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that process variables win over the file."""
        env_file = tmp_path / "kontent.env"
        env_file.write_text(f"KONTENT_ENVIRONMENT_ID={ENVIRONMENT_ID}\nKONTENT_API_KEY=file-key\n")
        monkeypatch.setenv("KONTENT_API_KEY", "env-key")

        assert ConfigFactory.from_env_file(env_file).get_api_key() == "env-key"


class TestShortcuts:
    """Tests for module-level helpers."""

    def test_create_config(self) -> None:
        """Test the create_config shortcut."""
        config = create_config(environment_id=ENVIRONMENT_ID, api_key="secret-key", timeout=5)
        assert config.timeout == 5.0

    def test_load_config_from_file(self, tmp_path: Path) -> None:
        """Test load_config with a file path."""
        env_file = tmp_path / "kontent.env"
        env_file.write_text(f"KONTENT_ENVIRONMENT_ID={ENVIRONMENT_ID}\nKONTENT_API_KEY=file-key\n")

        assert load_config(env_file).get_api_key() == "file-key"

    def test_load_config_environment_only(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test load_config without a file."""
        monkeypatch.setenv("KONTENT_ENVIRONMENT_ID", ENVIRONMENT_ID)
        monkeypatch.setenv("KONTENT_API_KEY", "env-key")

        assert load_config().environment_id == ENVIRONMENT_ID
