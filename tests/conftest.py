"""Pytest configuration and shared fixtures."""

import pytest

from kontent_kit import ManagementConfig, RetryConfig

ENVIRONMENT_ID = "11111111-2222-3333-4444-555555555555"
ENVIRONMENT_URL = f"https://manage.kontent.ai/v2/projects/{ENVIRONMENT_ID}"
ZERO_ID = "00000000-0000-0000-0000-000000000000"


@pytest.fixture
def management_config() -> ManagementConfig:
    """Create a test configuration.

    Retries are disabled so error tests fail fast.
    """
    return ManagementConfig(
        environment_id=ENVIRONMENT_ID,
        api_key="test-api-key-12345678",
        retry=RetryConfig(max_attempts=1),
    )


@pytest.fixture
def environment_url() -> str:
    return ENVIRONMENT_URL


@pytest.fixture
def single_language_response() -> dict:
    """A language as returned by GET languages/{reference}."""
    return {
        "id": ZERO_ID,
        "name": "Default project language",
        "codename": "default",
        "external_id": "string",
        "is_active": True,
        "is_default": True,
        "fallback_language": {"id": ZERO_ID},
    }


@pytest.fixture
def modified_language_response() -> dict:
    """The German language after renaming it and changing its fallback."""
    return {
        "id": "2ea66788-d3b8-5ff5-b37e-258502e4fd5d",
        "name": "Deutsch",
        "codename": "de-DE",
        "external_id": "standard-german",
        "is_active": False,
        "is_default": False,
        "fallback_language": {"id": ZERO_ID},
    }


def make_language(index: int) -> dict:
    """Build a minimal language object for listing fixtures."""
    return {
        "id": f"00000000-0000-0000-0000-{index:012d}",
        "name": f"Language {index}",
        "codename": f"language-{index}",
        "is_active": True,
        "is_default": index == 0,
        "fallback_language": {"id": ZERO_ID},
    }


@pytest.fixture
def language_pages() -> list[dict]:
    """Three listing pages of sizes 2, 2 and 1 chained by continuation tokens."""
    return [
        {
            "languages": [make_language(1), make_language(2)],
            "pagination": {"continuation_token": "T1", "next_page": "page-2"},
        },
        {
            "languages": [make_language(3), make_language(4)],
            "pagination": {"continuation_token": "T2", "next_page": "page-3"},
        },
        {
            "languages": [make_language(5)],
            "pagination": {"continuation_token": None, "next_page": None},
        },
    ]
