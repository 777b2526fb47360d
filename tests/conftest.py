"""Shared fixtures."""

import pytest

from src.config import Settings

SETTINGS_ENV_VARS = [
    "github_owner",
    "github_repo",
    "trigger_phrase",
    "openai_model",
    "prompt_system",
    "prompt_translation",
    "prompt_review_code",
    "prompt_summarize_diff",
    "source_filetypes",
    "language",
    "environment",
    "debug",
    "log_level",
    "port",
    "openai_api_key",
    "github_webhook_secret",
    "chat_max_retries",
    "char_soft_limit",
    "raw_fetch_timeout",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test from the built-in defaults."""
    for name in SETTINGS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(name.upper(), raising=False)


@pytest.fixture
def make_settings():
    """Build Settings from defaults plus overrides, ignoring any .env file."""

    def _make(**overrides) -> Settings:
        return Settings(_env_file=None, **overrides)

    return _make
