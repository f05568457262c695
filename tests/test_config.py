import pytest

from backlog_sdk.core.client import BacklogClient
from backlog_sdk.core.config import create_client_from_env, load_env_config

ENV_VARS = (
    "BACKLOG_BASE_URL",
    "BACKLOG_SPACE",
    "BACKLOG_DOMAIN",
    "BACKLOG_API_KEY",
    "BACKLOG_DEBUG",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_base_url_wins(monkeypatch):
    monkeypatch.setenv("BACKLOG_BASE_URL", "https://custom.example.com/")
    monkeypatch.setenv("BACKLOG_SPACE", "ignored")
    monkeypatch.setenv("BACKLOG_API_KEY", "K")

    cfg = load_env_config(use_dotenv=False)
    assert cfg.base_url == "https://custom.example.com/"
    assert cfg.api_key == "K"
    assert cfg.debug is False


def test_space_and_domain(monkeypatch):
    monkeypatch.setenv("BACKLOG_SPACE", "acme")
    assert load_env_config(use_dotenv=False).base_url == "https://acme.backlog.com/"

    monkeypatch.setenv("BACKLOG_DOMAIN", "backlog.jp")
    assert load_env_config(use_dotenv=False).base_url == "https://acme.backlog.jp/"


@pytest.mark.parametrize(
    "raw,expected", [("1", True), ("true", True), ("On", True), ("0", False), ("", False)]
)
def test_debug_flag(monkeypatch, raw, expected):
    monkeypatch.setenv("BACKLOG_DEBUG", raw)
    assert load_env_config(use_dotenv=False).debug is expected


def test_missing_values_rejected(monkeypatch):
    with pytest.raises(ValueError):
        create_client_from_env(use_dotenv=False)

    monkeypatch.setenv("BACKLOG_SPACE", "acme")
    with pytest.raises(ValueError):
        create_client_from_env(use_dotenv=False)


@pytest.mark.asyncio
async def test_create_client_from_env(monkeypatch):
    monkeypatch.setenv("BACKLOG_SPACE", "acme")
    monkeypatch.setenv("BACKLOG_API_KEY", "K")
    monkeypatch.setenv("BACKLOG_DEBUG", "yes")

    client = create_client_from_env(use_dotenv=False)
    async with client:
        assert isinstance(client, BacklogClient)
        assert client.base_url == "https://acme.backlog.com/"
        assert client.api_key == "K"
        assert client.debug is True


@pytest.mark.asyncio
async def test_explicit_kwargs_override_env(monkeypatch):
    monkeypatch.setenv("BACKLOG_BASE_URL", "https://acme.backlog.com/")
    monkeypatch.setenv("BACKLOG_API_KEY", "K")
    monkeypatch.setenv("BACKLOG_DEBUG", "1")

    client = create_client_from_env(use_dotenv=False, debug=False, timeout_seconds=5)
    async with client:
        assert client.debug is False
        assert client.timeout_seconds == 5
