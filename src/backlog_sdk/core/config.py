from __future__ import annotations

import os
from dataclasses import dataclass
from typing import TYPE_CHECKING

from dotenv import load_dotenv

if TYPE_CHECKING:
    from .client import BacklogClient

DEFAULT_DOMAIN = "backlog.com"
_TRUTHY = ("1", "true", "yes", "on")


@dataclass(frozen=True)
class EnvConfig:
    base_url: str
    api_key: str
    debug: bool = False


def _base_url_from_env() -> str:
    base_url = os.getenv("BACKLOG_BASE_URL", "").strip()
    if base_url:
        return base_url
    space = os.getenv("BACKLOG_SPACE", "").strip()
    if not space:
        return ""
    domain = os.getenv("BACKLOG_DOMAIN", "").strip() or DEFAULT_DOMAIN
    return f"https://{space}.{domain}/"


def load_env_config(*, use_dotenv: bool = True) -> EnvConfig:
    """
    Load Backlog settings from environment (optional .env).
    BACKLOG_BASE_URL wins over BACKLOG_SPACE/BACKLOG_DOMAIN.
    """
    if use_dotenv:
        load_dotenv()
    return EnvConfig(
        base_url=_base_url_from_env(),
        api_key=os.getenv("BACKLOG_API_KEY", "").strip(),
        debug=os.getenv("BACKLOG_DEBUG", "").strip().lower() in _TRUTHY,
    )


def create_client_from_env(*, use_dotenv: bool = True, **kwargs) -> "BacklogClient":
    """Create a BacklogClient from environment variables."""
    from .client import BacklogClient

    cfg = load_env_config(use_dotenv=use_dotenv)
    if not cfg.base_url or not cfg.api_key:
        raise ValueError(
            "Missing BACKLOG_BASE_URL (or BACKLOG_SPACE) or BACKLOG_API_KEY in environment."
        )
    kwargs.setdefault("debug", cfg.debug)
    return BacklogClient(base_url=cfg.base_url, api_key=cfg.api_key, **kwargs)


__all__ = ["EnvConfig", "load_env_config", "create_client_from_env", "DEFAULT_DOMAIN"]
