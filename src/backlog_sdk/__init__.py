"""backlog_sdk package exports."""

from . import resources
from .core import (
    BacklogAPIError,
    BacklogClient,
    BacklogClientError,
    BacklogFileError,
    BacklogHTTPError,
    BacklogInvalidArgumentError,
    BacklogParseError,
    BacklogStatusCodeError,
    IDOrKey,
    InvalidBaseURLError,
    InvalidIdentifierError,
    InvalidURLError,
    OptionsEncodeError,
    Query,
    create_client_from_env,
    load_env_config,
    setup_logging,
)
from .models import Order, RoleType, Sort

__all__ = [
    # Client
    "BacklogClient",
    "create_client_from_env",
    "load_env_config",
    "setup_logging",
    "resources",
    # Exceptions
    "BacklogClientError",
    "BacklogInvalidArgumentError",
    "InvalidIdentifierError",
    "InvalidURLError",
    "InvalidBaseURLError",
    "OptionsEncodeError",
    "BacklogHTTPError",
    "BacklogAPIError",
    "BacklogStatusCodeError",
    "BacklogParseError",
    "BacklogFileError",
    # Types
    "IDOrKey",
    "Query",
    "Order",
    "Sort",
    "RoleType",
]
