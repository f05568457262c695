"""Transport core for backlog-sdk (knows nothing about individual API areas)."""

from .client import BacklogClient, ByteSink, encode_body, response_dump
from .config import EnvConfig, create_client_from_env, load_env_config
from .errors import (
    BacklogAPIError,
    BacklogClientError,
    BacklogFileError,
    BacklogHTTPError,
    BacklogInvalidArgumentError,
    BacklogParseError,
    BacklogStatusCodeError,
    ErrorDetail,
    ErrorResponse,
    InvalidBaseURLError,
    InvalidIdentifierError,
    InvalidURLError,
    OptionsEncodeError,
)
from .identifiers import IDOrKey, api_path, render_identifier
from .logging import LogfmtFormatter, enable_debug_output, setup_logging
from .query import Query, add_options, append_query, encode_options
from .timestamps import Timestamp, TimestampParseError, format_timestamp, parse_timestamp

__all__ = [
    # Client
    "BacklogClient",
    "ByteSink",
    "encode_body",
    "response_dump",
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
    "ErrorDetail",
    "ErrorResponse",
    # Identifiers & query
    "IDOrKey",
    "api_path",
    "render_identifier",
    "Query",
    "encode_options",
    "add_options",
    "append_query",
    # Time
    "Timestamp",
    "TimestampParseError",
    "parse_timestamp",
    "format_timestamp",
    # Config & logging
    "EnvConfig",
    "load_env_config",
    "create_client_from_env",
    "LogfmtFormatter",
    "setup_logging",
    "enable_debug_output",
]
