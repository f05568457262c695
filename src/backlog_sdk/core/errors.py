from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorDetail(BaseModel):
    message: str = ""
    code: int = 0
    more_info: str = Field(default="", alias="moreInfo")

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    def __str__(self) -> str:
        return f"code:{self.code} message:{self.message} moreInfo:{self.more_info}"


class ErrorResponse(BaseModel):
    """Error envelope returned by Backlog on failure: {"errors": [...]}."""

    errors: List[ErrorDetail] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")

    def joined_message(self) -> str:
        return ", ".join(str(e) for e in self.errors)


class BacklogClientError(Exception):
    """Base error for client failures."""


class BacklogInvalidArgumentError(BacklogClientError, ValueError):
    """Raised before any network call when caller input cannot be used."""


class InvalidIdentifierError(BacklogInvalidArgumentError):
    pass


class InvalidURLError(BacklogInvalidArgumentError):
    pass


class InvalidBaseURLError(BacklogInvalidArgumentError):
    pass


class OptionsEncodeError(BacklogInvalidArgumentError):
    pass


class BacklogParseError(BacklogClientError):
    """Response body is not JSON or does not match the destination shape."""


class BacklogFileError(BacklogClientError):
    """A local file could not be opened or read for upload."""


class BacklogHTTPError(BacklogClientError):
    """Non-2xx response. ``status_code`` is always available."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        reason: str = "",
        method: Optional[str] = None,
        url: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.reason = reason
        self.method = method
        self.url = url


class BacklogAPIError(BacklogHTTPError):
    """Non-2xx response carrying a parseable, non-empty error envelope."""

    def __init__(self, errors: List[ErrorDetail], **kwargs):
        super().__init__(ErrorResponse(errors=errors).joined_message(), **kwargs)
        self.errors = errors

    @property
    def codes(self) -> List[int]:
        return [e.code for e in self.errors]


class BacklogStatusCodeError(BacklogHTTPError):
    def __init__(self, *, status_code: int, reason: str = "", **kwargs):
        status = f"{status_code} {reason}".strip()
        super().__init__(
            f"backlog server error: {status}",
            status_code=status_code,
            reason=reason,
            **kwargs,
        )


__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "BacklogClientError",
    "BacklogInvalidArgumentError",
    "InvalidIdentifierError",
    "InvalidURLError",
    "InvalidBaseURLError",
    "OptionsEncodeError",
    "BacklogParseError",
    "BacklogFileError",
    "BacklogHTTPError",
    "BacklogAPIError",
    "BacklogStatusCodeError",
]
