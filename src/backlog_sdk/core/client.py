import json
import logging
import mimetypes
import time
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Protocol

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from .config import load_env_config
from .errors import (
    BacklogAPIError,
    BacklogClientError,
    BacklogFileError,
    BacklogHTTPError,
    BacklogInvalidArgumentError,
    BacklogParseError,
    BacklogStatusCodeError,
    ErrorResponse,
    InvalidBaseURLError,
    InvalidURLError,
)
from .logging import enable_debug_output
from .query import add_options

BODY_METHODS = frozenset({"POST", "PUT", "PATCH", "DELETE"})
DEFAULT_CONTENT_TYPE = "application/octet-stream"
USER_AGENT = "backlog-sdk/0.1"


class ByteSink(Protocol):
    def write(self, data: bytes) -> Any: ...


@lru_cache(maxsize=256)
def _adapter(into: Any) -> TypeAdapter:
    return TypeAdapter(into)


def _check_base_url(base_url: str) -> httpx.URL:
    try:
        url = httpx.URL(base_url)
    except httpx.InvalidURL as exc:
        raise InvalidBaseURLError(f"Invalid base URL {base_url!r}: {exc}") from exc
    if not url.is_absolute_url:
        raise InvalidBaseURLError(f"base URL must be absolute, got {base_url!r}")
    # httpx reports "/" for a bare host, so check the text as given
    if not base_url.endswith("/") or url.query:
        raise InvalidBaseURLError(
            f"base URL must have a trailing slash, but {base_url!r} does not"
        )
    return url


def encode_body(body: Any) -> bytes:
    """JSON-encode a request body; pydantic models drop unset (None) fields."""
    if isinstance(body, BaseModel):
        payload = body.model_dump(mode="json", by_alias=True, exclude_none=True)
    else:
        payload = body
    return json.dumps(payload, ensure_ascii=False, separators=(",", ":")).encode(
        "utf-8"
    )


def response_dump(resp: httpx.Response) -> str:
    """Render status line, headers and body the way they came off the wire."""
    lines = [f"{resp.http_version} {resp.status_code} {resp.reason_phrase}".rstrip()]
    lines.extend(f"{k}: {v}" for k, v in resp.headers.items())
    lines.append("")
    lines.append(resp.content.decode("utf-8", errors="replace"))
    return "\n".join(lines)


class BacklogClient:
    """
    Shared HTTP transport for the Backlog REST API v2.
    - Composes URLs against the base endpoint and attaches ``apiKey``
    - Encodes query options and JSON bodies
    - Dispatches 2xx bodies into a typed destination or a byte sink
    - Classifies non-2xx responses into typed errors
    No retries, caching or rate-limit handling; no per-request state.
    """

    def __init__(
        self,
        *,
        base_url: str,
        api_key: str,
        debug: bool = False,
        timeout_seconds: float = 30.0,
        logger: Optional[logging.Logger] = None,
        http: Optional[httpx.AsyncClient] = None,
    ):
        base_url = (base_url or "").strip()
        api_key = api_key or ""

        if not base_url:
            raise ValueError("base_url must be provided.")
        if not api_key:
            raise ValueError("api_key must be provided.")

        self._base = _check_base_url(base_url)
        self.base_url = base_url
        self.api_key = api_key
        self.debug = debug
        self.timeout_seconds = timeout_seconds
        self.log = logger or logging.getLogger("backlog_sdk.client")
        if debug and logger is None:
            enable_debug_output()

        self._owns_http = http is None
        self.http = http or httpx.AsyncClient(
            headers={"Accept": "application/json", "User-Agent": USER_AGENT},
            timeout=timeout_seconds,
        )

    @classmethod
    def from_env(cls, **kwargs) -> "BacklogClient":
        cfg = load_env_config()
        kwargs.setdefault("debug", cfg.debug)
        return cls(base_url=cfg.base_url, api_key=cfg.api_key, **kwargs)

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "BacklogClient":
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.aclose()

    # ----- Debug output -----

    def debugf(self, fmt: str, *args: Any) -> None:
        if self.debug:
            self.log.debug(fmt, *args)

    def debugln(self, *values: Any) -> None:
        if self.debug:
            self.log.debug(" ".join(str(v) for v in values))

    # ----- Request construction -----

    @staticmethod
    def add_options(url: str, options: Optional[BaseModel]) -> str:
        return add_options(url, options)

    def resolve_url(self, path: str) -> httpx.URL:
        """Join ``path`` onto the base URL and append the apiKey parameter."""
        try:
            url = self._base.join(path)
        except (httpx.InvalidURL, TypeError, ValueError) as exc:
            raise InvalidURLError(f"Invalid URL path {path!r}: {exc}") from exc
        return url.copy_add_param("apiKey", self.api_key)

    def build_request(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        files: Optional[Dict[str, Any]] = None,
    ) -> httpx.Request:
        """
        Prepare a request; no I/O happens here.
        - JSON body only for POST/PUT/PATCH/DELETE, with Content-Type set
        - ``files`` produces a multipart/form-data body with its boundary
        """
        method = method.upper()
        url = self.resolve_url(path)

        if body is not None and files is not None:
            raise BacklogInvalidArgumentError("body and files are mutually exclusive.")
        if (body is not None or files is not None) and method not in BODY_METHODS:
            raise BacklogInvalidArgumentError(f"{method} requests cannot carry a body.")

        if files is not None:
            return self.http.build_request(method, url, files=files)
        if body is not None:
            return self.http.build_request(
                method,
                url,
                content=encode_body(body),
                headers={"Content-Type": "application/json"},
            )
        return self.http.build_request(method, url)

    # ----- Execution and dispatch -----

    async def do(
        self,
        request: httpx.Request,
        into: Any = None,
        *,
        sink: Optional[ByteSink] = None,
    ) -> Any:
        """
        Send ``request`` and dispatch the response.
        - 2xx + sink: stream raw bytes into ``sink.write``
        - 2xx + into: JSON-decode into ``into`` (empty body -> None)
        - 2xx + neither: discard body
        - non-2xx: raise BacklogAPIError / BacklogStatusCodeError
        Transport errors and cancellation propagate unchanged.
        """
        start = time.perf_counter()
        resp = await self.http.send(request, stream=True)
        try:
            self.log.debug(
                "op.request",
                extra={
                    "method": request.method,
                    "path": request.url.path,
                    "status": resp.status_code,
                    "duration_ms": int((time.perf_counter() - start) * 1000),
                },
            )

            if resp.status_code // 100 != 2:
                await resp.aread()
                raise self.classify(resp)

            if sink is not None:
                async for chunk in resp.aiter_bytes():
                    sink.write(chunk)
                return None

            content = await resp.aread()
            if into is None:
                return None
            return self._decode(content, into, request)
        finally:
            await resp.aclose()

    async def request(
        self,
        method: str,
        path: str,
        into: Any = None,
        *,
        body: Any = None,
        options: Optional[BaseModel] = None,
        sink: Optional[ByteSink] = None,
    ) -> Any:
        """add_options -> build_request -> do, the shape of every resource call."""
        url = self.add_options(path, options)
        req = self.build_request(method, url, body)
        return await self.do(req, into, sink=sink)

    async def upload_file(
        self,
        method: str,
        path: str,
        file_path: str,
        field: str,
        into: Any = None,
    ) -> Any:
        """
        Upload a local file as multipart/form-data.
        - One part named ``field`` with the file's base name
        - Content type guessed from the extension
        - The file handle is closed before returning, whatever the outcome
        """
        fpath = Path(file_path)
        try:
            fh = fpath.open("rb")
        except OSError as exc:
            raise BacklogFileError(f"Cannot open {file_path}: {exc}") from exc

        with fh:
            ctype = mimetypes.guess_type(fpath.name)[0] or DEFAULT_CONTENT_TYPE
            req = self.build_request(
                method, path, files={field: (fpath.name, fh, ctype)}
            )
            try:
                return await self.do(req, into)
            except OSError as exc:
                raise BacklogFileError(f"Cannot read {file_path}: {exc}") from exc

    # ----- Response handling -----

    def classify(self, resp: httpx.Response) -> BacklogHTTPError:
        """Turn a read, non-2xx response into the matching error."""
        self.debugln(response_dump(resp))

        context = {
            "status_code": resp.status_code,
            "reason": resp.reason_phrase,
            "method": resp.request.method,
            "url": str(resp.request.url.copy_remove_param("apiKey")),
        }
        try:
            envelope = ErrorResponse.model_validate_json(resp.content)
        except ValidationError:
            envelope = None

        if envelope is not None and envelope.errors:
            return BacklogAPIError(envelope.errors, **context)
        return BacklogStatusCodeError(**context)

    def _decode(self, content: bytes, into: Any, request: httpx.Request) -> Any:
        if not content.strip():
            return None
        try:
            return _adapter(into).validate_json(content)
        except ValidationError as exc:
            snippet = content[:500].decode("utf-8", errors="replace")
            raise BacklogParseError(
                f"Could not decode response from {request.method} "
                f"{request.url.path} into {getattr(into, '__name__', into)}: "
                f"{exc.error_count()} error(s); body snippet: {snippet!r}"
            ) from exc


__all__ = [
    "BacklogClient",
    "BacklogClientError",
    "ByteSink",
    "encode_body",
    "response_dump",
    "BODY_METHODS",
]
