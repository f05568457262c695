import io
import logging

import httpx
import pytest
import respx

from backlog_sdk.core.client import BacklogClient
from backlog_sdk.core.logging import LogfmtFormatter, setup_logging


def _record(msg, **extra):
    record = logging.LogRecord(
        name="backlog_sdk.client",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_logfmt_single_line():
    line = LogfmtFormatter().format(
        _record("op.request", method="GET", path="/api/v2/space", status=200)
    )
    assert line == (
        "level=debug logger=backlog_sdk.client event=op.request "
        "method=GET path=/api/v2/space status=200"
    )


def test_logfmt_quotes_values_with_spaces():
    line = LogfmtFormatter().format(_record("something happened"))
    assert 'event="something happened"' in line


def test_logfmt_multiline_body_follows_header():
    out = LogfmtFormatter().format(_record("HTTP/1.1 404 Not Found\n\n{}"))
    header, rest = out.split("\n", 1)
    assert header == "level=debug logger=backlog_sdk.client"
    assert rest.startswith("HTTP/1.1 404 Not Found")


@pytest.mark.asyncio
async def test_setup_logging_routes_client_records():
    stream = io.StringIO()
    setup_logging("DEBUG", stream=stream)
    try:
        async with respx.mock:
            respx.get("https://example.backlog.com/api/v2/space").mock(
                return_value=httpx.Response(200, json={"spaceKey": "acme"})
            )
            client = BacklogClient(base_url="https://example.backlog.com/", api_key="K")
            async with client:
                await client.request("GET", "api/v2/space", dict)
    finally:
        logger = logging.getLogger("backlog_sdk")
        for h in list(logger.handlers):
            logger.removeHandler(h)
        logger.setLevel(logging.NOTSET)

    output = stream.getvalue()
    assert "event=op.request" in output
    assert "method=GET" in output
    assert "status=200" in output
    assert "apiKey" not in output


def test_setup_logging_replaces_handlers():
    setup_logging("INFO", stream=io.StringIO())
    setup_logging("WARNING", stream=io.StringIO())
    logger = logging.getLogger("backlog_sdk")
    try:
        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING
    finally:
        for h in list(logger.handlers):
            logger.removeHandler(h)
        logger.setLevel(logging.NOTSET)
