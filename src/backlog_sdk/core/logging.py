import logging
import sys
from typing import Any, Optional, TextIO

LOG_EXTRA_FIELDS = (
    "operation",
    "method",
    "path",
    "status",
    "duration_ms",
)


class LogfmtFormatter(logging.Formatter):
    """logfmt lines for client records; extras are optional.

    Multi-line messages (response dumps) are emitted after the key/value
    header so they stay readable.
    """

    def format(self, record: logging.LogRecord) -> str:
        kv: list[str] = [
            f"level={record.levelname.lower()}",
            f"logger={record.name}",
        ]

        msg = record.getMessage()
        body: Optional[str] = None
        if "\n" in msg:
            body = msg
        elif msg:
            kv.append(f"event={self._fmt_val(msg)}")

        for key in LOG_EXTRA_FIELDS:
            val = getattr(record, key, None)
            if val is None:
                continue
            kv.append(f"{key}={self._fmt_val(val)}")

        if record.exc_info and record.exc_info[0] is not None:
            kv.append(f"exc_type={record.exc_info[0].__name__}")

        line = " ".join(kv)
        return f"{line}\n{body.rstrip()}" if body else line

    @staticmethod
    def _fmt_val(val: Any) -> str:
        if isinstance(val, (int, float, bool)):
            return str(val)
        s = str(val)
        if " " in s or "=" in s or '"' in s:
            s = '"' + s.replace('"', '\\"') + '"'
        return s


class StderrHandler(logging.StreamHandler):
    """StreamHandler bound to whatever ``sys.stderr`` is when a record is emitted."""

    def __init__(self, level: int = logging.NOTSET):
        logging.Handler.__init__(self, level)

    @property
    def stream(self) -> TextIO:
        return sys.stderr


def setup_logging(level: str = "INFO", stream: Optional[TextIO] = None) -> None:
    """Route the backlog_sdk loggers to ``stream`` (stderr by default) in logfmt."""

    logger = logging.getLogger("backlog_sdk")
    for h in list(logger.handlers):
        logger.removeHandler(h)

    handler = logging.StreamHandler(stream) if stream is not None else StderrHandler()
    handler.setFormatter(LogfmtFormatter())
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))


def enable_debug_output() -> None:
    """Send backlog_sdk DEBUG records to stderr unless handlers are already set up."""
    if logging.getLogger("backlog_sdk").handlers:
        return
    setup_logging("DEBUG")


__all__ = [
    "setup_logging",
    "enable_debug_output",
    "LogfmtFormatter",
    "StderrHandler",
    "LOG_EXTRA_FIELDS",
]
