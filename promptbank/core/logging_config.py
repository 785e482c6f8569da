"""Logging setup shared by the API and the client core.

``setup_logging`` installs one stdout handler on the root logger. Records
are rendered as JSON lines (default) or plain text, carry the current
request id when there is one, and pass through a filter that masks
bearer tokens and password-like values.
"""

import contextvars
import json
import logging
import re
import sys
from datetime import datetime, timezone
from typing import Optional

# Filled in per request by RequestContextMiddleware.
request_id_var: contextvars.ContextVar[str] = contextvars.ContextVar("request_id", default="")

_TEXT_FORMAT = "%(asctime)s %(levelname)-7s [%(name)s] %(message)s"

# Attributes every LogRecord has; anything else came in through ``extra=``.
_STANDARD_ATTRS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


class _JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        request_id = request_id_var.get()
        if request_id:
            entry["request_id"] = request_id
        entry.update(
            (key, value) for key, value in vars(record).items()
            if key not in _STANDARD_ATTRS and key not in entry
        )
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


_MASK = "***REDACTED***"

_SECRETS = (
    # "Bearer <token>"
    re.compile(r"(?i)(bearer\s+)[\w.\-]{20,}"),
    # bare JWTs (header always starts with eyJ)
    re.compile(r"\beyJ[\w\-]{10,}\.[\w\-]{10,}\.[\w\-]+"),
    # password=..., "token": "...", authorization: ...
    re.compile(r"(?i)((?:password|secret|token|authorization)[\"']?\s*[=:]\s*[\"']?)[^\s,\"']{4,}"),
)


def _mask(text: str) -> str:
    for pattern in _SECRETS:
        text = pattern.sub(lambda m: (m.group(1) if m.groups() else "") + _MASK, text)
    return text


class _SecretFilter(logging.Filter):
    """Mask secrets in the message, its string arguments and cached traceback text."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.msg = _mask(str(record.msg))
        if isinstance(record.args, tuple):
            record.args = tuple(_mask(a) if isinstance(a, str) else a for a in record.args)
        if record.exc_text:
            record.exc_text = _mask(record.exc_text)
        return True


# Third-party loggers that are too chatty at INFO.
_QUIET = {
    "uvicorn.access": logging.WARNING,
    "sqlalchemy.engine": logging.WARNING,
    "httpx": logging.WARNING,
    "passlib": logging.ERROR,
}


def setup_logging(log_level: Optional[str] = None, log_format: Optional[str] = None) -> None:
    """Replace the root logger's handlers with a single configured stdout handler.

    Args:
        log_level: Level name, INFO when omitted.
        log_format: ``"json"`` (default) or ``"text"``.
    """
    level = (log_level or "INFO").upper()
    style = (log_format or "json").lower()

    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(_SecretFilter())
    handler.setFormatter(_JsonFormatter() if style == "json" else logging.Formatter(_TEXT_FORMAT))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)

    for name, quiet_level in _QUIET.items():
        logging.getLogger(name).setLevel(quiet_level)

    logging.getLogger(__name__).debug("Logging configured", extra={"level": level, "format": style})
