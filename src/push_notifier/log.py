"""Structured JSON logging for push dispatch."""

import json
import logging
import sys
from collections.abc import Sequence
from datetime import datetime, timezone

# Build the set of standard LogRecord attributes so we can extract
# extra fields added via `extra={...}` in log calls.
_STANDARD_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
    | {"message", "asctime"}
)

# Device tokens address a real handset; only a prefix reaches the logs.
_TOKEN_FIELDS = frozenset({"device_key"})
_TOKEN_PREFIX_LEN = 8

# Transport libraries used by real APNS/FCM providers; noisy below WARNING.
PUSH_CLIENT_LOGGERS: tuple[str, ...] = (
    "aioapns",
    "h2",
    "hpack",
    "httpcore",
    "httpx",
    "firebase_admin",
    "google.auth",
    "urllib3",
)


def mask_token(token: object) -> object:
    """Shorten a device token to its first few characters."""
    if not isinstance(token, str) or len(token) <= _TOKEN_PREFIX_LEN:
        return token
    return f"{token[:_TOKEN_PREFIX_LEN]}..."


class JsonFormatter(logging.Formatter):
    """Single-line JSON formatter with device tokens masked."""

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, object] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key in _STANDARD_ATTRS:
                continue
            log_entry[key] = mask_token(value) if key in _TOKEN_FIELDS else value

        if record.exc_info and record.exc_info[1]:
            log_entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_entry, default=str)


def setup_logging(
    level: str = "INFO",
    suppress: Sequence[str] = PUSH_CLIENT_LOGGERS,
) -> None:
    """Send the root logger to stdout as JSON.

    The library never calls this itself; applications do, once at startup.

    Args:
        level: Root log level (e.g. "INFO", "DEBUG").
        suppress: Logger names to set to WARNING. Defaults to the HTTP/2
                  and Firebase client libraries behind real providers;
                  pass () to keep their output.
    """
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(JsonFormatter())

    root = logging.getLogger()
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    root.handlers.clear()
    root.addHandler(handler)

    for name in suppress:
        logging.getLogger(name).setLevel(logging.WARNING)
