"""Logging setup for hubkit.

hubkit is a library: every module logs under ``hubkit.<area>`` and the
``hubkit`` logger only carries a ``NullHandler``, so records reach whatever
the application configured on the root logger.

``configure_logging()`` is an opt-in for scripts and services that want
hubkit's own output: one stream handler emitting JSON lines (or plain text
for development), with level and format taken from ``HubkitConfig``
(``HUBKIT_LOG_LEVEL`` / ``HUBKIT_LOG_FORMAT``, environment or ``.env``).
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, TextIO

from .config import HubkitConfig, get_config

ROOT_LOGGER = "hubkit"

REDACTED = "[REDACTED]"

# Exact key names, compared case-insensitively
SENSITIVE_KEYS = frozenset(
    {
        "api_key",
        "auth",
        "authorization",
        "bearer",
        "credential",
        "encrypted_value",
        "key",
        "password",
        "secret",
        "token",
    }
)

# Attributes every LogRecord carries; anything else came in through ``extra=``
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "taskName"}

logging.getLogger(ROOT_LOGGER).addHandler(logging.NullHandler())


def record_context(record: logging.LogRecord) -> dict[str, Any]:
    """The ``extra=`` fields of a record, with sensitive values redacted."""
    return {
        key: REDACTED if key.lower() in SENSITIVE_KEYS else value
        for key, value in vars(record).items()
        if key not in _RECORD_ATTRIBUTES and not key.startswith("_")
    }


class StructuredFormatter(logging.Formatter):
    """One JSON object per record.

    Keys: ``timestamp`` (UTC, ISO 8601, ``Z`` suffix), ``level``, ``logger``,
    ``message``, ``context`` (extras, only when present) and ``exception``
    (formatted traceback, only when present). Values that are not JSON
    serializable are written with ``str()``.
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created, tz=timezone.utc)
        entry: dict[str, Any] = {
            "timestamp": timestamp.isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        context = record_context(record)
        if context:
            entry["context"] = context
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable single line format for development."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


class HubkitLogHandler(logging.StreamHandler):
    """Stream handler installed by ``configure_logging``.

    A dedicated type so reconfiguring finds and reuses it instead of stacking
    handlers, and never mistakes a handler someone else attached for it.
    """


def _own_handler(logger: logging.Logger) -> HubkitLogHandler | None:
    for handler in logger.handlers:
        if isinstance(handler, HubkitLogHandler):
            return handler
    return None


def configure_logging(
    level: str | None = None,
    log_format: str | None = None,
    *,
    stream: TextIO | None = None,
    config: HubkitConfig | None = None,
) -> HubkitLogHandler:
    """Send hubkit records to a stream handler owned by hubkit.

    Calling it again updates the existing handler. While the handler is
    installed the ``hubkit`` logger stops propagating, so records are not
    written twice when the root logger also has handlers.

    Args:
        level: Level name; defaults to ``config.log_level``. Unknown names
            fall back to INFO.
        log_format: ``json`` or ``text``; defaults to ``config.log_format``
        stream: Output stream (default: stderr)
        config: Settings to read defaults from (default: ``get_config()``)

    Returns:
        The installed handler
    """
    if level is None or log_format is None:
        config = config or get_config()
        level = level or config.log_level
        log_format = log_format or config.log_format

    logger = logging.getLogger(ROOT_LOGGER)
    numeric_level = logging.getLevelName(level.upper())
    logger.setLevel(numeric_level if isinstance(numeric_level, int) else logging.INFO)

    handler = _own_handler(logger)
    if handler is None:
        handler = HubkitLogHandler(stream)
        logger.addHandler(handler)
    elif stream is not None:
        handler.setStream(stream)

    formatter = TextFormatter() if log_format.lower() == "text" else StructuredFormatter()
    handler.setFormatter(formatter)
    logger.propagate = False
    return handler
