"""Log record emission for services embedding Arctic Fox.

Containers, hashers and renderers only ever call ``get_logger``; the host
service decides once, at startup, how records are emitted. Output goes to one
stream handler on the root logger, either as JSON lines or as plain text with
the bound fields appended.
"""

from __future__ import annotations

import json
import logging
import sys
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any, TextIO

from . import fields
from .context import bind_context, get_context

if TYPE_CHECKING:
    from packages.arctic_fox.config import LoggingSettings

_CONTEXT_ATTR = "arctic_fox_fields"


def _record_fields(record: logging.LogRecord) -> dict[str, str]:
    bound = getattr(record, _CONTEXT_ATTR, None)
    return bound if isinstance(bound, dict) else {}


class ContextFilter(logging.Filter):
    """Snapshot the bound fields onto each record as it passes the handler."""

    def filter(self, record: logging.LogRecord) -> bool:
        setattr(record, _CONTEXT_ATTR, get_context())
        return True


class JsonFormatter(logging.Formatter):
    """One JSON object per line: core fields, then bound fields, then exception."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            fields.TIMESTAMP: datetime.fromtimestamp(record.created, UTC).isoformat(),
            fields.LEVEL: record.levelname,
            fields.LOGGER: record.name,
            fields.MESSAGE: record.getMessage(),
        }
        payload.update(_record_fields(record))
        if record.exc_info and record.exc_info[0] is not None:
            payload.setdefault(fields.EXCEPTION_TYPE, record.exc_info[0].__name__)
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str, separators=(",", ":"))


class PlainFormatter(logging.Formatter):
    """Console format with ``key=value`` pairs for the bound fields."""

    def __init__(self) -> None:
        super().__init__(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        bound = _record_fields(record)
        if not bound:
            return line
        pairs = " ".join(f"{key}={bound[key]}" for key in sorted(bound))
        return f"{line} {pairs}"


def configure_logging(
    *,
    level: str = "INFO",
    json_output: bool = True,
    service: str | None = None,
    environment: str | None = None,
    stream: TextIO | None = None,
) -> None:
    """Route root logging through a single handler writing to ``stream``.

    ``stream`` defaults to stdout. Any handler already on the root logger is
    removed first, so calling this again reconfigures rather than duplicates.
    ``service`` and ``environment`` are bound as fields on every record.
    """
    handler = logging.StreamHandler(stream if stream is not None else sys.stdout)
    handler.addFilter(ContextFilter())
    handler.setFormatter(JsonFormatter() if json_output else PlainFormatter())

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.setLevel(level.upper())
    root.addHandler(handler)

    bind_context(**{fields.SERVICE: service or None, fields.ENVIRONMENT: environment or None})


def configure_logging_from_settings(
    settings: LoggingSettings, *, stream: TextIO | None = None
) -> None:
    """Configure root logging from the typed ``logging`` settings subtree."""
    configure_logging(
        level=settings.level,
        json_output=settings.json_output,
        service=settings.service,
        environment=settings.environment,
        stream=stream,
    )


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a standard library logger; emission is left to ``configure_logging``."""
    return logging.getLogger(name)
