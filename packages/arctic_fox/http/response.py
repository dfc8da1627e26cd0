"""FastAPI response adapter for rendered containers.

Route registration stays with the host service; this module only turns a
container into a ready-to-return ``Response``.
"""

from __future__ import annotations

import json
from typing import Any

from fastapi import Response

from packages.arctic_fox.config import ResponseSettings
from packages.arctic_fox.fox import ArcticFox, RenderedBody, render_with_settings

JSON_MEDIA_TYPE = "application/json"
TEXT_MEDIA_TYPE = "text/plain"


def media_type_for(body: bytes) -> str:
    """Return the JSON media type for rendered envelopes, plain text otherwise.

    Sinks and ``to_response`` both label payloads through this function.
    """
    try:
        json.loads(body)
    except ValueError:
        return TEXT_MEDIA_TYPE
    return JSON_MEDIA_TYPE


class ResponseCollector:
    """``ResponseSink`` that keeps the last payload as a FastAPI response."""

    def __init__(self) -> None:
        self._response: Response | None = None

    def send(self, body: bytes, status_code: int) -> None:
        """Store ``body`` and ``status_code`` as a response."""
        self._response = Response(content=body, status_code=status_code, media_type=media_type_for(body))

    @property
    def response(self) -> Response:
        """Return the collected response; raise when nothing was sent."""
        if self._response is None:
            raise LookupError("no payload has been sent to this collector")
        return self._response


def to_response(rendered: RenderedBody) -> Response:
    """Build a response from an already rendered payload."""
    collector = ResponseCollector()
    collector.send(rendered.body, rendered.status_code)
    return collector.response


def fox_response(fox: ArcticFox[Any], *, settings: ResponseSettings | None = None) -> Response:
    """Render ``fox`` and wrap the payload with its status hint."""
    return to_response(render_with_settings(fox, settings or ResponseSettings()))
