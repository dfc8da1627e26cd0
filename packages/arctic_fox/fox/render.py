"""Serialization adapter turning containers into transport payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol, assert_never

from pydantic import BaseModel, ConfigDict

from packages.arctic_fox.config import DEFAULT_FALLBACK_BODY, DEFAULT_SUCCESS_MESSAGE, ResponseSettings
from packages.arctic_fox.errors import codes
from packages.arctic_fox.logging import fields, get_logger, log_context

from .monad import ArcticFox
from .state import Frozen, Live

_LOGGER = get_logger(__name__)


class FoxEnvelope(BaseModel):
    """Wire shape of a rendered container."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    data: Any
    message: str


@dataclass(frozen=True)
class RenderedBody:
    """Payload bytes plus the hints a transport layer needs.

    ``size_hint`` is a capacity estimate (value size plus message length) and
    must not be used for framing.
    """

    body: bytes
    size_hint: int
    status_code: int
    is_fallback: bool = False


class ResponseSink(Protocol):
    """Transport collaborator accepting a rendered payload."""

    def send(self, body: bytes, status_code: int) -> None:
        """Deliver ``body`` with ``status_code``."""
        ...


def render(
    fox: ArcticFox[Any],
    *,
    success_message: str = DEFAULT_SUCCESS_MESSAGE,
    fallback_body: str = DEFAULT_FALLBACK_BODY,
) -> RenderedBody:
    """Render a container into ``{"data", "message"}`` JSON.

    Live containers carry ``success_message`` and status 200; frozen ones carry
    the error description and its status hint. Rendering never raises: when
    the value cannot be serialized the body is ``fallback_body``.
    """
    match fox.state:
        case Live(value=value):
            state = "live"
            message = success_message
            status_code = codes.STATUS_OK
        case Frozen(value=value, error=error):
            state = "frozen"
            message = error.describe()
            status_code = error.status_hint()
        case _:
            assert_never(fox.state)

    message_len = len(message.encode("utf-8"))
    try:
        envelope = FoxEnvelope(data=value.serialized(), message=message)
        body = envelope.model_dump_json(indent=2).encode("utf-8")
        size_hint = value.size() + message_len
    except Exception as exc:
        with log_context({fields.FOX_STATE: state, fields.EXCEPTION_TYPE: type(exc).__name__}):
            _LOGGER.warning(
                "Container rendering fell back to placeholder: value_type=%s",
                type(value).__name__,
                exc_info=exc,
            )
        body = fallback_body.encode("utf-8")
        return RenderedBody(
            body=body, size_hint=len(body), status_code=status_code, is_fallback=True
        )
    return RenderedBody(body=body, size_hint=size_hint, status_code=status_code)


def render_with_settings(fox: ArcticFox[Any], settings: ResponseSettings) -> RenderedBody:
    """Render using messages from the typed ``response`` settings subtree."""
    return render(
        fox,
        success_message=settings.success_message,
        fallback_body=settings.fallback_body,
    )


def respond(
    fox: ArcticFox[Any],
    sink: ResponseSink,
    *,
    settings: ResponseSettings | None = None,
) -> RenderedBody:
    """Render ``fox`` and hand the payload to ``sink``."""
    rendered = render_with_settings(fox, settings or ResponseSettings())
    sink.send(rendered.body, rendered.status_code)
    return rendered
