"""Tests for the FastAPI response adapter."""

from __future__ import annotations

import pytest
from fastapi import FastAPI, Response
from fastapi.testclient import TestClient

from packages.arctic_fox.config import DEFAULT_FALLBACK_BODY, ResponseSettings
from packages.arctic_fox.errors import forbidden
from packages.arctic_fox.fox import AdoptedCub, ArcticFox, adopt, render, respond
from packages.arctic_fox.http import (
    JSON_MEDIA_TYPE,
    TEXT_MEDIA_TYPE,
    ResponseCollector,
    fox_response,
    media_type_for,
    to_response,
)


def _deny(cub: AdoptedCub[str]) -> AdoptedCub[str]:
    raise forbidden("members only")


def _build_app() -> FastAPI:
    app = FastAPI()

    @app.get("/greeting")
    def greeting() -> Response:
        return fox_response(adopt("hello"))

    @app.get("/secret")
    def secret() -> Response:
        return fox_response(adopt("vault").run(_deny))

    @app.get("/broken")
    def broken() -> Response:
        return fox_response(ArcticFox.live(AdoptedCub(data=object())))

    @app.get("/custom")
    def custom() -> Response:
        return fox_response(adopt(1), settings=ResponseSettings(success_message="Fetched"))

    return app


def test_live_container_returns_json_with_status_200() -> None:
    """A live container should map to a 200 JSON response."""
    client = TestClient(_build_app())

    response = client.get("/greeting")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith(JSON_MEDIA_TYPE)
    assert response.json() == {"data": "hello", "message": "The Request is Successful"}


def test_frozen_container_returns_error_status_and_description() -> None:
    """A frozen container should use its error's status hint and description."""
    client = TestClient(_build_app())

    response = client.get("/secret")

    assert response.status_code == 403
    assert response.json() == {"data": "vault", "message": "Forbidden: members only"}


def test_unserializable_value_returns_plain_fallback() -> None:
    """Fallback bodies should be sent as plain text."""
    client = TestClient(_build_app())

    response = client.get("/broken")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith(TEXT_MEDIA_TYPE)
    assert response.text == DEFAULT_FALLBACK_BODY


def test_settings_override_success_message() -> None:
    """Response settings should control the success message."""
    client = TestClient(_build_app())
    assert client.get("/custom").json()["message"] == "Fetched"


def test_response_collector_captures_respond_output() -> None:
    """ResponseCollector should act as a sink for respond."""
    collector = ResponseCollector()

    rendered = respond(adopt("vault").run(_deny), collector)

    assert collector.response.status_code == 403
    assert collector.response.body == rendered.body
    assert collector.response.media_type == JSON_MEDIA_TYPE


def test_response_collector_without_payload_raises() -> None:
    """Reading an empty collector should fail loudly."""
    with pytest.raises(LookupError):
        ResponseCollector().response


def test_fallback_media_type_matches_across_paths() -> None:
    """The sink path and to_response should label a fallback body identically."""
    fox = ArcticFox.live(AdoptedCub(data=object()))
    collector = ResponseCollector()

    respond(fox, collector)
    direct = to_response(render(fox))

    assert collector.response.media_type == TEXT_MEDIA_TYPE
    assert direct.media_type == TEXT_MEDIA_TYPE
    assert collector.response.body == direct.body


def test_media_type_follows_body_content() -> None:
    """Rendered envelopes are JSON and placeholder text is plain."""
    assert media_type_for(render(adopt(1)).body) == JSON_MEDIA_TYPE
    assert media_type_for(DEFAULT_FALLBACK_BODY.encode("utf-8")) == TEXT_MEDIA_TYPE
    assert media_type_for(b"\xff\xfe") == TEXT_MEDIA_TYPE
