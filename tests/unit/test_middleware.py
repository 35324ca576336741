"""Raw ASGI middleware tests (timeout, request id) and viewer resolution."""

import asyncio
from types import SimpleNamespace

from httpx import ASGITransport, AsyncClient

from gallery.api.v1.dependencies import Viewer, get_viewer
from gallery.middleware import RequestIDMiddleware, TimeoutMiddleware
from gallery.middleware.request_id import sanitize_request_id


def _app(delay: float):
    async def app(scope, receive, send) -> None:
        await asyncio.sleep(delay)
        await send({"type": "http.response.start", "status": 200, "headers": []})
        await send({"type": "http.response.body", "body": b"done"})

    return app


async def _get(app, headers=None):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        return await ac.get("/slow", headers=headers)


async def test_timeout_returns_504_json() -> None:
    response = await _get(TimeoutMiddleware(_app(1.0), timeout_seconds=0.01))
    assert response.status_code == 504
    assert response.json()["error"] == "GATEWAY_TIMEOUT"


async def test_fast_request_passes_through_timeout() -> None:
    response = await _get(TimeoutMiddleware(_app(0), timeout_seconds=5))
    assert response.status_code == 200
    assert response.text == "done"


async def test_request_id_generated_when_missing() -> None:
    response = await _get(RequestIDMiddleware(_app(0)))
    assert len(response.headers["x-request-id"]) == 36


def test_sanitize_request_id() -> None:
    assert sanitize_request_id("req_42-a") == "req_42-a"
    assert sanitize_request_id("a" * 65) != "a" * 65
    assert sanitize_request_id(None)


def test_viewer_defaults_to_anonymous() -> None:
    request = SimpleNamespace(state=SimpleNamespace())
    viewer = get_viewer(request)
    assert viewer == Viewer.anonymous()
    assert not viewer.is_authenticated
    assert viewer.roles == frozenset()


def test_viewer_from_request_state() -> None:
    signed_in = Viewer(roles=frozenset({"editors"}), is_authenticated=True)
    request = SimpleNamespace(state=SimpleNamespace(viewer=signed_in))
    assert get_viewer(request) is signed_in
