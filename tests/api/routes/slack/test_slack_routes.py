"""Testes end-to-end do relay: app local → cliente compartilhado → Slack falso."""

from __future__ import annotations

import asyncio

import httpx
import pytest

from app.app import create_app
from tests.fakes.fake_slack import (
    BrokenStream,
    FakeSlackUpstream,
    form_fields,
    raise_connect_error,
)


@pytest.fixture(autouse=True)
def _default_slack_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("SLACK_API_BASE_URL", raising=False)


async def _call(upstream: FakeSlackUpstream, method: str, path: str, **kwargs) -> httpx.Response:
    slack_client = upstream.client()
    app = create_app(slack_client=slack_client)
    transport = httpx.ASGITransport(app=app)
    try:
        async with httpx.AsyncClient(transport=transport, base_url="http://relay.local") as local:
            return await local.request(method, path, **kwargs)
    finally:
        await slack_client.aclose()


# ──────────────────────────────────────────────────────────────────────────────
# POST /send-message
# ──────────────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_send_message_posts_channel_and_text_once() -> None:
    upstream = FakeSlackUpstream(lambda r: httpx.Response(200, json={"ok": True, "ts": "1.2"}))

    response = await _call(
        upstream, "POST", "/send-message", data={"channel": "C123", "message": "hello"}
    )

    assert response.status_code == 200
    assert response.json() == {"ok": True, "ts": "1.2"}
    [request] = upstream.requests
    assert request.method == "POST"
    assert str(request.url) == "https://slack.com/api/chat.postMessage"
    assert form_fields(request) == {"channel": ["C123"], "text": ["hello"]}
    assert request.headers["authorization"] == "Bearer xoxb-test"
    assert request.headers["content-type"] == "application/x-www-form-urlencoded"


@pytest.mark.asyncio
async def test_send_message_forwards_empty_message_and_drops_extra_fields() -> None:
    upstream = FakeSlackUpstream()

    response = await _call(
        upstream,
        "POST",
        "/send-message",
        data={"channel": "C1", "message": "", "icon_emoji": ":x:"},
    )

    assert response.status_code == 200
    assert form_fields(upstream.requests[0]) == {"channel": ["C1"], "text": [""]}


@pytest.mark.asyncio
async def test_send_message_without_channel_is_rejected_before_upstream() -> None:
    upstream = FakeSlackUpstream()

    response = await _call(upstream, "POST", "/send-message", data={"message": "hello"})

    assert response.status_code == 422
    assert upstream.requests == []


# ──────────────────────────────────────────────────────────────────────────────
# GET /users
# ──────────────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_list_users_returns_upstream_json_unmodified() -> None:
    payload = {"ok": True, "user": []}
    upstream = FakeSlackUpstream(lambda r: httpx.Response(200, json=payload))

    response = await _call(upstream, "GET", "/users")

    assert response.status_code == 200
    assert response.json() == payload
    [request] = upstream.requests
    assert request.method == "GET"
    assert str(request.url) == "https://slack.com/api/users.list"


@pytest.mark.asyncio
async def test_list_users_passes_through_ok_false() -> None:
    payload = {"ok": False, "error": "invalid_auth"}
    upstream = FakeSlackUpstream(lambda r: httpx.Response(200, json=payload))

    response = await _call(upstream, "GET", "/users")

    assert response.status_code == 200
    assert response.json() == payload


# ──────────────────────────────────────────────────────────────────────────────
# GET /conversations/{channel_id}
# ──────────────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_conversation_info_passes_channel_in_query() -> None:
    upstream = FakeSlackUpstream(lambda r: httpx.Response(200, json={"ok": True}))

    response = await _call(upstream, "GET", "/conversations/C123")

    assert response.status_code == 200
    [request] = upstream.requests
    assert request.url.path == "/api/conversations.info"
    assert request.url.query == b"channel=C123"


@pytest.mark.asyncio
async def test_conversation_info_interpolates_channel_id_without_escaping() -> None:
    """Documenta o comportamento atual: o id não é escapado.

    Um "&" no id vira um segundo parâmetro na query enviada ao Slack.
    """
    upstream = FakeSlackUpstream()

    await _call(upstream, "GET", "/conversations/C1%26limit%3D5")

    params = upstream.requests[0].url.params
    assert params["channel"] == "C1"
    assert params["limit"] == "5"


@pytest.mark.asyncio
async def test_conversation_info_space_reaches_query_raw() -> None:
    upstream = FakeSlackUpstream()

    await _call(upstream, "GET", "/conversations/C%201")

    assert upstream.requests[0].url.params["channel"] == "C 1"


# ──────────────────────────────────────────────────────────────────────────────
# Erros normalizados
# ──────────────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("method", "path", "kwargs"),
    [
        ("POST", "/send-message", {"data": {"channel": "C1", "message": "m"}}),
        ("GET", "/users", {}),
        ("GET", "/conversations/C1", {}),
    ],
)
async def test_transport_failure_returns_500_without_retry(
    method: str, path: str, kwargs: dict
) -> None:
    upstream = FakeSlackUpstream(raise_connect_error)

    response = await _call(upstream, method, path, **kwargs)

    assert response.status_code == 500
    assert response.headers["content-type"].startswith("text/plain")
    assert response.text == "There was an error in handling the response from Slack"
    assert len(upstream.requests) == 1


@pytest.mark.asyncio
async def test_non_json_body_returns_malformed_body_message() -> None:
    upstream = FakeSlackUpstream(lambda r: httpx.Response(200, text="not json"))

    response = await _call(upstream, "GET", "/users")

    assert response.status_code == 500
    assert response.text == "Unable to convert body to json"


@pytest.mark.asyncio
@pytest.mark.parametrize("constant", ["NaN", "Infinity", "-Infinity"])
async def test_non_standard_json_constant_returns_malformed_body_with_cors(
    constant: str,
) -> None:
    upstream = FakeSlackUpstream(
        lambda r: httpx.Response(
            200,
            text=f'{{"ok": true, "score": {constant}}}',
            headers={"Content-Type": "application/json"},
        )
    )

    response = await _call(upstream, "GET", "/users", headers={"Origin": "http://localhost:3000"})

    assert response.status_code == 500
    assert response.text == "Unable to convert body to json"
    assert response.headers["access-control-allow-origin"] == "*"


@pytest.mark.asyncio
async def test_unreadable_body_returns_body_unreadable_message() -> None:
    upstream = FakeSlackUpstream(lambda r: httpx.Response(200, stream=BrokenStream()))

    response = await _call(upstream, "GET", "/conversations/C1")

    assert response.status_code == 500
    assert response.text == "Unable to extract response body"


# ──────────────────────────────────────────────────────────────────────────────
# Concorrência
# ──────────────────────────────────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_two_handlers_share_one_client_concurrently() -> None:
    """Ambas as requisições ficam em voo ao mesmo tempo no mesmo cliente."""
    both_in_flight = asyncio.Event()
    in_flight = 0

    async def handler(request: httpx.Request) -> httpx.Response:
        nonlocal in_flight
        in_flight += 1
        if in_flight == 2:
            both_in_flight.set()
        await asyncio.wait_for(both_in_flight.wait(), timeout=2.0)
        payload = {"path": request.url.path, "query": request.url.query.decode()}
        return httpx.Response(200, json=payload)

    upstream = FakeSlackUpstream(handler)
    slack_client = upstream.client()
    app = create_app(slack_client=slack_client)
    headers_before = dict(slack_client.default_headers)

    async with httpx.AsyncClient(
        transport=httpx.ASGITransport(app=app), base_url="http://relay.local"
    ) as local:
        users, conversation = await asyncio.gather(
            local.get("/users"),
            local.get("/conversations/C7"),
        )
    await slack_client.aclose()

    assert users.json() == {"path": "/api/users.list", "query": ""}
    assert conversation.json() == {"path": "/api/conversations.info", "query": "channel=C7"}
    assert len(upstream.requests) == 2
    assert dict(slack_client.default_headers) == headers_before
