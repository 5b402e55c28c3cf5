"""Testes da extração do form de POST /send-message."""

from __future__ import annotations

from urllib.parse import urlencode

import pytest
from fastapi.exceptions import RequestValidationError
from starlette.requests import Request

from api.connectors.slack.models import OutboundMessage
from api.validators.slack import read_outbound_message


def _form_request(fields: dict[str, str]) -> Request:
    body = urlencode(fields).encode("utf-8")
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "POST",
        "path": "/send-message",
        "raw_path": b"/send-message",
        "query_string": b"",
        "headers": [
            (b"content-type", b"application/x-www-form-urlencoded"),
            (b"content-length", str(len(body)).encode("ascii")),
        ],
    }
    sent = False

    async def _receive() -> dict[str, object]:
        nonlocal sent
        if sent:
            return {"type": "http.request", "body": b"", "more_body": False}
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, _receive)


@pytest.mark.asyncio
async def test_reads_channel_and_message() -> None:
    message = await read_outbound_message(_form_request({"channel": "C1", "message": "oi"}))

    assert message == OutboundMessage(channel="C1", message="oi")


@pytest.mark.asyncio
async def test_empty_message_is_allowed() -> None:
    message = await read_outbound_message(_form_request({"channel": "C1", "message": ""}))

    assert message.message == ""


@pytest.mark.asyncio
async def test_extra_fields_are_ignored() -> None:
    message = await read_outbound_message(
        _form_request({"channel": "C1", "message": "oi", "as_user": "true"})
    )

    assert message == OutboundMessage(channel="C1", message="oi")


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("fields", "missing"),
    [
        ({"message": "oi"}, ["channel"]),
        ({"channel": "C1"}, ["message"]),
        ({"channel": "", "message": "oi"}, ["channel"]),
        ({}, ["channel", "message"]),
    ],
)
async def test_missing_fields_raise_validation_error(
    fields: dict[str, str], missing: list[str]
) -> None:
    with pytest.raises(RequestValidationError) as exc_info:
        await read_outbound_message(_form_request(fields))

    assert [error["loc"][-1] for error in exc_info.value.errors()] == missing
