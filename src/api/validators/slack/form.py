"""Extração do form de POST /send-message.

Só verifica presença: `channel` precisa existir e não ser vazio,
`message` precisa existir (pode ser vazio). Falhas viram o 422
padrão do FastAPI.
"""

from __future__ import annotations

from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError

from api.connectors.slack.models import OutboundMessage

REQUIRED_FIELDS = ("channel", "message")


async def read_outbound_message(request: Request) -> OutboundMessage:
    """Dependency FastAPI: lê o form e devolve OutboundMessage.

    Raises:
        RequestValidationError: Campo ausente, vazio (channel) ou não textual.
    """
    form = await request.form()
    values = {name: form.get(name) for name in REQUIRED_FIELDS}

    errors = [
        _missing_field_error(name, value)
        for name, value in values.items()
        if not isinstance(value, str) or (name == "channel" and not value)
    ]
    if errors:
        raise RequestValidationError(errors)

    return OutboundMessage(channel=values["channel"], message=values["message"])


def _missing_field_error(name: str, value: Any) -> dict[str, Any]:
    return {
        "type": "missing",
        "loc": ("body", name),
        "msg": "Field required",
        "input": None if value is None else str(value),
    }
