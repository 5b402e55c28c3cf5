"""Endpoints do relay Slack.

Endpoints:
- POST /send-message: chat.postMessage (form channel/message)
- GET /users: users.list
- GET /conversations/{channel_id}: conversations.info

Cada handler monta uma única chamada ao Slack pelo cliente
compartilhado, entrega a tentativa ao normalizador e devolve o
resultado. Sem retries e sem recuperação local de erros.
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from api.connectors.slack.http_client import SlackHttpClient
from api.connectors.slack.models import OutboundMessage
from api.connectors.slack.normalizer import normalize_upstream_response
from api.payload_builders.slack import build_post_message_form
from api.routes.slack.dependencies import get_slack_client
from api.routes.slack.responses import relay_response
from api.validators.slack import read_outbound_message
from config.settings import get_slack_settings
from config.settings.slack import (
    CONVERSATIONS_INFO_METHOD,
    POST_MESSAGE_METHOD,
    USERS_LIST_METHOD,
)

logger = logging.getLogger(__name__)

router = APIRouter()

SlackClient = Annotated[SlackHttpClient, Depends(get_slack_client)]


@router.post("/send-message", response_class=Response)
async def send_message(
    message: Annotated[OutboundMessage, Depends(read_outbound_message)],
    client: SlackClient,
) -> Response:
    """Envia mensagem para um canal via chat.postMessage."""
    logger.debug("slack_send_message", extra={"message_length": len(message.message)})
    url = get_slack_settings().post_message_url
    result = await normalize_upstream_response(
        client.post_form(url, build_post_message_form(message)),
        endpoint=POST_MESSAGE_METHOD,
    )
    return relay_response(result)


@router.get("/users", response_class=Response)
async def list_users(client: SlackClient) -> Response:
    """Lista usuários do workspace via users.list."""
    url = get_slack_settings().users_list_url
    result = await normalize_upstream_response(client.get(url), endpoint=USERS_LIST_METHOD)
    return relay_response(result)


@router.get("/conversations/{channel_id}", response_class=Response)
async def get_conversation_info(channel_id: str, client: SlackClient) -> Response:
    """Metadados de um canal via conversations.info.

    O channel_id vai interpolado na query sem escaping.
    """
    url = get_slack_settings().conversation_info_url(channel_id)
    result = await normalize_upstream_response(
        client.get(url),
        endpoint=CONVERSATIONS_INFO_METHOD,
    )
    return relay_response(result)
