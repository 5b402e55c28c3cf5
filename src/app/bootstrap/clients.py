"""Factory do cliente externo compartilhado (Slack).

O cliente é criado uma vez no lifespan e guardado em
app.state.slack_client; todos os handlers recebem a mesma instância.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from api.connectors.slack.http_client import create_slack_http_client

if TYPE_CHECKING:
    from api.connectors.slack.http_client import SlackHttpClient

logger = logging.getLogger(__name__)


def create_shared_slack_client() -> SlackHttpClient:
    """Cria o cliente Slack do processo.

    Returns:
        SlackHttpClient com headers padrão do ambiente.
    """
    client = create_slack_http_client()
    token_configured = bool(client.default_headers["Authorization"])
    logger.info(
        "slack_client_created",
        extra={"component": "bootstrap", "token_configured": token_configured},
    )
    return client


async def close_shared_slack_client(client: SlackHttpClient | None) -> None:
    """Fecha o cliente no shutdown (idempotente)."""
    if client is None or client.is_closed:
        return
    await client.aclose()
    logger.info("slack_client_closed", extra={"component": "bootstrap"})
