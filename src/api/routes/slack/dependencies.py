"""Dependencies FastAPI das rotas Slack."""

from __future__ import annotations

from fastapi import Request

from api.connectors.slack.http_client import SlackHttpClient


def get_slack_client(request: Request) -> SlackHttpClient:
    """Retorna o cliente Slack compartilhado (app.state.slack_client).

    O mesmo objeto é entregue a todos os handlers concorrentes; ele é
    somente-leitura, então nenhum handler deve alterá-lo.

    Raises:
        RuntimeError: Se o lifespan não criou o cliente.
    """
    client = getattr(request.app.state, "slack_client", None)
    if client is None:
        raise RuntimeError("slack_client não inicializado (lifespan não executado?)")
    return client
