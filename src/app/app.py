"""Entrypoint da aplicação Slack Relay.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 127.0.0.1 --port 8080

Uso (desenvolvimento):
    slack-relay
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.clients import close_shared_slack_client, create_shared_slack_client
from app.observability import correlation_id_middleware
from config.logging import get_logger
from config.settings import get_base_settings, get_cors_settings, get_server_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from api.connectors.slack.http_client import SlackHttpClient

# Inicializar .env e logging ANTES de qualquer leitura de settings
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações (só loga)
    - Cria o cliente Slack compartilhado, se não foi injetado

    Shutdown:
    - Fecha o pool de conexões do cliente
    """
    service = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service})
    validate_runtime_settings()

    if getattr(app.state, "slack_client", None) is None:
        app.state.slack_client = create_shared_slack_client()

    yield

    logger.info("app_shutting_down", extra={"service": service})
    await close_shared_slack_client(app.state.slack_client)


def create_app(slack_client: SlackHttpClient | None = None) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        slack_client: Cliente já construído (testes). None = criado no lifespan.

    Returns:
        Aplicação FastAPI configurada.
    """
    fastapi_app = FastAPI(
        title="Slack Relay",
        description="Gateway HTTP local para a Slack Web API",
        version="1.0.0",
        lifespan=lifespan,
    )
    fastapi_app.state.slack_client = slack_client

    # Correlation id por requisição (registrado antes do CORS: CORS fica por fora)
    fastapi_app.middleware("http")(correlation_id_middleware)

    cors = get_cors_settings()
    fastapi_app.add_middleware(
        CORSMiddleware,
        allow_origins=list(cors.allow_origins),
        allow_credentials=cors.allow_credentials,
        allow_methods=list(cors.allow_methods),
        allow_headers=list(cors.allow_headers),
        max_age=cors.max_age_seconds,
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": get_base_settings().service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta."""
    import uvicorn

    server = get_server_settings()
    logger.info("Starting Slack Relay", extra={"host": server.host, "port": server.port})
    uvicorn.run(
        "app.app:app",
        host=server.host,
        port=server.port,
        reload=server.reload,
        log_config=None,
    )


if __name__ == "__main__":
    main()
