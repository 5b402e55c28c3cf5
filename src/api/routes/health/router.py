"""Endpoints de health check e readiness."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings, get_slack_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "degraded", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.error}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness probe — verifica se o serviço está rodando."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe.

    Não chama o Slack: só confere que o cliente compartilhado existe e
    se há token configurado. Token vazio é "degraded", não bloqueia.
    """
    client_check = _check_slack_client(getattr(request.app.state, "slack_client", None))
    token_check = _check_slack_token()
    ready = client_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {
            "slack_client": client_check.as_dict(),
            "slack_token": token_check.as_dict(),
        },
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_slack_client(slack_client: Any | None) -> DependencyCheck:
    if slack_client is None:
        return DependencyCheck(status="failed", error="not_configured")
    if getattr(slack_client, "is_closed", False):
        return DependencyCheck(status="failed", error="closed")
    return DependencyCheck(status="ok")


def _check_slack_token() -> DependencyCheck:
    if not get_slack_settings().bot_token:
        return DependencyCheck(status="degraded", error="not_configured")
    return DependencyCheck(status="ok")
