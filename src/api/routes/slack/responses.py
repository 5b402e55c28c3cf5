"""Mapeamento UpstreamResult → resposta HTTP.

Único ponto que decide status de erro do relay: os três tipos de erro
saem como 500 em texto puro, diferenciados apenas pela mensagem.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import status
from fastapi.responses import JSONResponse, PlainTextResponse, Response

if TYPE_CHECKING:
    from api.connectors.slack.errors import RelayErrorKind, UpstreamResult

RELAY_ERROR_STATUS = status.HTTP_500_INTERNAL_SERVER_ERROR


def relay_response(result: UpstreamResult) -> Response:
    """Converte o resultado normalizado na resposta ao chamador local."""
    if result.error is not None:
        return relay_error_response(result.error)
    return JSONResponse(content=result.body)


def relay_error_response(kind: RelayErrorKind) -> PlainTextResponse:
    return PlainTextResponse(kind.description, status_code=RELAY_ERROR_STATUS)
