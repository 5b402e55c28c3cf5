"""Middleware HTTP de correlation_id.

Lê X-Correlation-ID da requisição (ou gera um UUID), mantém no
contexto durante o processamento e devolve no header da resposta.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.observability.correlation import (
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)

if TYPE_CHECKING:
    from collections.abc import Awaitable, Callable

    from fastapi import Request, Response

CORRELATION_HEADER = "X-Correlation-ID"


async def correlation_id_middleware(
    request: Request,
    call_next: Callable[[Request], Awaitable[Response]],
) -> Response:
    """Propaga o correlation_id por requisição."""
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER) or None)
    try:
        response = await call_next(request)
        response.headers[CORRELATION_HEADER] = get_correlation_id()
        return response
    finally:
        reset_correlation_id(token)
