"""Normalizador de respostas do Slack.

Converte a tentativa de chamada ao upstream em UpstreamResult, em três
estágios independentes:

1. transporte: a chamada não completou → UPSTREAM_UNREACHABLE
2. leitura: o corpo não pôde ser lido como texto → BODY_UNREADABLE
3. parse: o texto não é JSON → MALFORMED_BODY

NaN e Infinity não são JSON: o parse os rejeita, e o corpo vira
MALFORMED_BODY em vez de quebrar a serialização da resposta local.

JSON válido volta como está, qualquer que seja o formato, inclusive
{"ok": false, "error": "..."} do próprio Slack.
"""

from __future__ import annotations

import json
import logging
import time
from typing import TYPE_CHECKING

import httpx

from api.connectors.slack.errors import RelayErrorKind, UpstreamResult
from app.observability import record_latency, record_relay_outcome

if TYPE_CHECKING:
    from collections.abc import Awaitable

logger = logging.getLogger(__name__)


async def normalize_upstream_response(
    attempt: Awaitable[httpx.Response],
    *,
    endpoint: str,
) -> UpstreamResult:
    """Aguarda a chamada ao Slack e normaliza o desfecho.

    Args:
        attempt: Awaitable da chamada (ex: client.get(url)), ainda não aguardado
        endpoint: Método da Web API, apenas para logs e métricas

    Returns:
        UpstreamResult com o JSON parseado ou o tipo de erro.
    """
    started_at = time.perf_counter()
    try:
        response = await attempt
    except (httpx.HTTPError, httpx.InvalidURL) as exc:
        _record_elapsed(endpoint, started_at)
        logger.warning(
            "slack_upstream_unreachable",
            extra={"endpoint": endpoint, "error_type": type(exc).__name__, "error": str(exc)},
        )
        return _finish(endpoint, UpstreamResult.failure(RelayErrorKind.UPSTREAM_UNREACHABLE))

    try:
        text = await _read_text(response, endpoint)
    finally:
        await response.aclose()
        _record_elapsed(endpoint, started_at)

    if text is None:
        return _finish(endpoint, UpstreamResult.failure(RelayErrorKind.BODY_UNREADABLE))

    try:
        body = json.loads(text, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as exc:
        logger.warning(
            "slack_malformed_body",
            extra={
                "endpoint": endpoint,
                "status_code": response.status_code,
                "error_type": type(exc).__name__,
                "error": str(exc),
            },
        )
        return _finish(endpoint, UpstreamResult.failure(RelayErrorKind.MALFORMED_BODY))

    return _finish(endpoint, UpstreamResult.success(body))


async def _read_text(response: httpx.Response, endpoint: str) -> str | None:
    """Lê o corpo inteiro e decodifica como texto. None se falhar."""
    try:
        await response.aread()
        return response.text
    except (httpx.HTTPError, httpx.StreamError, UnicodeDecodeError, LookupError) as exc:
        logger.warning(
            "slack_body_unreadable",
            extra={
                "endpoint": endpoint,
                "status_code": response.status_code,
                "error_type": type(exc).__name__,
            },
        )
        return None


def _reject_constant(constant: str) -> None:
    raise ValueError(f"constante fora do JSON: {constant}")


def _record_elapsed(endpoint: str, started_at: float) -> None:
    record_latency("slack", endpoint, (time.perf_counter() - started_at) * 1000)


def _finish(endpoint: str, result: UpstreamResult) -> UpstreamResult:
    record_relay_outcome(endpoint, "ok" if result.ok else result.error.value)
    return result
