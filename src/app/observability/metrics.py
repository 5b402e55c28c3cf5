"""Registro de métricas via structured logging.

As métricas são logs estruturados, agregáveis depois pelo coletor
de logs (Cloud Logging, Loki, CloudWatch Insights).

Métricas suportadas:
- Latência: tempo de cada chamada ao upstream Slack
- Resultado do relay: counter por endpoint e outcome

Uso:
    from app.observability import record_latency, record_relay_outcome

    start = time.perf_counter()
    # ... chamada ...
    record_latency("slack", "users.list", (time.perf_counter() - start) * 1000)
    record_relay_outcome("users.list", "ok")
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "slack")
        operation: Nome da operação (ex: "chat.postMessage")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação; None usa o do contexto
    """
    extra: dict[str, object] = {
        "metric_type": "latency",
        "component": component,
        "operation": operation,
        "latency_ms": round(latency_ms, 2),
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_latency", extra=extra)


def record_relay_outcome(
    endpoint: str,
    outcome: str,
    correlation_id: str | None = None,
) -> None:
    """Registra o desfecho de um relay.

    Args:
        endpoint: Método da Slack Web API (ex: "users.list")
        outcome: "ok" ou o valor de RelayErrorKind
        correlation_id: ID de correlação; None usa o do contexto
    """
    extra: dict[str, object] = {
        "metric_type": "relay_outcome",
        "component": "slack",
        "endpoint": endpoint,
        "outcome": outcome,
    }
    if correlation_id:
        extra["correlation_id"] = correlation_id
    logger.info("metric_relay_outcome", extra=extra)
