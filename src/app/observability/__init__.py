"""Observabilidade — correlation_id, métricas via logs estruturados.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
    from app.observability import record_latency, record_relay_outcome
"""

from app.observability.correlation import (
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import record_latency, record_relay_outcome
from app.observability.middleware import CORRELATION_HEADER, correlation_id_middleware

__all__ = [
    "CORRELATION_HEADER",
    "correlation_id_middleware",
    "generate_correlation_id",
    "get_correlation_id",
    "record_latency",
    "record_relay_outcome",
    "reset_correlation_id",
    "set_correlation_id",
]
