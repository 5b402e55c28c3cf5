"""Correlation_id por requisição.

Guardado em ContextVar: cada requisição concorrente enxerga o próprio
valor, e o filter de logging o injeta em todo record.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

_correlation_id: ContextVar[str] = ContextVar("slack_relay_correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id ativo ou string vazia."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID recebido no header. None gera um UUID v4.

    Returns:
        Token para reset_correlation_id().
    """
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o valor anterior ao set correspondente."""
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return str(uuid.uuid4())
