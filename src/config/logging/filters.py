"""Filters de logging para injeção de contexto e mascaramento.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: slack-relay)

Mascaramento:
- Tokens do Slack (xoxb-, xoxp-, xoxa-, ...) viram [SLACK_TOKEN]
"""

from __future__ import annotations

import logging
import re
from re import Pattern
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Callable

SLACK_TOKEN_MASK: Final = "[SLACK_TOKEN]"

_SLACK_TOKEN_PATTERN: Final[Pattern[str]] = re.compile(r"\bxox[abeoprs]-[A-Za-z0-9-]+")

# Atributos nativos do LogRecord; o resto veio de `extra`
_RECORD_ATTRIBUTES: Final = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None))
) | {"message", "asctime", "correlation_id", "service"}


def redact_slack_tokens(text: str) -> str:
    """Substitui tokens do Slack por SLACK_TOKEN_MASK.

    Exemplos:
        >>> redact_slack_tokens("Bearer xoxb-123-abc")
        'Bearer [SLACK_TOKEN]'
    """
    if not text:
        return text
    return _SLACK_TOKEN_PATTERN.sub(SLACK_TOKEN_MASK, text)


def _redact_value(value: object) -> object:
    if isinstance(value, str):
        return redact_slack_tokens(value)
    if isinstance(value, (list, tuple)):
        return type(value)(_redact_value(item) for item in value)
    return value


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        Nunca descarta o record.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


class SlackTokenRedactionFilter(logging.Filter):
    """Mascara tokens do Slack na mensagem, nos args e nos extras string.

    Não toca nos atributos nativos do LogRecord. Nunca descarta o record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if isinstance(record.msg, str):
            record.msg = redact_slack_tokens(record.msg)
        if isinstance(record.args, tuple):
            record.args = tuple(_redact_value(arg) for arg in record.args)

        for key, value in list(vars(record).items()):
            if key not in _RECORD_ATTRIBUTES:
                setattr(record, key, _redact_value(value))
        return True
