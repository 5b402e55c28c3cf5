"""Configuração centralizada de logging.

Configura logging estruturado JSON com campos obrigatórios
(correlation_id, service, level, logger, message) e nível
configurável por ambiente.

Tokens do Slack nunca entram nos logs: o handler raiz mascara
qualquer token xox*- na mensagem e nos campos extras.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from config.logging.filters import CorrelationIdFilter, SlackTokenRedactionFilter
from config.logging.formatters import create_json_formatter
from config.settings import VALID_LOG_LEVELS

if TYPE_CHECKING:
    from collections.abc import Callable

# Nome padrão do serviço
DEFAULT_SERVICE_NAME = "slack-relay"

# Nível usado quando LOG_LEVEL é inválido
FALLBACK_LOG_LEVEL = "INFO"


def resolve_log_level(level: str) -> str:
    """Normaliza o nível; inválido vira FALLBACK_LOG_LEVEL."""
    level_upper = level.upper()
    return level_upper if level_upper in VALID_LOG_LEVELS else FALLBACK_LOG_LEVEL


def configure_logging(
    level: str = FALLBACK_LOG_LEVEL,
    service_name: str = DEFAULT_SERVICE_NAME,
    correlation_id_getter: Callable[[], str] | None = None,
) -> None:
    """Configura logging JSON estruturado para o serviço.

    Deve ser chamada uma vez na inicialização (app/bootstrap/).
    Nunca levanta por nível inválido: usa INFO e deixa o problema para
    validate_runtime_settings reportar via BaseSettings.validate().

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função opcional que retorna o correlation_id
            do contexto atual (ex: de ContextVar).
    """
    level_resolved = resolve_log_level(level)

    handler = logging.StreamHandler()
    handler.setLevel(level_resolved)
    handler.setFormatter(create_json_formatter())
    handler.addFilter(CorrelationIdFilter(service_name, correlation_id_getter))
    handler.addFilter(SlackTokenRedactionFilter())

    root = logging.getLogger()
    root.setLevel(level_resolved)
    # Substituir handlers existentes para evitar duplicação
    root.handlers = [handler]


def get_logger(name: str) -> logging.Logger:
    """Retorna logger para o módulo especificado.

    O filter injeta automaticamente service e correlation_id.
    """
    return logging.getLogger(name)
