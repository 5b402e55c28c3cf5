"""Configuração de logging estruturado.

Re-exporta funções e classes para configuração de logging JSON.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="slack-relay")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("slack_call_done", extra={"endpoint": "users.list"})

Tokens do Slack são mascarados como [SLACK_TOKEN] antes da emissão.

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime
"""

from config.logging.config import (
    FALLBACK_LOG_LEVEL,
    configure_logging,
    get_logger,
    resolve_log_level,
)
from config.logging.filters import (
    SLACK_TOKEN_MASK,
    CorrelationIdFilter,
    SlackTokenRedactionFilter,
    redact_slack_tokens,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FALLBACK_LOG_LEVEL",
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "SLACK_TOKEN_MASK",
    # Filters
    "CorrelationIdFilter",
    "SlackTokenRedactionFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "redact_slack_tokens",
    "resolve_log_level",
]
