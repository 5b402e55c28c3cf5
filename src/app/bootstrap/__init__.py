"""Bootstrap da aplicação — inicialização e wiring.

Composition root: carrega .env, configura logging e valida settings.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging

from dotenv import find_dotenv, load_dotenv

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_base_settings,
    get_server_settings,
    get_slack_settings,
)

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação.

    Deve ser chamada uma vez, antes de ler qualquer setting: o .env
    precisa estar carregado quando as settings cacheadas são criadas.
    Variáveis já presentes no ambiente têm precedência sobre o .env.
    """
    load_dotenv(find_dotenv(usecwd=True), override=False)
    base = get_base_settings()

    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def initialize_test_app() -> None:
    """Inicializa logging em DEBUG para testes (sem .env)."""
    configure_logging(
        level="DEBUG",
        service_name="slack-relay_test",
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> list[str]:
    """Valida settings no startup e loga o resultado.

    Nunca levanta: BOT_TOKEN ausente é tolerado em qualquer ambiente,
    e o erro aparece nas chamadas ao Slack, não no boot.

    Returns:
        Lista de problemas encontrados (vazia = OK).
    """
    base = get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"slack: {error}" for error in get_slack_settings().validate())
    errors.extend(f"server: {error}" for error in get_server_settings().validate())

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    return errors
