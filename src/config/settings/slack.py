"""Settings específicas do Slack.

Configurações do upstream Slack Web API: token do bot, URL base e
endpoints usados pelo relay.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

# Constantes da Slack Web API
SLACK_API_BASE_URL: str = "https://slack.com/api"
POST_MESSAGE_METHOD: str = "chat.postMessage"
USERS_LIST_METHOD: str = "users.list"
CONVERSATIONS_INFO_METHOD: str = "conversations.info"

FORM_CONTENT_TYPE: str = "application/x-www-form-urlencoded"


@dataclass(frozen=True)
class SlackSettings:
    """Configurações do upstream Slack.

    Attributes:
        bot_token: Token do bot (BOT_TOKEN). Vazio é tolerado no boot;
            o Slack recusa as chamadas em runtime.
        api_base_url: URL base da Web API
        request_timeout_seconds: Timeout de transporte por requisição
    """

    bot_token: str = ""
    api_base_url: str = SLACK_API_BASE_URL
    request_timeout_seconds: float = 30.0

    @property
    def authorization_header(self) -> str:
        """Valor do header Authorization.

        Token vazio gera header vazio. Token com esquema já presente
        (ex: "Bearer xoxb-...") é usado como está.
        """
        token = self.bot_token.strip()
        if not token:
            return ""
        if " " in token:
            return token
        return f"Bearer {token}"

    @property
    def post_message_url(self) -> str:
        """URL do chat.postMessage."""
        return f"{self.api_base_url}/{POST_MESSAGE_METHOD}"

    @property
    def users_list_url(self) -> str:
        """URL do users.list."""
        return f"{self.api_base_url}/{USERS_LIST_METHOD}"

    def conversation_info_url(self, channel_id: str) -> str:
        """URL do conversations.info para o canal.

        O channel_id é interpolado sem escaping: caracteres reservados
        (espaço, "&", "#") chegam crus na query string.
        """
        return f"{self.api_base_url}/{CONVERSATIONS_INFO_METHOD}?channel={channel_id}"

    def validate(self) -> list[str]:
        """Valida configurações mínimas do Slack.

        Returns:
            Lista de erros de validação (vazia = tudo OK).
        """
        errors: list[str] = []

        if not self.bot_token:
            errors.append("BOT_TOKEN não configurado")

        if not self.api_base_url.startswith(("http://", "https://")):
            errors.append("SLACK_API_BASE_URL deve ser uma URL http(s)")

        if self.request_timeout_seconds <= 0:
            errors.append("SLACK_REQUEST_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_from_env() -> SlackSettings:
    """Carrega SlackSettings a partir de variáveis de ambiente."""
    return SlackSettings(
        bot_token=os.getenv("BOT_TOKEN", ""),
        api_base_url=os.getenv("SLACK_API_BASE_URL", SLACK_API_BASE_URL).rstrip("/"),
        request_timeout_seconds=float(os.getenv("SLACK_REQUEST_TIMEOUT_SECONDS", "30")),
    )


@lru_cache(maxsize=1)
def get_slack_settings() -> SlackSettings:
    """Retorna instância cacheada de SlackSettings.

    A cache garante singleton para múltiplas injeções.
    """
    return _load_from_env()
