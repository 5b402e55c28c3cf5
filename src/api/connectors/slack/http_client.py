"""Cliente HTTP compartilhado para a Slack Web API.

Um único httpx.AsyncClient é criado na inicialização com os headers
padrão (Content-Type form-urlencoded e Authorization) e compartilhado
por todos os handlers concorrentes.

Invariante: nada neste cliente é mutado depois do __init__. Por isso
não há lock; headers por chamada são passados na requisição e nunca
gravados no cliente. Não introduzir setters nem alterar
`self._client.headers` em runtime.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING

import httpx

from config.settings import FORM_CONTENT_TYPE

if TYPE_CHECKING:
    from collections.abc import Mapping

    from config.settings import SlackSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SlackClientConfig:
    """Configuração imutável do cliente Slack.

    Attributes:
        authorization: Valor completo do header Authorization (pode ser vazio)
        timeout_seconds: Timeout de transporte aplicado a cada chamada
    """

    authorization: str = ""
    timeout_seconds: float = 30.0

    @property
    def default_headers(self) -> dict[str, str]:
        """Os dois headers fixos enviados em toda chamada."""
        return {
            "Content-Type": FORM_CONTENT_TYPE,
            "Authorization": self.authorization,
        }


class SlackHttpClient:
    """Cliente HTTP somente-leitura após a construção.

    Sem retries: cada método emite exatamente uma requisição. As
    respostas voltam em modo streaming; quem lê o corpo é o
    normalizador (api.connectors.slack.normalizer).
    """

    def __init__(
        self,
        config: SlackClientConfig | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Inicializa o cliente.

        Args:
            config: Headers e timeout. Default: token vazio, 30s.
            transport: Transport httpx alternativo (ex: MockTransport em testes).
        """
        self._config = config or SlackClientConfig()
        self._default_headers = MappingProxyType(self._config.default_headers)
        self._client = httpx.AsyncClient(
            headers=dict(self._default_headers),
            timeout=self._config.timeout_seconds,
            transport=transport,
        )

    @property
    def default_headers(self) -> Mapping[str, str]:
        """Headers padrão (view somente-leitura)."""
        return self._default_headers

    @property
    def is_closed(self) -> bool:
        return self._client.is_closed

    async def get(
        self,
        url: str,
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Emite GET com os headers padrão (sobrescritos por `headers`)."""
        request = self._client.build_request("GET", url, headers=headers)
        return await self._client.send(request, stream=True)

    async def post_form(
        self,
        url: str,
        data: Mapping[str, str],
        headers: dict[str, str] | None = None,
    ) -> httpx.Response:
        """Emite POST form-urlencoded com os headers padrão."""
        request = self._client.build_request("POST", url, data=dict(data), headers=headers)
        return await self._client.send(request, stream=True)

    async def aclose(self) -> None:
        """Fecha o pool de conexões (shutdown)."""
        await self._client.aclose()


def create_slack_http_client(
    settings: SlackSettings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> SlackHttpClient:
    """Factory para criar o cliente Slack a partir das settings.

    Token ausente não impede o boot: o header Authorization vai vazio e
    o Slack recusa as chamadas (erro embutido no JSON da resposta).

    Args:
        settings: SlackSettings opcional. Se None, carrega do ambiente.
        transport: Transport httpx alternativo.

    Returns:
        Cliente configurado, pronto para compartilhamento.
    """
    from config.settings import get_slack_settings

    slack = settings or get_slack_settings()
    if not slack.bot_token:
        logger.warning("slack_bot_token_missing", extra={"component": "slack_client"})

    config = SlackClientConfig(
        authorization=slack.authorization_header,
        timeout_seconds=slack.request_timeout_seconds,
    )
    return SlackHttpClient(config=config, transport=transport)
