"""Builder do form do chat.postMessage."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from api.connectors.slack.models import OutboundMessage


def build_post_message_form(message: OutboundMessage) -> dict[str, str]:
    """Constrói o corpo form-urlencoded do chat.postMessage.

    Apenas as chaves `channel` e `text`; nenhum outro campo é enviado.

    Args:
        message: Mensagem recebida do chamador local

    Returns:
        Dict pronto para SlackHttpClient.post_form
    """
    return {
        "channel": message.channel,
        "text": message.message,
    }
