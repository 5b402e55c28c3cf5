"""Modelos do relay Slack."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class OutboundMessage:
    """Mensagem recebida em POST /send-message.

    Imutável após o parse; consumida uma única vez para montar
    exatamente uma chamada ao chat.postMessage. Não é persistida.

    Attributes:
        channel: ID do canal de destino (não vazio)
        message: Texto da mensagem (pode ser vazio)
    """

    channel: str
    message: str
