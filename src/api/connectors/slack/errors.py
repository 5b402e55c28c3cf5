"""Taxonomia de erros do relay e resultado normalizado do upstream.

São exatamente três tipos de erro, sem subtipos. Erros de negócio do
Slack (JSON com "ok": false) não fazem parte da taxonomia: chegam ao
chamador como sucesso.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class RelayErrorKind(str, Enum):
    """Falhas detectadas pelo normalizador, uma por estágio."""

    UPSTREAM_UNREACHABLE = "upstream_unreachable"
    BODY_UNREADABLE = "body_unreadable"
    MALFORMED_BODY = "malformed_body"

    @property
    def description(self) -> str:
        """Mensagem legível devolvida ao chamador local."""
        return _DESCRIPTIONS[self]


_DESCRIPTIONS: dict[RelayErrorKind, str] = {
    RelayErrorKind.UPSTREAM_UNREACHABLE: "There was an error in handling the response from Slack",
    RelayErrorKind.BODY_UNREADABLE: "Unable to extract response body",
    RelayErrorKind.MALFORMED_BODY: "Unable to convert body to json",
}


@dataclass(frozen=True, slots=True)
class UpstreamResult:
    """Resultado de uma chamada ao Slack: JSON parseado ou erro.

    Vive apenas durante o ciclo requisição/resposta; nunca é
    compartilhado entre requisições.
    """

    body: Any = None
    error: RelayErrorKind | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, body: Any) -> UpstreamResult:
        return cls(body=body)

    @classmethod
    def failure(cls, kind: RelayErrorKind) -> UpstreamResult:
        return cls(error=kind)
