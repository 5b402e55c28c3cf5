"""Settings do servidor HTTP local e da política de CORS."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


@dataclass(frozen=True)
class ServerSettings:
    """Bind do servidor uvicorn.

    Attributes:
        host: Interface de escuta
        port: Porta TCP
        reload: Auto-reload (apenas desenvolvimento)
    """

    host: str = "127.0.0.1"
    port: int = 8080
    reload: bool = False

    def validate(self) -> list[str]:
        errors: list[str] = []
        if not 0 < self.port < 65536:
            errors.append(f"PORT inválida: {self.port}")
        return errors


@dataclass(frozen=True)
class CorsSettings:
    """Política de CORS fixa, aplicada a todas as rotas."""

    allow_origins: tuple[str, ...] = ("*",)
    allow_methods: tuple[str, ...] = ("GET", "POST", "PUT", "DELETE")
    allow_headers: tuple[str, ...] = ("Authorization", "Accept", "Content-Type")
    allow_credentials: bool = False
    max_age_seconds: int = 3600


def _load_server_from_env() -> ServerSettings:
    """Carrega ServerSettings de variáveis de ambiente."""
    return ServerSettings(
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8080")),
        reload=os.getenv("RELOAD", "").lower() in ("true", "1", "yes"),
    )


@lru_cache(maxsize=1)
def get_server_settings() -> ServerSettings:
    """Retorna instância cacheada de ServerSettings."""
    return _load_server_from_env()


@lru_cache(maxsize=1)
def get_cors_settings() -> CorsSettings:
    """Retorna a política de CORS do processo."""
    return CorsSettings()
