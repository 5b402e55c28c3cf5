"""Rotas HTTP da API.

Responsabilidades:
- Definir endpoints HTTP (relay Slack, health)
- Extração inicial da entrada (form, path)
- Delegação para connectors
- Respostas HTTP apropriadas

Estrutura:
- routes/slack/: relay para a Slack Web API
- routes/health/: health checks e readiness
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
