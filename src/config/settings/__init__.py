"""Agregador de settings do Slack Relay.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# Base settings
from config.settings.base import (
    VALID_LOG_LEVELS,
    BaseSettings,
    Environment,
    get_base_settings,
)

# Servidor e CORS
from config.settings.server import (
    CorsSettings,
    ServerSettings,
    get_cors_settings,
    get_server_settings,
)

# Upstream Slack
from config.settings.slack import (
    FORM_CONTENT_TYPE,
    SLACK_API_BASE_URL,
    SlackSettings,
    get_slack_settings,
)

__all__ = [
    # Constants
    "FORM_CONTENT_TYPE",
    "SLACK_API_BASE_URL",
    "VALID_LOG_LEVELS",
    # Base
    "BaseSettings",
    # Servidor
    "CorsSettings",
    "Environment",
    "ServerSettings",
    # Slack
    "SlackSettings",
    "get_base_settings",
    "get_cors_settings",
    "get_server_settings",
    "get_slack_settings",
]
