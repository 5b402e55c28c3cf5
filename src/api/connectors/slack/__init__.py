"""Connector Slack — cliente compartilhado, normalizador e erros.

Uso:
    from api.connectors.slack import normalize_upstream_response

    result = await normalize_upstream_response(
        client.get(settings.users_list_url),
        endpoint="users.list",
    )
"""

from api.connectors.slack.errors import RelayErrorKind, UpstreamResult
from api.connectors.slack.http_client import (
    SlackClientConfig,
    SlackHttpClient,
    create_slack_http_client,
)
from api.connectors.slack.models import OutboundMessage
from api.connectors.slack.normalizer import normalize_upstream_response

__all__ = [
    "OutboundMessage",
    "RelayErrorKind",
    "SlackClientConfig",
    "SlackHttpClient",
    "UpstreamResult",
    "create_slack_http_client",
    "normalize_upstream_response",
]
