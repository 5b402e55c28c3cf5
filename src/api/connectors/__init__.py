"""Connectors — adapters de borda para APIs externas.

Estrutura:
- slack/: Slack Web API (chat.postMessage, users.list, conversations.info)
"""

__all__: list[str] = []
