"""Payload builders por canal — construção de payloads para APIs externas.

Estrutura:
- slack/: Slack Web API (chat.postMessage)
"""

__all__: list[str] = []
