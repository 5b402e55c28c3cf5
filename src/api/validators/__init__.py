"""Validators por canal — validação das entradas recebidas do chamador local.

Estrutura:
- slack/: form do POST /send-message
"""

__all__: list[str] = []
