"""API — camada de borda: rotas locais e adapter do Slack.

Subpastas:
- connectors/: cliente HTTP, normalizador e erros do upstream
- payload_builders/: construção de payloads para a Slack Web API
- validators/: extração/validação da entrada local
- routes/: endpoints HTTP

NÃO PODE conter: bootstrap, configuração de logging, wiring do app.
"""
