"""App — composition root do serviço.

Subpastas:
- bootstrap/: inicialização, validação de settings e factory do cliente Slack
- observability/: correlation_id e métricas via logs estruturados
- app.py: aplicação FastAPI e entrypoint uvicorn

Padrão: app monta; api adapta; config configura.
"""
