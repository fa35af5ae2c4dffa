"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (dispatch, webhooks, health)
- Validação inicial de request (headers, corpo)
- Delegação para connectors via app/bootstrap
- Respostas HTTP apropriadas

Estrutura:
- routes/messaging/: POST /api/messaging
- routes/telegram/: webhook inbound do Telegram
- routes/health/: health checks e readiness

Agregação:
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
