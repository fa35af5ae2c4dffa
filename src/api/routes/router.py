"""Agregador de rotas — registra todos os routers.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.messaging.router import router as messaging_router
from api.routes.telegram.webhook import router as telegram_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Dispatch interno (POST /api/messaging)
    api_router.include_router(messaging_router, tags=["messaging"])

    # Webhooks inbound
    api_router.include_router(telegram_router, tags=["telegram"])

    return api_router
