"""Agregador de rotas — registra health e os endpoints do Inter.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.inter.router import router as inter_router


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks na raiz (/health, /ready)
    api_router.include_router(health_router, tags=["health"])

    # Inter: /oauth/token, /auth/token, /cobrancas, /cobrancas/{id}/pdf
    api_router.include_router(inter_router, tags=["inter"])

    return api_router
