"""Rotas HTTP da API — adapters de entrada.

Responsabilidades:
- Definir endpoints HTTP (relay Inter, health)
- Validação inicial de request (headers, corpo)
- Delegação para o gateway (app/services)
- Tradução de erros em respostas HTTP

Estrutura:
- routes/inter/: token OAuth e cobranças
- routes/health/: health checks e readiness
- router.py: registra todos os routers no app principal
"""

from __future__ import annotations

from api.routes.router import create_api_router

__all__ = ["create_api_router"]
