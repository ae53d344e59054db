"""Entrypoint do Inter Bridge.

Expõe a aplicação ASGI (FastAPI) que recebe requests locais e os repassa,
via mTLS, para a API do Banco Inter.

Uso (produção):
    inter-bridge                      # valida config, sobe na PORT (3000)
    uvicorn app.app:app --port 3000   # config inválida aborta o startup

Uso (desenvolvimento):
    uvicorn app.app:app --reload --port 3000
"""

from __future__ import annotations

import sys
from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import build_gateway, initialize_app
from app.observability import CorrelationIdMiddleware
from config.logging import get_logger
from config.settings import get_base_settings
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

    from app.services import InterGateway
    from config.settings import InterSettings

# Inicializar logging ANTES de qualquer log
initialize_app()

logger = get_logger(__name__)


def create_app(
    inter_settings: InterSettings | None = None,
    gateway: InterGateway | None = None,
) -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    Args:
        inter_settings: Settings do Inter; se None, carregadas do ambiente
        gateway: Gateway já construído (testes / main). Se None, é
            construído no startup e qualquer erro de configuração
            impede o servidor de aceitar conexões.

    Returns:
        Aplicação FastAPI configurada.
    """

    @asynccontextmanager
    async def lifespan(fastapi_app: FastAPI) -> AsyncGenerator[None, None]:
        logger.info("app_starting", extra={"service": "inter-bridge"})
        if fastapi_app.state.gateway is None:
            fastapi_app.state.gateway = build_gateway(inter_settings)

        yield

        logger.info("app_shutting_down", extra={"service": "inter-bridge"})
        await fastapi_app.state.gateway.aclose()

    base = get_base_settings()
    fastapi_app = FastAPI(
        title="Inter Bridge",
        description="Relay mTLS para a API de cobranças do Banco Inter",
        version="1.0.0",
        lifespan=lifespan,
        docs_url=None if base.is_production else "/docs",
        redoc_url=None,
        openapi_url=None if base.is_production else "/openapi.json",
    )
    fastapi_app.state.gateway = gateway

    fastapi_app.add_middleware(CorrelationIdMiddleware)
    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": "inter-bridge"})
    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Valida configuração, constrói o gateway e sobe o servidor.

    Sai com status 1 sem abrir a porta se a configuração for inválida.
    """
    import uvicorn

    base = get_base_settings()
    try:
        gateway = build_gateway()
    except ConfigurationError as exc:
        logger.critical(
            "startup_aborted",
            extra={"component": "bootstrap", "errors": exc.errors},
        )
        sys.exit(1)

    logger.info("inter_bridge_listening", extra={"host": base.host, "port": base.port})
    uvicorn.run(
        create_app(gateway=gateway),
        host=base.host,
        port=base.port,
        log_config=None,
    )


if __name__ == "__main__":
    main()
