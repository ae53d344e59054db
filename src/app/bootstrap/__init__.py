"""Bootstrap da aplicação — inicialização e wiring.

Composition root: configura logging, valida configuração e constrói o
gateway com sua identidade TLS e cliente HTTP.

Uso:
    from app.bootstrap import build_gateway, initialize_app

    initialize_app()
    gateway = build_gateway()
"""

from __future__ import annotations

import logging

from app.infra.http import create_mtls_http_client
from app.infra.tls import TlsIdentityError, load_tls_identity
from app.observability import get_correlation_id
from app.services import InterGateway
from config.logging import configure_logging
from config.settings import (
    BaseSettings,
    InterSettings,
    get_base_settings,
    get_inter_settings,
)
from utils.errors import ConfigurationError

logger = logging.getLogger(__name__)


def initialize_app(base_settings: BaseSettings | None = None) -> None:
    """Configura logging estruturado JSON com correlation_id.

    Deve ser chamada uma vez no início do serviço.
    """
    base = base_settings or get_base_settings()
    configure_logging(
        level=base.log_level,
        service_name=base.service_name,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings(
    inter_settings: InterSettings | None = None,
    base_settings: BaseSettings | None = None,
) -> None:
    """Valida settings obrigatórias no startup.

    Falha rápido em qualquer ambiente: sem certificado, chave ou
    credenciais OAuth o bridge não deve aceitar tráfego.

    Raises:
        ConfigurationError: Lista de problemas (sem valores sensíveis)
    """
    inter = inter_settings or get_inter_settings()
    base = base_settings or get_base_settings()
    errors: list[str] = []
    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"inter: {error}" for error in inter.validate())

    if errors:
        logger.error(
            "settings_validation_failed",
            extra={
                "component": "bootstrap",
                "environment": base.environment,
                "error_count": len(errors),
                "errors": errors,
            },
        )
        raise ConfigurationError(errors)

    logger.info(
        "settings_validated",
        extra={"component": "bootstrap", "environment": base.environment},
    )


def build_gateway(inter_settings: InterSettings | None = None) -> InterGateway:
    """Constrói o gateway: valida settings, carrega identidade TLS e cliente.

    Raises:
        ConfigurationError: Configuração ausente ou material TLS inválido
    """
    inter = inter_settings or get_inter_settings()
    validate_runtime_settings(inter)
    try:
        identity = load_tls_identity(inter.cert_b64, inter.key_b64)
        http_client = create_mtls_http_client(inter, identity)
    except TlsIdentityError as exc:
        logger.error(
            "tls_identity_invalid",
            extra={"component": "bootstrap", "errors": exc.errors},
        )
        raise
    return InterGateway(inter, http_client)


__all__ = [
    "ConfigurationError",
    "build_gateway",
    "initialize_app",
    "validate_runtime_settings",
]
