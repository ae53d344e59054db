"""Configuração de logging estruturado.

Uso:
    from config.logging import configure_logging, get_logger

    # Na inicialização (bootstrap)
    configure_logging(level="INFO", service_name="inter_bridge")

    # Em qualquer módulo
    logger = get_logger(__name__)
    logger.info("upstream_request_completed", extra={"latency_ms": 42})

Campos obrigatórios em todo log:
- correlation_id
- service
- level
- logger
- message
- asctime

Nunca logar corpos de request/response nem segredos.
"""

from config.logging.config import configure_logging, get_logger
from config.logging.filters import (
    REDACTED,
    CorrelationIdFilter,
    RedactSecretsFilter,
    is_sensitive_field,
    redact_mapping,
)
from config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REDACTED",
    "REQUIRED_LOG_FIELDS",
    # Filters
    "CorrelationIdFilter",
    "RedactSecretsFilter",
    # Configuração principal
    "configure_logging",
    # Formatters
    "create_json_formatter",
    "get_logger",
    "is_sensitive_field",
    "redact_mapping",
]
