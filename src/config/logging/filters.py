"""Filters de logging para injeção de contexto e redação.

Campos injetados:
- correlation_id: ID de rastreamento da requisição
- service: Nome do serviço (ex: inter_bridge)

Campos redigidos:
- qualquer `extra` cujo nome indique segredo (client_secret, authorization, ...)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

REDACTED = "***"

# Fragmentos de nome de campo tratados como sensíveis
SENSITIVE_FIELD_MARKERS: frozenset[str] = frozenset(
    {
        "authorization",
        "secret",
        "token",
        "password",
        "cert",
        "key",
    }
)

# Campos de contexto que contêm os marcadores mas não são segredos
SAFE_FIELDS: frozenset[str] = frozenset({"token_type", "error_type"})


class CorrelationIdFilter(logging.Filter):
    """Injeta correlation_id e service em cada record de log.

    Args:
        service_name: Nome do serviço para identificação nos logs.
        correlation_id_getter: Função que retorna o correlation_id atual.
            Se não fornecida, usa string vazia como fallback.
    """

    def __init__(
        self,
        service_name: str,
        correlation_id_getter: Callable[[], str] | None = None,
    ) -> None:
        super().__init__()
        self._service_name = service_name
        self._get_correlation_id = correlation_id_getter or (lambda: "")

    def filter(self, record: logging.LogRecord) -> bool:
        """Adiciona correlation_id e service ao record.

        Se correlation_id já foi passado via `extra`, preserva o valor.
        """
        existing = getattr(record, "correlation_id", None)
        record.correlation_id = existing if existing else self._get_correlation_id()
        record.service = self._service_name
        return True


def is_sensitive_field(name: str) -> bool:
    """Retorna True se o nome do campo indica valor sensível."""
    lowered = name.lower()
    if lowered in SAFE_FIELDS:
        return False
    return any(marker in lowered for marker in SENSITIVE_FIELD_MARKERS)


def redact_mapping(values: dict[str, Any]) -> dict[str, Any]:
    """Cópia de `values` com campos sensíveis substituídos por REDACTED."""
    redacted: dict[str, Any] = {}
    for name, value in values.items():
        if is_sensitive_field(name):
            redacted[name] = REDACTED
        elif isinstance(value, dict):
            redacted[name] = redact_mapping(value)
        else:
            redacted[name] = value
    return redacted


class RedactSecretsFilter(logging.Filter):
    """Mascara campos `extra` sensíveis antes da formatação.

    Atua apenas sobre atributos adicionados via `extra`; os atributos
    padrão do LogRecord não são tocados.

    Args:
        extra_fields: Nomes adicionais a tratar como sensíveis.
    """

    _STANDARD_ATTRS = frozenset(
        logging.LogRecord("", 0, "", 0, "", None, None).__dict__.keys()
    ) | {"message", "asctime", "correlation_id", "service"}

    def __init__(self, extra_fields: Iterable[str] = ()) -> None:
        super().__init__()
        self._extra_fields = frozenset(name.lower() for name in extra_fields)

    def filter(self, record: logging.LogRecord) -> bool:
        for name, value in list(record.__dict__.items()):
            if name in self._STANDARD_ATTRS:
                continue
            if name.lower() in self._extra_fields or is_sensitive_field(name):
                setattr(record, name, REDACTED)
            elif isinstance(value, dict):
                setattr(record, name, redact_mapping(value))
        return True
