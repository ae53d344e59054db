"""Correlation id por requisição.

Lido do header `X-Correlation-ID` (ou gerado) e injetado em todos os logs
do ciclo request/response. ContextVar mantém o valor isolado por task.
"""

from __future__ import annotations

import uuid
from contextvars import ContextVar, Token

CORRELATION_ID_HEADER = "X-Correlation-ID"

# Limite para não propagar valores arbitrariamente grandes vindos do chamador
MAX_CORRELATION_ID_LENGTH = 128

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """Retorna o correlation_id do contexto atual (ou string vazia)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id no contexto atual.

    Args:
        correlation_id: ID recebido. Se vazio ou inválido, gera um novo UUID.

    Returns:
        Token para reset posterior via reset_correlation_id().
    """
    value = normalize_correlation_id(correlation_id)
    return _correlation_id.set(value)


def reset_correlation_id(token: Token[str]) -> None:
    """Restaura o correlation_id ao valor anterior."""
    _correlation_id.reset(token)


def normalize_correlation_id(raw: str | None) -> str:
    """Aceita o valor do chamador apenas se for curto e imprimível."""
    candidate = (raw or "").strip()
    if (
        not candidate
        or len(candidate) > MAX_CORRELATION_ID_LENGTH
        or not candidate.isprintable()
    ):
        return generate_correlation_id()
    return candidate


def generate_correlation_id() -> str:
    """Gera um novo correlation_id (UUID v4)."""
    return str(uuid.uuid4())
