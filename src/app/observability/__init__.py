"""Observabilidade — correlation_id e middleware HTTP.

Uso:
    from app.observability import get_correlation_id, set_correlation_id
"""

from app.observability.correlation import (
    CORRELATION_ID_HEADER,
    generate_correlation_id,
    get_correlation_id,
    normalize_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.middleware import CorrelationIdMiddleware

__all__ = [
    "CORRELATION_ID_HEADER",
    "CorrelationIdMiddleware",
    "generate_correlation_id",
    "get_correlation_id",
    "normalize_correlation_id",
    "reset_correlation_id",
    "set_correlation_id",
]
