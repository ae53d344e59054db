"""Helpers de logging de chamadas ao upstream (sem corpos nem headers)."""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def log_upstream_call(
    method: str,
    path: str,
    status_code: int,
    elapsed_ms: float,
) -> None:
    """Loga chamada concluída; status >= 400 sobe para WARNING."""
    level = logging.WARNING if status_code >= 400 else logging.INFO
    logger.log(
        level,
        "upstream_request_completed",
        extra={
            "method": method,
            "path": path,
            "status_code": status_code,
            "elapsed_ms": round(elapsed_ms, 2),
        },
    )


def log_upstream_failure(
    method: str,
    path: str,
    error_type: str,
    elapsed_ms: float,
) -> None:
    """Loga falha de transporte (sem resposta do upstream)."""
    logger.error(
        "upstream_request_failed",
        extra={
            "method": method,
            "path": path,
            "error_type": error_type,
            "elapsed_ms": round(elapsed_ms, 2),
        },
    )
