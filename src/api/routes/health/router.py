"""Endpoints de health check."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_inter_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check.

    `config` indica apenas presença das configurações obrigatórias.
    """

    status: str
    service: str
    timestamp: str
    config: dict[str, bool]
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.error}


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Liveness probe — processo vivo e presença da configuração."""
    gateway = getattr(request.app.state, "gateway", None)
    presence = gateway.config_presence() if gateway is not None else get_inter_settings().presence()
    return HealthResponse(
        status="ok",
        service="inter-bridge",
        timestamp=datetime.now(UTC).isoformat(),
        config=presence,
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness probe — gateway construído com identidade TLS válida."""
    gateway_check = _check_gateway(getattr(request.app.state, "gateway", None))
    ready = gateway_check.status == "ok"
    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {"gateway": gateway_check.as_dict()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


def _check_gateway(gateway: Any | None) -> DependencyCheck:
    if gateway is None:
        return DependencyCheck(status="failed", error="not_initialized")
    return DependencyCheck(status="ok")
